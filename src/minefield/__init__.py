"""
Minefield engine module.

Provides grid construction, first-click-safe mine placement, cell
revealing with zero cascades, and 3BV scoring.
"""
from .cell import Cell, CellState
from .config import (
    BoardConfig,
    MAX_MINE_DENSITY,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .errors import (
    MinefieldError,
    ConfigurationError,
    InvalidDimensionsError,
    OutOfBoundsError,
)
from .grid import DIRECTIONS, Grid, create_grid
from .placement import (
    safe_zone,
    place_mines,
    place_mines_at,
    compute_neighbor_counts,
)
from .reveal import RevealResult, reveal_cell, toggle_flag, can_chord, chord
from .scoring import calculate_3bv, find_openings

__all__ = [
    "Cell",
    "CellState",
    "BoardConfig",
    "MAX_MINE_DENSITY",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinefieldError",
    "ConfigurationError",
    "InvalidDimensionsError",
    "OutOfBoundsError",
    "DIRECTIONS",
    "Grid",
    "create_grid",
    "safe_zone",
    "place_mines",
    "place_mines_at",
    "compute_neighbor_counts",
    "RevealResult",
    "reveal_cell",
    "toggle_flag",
    "can_chord",
    "chord",
    "calculate_3bv",
    "find_openings",
]
