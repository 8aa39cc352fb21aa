"""
Board configuration for the minefield engine.

Holds the dimensions and mine count a session is played with, plus the
standard difficulty presets.
"""
from dataclasses import dataclass

from .errors import ConfigurationError, InvalidDimensionsError


# ============================================================================
# Constants
# ============================================================================

# Mine placement rejection-samples random cells, so boards that are mostly
# mines are refused up front.
MAX_MINE_DENSITY = 0.5


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidDimensionsError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = int(self.total_cells * MAX_MINE_DENSITY)
        if self.num_mines > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines

    @property
    def density(self) -> float:
        return self.num_mines / self.total_cells


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)
