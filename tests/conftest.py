"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import BoardConfig, Cell, Grid, create_grid, place_mines_at
from session import GameSession


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def blank_grid() -> Grid:
    """Create a 5x5 grid without mines placed."""
    return create_grid(5, 5)


@pytest.fixture
def empty_grid() -> Grid:
    """Create a 5x5 grid with zero mines placed, for cascade testing."""
    grid = create_grid(5, 5)
    place_mines_at(grid, [])
    return grid


@pytest.fixture
def corner_mine_grid() -> Grid:
    """5x5 grid with a single mine in the top-left corner."""
    grid = create_grid(5, 5)
    place_mines_at(grid, [(0, 0)])
    return grid


@pytest.fixture
def wall_grid() -> Grid:
    """
    5x5 grid with a full column of mines down the middle.

    Columns 0 and 4 are zero cells, columns 1 and 3 are numbered, so the
    board splits into two separate openings.
    """
    grid = create_grid(5, 5)
    place_mines_at(grid, [(row, 2) for row in range(5)])
    return grid


@pytest.fixture
def two_mine_grid() -> Grid:
    """
    3x3 grid with mines at (0, 0) and (0, 2).

    Counts:
        * 2 *
        1 2 1
        0 0 0
    """
    grid = create_grid(3, 3)
    place_mines_at(grid, [(0, 0), (0, 2)])
    return grid


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def default_session(rng: random.Random) -> GameSession:
    """9x9 session with 10 mines placed on first reveal."""
    return GameSession(BoardConfig(9, 9, 10), rng=rng)


@pytest.fixture
def empty_session() -> GameSession:
    """5x5 session with no mines."""
    return GameSession(BoardConfig(5, 5, 0))


@pytest.fixture
def two_mine_session() -> GameSession:
    """3x3 session using the two_mine_grid layout."""
    session = GameSession(BoardConfig(3, 3, 2))
    place_mines_at(session.grid, [(0, 0), (0, 2)])
    return session


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
