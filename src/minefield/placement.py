"""
Mine placement for the minefield engine.

Mines are placed on the first click so that the clicked cell and its
neighbours are always safe, giving the player an opening to start from.
"""
import random
from typing import Iterable, Optional, Set

from .errors import ConfigurationError
from .grid import Grid, Position


# ============================================================================
# Safe Zone
# ============================================================================

def safe_zone(grid: Grid, row: int, col: int) -> Set[Position]:
    """
    Get the positions guaranteed mine-free around a first click.

    Args:
        grid: Grid being populated.
        row: Row of the first click.
        col: Column of the first click.

    Returns:
        The clicked position plus its in-bounds Moore neighbours.
    """
    grid.check_bounds(row, col)
    zone = {(row, col)}
    zone.update(grid.neighbors(row, col))
    return zone


# ============================================================================
# Placement
# ============================================================================

def place_mines(
    grid: Grid,
    mine_count: int,
    first_click: Position,
    rng: Optional[random.Random] = None,
) -> None:
    """
    Randomly place mines, keeping the first click's safe zone clear.

    Cells are drawn uniformly at random and rejected if they are already
    mined or inside the safe zone, until ``mine_count`` mines exist. Then
    every safe cell's neighbour count is computed.

    Args:
        grid: Empty grid to populate in place.
        mine_count: Number of mines to place.
        first_click: (row, col) of the first reveal.
        rng: Random source; the ``random`` module when omitted.

    Raises:
        OutOfBoundsError: If first_click is outside the grid.
        ConfigurationError: If mines were already placed on this grid, or
            mine_count does not fit outside the safe zone.
    """
    _check_not_placed(grid)
    zone = safe_zone(grid, *first_click)
    free_cells = len(grid) - len(zone)
    if mine_count < 0:
        raise ConfigurationError("Number of mines cannot be negative")
    if mine_count > free_cells:
        raise ConfigurationError(
            f"Cannot place {mine_count} mines: only {free_cells} cells lie "
            f"outside the safe zone around {first_click}"
        )

    source = rng if rng is not None else random
    placed = 0
    while placed < mine_count:
        row = source.randrange(grid.rows)
        col = source.randrange(grid.cols)
        cell = grid[row][col]
        if cell.is_mine or (row, col) in zone:
            continue
        cell.is_mine = True
        placed += 1

    compute_neighbor_counts(grid)
    grid.mines_placed = True


def place_mines_at(grid: Grid, positions: Iterable[Position]) -> None:
    """
    Place mines at fixed positions.

    Used for scripted boards where the layout must be known in advance.

    Raises:
        OutOfBoundsError: If any position is outside the grid.
        ConfigurationError: If mines were already placed on this grid.
    """
    _check_not_placed(grid)
    cells = [grid.cell(row, col) for row, col in positions]
    for cell in cells:
        cell.is_mine = True
    compute_neighbor_counts(grid)
    grid.mines_placed = True


def _check_not_placed(grid: Grid) -> None:
    if grid.mines_placed:
        raise ConfigurationError("Mines have already been placed on this grid")


# ============================================================================
# Neighbour Counts
# ============================================================================

def compute_neighbor_counts(grid: Grid) -> None:
    """Set neighbor_count for every non-mine cell."""
    for cell in grid:
        if cell.is_mine:
            continue
        cell.neighbor_count = sum(
            1 for neighbor in grid.neighbor_cells(cell.row, cell.col)
            if neighbor.is_mine
        )
