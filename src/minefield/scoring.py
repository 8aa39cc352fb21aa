"""
3BV scoring for the minefield engine.

3BV (Bechtel's Board Benchmark Value) is the minimum number of left clicks
needed to clear a board: each opening counts once, and every safe cell not
uncovered by an opening counts on its own. It depends only on the mine
layout, not on how far the game has progressed.
"""
from typing import Iterable, List, Optional, Set

import numpy as np

from .errors import ConfigurationError
from .grid import Grid, Position


def calculate_3bv(
    grid: Grid, order: Optional[Iterable[Position]] = None
) -> int:
    """
    Calculate the 3BV of a populated grid.

    Args:
        grid: Grid with mines placed. Not modified.
        order: Positions to scan for openings; row-major when omitted.
            Must list every position exactly once; any such ordering
            gives the same result.

    Returns:
        Minimum number of clicks to clear the grid.

    Raises:
        ConfigurationError: If mines have not been placed yet, or order
            is not a permutation of the grid positions.
        OutOfBoundsError: If order holds a position outside the grid.
    """
    _check_placed(grid)
    visited = np.zeros((grid.rows, grid.cols), dtype=bool)
    if order is None:
        positions = _row_major(grid)
    else:
        positions = _check_order(grid, order)

    clicks = 0
    for row, col in positions:
        cell = grid[row][col]
        if cell.is_opening and not visited[row, col]:
            clicks += 1
            _mark_opening(grid, row, col, visited)

    for cell in grid:
        if not cell.is_mine and not visited[cell.row, cell.col]:
            clicks += 1
    return clicks


def find_openings(grid: Grid) -> List[Set[Position]]:
    """
    Find every opening on the grid.

    Returns:
        One set of zero-cell positions per maximal 8-connected region, in
        row-major order of each region's first cell. Numbered border cells
        are not included.
    """
    _check_placed(grid)
    visited = np.zeros((grid.rows, grid.cols), dtype=bool)
    openings = []
    for row, col in _row_major(grid):
        if grid[row][col].is_opening and not visited[row, col]:
            region = _mark_opening(grid, row, col, visited)
            openings.append(
                {position for position in region
                 if grid[position[0]][position[1]].is_opening}
            )
    return openings


def _mark_opening(
    grid: Grid, row: int, col: int, visited: np.ndarray
) -> Set[Position]:
    """
    Flood-fill one opening, marking it and its border as visited.

    Returns:
        Every position marked by this fill.
    """
    marked = set()
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        if visited[current_row, current_col]:
            continue
        visited[current_row, current_col] = True
        marked.add((current_row, current_col))
        if grid[current_row][current_col].neighbor_count == 0:
            for neighbor_row, neighbor_col in grid.neighbors(
                current_row, current_col
            ):
                if not visited[neighbor_row, neighbor_col]:
                    stack.append((neighbor_row, neighbor_col))
    return marked


def _check_order(
    grid: Grid, order: Iterable[Position]
) -> List[Position]:
    positions = list(order)
    for row, col in positions:
        grid.check_bounds(row, col)
    if len(positions) != len(grid) or len(set(positions)) != len(grid):
        raise ConfigurationError(
            "Scan order must list every position exactly once"
        )
    return positions


def _row_major(grid: Grid) -> List[Position]:
    return [(row, col) for row in range(grid.rows) for col in range(grid.cols)]


def _check_placed(grid: Grid) -> None:
    if not grid.mines_placed:
        raise ConfigurationError("3BV needs a grid with mines placed")
