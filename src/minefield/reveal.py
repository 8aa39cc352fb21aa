"""
Reveal engine for the minefield.

Opens cells, floods zero-count regions and reports mine hits. Win
detection is left to the caller: ``reveal_cell`` never reports a win, use
``Grid.is_cleared`` after each reveal.
"""
from typing import List, NamedTuple

from .grid import Grid, Position


class RevealResult(NamedTuple):
    """Outcome of a reveal."""

    game_over: bool = False
    win: bool = False


NO_CHANGE = RevealResult(False, False)


# ============================================================================
# Reveal
# ============================================================================

def reveal_cell(grid: Grid, row: int, col: int) -> RevealResult:
    """
    Reveal a cell at the given position.

    Open or flagged cells are left alone. A mine is opened and ends the
    game. A safe cell is opened, and if it has no mined neighbours the
    whole connected zero region and its numbered border are opened too.

    Args:
        grid: Grid with mines already placed.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        RevealResult; ``game_over`` is True only when a mine was opened.

    Raises:
        OutOfBoundsError: If the position is outside the grid.
    """
    cell = grid.cell(row, col)
    if cell.is_open or cell.is_flagged:
        return NO_CHANGE

    if cell.is_mine:
        cell.open()
        return RevealResult(game_over=True, win=False)

    _flood_open(grid, row, col)
    return NO_CHANGE


def _flood_open(grid: Grid, row: int, col: int) -> None:
    """Open a safe cell, expanding through zero cells with a work stack."""
    stack: List[Position] = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        cell = grid[current_row][current_col]
        if not cell.open():
            continue
        if cell.neighbor_count == 0:
            stack.extend(grid.neighbors(current_row, current_col))


# ============================================================================
# Flags & Chords
# ============================================================================

def toggle_flag(grid: Grid, row: int, col: int) -> bool:
    """
    Toggle flag on a cell.

    Returns:
        True if flag was toggled, False if the cell is open.

    Raises:
        OutOfBoundsError: If the position is outside the grid.
    """
    return grid.cell(row, col).toggle_flag()


def count_adjacent_flags(grid: Grid, row: int, col: int) -> int:
    """Count flagged cells adjacent to position."""
    return sum(1 for cell in grid.neighbor_cells(row, col) if cell.is_flagged)


def can_chord(grid: Grid, row: int, col: int) -> bool:
    """
    Check if a chord at position would reveal anything.

    Raises:
        OutOfBoundsError: If the position is outside the grid.
    """
    cell = grid.cell(row, col)
    if not cell.is_open or cell.is_mine or cell.neighbor_count == 0:
        return False
    if count_adjacent_flags(grid, row, col) != cell.neighbor_count:
        return False
    return any(
        neighbor.is_hidden for neighbor in grid.neighbor_cells(row, col)
    )


def chord(grid: Grid, row: int, col: int) -> RevealResult:
    """
    Chord action: reveal all hidden neighbours if the flag count matches.

    Only applies to an open numbered cell whose adjacent flag count equals
    its neighbour count. Every hidden neighbour is revealed even if one of
    them turns out to be a mine.

    Returns:
        RevealResult with ``game_over`` set if any revealed neighbour was
        a mine.
    """
    if not can_chord(grid, row, col):
        return NO_CHANGE

    game_over = False
    for neighbor_row, neighbor_col in grid.neighbors(row, col):
        result = reveal_cell(grid, neighbor_row, neighbor_col)
        game_over = game_over or result.game_over
    return RevealResult(game_over=game_over, win=False)
