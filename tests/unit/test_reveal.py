"""
Unit tests for the reveal engine.

Tests single reveals, mine hits, zero cascades, flags and chording.
"""
import random
from collections import deque
from typing import Set, Tuple

import pytest
import numpy as np
from minefield import (
    Grid,
    OutOfBoundsError,
    RevealResult,
    can_chord,
    chord,
    create_grid,
    place_mines,
    place_mines_at,
    reveal_cell,
    toggle_flag,
)


def open_positions(grid: Grid) -> Set[Tuple[int, int]]:
    return {cell.position for cell in grid if cell.is_open}


def expected_closure(grid: Grid, row: int, col: int) -> Set[Tuple[int, int]]:
    """Zero region containing (row, col) plus its numbered border."""
    if grid[row][col].neighbor_count != 0:
        return {(row, col)}
    region = set()
    queue = deque([(row, col)])
    while queue:
        position = queue.popleft()
        if position in region:
            continue
        region.add(position)
        if grid[position[0]][position[1]].neighbor_count == 0:
            queue.extend(grid.neighbors(*position))
    return region


# ============================================================================
# Basic Reveal Tests
# ============================================================================

class TestReveal:
    """Test cell revealing behavior."""

    def test_reveal_numbered_cell_opens_only_it(
        self, corner_mine_grid: Grid
    ) -> None:
        result = reveal_cell(corner_mine_grid, 1, 1)
        assert result == RevealResult(game_over=False, win=False)
        assert open_positions(corner_mine_grid) == {(1, 1)}

    def test_reveal_twice_is_noop(self, corner_mine_grid: Grid) -> None:
        reveal_cell(corner_mine_grid, 0, 1)
        before = corner_mine_grid.to_observation()
        result = reveal_cell(corner_mine_grid, 0, 1)
        assert result == RevealResult(False, False)
        assert np.array_equal(corner_mine_grid.to_observation(), before)

    def test_reveal_never_reports_win(self, empty_grid: Grid) -> None:
        """Clearing the board is detected by the caller, not reveal_cell."""
        result = reveal_cell(empty_grid, 0, 0)
        assert result.win is False
        assert empty_grid.is_cleared() is True

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (5, 2), (2, 5)])
    def test_out_of_bounds_raises(
        self, corner_mine_grid: Grid, row: int, col: int
    ) -> None:
        with pytest.raises(OutOfBoundsError):
            reveal_cell(corner_mine_grid, row, col)
        assert open_positions(corner_mine_grid) == set()


# ============================================================================
# Mine Tests
# ============================================================================

class TestRevealMine:
    """Test revealing a mine."""

    def test_mine_ends_game(self, corner_mine_grid: Grid) -> None:
        result = reveal_cell(corner_mine_grid, 0, 0)
        assert result == RevealResult(game_over=True, win=False)
        assert corner_mine_grid[0][0].is_open is True

    def test_mine_does_not_cascade(self, corner_mine_grid: Grid) -> None:
        reveal_cell(corner_mine_grid, 0, 0)
        assert open_positions(corner_mine_grid) == {(0, 0)}


# ============================================================================
# Flag Tests
# ============================================================================

class TestFlags:
    """Test flags guarding against reveals."""

    def test_flagged_mine_is_noop(self, corner_mine_grid: Grid) -> None:
        toggle_flag(corner_mine_grid, 0, 0)
        result = reveal_cell(corner_mine_grid, 0, 0)
        assert result == RevealResult(False, False)
        assert corner_mine_grid[0][0].is_flagged is True
        assert open_positions(corner_mine_grid) == set()

    def test_flagged_safe_cell_is_noop(self, empty_grid: Grid) -> None:
        toggle_flag(empty_grid, 3, 3)
        assert reveal_cell(empty_grid, 3, 3) == RevealResult(False, False)
        assert open_positions(empty_grid) == set()

    def test_cascade_skips_flagged_cells(self, empty_grid: Grid) -> None:
        toggle_flag(empty_grid, 2, 2)
        reveal_cell(empty_grid, 0, 0)
        assert len(open_positions(empty_grid)) == 24
        assert empty_grid[2][2].is_flagged is True

    def test_toggle_flag_on_open_cell_fails(self, empty_grid: Grid) -> None:
        reveal_cell(empty_grid, 0, 0)
        assert toggle_flag(empty_grid, 1, 1) is False

    def test_toggle_flag_out_of_bounds(self, empty_grid: Grid) -> None:
        with pytest.raises(OutOfBoundsError):
            toggle_flag(empty_grid, 0, 9)


# ============================================================================
# Cascade Tests
# ============================================================================

class TestCascade:
    """Test zero-region flood fill."""

    def test_empty_grid_opens_everything(self, empty_grid: Grid) -> None:
        reveal_cell(empty_grid, 2, 2)
        assert len(open_positions(empty_grid)) == 25

    def test_corner_mine_opens_all_safe_cells(
        self, corner_mine_grid: Grid
    ) -> None:
        reveal_cell(corner_mine_grid, 4, 4)
        assert len(open_positions(corner_mine_grid)) == 24
        assert corner_mine_grid[0][0].is_open is False

    def test_cascade_stops_at_mine_wall(self, wall_grid: Grid) -> None:
        """Only the left opening and its border open."""
        reveal_cell(wall_grid, 0, 0)
        expected = {(row, col) for row in range(5) for col in (0, 1)}
        assert open_positions(wall_grid) == expected

    def test_cascade_matches_closure_on_random_boards(self) -> None:
        rng = random.Random(2024)
        for _ in range(30):
            grid = create_grid(12, 12)
            click = (rng.randrange(12), rng.randrange(12))
            place_mines(grid, 20, click, rng=rng)
            reveal_cell(grid, *click)
            assert open_positions(grid) == expected_closure(grid, *click)
            assert all(not grid[r][c].is_mine for r, c in open_positions(grid))

    def test_large_opening_does_not_recurse(self) -> None:
        """A board far bigger than the recursion limit opens in one call."""
        grid = create_grid(300, 300)
        place_mines_at(grid, [])
        reveal_cell(grid, 150, 150)
        assert grid.open_safe_count == 300 * 300


# ============================================================================
# Chord Tests
# ============================================================================

class TestChord:
    """Test revealing around a satisfied number."""

    def test_chord_with_matching_flags(self, two_mine_grid: Grid) -> None:
        reveal_cell(two_mine_grid, 2, 0)
        toggle_flag(two_mine_grid, 0, 0)
        result = chord(two_mine_grid, 1, 0)
        assert result == RevealResult(False, False)
        assert two_mine_grid[0][1].is_open is True
        assert two_mine_grid.is_cleared() is True

    def test_chord_without_enough_flags_is_noop(
        self, two_mine_grid: Grid
    ) -> None:
        reveal_cell(two_mine_grid, 2, 0)
        assert chord(two_mine_grid, 1, 0) == RevealResult(False, False)
        assert two_mine_grid[0][1].is_open is False

    def test_chord_with_wrong_flag_hits_mine(self, two_mine_grid: Grid) -> None:
        reveal_cell(two_mine_grid, 2, 0)
        toggle_flag(two_mine_grid, 0, 1)
        result = chord(two_mine_grid, 1, 0)
        assert result.game_over is True
        assert two_mine_grid[0][0].is_open is True

    def test_chord_on_hidden_cell_is_noop(self, two_mine_grid: Grid) -> None:
        assert chord(two_mine_grid, 0, 1) == RevealResult(False, False)

    def test_can_chord(self, two_mine_grid: Grid) -> None:
        assert can_chord(two_mine_grid, 0, 1) is False
        reveal_cell(two_mine_grid, 2, 0)
        assert can_chord(two_mine_grid, 1, 0) is False
        toggle_flag(two_mine_grid, 0, 0)
        assert can_chord(two_mine_grid, 1, 0) is True
        chord(two_mine_grid, 1, 0)
        assert can_chord(two_mine_grid, 1, 0) is False
