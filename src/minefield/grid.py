"""
Grid module for the minefield engine.

The grid is a fixed rows x cols rectangle of cells. It owns every cell
exclusively and provides the bounds and neighbourhood helpers shared by
mine placement, revealing and scoring.
"""
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidDimensionsError, OutOfBoundsError


# ============================================================================
# Constants
# ============================================================================

# Moore neighbourhood offsets as (delta_row, delta_col)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

Position = Tuple[int, int]


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Rectangular collection of cells.

    Cells are stored row-major; ``grid[row][col]`` is the cell whose own
    ``row``/``col`` equal those indices. One grid belongs to exactly one
    game and must only be mutated by one caller at a time.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise InvalidDimensionsError(
                f"Grid dimensions must be positive, got {rows}x{cols}"
            )
        self.rows = rows
        self.cols = cols
        self.mines_placed = False
        self._cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(cols)]
            for row in range(rows)
        ]

    def __getitem__(self, row: int) -> List[Cell]:
        return self._cells[row]

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self.rows}, cols={self.cols}, "
            f"mines={self.mine_count})"
        )

    # ========================================================================
    # Bounds & Neighbours (Low-level)
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, row: int, col: int) -> None:
        """Raise OutOfBoundsError if position is outside the grid."""
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)

    def cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        self.check_bounds(row, col)
        return self._cells[row][col]

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get in-bounds Moore neighbour positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, in DIRECTIONS order.
        """
        neighbors = []
        for delta_row, delta_col in DIRECTIONS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.in_bounds(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def neighbor_cells(self, row: int, col: int) -> List[Cell]:
        return [self._cells[r][c] for r, c in self.neighbors(row, col)]

    # ========================================================================
    # Aggregate Queries (High-level)
    # ========================================================================

    @property
    def mine_count(self) -> int:
        return sum(1 for cell in self if cell.is_mine)

    @property
    def safe_count(self) -> int:
        return len(self) - self.mine_count

    @property
    def open_safe_count(self) -> int:
        return sum(1 for cell in self if cell.is_open and not cell.is_mine)

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self if cell.is_flagged)

    def is_cleared(self) -> bool:
        """Check if every safe cell has been opened."""
        if not self.mines_placed:
            return False
        return self.open_safe_count == self.safe_count

    def hidden_positions(self) -> List[Position]:
        """Positions of cells that are neither open nor flagged."""
        return [cell.position for cell in self if cell.is_hidden]

    def to_observation(self) -> np.ndarray:
        """
        Get grid state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = open with neighbour count
                9 = open mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self:
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def mine_mask(self) -> np.ndarray:
        """Boolean array, True where a mine is."""
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        for cell in self:
            mask[cell.row, cell.col] = cell.is_mine
        return mask

    def render(self, reveal_all: bool = False) -> str:
        """
        Render grid as ASCII text, one line per row.

        Args:
            reveal_all: Show mines and counts regardless of open state.
        """
        lines = []
        for row in self._cells:
            chars = []
            for cell in row:
                if cell.is_flagged and not reveal_all:
                    chars.append("F")
                elif not cell.is_open and not reveal_all:
                    chars.append(".")
                elif cell.is_mine:
                    chars.append("*")
                elif cell.neighbor_count == 0:
                    chars.append(" ")
                else:
                    chars.append(str(cell.neighbor_count))
            lines.append(" ".join(chars))
        return "\n".join(lines)


# ============================================================================
# Construction
# ============================================================================

def create_grid(rows: int, cols: int) -> Grid:
    """
    Create an empty grid with no mines.

    Args:
        rows: Number of rows, must be positive.
        cols: Number of columns, must be positive.

    Returns:
        New grid with every cell hidden, mine-free and zero-counted.

    Raises:
        InvalidDimensionsError: If rows or cols is not positive.
    """
    return Grid(rows, cols)
