"""
Game session controller.

Owns one grid for the lifetime of a game together with the player's
cursor, and turns key actions into engine calls. Handles what the engine
leaves to its caller: placing mines on the first reveal, deciding when the
game is won, and resolving the context-dependent SMART action.
"""
import random
from enum import Enum, auto
from typing import Callable, Iterable, List, Optional

from minefield.config import BoardConfig
from minefield.grid import Grid, Position, create_grid
from minefield.placement import place_mines
from minefield.reveal import RevealResult, can_chord, chord, reveal_cell
from minefield.scoring import calculate_3bv
from controls.actions import Action, ActionType
from controls.vim import handle_vim_key


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


NO_CHANGE = RevealResult(False, False)

CANCEL_KEY = "Escape"
FLAG_SEARCH_TERM = "f"
HIDDEN_SEARCH_TERM = "."


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    A single minesweeper game driven by actions.

    The cursor is a (row, col) position that movement actions change and
    cell actions (reveal, flag, smart) apply to. Digits typed before an
    action form a repeat count, as in vim.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the session with an empty grid.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        self.rng = rng
        self.reset()

    def reset(self) -> None:
        """Start a new game on a fresh grid."""
        self.grid: Grid = create_grid(self.config.rows, self.config.cols)
        self.game_state = GameState.PLAYING
        self.cursor_row = 0
        self.cursor_col = 0
        self.pending_count = 0
        self.search_term: Optional[str] = None
        self._search_pending = False
        self.clicks = 0

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def cursor(self) -> Position:
        return self.cursor_row, self.cursor_col

    @property
    def is_playing(self) -> bool:
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.game_state == GameState.LOST

    @property
    def search_pending(self) -> bool:
        """Whether the next key will be taken as a search term."""
        return self._search_pending

    @property
    def three_bv(self) -> Optional[int]:
        """3BV of the current layout, or None before mines are placed."""
        if not self.grid.mines_placed:
            return None
        return calculate_3bv(self.grid)

    # ========================================================================
    # Key Input
    # ========================================================================

    def feed_key(self, key: str) -> Optional[RevealResult]:
        """
        Handle one raw key.

        Unbound keys are ignored. While a search is pending the key is
        used as the search term instead.

        Returns:
            The reveal outcome for cell actions, otherwise None.
        """
        if self._search_pending:
            self._search_pending = False
            if key != CANCEL_KEY:
                self.search(key)
            return None

        action = handle_vim_key(key)
        if action is None:
            return None
        return self.apply(action)

    def feed_keys(self, keys: Iterable[str]) -> None:
        """Handle a sequence of keys in order."""
        for key in keys:
            self.feed_key(key)

    def apply(self, action: Action) -> Optional[RevealResult]:
        """
        Apply an interpreted action.

        Returns:
            The reveal outcome for REVEAL, SMART and FLAG, otherwise None.
        """
        if action.type == ActionType.DIGIT:
            self.pending_count = self.pending_count * 10 + int(action.value)
            return None
        if action.type == ActionType.ZERO and self.pending_count:
            self.pending_count *= 10
            return None

        count = self.pending_count
        self.pending_count = 0
        return self._dispatch(action, count)

    def _dispatch(self, action: Action, count: int) -> Optional[RevealResult]:
        """Run an action with its repeat count (0 when none was typed)."""
        repeat = max(count, 1)
        kind = action.type

        if kind == ActionType.MOVE_CURSOR:
            self.move_cursor(action.dx * repeat, action.dy * repeat)
        elif kind in (ActionType.ZERO, ActionType.START_ROW):
            self.cursor_col = 0
        elif kind == ActionType.GO_TOP:
            self._go_to_row(count - 1 if count else 0)
        elif kind == ActionType.GO_BOTTOM:
            self._go_to_row(count - 1 if count else self.grid.rows - 1)
        elif kind == ActionType.NEXT_UNREVEALED:
            self._repeat_jump(repeat, self._row_major, forward=True)
        elif kind == ActionType.PREV_UNREVEALED:
            self._repeat_jump(repeat, self._row_major, forward=False)
        elif kind == ActionType.NEXT_UNREVEALED_VERTICAL:
            self._repeat_jump(repeat, self._column_major, forward=True)
        elif kind == ActionType.PREV_UNREVEALED_VERTICAL:
            self._repeat_jump(repeat, self._column_major, forward=False)
        elif kind == ActionType.START_SEARCH:
            self._search_pending = True
        elif kind == ActionType.NEXT_MATCH:
            self._repeat_match(repeat, forward=True)
        elif kind == ActionType.PREV_MATCH:
            self._repeat_match(repeat, forward=False)
        elif kind == ActionType.REVEAL:
            return self.reveal(*self.cursor)
        elif kind == ActionType.FLAG:
            self.toggle_flag(*self.cursor)
            return NO_CHANGE
        elif kind == ActionType.SMART:
            return self.smart(*self.cursor)
        return None

    # ========================================================================
    # Cursor Movement
    # ========================================================================

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, clamping to the grid edges."""
        self.cursor_col = _clamp(self.cursor_col + dx, self.grid.cols)
        self.cursor_row = _clamp(self.cursor_row + dy, self.grid.rows)

    def _go_to_row(self, row: int) -> None:
        self.cursor_row = _clamp(row, self.grid.rows)

    def _row_major(self) -> List[Position]:
        return [
            (row, col)
            for row in range(self.grid.rows)
            for col in range(self.grid.cols)
        ]

    def _column_major(self) -> List[Position]:
        return [
            (row, col)
            for col in range(self.grid.cols)
            for row in range(self.grid.rows)
        ]

    def _repeat_jump(
        self,
        repeat: int,
        ordering: Callable[[], List[Position]],
        forward: bool,
    ) -> None:
        # each hop lands on a later cell, so no more than one per cell
        for _ in range(min(repeat, len(self.grid))):
            target = _find_from_cursor(
                ordering(),
                self.cursor,
                lambda pos: self.grid[pos[0]][pos[1]].is_hidden,
                forward,
                wrap=False,
            )
            if target is None:
                return
            self.cursor_row, self.cursor_col = target

    # ========================================================================
    # Search
    # ========================================================================

    def search(self, term: str) -> bool:
        """
        Set the search term and jump to the next matching cell.

        Terms: a digit "0"-"8" matches open cells showing that count,
        "f" matches flagged cells and "." matches hidden cells.

        Returns:
            True if the cursor moved to a match.
        """
        self.search_term = term
        return self.jump_to_match(forward=True)

    def jump_to_match(self, forward: bool = True) -> bool:
        """Move to the next (or previous) match, wrapping around the grid."""
        if self.search_term is None:
            return False
        target = _find_from_cursor(
            self._row_major(), self.cursor, self._matches, forward, wrap=True
        )
        if target is None:
            return False
        self.cursor_row, self.cursor_col = target
        return True

    def _repeat_match(self, repeat: int, forward: bool) -> None:
        """Jump ``repeat`` matches along, skipping whole laps of the grid."""
        if self.search_term is None:
            return
        matches = sum(
            1 for position in self._row_major() if self._matches(position)
        )
        if not matches:
            return
        # the first jump lands on a match; after that jumps cycle every lap
        for _ in range(1 + (repeat - 1) % matches):
            self.jump_to_match(forward=forward)

    def _matches(self, position: Position) -> bool:
        cell = self.grid[position[0]][position[1]]
        term = self.search_term
        if term == FLAG_SEARCH_TERM:
            return cell.is_flagged
        if term == HIDDEN_SEARCH_TERM:
            return cell.is_hidden
        if term is not None and len(term) == 1 and term in "012345678":
            return (
                cell.is_open
                and not cell.is_mine
                and cell.neighbor_count == int(term)
            )
        return False

    # ========================================================================
    # Cell Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell, placing mines first if this is the first reveal.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        cell = self.grid.cell(row, col)
        if not self.is_playing or not cell.is_hidden:
            return NO_CHANGE

        if not self.grid.mines_placed:
            place_mines(
                self.grid, self.config.num_mines, (row, col), rng=self.rng
            )

        self.clicks += 1
        return self._settle(reveal_cell(self.grid, row, col))

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a hidden cell.

        Returns:
            True if the flag was toggled.
        """
        cell = self.grid.cell(row, col)
        if not self.is_playing:
            return False
        return cell.toggle_flag()

    def chord(self, row: int, col: int) -> RevealResult:
        """Reveal around a satisfied number."""
        if not self.is_playing or not can_chord(self.grid, row, col):
            return NO_CHANGE
        self.clicks += 1
        return self._settle(chord(self.grid, row, col))

    def smart(self, row: int, col: int) -> RevealResult:
        """
        Do the most useful thing for the cell under the cursor.

        A hidden cell is revealed. An open number whose flags are all
        placed is chorded. An open number whose hidden neighbours must all
        be mines gets them flagged. Anything else is left alone.
        """
        cell = self.grid.cell(row, col)
        if not self.is_playing or cell.is_flagged:
            return NO_CHANGE
        if cell.is_hidden:
            return self.reveal(row, col)
        if cell.neighbor_count == 0:
            return NO_CHANGE

        neighbors = self.grid.neighbor_cells(row, col)
        flagged = sum(1 for neighbor in neighbors if neighbor.is_flagged)
        hidden = [neighbor for neighbor in neighbors if neighbor.is_hidden]
        if not hidden:
            return NO_CHANGE
        if flagged == cell.neighbor_count:
            return self.chord(row, col)
        if flagged + len(hidden) == cell.neighbor_count:
            for neighbor in hidden:
                neighbor.toggle_flag()
        return NO_CHANGE

    def _settle(self, result: RevealResult) -> RevealResult:
        """Update game state after a reveal and report the outcome."""
        if result.game_over:
            self.game_state = GameState.LOST
        elif self.grid.is_cleared():
            self.game_state = GameState.WON
        return RevealResult(
            game_over=not self.is_playing,
            win=self.is_won,
        )

    # ========================================================================
    # Rendering
    # ========================================================================

    def render(self) -> str:
        """Render the grid as text with the game status below it."""
        reveal_all = not self.is_playing
        status = (
            f"{self.game_state.name} | cursor {self.cursor} | "
            f"flags {self.grid.flag_count}/{self.config.num_mines}"
        )
        return self.grid.render(reveal_all=reveal_all) + "\n" + status


# ============================================================================
# Helpers
# ============================================================================

def _clamp(value: int, size: int) -> int:
    return max(0, min(size - 1, value))


def _find_from_cursor(
    positions: List[Position],
    cursor: Position,
    predicate: Callable[[Position], bool],
    forward: bool,
    wrap: bool,
) -> Optional[Position]:
    """
    Find the first position after (or before) the cursor matching predicate.

    The cursor's own position is never returned unless wrapping brings the
    scan all the way back around to it.
    """
    if not forward:
        positions = positions[::-1]
    start = positions.index(cursor) + 1
    candidates = positions[start:]
    if wrap:
        candidates += positions[:start]
    for position in candidates:
        if predicate(position):
            return position
    return None
