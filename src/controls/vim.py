"""
Vim-style key bindings.

Maps one key identifier (a single character, or a browser-style named key
such as ``"ArrowLeft"`` or ``"Enter"``) to an Action. The mapping holds no
state; count prefixes, search terms and cursor position belong to the
controller consuming the actions.
"""
from typing import Dict, Optional

from .actions import Action, ActionType


# ============================================================================
# Constants
# ============================================================================

# Horizontal delta for "$"; the controller clamps it to the last column.
ROW_END_DELTA = 999

_LEFT = Action(ActionType.MOVE_CURSOR, dx=-1, dy=0)
_DOWN = Action(ActionType.MOVE_CURSOR, dx=0, dy=1)
_UP = Action(ActionType.MOVE_CURSOR, dx=0, dy=-1)
_RIGHT = Action(ActionType.MOVE_CURSOR, dx=1, dy=0)

KEYMAP: Dict[str, Action] = {
    "0": Action(ActionType.ZERO),
    "_": Action(ActionType.START_ROW),
    # search
    "/": Action(ActionType.START_SEARCH),
    "n": Action(ActionType.NEXT_MATCH),
    "N": Action(ActionType.PREV_MATCH),
    # movement
    "h": _LEFT,
    "ArrowLeft": _LEFT,
    "j": _DOWN,
    "ArrowDown": _DOWN,
    "k": _UP,
    "ArrowUp": _UP,
    "l": _RIGHT,
    "ArrowRight": _RIGHT,
    # skips
    "w": Action(ActionType.NEXT_UNREVEALED),
    "b": Action(ActionType.PREV_UNREVEALED),
    "{": Action(ActionType.PREV_UNREVEALED_VERTICAL),
    "}": Action(ActionType.NEXT_UNREVEALED_VERTICAL),
    # actions
    "i": Action(ActionType.REVEAL),
    "Enter": Action(ActionType.REVEAL),
    " ": Action(ActionType.SMART),
    "f": Action(ActionType.FLAG),
    # advanced motions
    "$": Action(ActionType.MOVE_CURSOR, dx=ROW_END_DELTA, dy=0),
    "G": Action(ActionType.GO_BOTTOM),
    "g": Action(ActionType.GO_TOP),
}


def handle_vim_key(key: str) -> Optional[Action]:
    """
    Translate a key into an action.

    Args:
        key: Single character or named key.

    Returns:
        The mapped Action, or None if the key is not bound.
    """
    if len(key) == 1 and key in "123456789":
        return Action(ActionType.DIGIT, value=key)
    return KEYMAP.get(key)
