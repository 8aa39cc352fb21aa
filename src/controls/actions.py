"""
Semantic actions produced by the key interpreter.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# ============================================================================
# Action Types
# ============================================================================

class ActionType(Enum):
    """Closed set of actions a keystroke can request."""

    MOVE_CURSOR = auto()
    REVEAL = auto()
    FLAG = auto()
    SMART = auto()
    DIGIT = auto()
    ZERO = auto()
    GO_TOP = auto()
    GO_BOTTOM = auto()
    START_ROW = auto()
    NEXT_UNREVEALED = auto()
    PREV_UNREVEALED = auto()
    NEXT_UNREVEALED_VERTICAL = auto()
    PREV_UNREVEALED_VERTICAL = auto()
    START_SEARCH = auto()
    NEXT_MATCH = auto()
    PREV_MATCH = auto()


# ============================================================================
# Action Data Class
# ============================================================================

@dataclass(frozen=True)
class Action:
    """
    A single interpreted keystroke.

    Attributes:
        type: What the controller should do.
        dx: Column delta for MOVE_CURSOR.
        dy: Row delta for MOVE_CURSOR.
        value: The digit character for DIGIT.
    """

    type: ActionType
    dx: int = 0
    dy: int = 0
    value: Optional[str] = None
