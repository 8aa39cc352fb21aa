"""
Keyboard controls module.

Translates raw keystrokes into game actions for a modal, vim-like
control scheme.
"""
from .actions import Action, ActionType
from .vim import KEYMAP, ROW_END_DELTA, handle_vim_key

__all__ = [
    "Action",
    "ActionType",
    "KEYMAP",
    "ROW_END_DELTA",
    "handle_vim_key",
]
