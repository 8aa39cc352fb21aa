"""
Game session module.

Provides the controller that plays a game from key actions, and a
gymnasium environment built on it.
"""
from .controller import GameSession, GameState
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "GameSession",
    "GameState",
    "MinesweeperEnv",
    "make_vec_env",
]
