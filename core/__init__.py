# core/__init__.py  (pure simulation, no pygame)
from .direction import Direction, is_reversal
from .interfaces import Cell, GameResult, Snapshot
from .board import Board
from .snake_state import SnakeState
from .food import FoodSpawner
from .session import SessionController

__all__ = [
    "Direction", "is_reversal",
    "Cell", "GameResult", "Snapshot",
    "Board", "SnakeState", "FoodSpawner", "SessionController",
]
