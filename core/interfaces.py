# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple
from .direction import Direction

Cell = Tuple[int, int]  # (x, y), signed

class GameResult(Enum):
    CONTINUE = "continue"
    TERMINATED = "terminated"

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Cell
    dir: Direction
    score: int
    step_count: int
    terminated: bool
    reason: str | None
    grid_w: int
    grid_h: int
    cell_size: int

    @property
    def head(self) -> Cell:
        return self.snake[0]
