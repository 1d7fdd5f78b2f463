# core/food.py
from __future__ import annotations
import random
from typing import AbstractSet, Optional
from .interfaces import Cell

class FoodSpawner:
    """Owns the single food cell and places new food by rejection sampling."""

    def __init__(self, cell: Cell, seed: Optional[int] = None):
        self.cell: Cell = (int(cell[0]), int(cell[1]))
        self.rng = random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        self.rng = random.Random(seed)

    def check_eaten(self, head: Cell) -> bool:
        return head == self.cell

    def respawn(self, cols: int, rows: int, occupied: AbstractSet[Cell]) -> Cell:
        """Draw uniform cells in [0,cols)x[0,rows) until one is free.

        A fully occupied board has no valid answer; that case raises
        ValueError rather than looping forever.
        """
        on_board = sum(1 for (x, y) in occupied if 0 <= x < cols and 0 <= y < rows)
        if on_board >= cols * rows:
            raise ValueError(f"No free cell left on a {cols}x{rows} board")

        while True:
            cand = (self.rng.randrange(cols), self.rng.randrange(rows))
            if cand not in occupied:
                self.cell = cand
                return cand
