# core/featurizers.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np
from .interfaces import Snapshot

class GridFeaturizer:
    """Encodes a Snapshot into a (rows, cols, C) occupancy grid.

    c0 -> snake body excluding head
    c1 -> snake head
    c2 -> food
    """
    channels = 3

    def __init__(self, flat: bool = False):
        self.flat = flat

    def shape(self, grid_h: int, grid_w: int) -> Tuple[int, ...]:
        C = self.channels
        return (grid_h * grid_w * C,) if self.flat else (grid_h, grid_w, C)

    def encode(self, s: Snapshot) -> np.ndarray:
        grid = np.zeros((s.grid_h, s.grid_w, self.channels), dtype=np.float32)
        for (x, y) in s.snake[1:]:
            grid[y, x, 0] = 1.0
        hx, hy = s.head; grid[hy, hx, 1] = 1.0
        fx, fy = s.food; grid[fy, fx, 2] = 1.0
        if self.flat:
            return grid.reshape(-1)
        return grid


def to_text(s: Snapshot) -> List[str]:
    """One string per row: '.' empty, 'F' food, 'o' body, 'H' head."""
    grid = [["." for _ in range(s.grid_w)] for _ in range(s.grid_h)]
    fx, fy = s.food
    grid[fy][fx] = "F"
    for (x, y) in s.snake[1:]:
        grid[y][x] = "o"
    hx, hy = s.head
    grid[hy][hx] = "H"
    return ["".join(row) for row in grid]
