# core/board.py
from __future__ import annotations
from dataclasses import dataclass
from .interfaces import Cell

@dataclass(frozen=True, slots=True)
class Board:
    cols: int
    rows: int
    cell_size: int = 20   # render only

    def __post_init__(self):
        for name in ("cols", "rows", "cell_size"):
            v = getattr(self, name)
            if not isinstance(v, int) or v <= 0:
                raise ValueError(f"Board.{name} must be a positive int, got {v!r}")

    @property
    def area(self) -> int:
        return self.cols * self.rows

    @property
    def pixel_size(self) -> tuple[int, int]:
        return (self.cols * self.cell_size, self.rows * self.cell_size)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows
