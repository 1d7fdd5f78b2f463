# core/snake_state.py
from __future__ import annotations
from collections import deque
from typing import Deque, FrozenSet, Iterable, Iterator, Set
from .direction import Direction
from .interfaces import Cell, GameResult

class SnakeState:
    """Ordered snake body (head first) plus heading.

    The body lives in a deque for O(1) push-front/pop-back and is mirrored by a
    set for O(1) occupancy checks. Cells never repeat.
    """

    def __init__(self, body: Iterable[Cell], heading: Direction = Direction.DOWN):
        self.body: Deque[Cell] = deque((int(x), int(y)) for x, y in body)
        if not self.body:
            raise ValueError("Snake needs at least one segment")
        self._cells: Set[Cell] = set(self.body)
        if len(self._cells) != len(self.body):
            raise ValueError(f"Snake body repeats a cell: {list(self.body)}")
        self.heading = heading

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def cells(self) -> FrozenSet[Cell]:
        return frozenset(self._cells)

    def collides(self, cell: Cell) -> bool:
        return cell in self._cells

    def next_head(self, cols: int, rows: int) -> Cell:
        """Head cell after one step, wrapped onto the torus."""
        if not self.body:
            raise RuntimeError("Snake has no body")
        x, y = self.body[0]
        d = self.heading

        # off-grid sentinel so the unit step lands on the far edge
        if d is Direction.LEFT and x == 0:
            x = cols
        elif d is Direction.RIGHT and x == cols - 1:
            x = -1
        if d is Direction.UP and y == 0:
            y = rows
        elif d is Direction.DOWN and y == rows - 1:
            y = -1

        dx, dy = d.delta
        return (x + dx, y + dy)

    def blocked(self, cell: Cell, just_ate: bool) -> bool:
        """True if moving the head onto `cell` this tick hits the body."""
        # a non-growing snake vacates its tail this tick, so it may move into it
        return cell in self._cells and (just_ate or cell != self.body[-1])

    def advance(self, just_ate: bool, cols: int, rows: int) -> GameResult:
        new_head = self.next_head(cols, rows)
        if self.blocked(new_head, just_ate):
            return GameResult.TERMINATED

        if not just_ate:
            self._cells.discard(self.body.pop())
        self.body.appendleft(new_head)
        self._cells.add(new_head)
        return GameResult.CONTINUE
