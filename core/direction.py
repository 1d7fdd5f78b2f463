# core/direction.py
from __future__ import annotations
from enum import Enum
from typing import Tuple

class Direction(Enum):
    """Absolute heading; the value is the (dx, dy) unit step on screen axes."""
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown direction {name!r}") from None


def is_reversal(current: Direction, requested: Direction) -> bool:
    return requested is current.opposite
