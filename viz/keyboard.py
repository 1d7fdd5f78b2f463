# viz/keyboard.py
from __future__ import annotations
from typing import List, Union
import pygame as pg
from core.direction import Direction

Command = Union[Direction, str]   # a Direction or "quit"

KEYMAP = {
    pg.K_UP: Direction.UP, pg.K_w: Direction.UP,
    pg.K_DOWN: Direction.DOWN, pg.K_s: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT, pg.K_a: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT, pg.K_d: Direction.RIGHT,
}

class Keyboard:
    """Turns pygame key presses into commands, in arrival order.

    Only KEYDOWN is forwarded; releases and unmapped keys are dropped here so
    nothing but a Direction ever reaches the session.
    """

    def poll(self) -> List[Command]:
        out: List[Command] = []
        for e in pg.event.get():
            if e.type == pg.QUIT:
                out.append("quit")
            elif e.type == pg.KEYDOWN:
                if e.key == pg.K_ESCAPE:
                    out.append("quit")
                elif e.key in KEYMAP:
                    out.append(KEYMAP[e.key])
        return out
