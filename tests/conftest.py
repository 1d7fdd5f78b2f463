# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from core.board import Board
from core.direction import Direction
from core.interfaces import Snapshot
from core.session import SessionController
from core.snake_state import SnakeState

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def session_factory():
    def make(body, heading=Direction.DOWN, cols=5, rows=5, food=(4, 4), seed=0, cell_size=20):
        board = Board(cols, rows, cell_size)
        return SessionController(board, SnakeState(body, heading), food=food, seed=seed)
    return make

@pytest.fixture
def snapshot_factory():
    def make(snake=((1, 1), (1, 2)), food=(3, 3), dir=Direction.UP, grid_w=5, grid_h=5, **kwargs):
        fields = dict(score=0, step_count=0, terminated=False, reason=None, cell_size=20)
        fields.update(kwargs)
        return Snapshot(snake=tuple(snake), food=food, dir=dir, grid_w=grid_w, grid_h=grid_h, **fields)
    return make

class FakeTime:
    """Time source the test moves by hand."""
    def __init__(self):
        self.t = 0.0
    def __call__(self):
        return self.t

@pytest.fixture
def fake_time():
    return FakeTime()
