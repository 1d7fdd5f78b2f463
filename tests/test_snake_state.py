# tests/test_snake_state.py
import pytest
from core.direction import Direction
from core.interfaces import GameResult
from core.snake_state import SnakeState

def test_single_segment_moves_down():
    s = SnakeState([(2, 2)], Direction.DOWN)
    assert s.advance(False, 5, 5) is GameResult.CONTINUE
    assert list(s.body) == [(2, 3)]

def test_wrap_left_keeps_length():
    s = SnakeState([(0, 2), (1, 2)], Direction.LEFT)
    assert s.advance(False, 5, 5) is GameResult.CONTINUE
    assert s.head == (4, 2)
    assert list(s.body) == [(4, 2), (0, 2)]

@pytest.mark.parametrize("start, heading, expected", [
    ((0, 2), Direction.LEFT, (4, 2)),
    ((4, 2), Direction.RIGHT, (0, 2)),
    ((2, 0), Direction.UP, (2, 4)),
    ((2, 4), Direction.DOWN, (2, 0)),
])
def test_wraps_every_edge(start, heading, expected):
    s = SnakeState([start], heading)
    s.advance(False, 5, 5)
    assert s.head == expected

def test_wrap_on_non_square_board():
    s = SnakeState([(6, 0)], Direction.UP)
    s.advance(False, 7, 3)
    assert s.head == (6, 2)
    s.heading = Direction.RIGHT
    s.advance(False, 7, 3)
    assert s.head == (0, 2)

def test_growth_keeps_tail():
    s = SnakeState([(2, 2), (2, 1)], Direction.DOWN)
    assert s.advance(True, 5, 5) is GameResult.CONTINUE
    assert list(s.body) == [(2, 3), (2, 2), (2, 1)]

def test_may_follow_vacating_tail():
    # 2x2 loop: head (1,1) moving right onto the tail at (2,1)
    body = [(1, 1), (1, 2), (2, 2), (2, 1)]
    s = SnakeState(body, Direction.RIGHT)
    assert s.advance(False, 5, 5) is GameResult.CONTINUE
    assert list(s.body) == [(2, 1), (1, 1), (1, 2), (2, 2)]
    assert len(s.cells) == 4

def test_tail_is_solid_while_growing():
    body = [(1, 1), (1, 2), (2, 2), (2, 1)]
    s = SnakeState(body, Direction.RIGHT)
    assert s.advance(True, 5, 5) is GameResult.TERMINATED
    assert list(s.body) == body

def test_self_collision_leaves_body_untouched():
    body = [(2, 2), (2, 3), (3, 3), (3, 2), (3, 1)]
    s = SnakeState(body, Direction.RIGHT)
    assert s.advance(False, 5, 5) is GameResult.TERMINATED
    assert list(s.body) == body
    assert s.cells == frozenset(body)

def test_wrap_into_own_tail():
    body = [(0, 1), (1, 1), (2, 1), (3, 1), (4, 1)]
    s = SnakeState(body, Direction.LEFT)
    assert s.advance(False, 5, 3) is GameResult.CONTINUE
    assert s.head == (4, 1)

    s = SnakeState(body, Direction.LEFT)
    assert s.advance(True, 5, 3) is GameResult.TERMINATED

def test_single_segment_never_self_collides():
    # on a 1x1 torus every step lands on the cell being vacated
    s = SnakeState([(0, 0)], Direction.LEFT)
    for _ in range(3):
        assert s.advance(False, 1, 1) is GameResult.CONTINUE
    assert list(s.body) == [(0, 0)]

def test_rejects_bad_bodies():
    with pytest.raises(ValueError):
        SnakeState([])
    with pytest.raises(ValueError):
        SnakeState([(1, 1), (1, 1)])

def test_empty_body_is_fatal():
    s = SnakeState([(1, 1)])
    s.body.clear()
    with pytest.raises(RuntimeError):
        s.advance(False, 5, 5)

def test_blocked_does_not_mutate():
    body = [(1, 1), (1, 2), (2, 2), (2, 1)]
    s = SnakeState(body, Direction.RIGHT)
    assert not s.blocked((2, 1), just_ate=False)
    assert s.blocked((2, 1), just_ate=True)
    assert s.blocked((1, 2), just_ate=False)
    assert not s.blocked((3, 3), just_ate=True)
    assert list(s.body) == body
