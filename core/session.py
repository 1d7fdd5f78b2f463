# core/session.py
from __future__ import annotations
import threading
from typing import Optional, TYPE_CHECKING
from .board import Board
from .direction import Direction, is_reversal
from .food import FoodSpawner
from .interfaces import Cell, GameResult, Snapshot
from .snake_state import SnakeState

if TYPE_CHECKING:
    from config import AppConfig


class SessionController:
    """Per-tick orchestration of snake, food and board for one session.

    Direction requests are buffered and committed at the start of the next
    tick. One lock covers tick/request/snapshot, so readers on another thread
    only ever see committed state.
    """

    def __init__(
        self,
        board: Board,
        snake: SnakeState,
        food: Optional[Cell] = None,
        seed: Optional[int] = None,
    ):
        self.board = board
        self.snake = snake
        if food is not None:
            food = (int(food[0]), int(food[1]))
        for c in snake:
            if not board.contains(c):
                raise ValueError(f"Snake cell {c} is outside the {board.cols}x{board.rows} board")

        self._food = FoodSpawner(food if food is not None else snake.head, seed=seed)
        if food is None:
            self._food.respawn(board.cols, board.rows, snake.cells)
        elif not board.contains(food):
            raise ValueError(f"Food {food} is outside the {board.cols}x{board.rows} board")
        elif snake.collides(food):
            raise ValueError(f"Food {food} starts on the snake")

        self._lock = threading.Lock()
        self._pending: Optional[Direction] = None
        self._grow_next = False
        self.score = 0
        self.step_count = 0
        self.result = GameResult.CONTINUE
        self.reason: str | None = None

    @classmethod
    def from_config(cls, cfg: "AppConfig") -> "SessionController":
        board = Board(cfg.grid_w, cfg.grid_h, cfg.render_cell)
        snake = SnakeState([tuple(cfg.start_cell)], Direction.from_name(cfg.start_dir))
        food = tuple(cfg.start_food) if cfg.start_food is not None else None
        return cls(board, snake, food=food, seed=cfg.seed)

    # ---- read side ----
    @property
    def terminated(self) -> bool:
        return self.result is GameResult.TERMINATED

    @property
    def heading(self) -> Direction:
        return self.snake.heading

    @property
    def pending_heading(self) -> Optional[Direction]:
        return self._pending

    @property
    def food(self) -> Cell:
        return self._food.cell

    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot(
                snake=tuple(self.snake.body),
                food=self._food.cell,
                dir=self.snake.heading,
                score=self.score,
                step_count=self.step_count,
                terminated=self.terminated,
                reason=self.reason,
                grid_w=self.board.cols,
                grid_h=self.board.rows,
                cell_size=self.board.cell_size,
            )

    # ---- write side ----
    def request_direction(self, direction: Direction) -> bool:
        """Buffer a heading change for the next tick; returns False if dropped.

        The reversal guard checks the heading committed at the start of the
        tick, never an earlier request buffered in the same tick.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f"expected Direction, got {type(direction).__name__}")
        with self._lock:
            if self.terminated or is_reversal(self.snake.heading, direction):
                return False
            self._pending = direction
            return True

    def tick(self) -> GameResult:
        with self._lock:
            if self.terminated:
                return self.result

            if self._pending is not None:
                self.snake.heading = self._pending
                self._pending = None

            cols, rows = self.board.cols, self.board.rows
            grow = self._grow_next

            # eating the last free cell leaves nowhere to respawn; end before moving
            new_head = self.snake.next_head(cols, rows)
            if (not self.snake.blocked(new_head, grow) and self._food.check_eaten(new_head)
                    and len(self.snake) + (1 if grow else 0) >= self.board.area):
                self.result, self.reason = GameResult.TERMINATED, "full"
                return self.result

            if self.snake.advance(grow, cols, rows) is GameResult.TERMINATED:
                self.result, self.reason = GameResult.TERMINATED, "self"
                return self.result

            # growth shows up on the tick after the bite
            self._grow_next = self._food.check_eaten(self.snake.head)
            if self._grow_next:
                self.score += 1
                self._food.respawn(cols, rows, self.snake.cells)

            self.step_count += 1
            return GameResult.CONTINUE
