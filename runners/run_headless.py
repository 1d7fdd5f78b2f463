# runners/run_headless.py
from __future__ import annotations
import random
from typing import List, Optional
from config import AppConfig
from core.direction import Direction
from core.interfaces import GameResult
from core.session import SessionController
from runners.clock import FixedRateClock
from runners.driver import SessionDriver
from runners.session_log import ALL_KEYS, CSVLogger, make_session_end_logger, make_tick_logger
from viz.keyboard import Command
from viz.renderer_headless import HeadlessRenderer


class RandomTurns:
    """Autopilot input: on each poll, turns with probability `p_turn`."""
    def __init__(self, p_turn: float = 0.2, seed: Optional[int] = None):
        self.p_turn = p_turn
        self.rng = random.Random(seed)

    def poll(self) -> List[Command]:
        if self.rng.random() < self.p_turn:
            return [self.rng.choice(list(Direction))]
        return []


class StepTime:
    """Manual time source: every read advances by exactly one tick period."""
    def __init__(self, period: float):
        self.period = period
        self.now = 0.0

    def __call__(self) -> float:
        t = self.now
        self.now += self.period
        return t


def main(cfg: AppConfig | None = None, ticks: int = 200, p_turn: float = 0.2) -> GameResult:
    """Run a seeded autopilot session without a display and print the board."""
    cfg = cfg or AppConfig()
    session = SessionController.from_config(cfg)
    rend = HeadlessRenderer()
    rend.open(cfg)

    logger = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else None
    hooks = [make_tick_logger(logger, cfg.log_every)] if logger else []

    # one tick per frame, no wall-clock waiting
    clock = FixedRateClock(cfg.tick_rate, time_fn=StepTime(1.0 / cfg.tick_rate))
    driver = SessionDriver(session, rend, RandomTurns(p_turn, seed=cfg.seed), clock,
                           fps=cfg.fps, hooks=hooks)
    result = driver.run(max_frames=ticks)

    snap = session.snapshot()
    if logger:
        make_session_end_logger(logger)(snap)
        logger.close()
    rend.close()

    for row in rend.text():
        print(row)
    print(f"[session] {result.value} score={snap.score} len={len(snap.snake)} "
          f"ticks={snap.step_count} reason={snap.reason}")
    return result
