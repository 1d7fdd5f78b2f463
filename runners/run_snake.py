# runners/run_snake.py
from __future__ import annotations
from config import AppConfig
from core.session import SessionController
from runners.clock import FixedRateClock
from runners.driver import SessionDriver
from runners.session_log import ALL_KEYS, CSVLogger, make_session_end_logger, make_tick_logger
from viz.keyboard import Keyboard
from viz.renderer_pygame import PygameRenderer

def main(cfg: AppConfig | None = None):
    """Human play in a pygame window."""
    cfg = cfg or AppConfig()
    session = SessionController.from_config(cfg)

    rend = PygameRenderer()
    rend.open(cfg)

    logger = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else None
    hooks = [make_tick_logger(logger, cfg.log_every)] if logger else []

    driver = SessionDriver(
        session, rend, Keyboard(),
        FixedRateClock(cfg.tick_rate, max_catchup=cfg.max_catchup),
        fps=cfg.fps, hooks=hooks,
    )
    try:
        result = driver.run()
    finally:
        snap = session.snapshot()
        if logger:
            make_session_end_logger(logger)(snap)
            logger.close()
        rend.close()

    print(f"[session] {result.value} score={snap.score} len={len(snap.snake)} "
          f"ticks={snap.step_count} reason={snap.reason}")
    return result
