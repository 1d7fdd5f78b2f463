# runners/session_log.py
from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable
from core.interfaces import Snapshot

ALL_KEYS = [
    "step",
    # per tick
    "tick/length", "tick/score", "tick/head_x", "tick/head_y",
    "tick/food_x", "tick/food_y", "tick/dir",
    # end of session
    "session/final_score", "session/final_length", "session/ticks",
    "session/death_self", "session/death_full",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped, not fatal
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def make_tick_logger(logger: Logger, every: int = 1) -> Callable[[Snapshot], None]:
    """
    Returns a hook(snap) -> None that logs one row every `every` completed
    ticks. Snapshots of a terminated session are left to the end-of-session
    logger.
    """
    every = max(1, int(every))

    def _on_tick(snap: Snapshot) -> None:
        if snap.terminated or snap.step_count % every != 0:
            return
        hx, hy = snap.head
        fx, fy = snap.food
        logger.log(snap.step_count, {
            "tick/length": len(snap.snake),
            "tick/score": snap.score,
            "tick/head_x": hx, "tick/head_y": hy,
            "tick/food_x": fx, "tick/food_y": fy,
            "tick/dir": snap.dir.name,
        })
    return _on_tick


def make_session_end_logger(logger: Logger) -> Callable[[Snapshot], None]:
    def _on_end(snap: Snapshot) -> None:
        logger.log(snap.step_count, {
            "session/final_score": snap.score,
            "session/final_length": len(snap.snake),
            "session/ticks": snap.step_count,
            "session/death_self": 1.0 if snap.reason == "self" else 0.0,
            "session/death_full": 1.0 if snap.reason == "full" else 0.0,
        })
        logger.flush()
    return _on_end
