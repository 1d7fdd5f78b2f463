# runners/clock.py
from __future__ import annotations
import time
from typing import Callable

class FixedRateClock:
    """Fixed-step tick accumulator, decoupled from the render rate.

    `due()` reports how many simulation ticks are owed since the previous
    call. After a long stall at most `max_catchup` ticks are reported and the
    rest of the backlog is dropped.
    """

    def __init__(self, rate: float, time_fn: Callable[[], float] = time.perf_counter,
                 max_catchup: int = 5):
        if rate <= 0:
            raise ValueError(f"tick rate must be positive, got {rate!r}")
        if max_catchup < 1:
            raise ValueError(f"max_catchup must be >= 1, got {max_catchup!r}")
        self.rate = rate
        self.period = 1.0 / rate
        self.max_catchup = max_catchup
        self._time = time_fn
        self._last = time_fn()
        self._acc = 0.0
        self.stopped = False

    def due(self) -> int:
        if self.stopped:
            return 0
        now = self._time()
        self._acc += now - self._last
        self._last = now
        n = int(self._acc / self.period + 1e-9)   # float slack
        if n > self.max_catchup:
            self._acc = 0.0
            return self.max_catchup
        self._acc -= n * self.period
        return n

    def stop(self) -> None:
        self.stopped = True
