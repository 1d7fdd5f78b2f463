# runners/driver.py
from __future__ import annotations
from typing import Callable, List, Optional, Protocol, Sequence
from core.interfaces import GameResult, Snapshot
from core.session import SessionController
from runners.clock import FixedRateClock
from viz.render_iface import Renderer
from viz.keyboard import Command

TickHook = Callable[[Snapshot], None]

class CommandSource(Protocol):
    def poll(self) -> Sequence[Command]: ...


class SessionDriver:
    """Frame loop: input -> due ticks -> draw latest snapshot -> pace.

    The session's terminal result stops the clock; nothing is ticked after it.
    """

    def __init__(
        self,
        session: SessionController,
        renderer: Renderer,
        source: CommandSource,
        clock: FixedRateClock,
        fps: int = 60,
        hooks: Optional[List[TickHook]] = None,
    ):
        self.session = session
        self.renderer = renderer
        self.source = source
        self.clock = clock
        self.fps = fps
        self.hooks: List[TickHook] = list(hooks or [])
        self.frames = 0
        self._stop = False

    def stop(self) -> None:
        self._stop = True
        self.clock.stop()

    def run(self, max_frames: Optional[int] = None) -> GameResult:
        while not self._stop:
            if max_frames is not None and self.frames >= max_frames:
                break

            for cmd in self.source.poll():
                if cmd == "quit":
                    self.stop()
                    break
                self.session.request_direction(cmd)
            if self._stop:
                break

            for _ in range(self.clock.due()):
                result = self.session.tick()
                snap = self.session.snapshot()
                for hook in self.hooks:
                    hook(snap)
                if result is GameResult.TERMINATED:
                    self.clock.stop()
                    break

            self.renderer.draw(self.session.snapshot())
            self.renderer.tick(self.fps)
            self.frames += 1

            if self.session.terminated:
                break
        return self.session.result
