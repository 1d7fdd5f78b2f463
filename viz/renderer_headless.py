# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
import numpy as np
from config import AppConfig
from core.featurizers import GridFeaturizer, to_text
from core.interfaces import Snapshot
from viz.render_iface import Renderer

class HeadlessRenderer(Renderer):
    """No display. Keeps the last frame as a numpy grid and as ASCII rows."""

    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frames = 0
        self.last: Optional[Snapshot] = None
        self.last_grid: Optional[np.ndarray] = None
        self._featurizer = GridFeaturizer()

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames = 0

    def draw(self, snap: Snapshot) -> None:
        assert self.cfg is not None, "Renderer not opened"
        self.last = snap
        self.last_grid = self._featurizer.encode(snap)
        self.frames += 1

    def text(self) -> List[str]:
        return to_text(self.last) if self.last is not None else []

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        self.cfg = None
