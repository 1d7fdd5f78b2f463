# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / session
    grid_w: int = 30
    grid_h: int = 20
    seed: Optional[int] = None
    start_cell: Tuple[int, int] = (0, 0)
    start_dir: str = "down"
    start_food: Optional[Tuple[int, int]] = (10, 10)   # None -> random free cell

    # clock
    tick_rate: int = 15      # simulation ticks per second
    fps: int = 60            # render frames per second
    max_catchup: int = 5     # ticks run at most per frame after a stall

    # render
    render_cell: int = 20
    render_title: str = "Snekk Game"
    render_grid_lines: bool = False
    render_show_hud: bool = True

    # logging
    log_path: Optional[str] = None   # CSV of per-tick metrics when set
    log_every: int = 1

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
