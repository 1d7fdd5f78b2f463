# main.py
import argparse

from config import AppConfig
from runners.run_snake import main as snake
from runners.run_headless import main as headless

def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("mode", choices=["snake", "headless"])
    p.add_argument("--grid-w", type=int, default=30)
    p.add_argument("--grid-h", type=int, default=20)
    p.add_argument("--cell-px", type=int, default=20)
    p.add_argument("--tick-rate", type=int, default=15)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("--log", default=None, help="CSV file for per-tick metrics")
    p.add_argument("--ticks", type=int, default=200, help="headless: frames to run")
    return p.parse_args()

def main():
    args = parse_args()
    cfg = AppConfig().with_(
        grid_w=args.grid_w,
        grid_h=args.grid_h,
        render_cell=args.cell_px,
        tick_rate=args.tick_rate,
        fps=args.fps,
        seed=args.seed,
        render_grid_lines=args.grid_lines,
        log_path=args.log,
    )
    # the default start food only fits the default board
    sx, sy = cfg.start_food
    if sx >= cfg.grid_w or sy >= cfg.grid_h:
        cfg = cfg.with_(start_food=None)

    if args.mode == "snake":
        snake(cfg)
    elif args.mode == "headless":
        headless(cfg, ticks=args.ticks)

if __name__ == "__main__":
    main()
