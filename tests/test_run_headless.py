# tests/test_run_headless.py
import os
from config import AppConfig
from core.direction import Direction
from core.interfaces import GameResult
from runners.run_headless import RandomTurns, main

def test_random_turns_only_emit_directions():
    src = RandomTurns(p_turn=1.0, seed=0)
    for _ in range(20):
        (cmd,) = src.poll()
        assert isinstance(cmd, Direction)
    assert RandomTurns(p_turn=0.0).poll() == []

def test_headless_session_prints_board(tmp_path, capsys):
    log = str(tmp_path / "run.csv")
    cfg = AppConfig(grid_w=10, grid_h=8, start_food=(5, 5), seed=1, log_path=log)
    result = main(cfg, ticks=30)
    assert isinstance(result, GameResult)

    out = capsys.readouterr().out.splitlines()
    assert len(out[0]) == 10
    assert out[-1].startswith("[session]")
    assert os.path.getsize(log) > 0

def test_tiny_board_runs_to_completion(capsys):
    cfg = AppConfig(grid_w=2, grid_h=1, start_food=None, seed=0)
    result = main(cfg, ticks=40, p_turn=0.5)
    assert isinstance(result, GameResult)
    assert capsys.readouterr().out.splitlines()[-1].startswith("[session]")
