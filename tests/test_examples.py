from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from omegaconf import OmegaConf

from examples import every_second
from examples.game_loop import GameLoopConfig, run_game_loop
from tickrate.config import CounterConfig

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"


def test_every_second_runs_bounded(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        every_second.main(
            ["--period", "0.001", "--iterations", "3", "--window-size", "2", "--strategy", "fixed"]
        )
    messages = [record.getMessage() for record in caplog.records if record.name == "examples.every_second"]
    assert len(messages) == 3
    assert all(message.startswith("Updating at ") and message.endswith(" Hz") for message in messages)


@pytest.mark.parametrize("strategy", ["rolling", "fixed"])
def test_game_loop_reports_rate(tmp_path: Path, strategy: str) -> None:
    metrics_path = tmp_path / "frames.jsonl"
    cfg = GameLoopConfig(
        counter=CounterConfig(strategy=strategy, window_size=5),
        target_hz=500.0,
        frames=20,
        report_every_s=0.0,
        metrics_jsonl=str(metrics_path),
    )
    rate = run_game_loop(cfg)
    assert rate > 0.0
    lines = metrics_path.read_text().strip().splitlines()
    assert len(lines) == cfg.frames
    assert json.loads(lines[-1])["step"] == cfg.frames


def test_game_loop_rejects_bad_target() -> None:
    with pytest.raises(ValueError):
        run_game_loop(GameLoopConfig(target_hz=0.0))


def test_shipped_measure_config_builds_game_loop() -> None:
    raw = OmegaConf.to_container(OmegaConf.load(CONFIG_DIR / "measure.yaml"), resolve=True)
    cfg = GameLoopConfig(counter=CounterConfig(**raw["counter"]), **raw["experiment"])
    assert cfg.counter.strategy == "rolling"
    assert cfg.frames > 0
    assert "mode" not in raw
