from __future__ import annotations

import logging

import hydra
from omegaconf import DictConfig, OmegaConf

from examples.game_loop import GameLoopConfig, run_game_loop
from tickrate.config import CounterConfig

logger = logging.getLogger(__name__)


@hydra.main(config_path="../configs", config_name="measure", version_base=None)
def main(cfg: DictConfig) -> None:
    raw = OmegaConf.to_container(cfg, resolve=True)
    counter_cfg = CounterConfig(**(raw.get("counter") or {}))
    experiment = raw.get("experiment") or {}
    rate = run_game_loop(GameLoopConfig(counter=counter_cfg, **experiment))
    logger.info("Final rate %.2f Hz", rate)


if __name__ == "__main__":
    main()
