from __future__ import annotations

import argparse
import logging
import random
import sys
import tkinter as tk
from collections.abc import Sequence
from pathlib import Path

from spikehop.app.game_driver import GameDriver
from spikehop.domain.config import GameConfig
from spikehop.infra.config_loader import load_config
from spikehop.infra.exceptions import ConfigError
from spikehop.ui.input_mapper import TkInputMapper
from spikehop.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, config: GameConfig) -> None:
        self.root = tk.Tk()
        self.root.title("Spike Hop")
        self.root.resizable(False, False)

        self.view = TkCanvasView(
            self.root,
            width=config.width,
            height=config.height,
            on_reset=self._on_reset,
        )

        self.driver = GameDriver(
            scheduler=self.root,
            view=self.view,
            config=config,
            rng=random.Random(),
        )

        self.input = TkInputMapper(
            self.root,
            on_jump_pressed=self.driver.jump_pressed,
            on_jump_released=self.driver.jump_released,
        )

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self.driver.init()
        self.root.mainloop()

    def _on_reset(self) -> None:
        self.driver.reset()

    def _on_close(self) -> None:
        try:
            self.driver.shutdown()
        except tk.TclError:
            # Root may already be half torn down; nothing left to cancel.
            logger.debug("Timer cancel failed during shutdown", exc_info=True)
        self.root.destroy()


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spikehop", description="Jump the square over the spikes.")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default tunables")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    GameApp(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
