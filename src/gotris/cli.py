from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from gotris.game import GameConfig

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
ERROR_USAGE = 1
ERROR_SCREEN_INIT = 2

MODES = ("debug", "pygame")


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(ERROR_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="gotris", description="Gotris: a falling-block puzzle game")
    p.add_argument("mode", nargs="?", choices=MODES, default="debug",
                   help="Render mode: debug (plain text, line input) or pygame (real-time window)")
    p.add_argument("--controls", action="store_true", help="Print the controls of the selected mode and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="[GOTRIS] %(asctime)s - %(name)s - %(message)s")

    if args.mode == "pygame":
        try:
            from gotris.visualization import human_play as mode
        except ImportError as e:
            logger.error("pygame mode unavailable: %s", e)
            return ERROR_SCREEN_INIT
    else:
        from gotris.visualization import debug_play as mode

    if args.controls:
        print(mode.controls())
        return EXIT_SUCCESS

    config = GameConfig(random_seed=args.seed)
    logger.info("starting %s mode (seed=%s)", args.mode, args.seed)
    if args.mode == "pygame":
        import pygame

        try:
            mode.run(config)
        except pygame.error as e:
            logger.error("could not initialise display: %s", e)
            return ERROR_SCREEN_INIT
    else:
        mode.run(config)
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
