# main.py
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

import pygame  # type: ignore

from .config import Config
from .display import PygameTarget, poll_command
from .errors import ConfigurationError
from .render import draw
from .scores import ScoreBoard, SQLiteScoreBoard
from .session import Session

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake with a menu.")
    parser.add_argument("--grid-size", type=int, default=defaults.grid_size)
    parser.add_argument(
        "--tick-delay",
        type=int,
        default=defaults.tick_delay,
        help="frames between snake steps (lower = faster)",
    )
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--seed", type=int, default=None, help="seed apple placement")
    parser.add_argument("--name", type=str, default="PLAYER", help="name to record scores under")
    parser.add_argument(
        "--scores-db",
        type=str,
        default=None,
        help="SQLite file for high scores (kept in memory if omitted)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return dataclasses.replace(
        Config(),
        grid_size=args.grid_size,
        tick_delay=args.tick_delay,
        fps=args.fps,
        seed=args.seed,
    )


def run(session: Session, config: Config) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.window_size, config.window_size))
    pygame.display.set_caption("gridsnake")
    clock = pygame.time.Clock()
    target = PygameTarget(screen, config)

    try:
        while session.running:
            # 1) input
            command = poll_command(pygame.event.get())
            if command is None:
                break

            # 2) update
            snapshot = session.frame(command)

            # 3) render
            target.clear()
            draw(target, snapshot, config)
            pygame.display.flip()
            clock.tick(config.fps)  # movement is gated by the tick scheduler
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ConfigurationError as exc:
        logger.error("bad configuration: %s", exc)
        return 2

    scores = SQLiteScoreBoard(args.scores_db) if args.scores_db else ScoreBoard()
    try:
        session = Session(config, scores=scores, player=args.name)
        run(session, config)
    finally:
        if isinstance(scores, SQLiteScoreBoard):
            scores.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
