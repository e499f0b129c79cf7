# game.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .apple import AppleSpawner
from .config import Config
from .geometry import Command, Direction, Point
from .menu import MenuView
from .snake import MoveOutcome, Snake
from .ticker import TickScheduler

logger = logging.getLogger(__name__)


class GameState(Enum):
    START = "start"
    RUN = "run"
    END = "end"
    HELP = "help"
    SCORES = "scores"
    EXIT = "exit"


# States reachable by confirming a main-menu entry
MENU_TARGETS = (GameState.RUN, GameState.HELP, GameState.SCORES, GameState.EXIT)


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, enough to draw it."""
    state: GameState
    head: Point
    body: Tuple[Point, ...]
    apple: Point
    score: int
    menu: Optional[MenuView] = None
    text: Optional[str] = None
    notice: Optional[str] = None


# ---------- State machine ----------
class Game:
    """
    Snake, apple, tick scheduler and score, plus the run/end lifecycle.

    advance() is called once per frame while running; the tick scheduler
    decides on which of those frames the snake actually moves.
    """

    def __init__(self, config: Config, spawner: Optional[AppleSpawner] = None):
        self.config = config
        self.spawner = spawner if spawner is not None else AppleSpawner(config)
        self.ticker = TickScheduler(config.tick_delay)
        self.restart()
        self.state = GameState.START

    def restart(self) -> None:
        """Fresh snake, apple and score; straight into play."""
        # snake first, apple from the finished snake
        self.snake = Snake.spawn(self.config)
        self.apple = self.spawner.place(self.snake)
        self.ticker.reset()
        self.direction = self.snake.heading
        self.score = 0
        self.over = False
        self.won = False
        self.state = GameState.RUN

    @property
    def tick(self) -> int:
        return self.ticker.count

    @property
    def running(self) -> bool:
        return self.state is not GameState.EXIT

    def back(self) -> None:
        """Return to the main menu; the current round is left as it is."""
        if self.state is not GameState.EXIT:
            self.state = GameState.START

    def choose(self, target: GameState) -> None:
        """Leave the main menu for the confirmed entry."""
        if self.state is not GameState.START:
            return
        if target not in MENU_TARGETS:
            raise ValueError(f"{target} is not a menu destination")
        if target is GameState.RUN and self.over:
            self.restart()
            return
        self.state = target
        logger.debug("menu -> %s", target.value)

    def steer(self, command: Command) -> None:
        direction: Optional[Direction] = command.direction
        if direction is not None:
            self.direction = direction

    def advance(self, command: Command = Command.NONE) -> Optional[MoveOutcome]:
        """
        Run one frame of play. Returns the move outcome on frames where the
        snake moved, None otherwise.
        """
        if self.state is not GameState.RUN:
            return None

        self.steer(command)
        if not self.ticker.tick():
            return None

        outcome = self.snake.move(self.direction)
        if outcome is MoveOutcome.COLLIDED:
            self.state = GameState.END
            self.over = True
            logger.info("snake crashed at %s, score %d", self.snake.head, self.score)
        elif self.snake.head == self.apple:
            # grow: keep the tail this tick
            self.score += 1
            if len(self.snake) >= self.config.grid_size ** 2:
                # nowhere left to put an apple: the round is won
                self.state = GameState.END
                self.over = True
                self.won = True
                logger.info("board filled, score %d", self.score)
            else:
                self.apple = self.spawner.place(self.snake)
                logger.debug("apple eaten, score %d", self.score)
        else:
            self.snake.shrink()
        return outcome

    def snapshot(self, menu: Optional[MenuView] = None, text: Optional[str] = None,
                 notice: Optional[str] = None) -> Snapshot:
        return Snapshot(
            state=self.state,
            head=self.snake.head,
            body=tuple(self.snake.body),
            apple=self.apple,
            score=self.score,
            menu=menu,
            text=text,
            notice=notice,
        )
