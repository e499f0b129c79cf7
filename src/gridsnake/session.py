# session.py
from __future__ import annotations

import logging
from typing import List, Optional

from .apple import AppleSpawner
from .config import BOARD_FILLED, HELP_TEXT, NAME_TAKEN, NO_SCORES, Config
from .errors import DuplicateNameError
from .game import Game, GameState, Snapshot
from .geometry import Command
from .menu import EndBehavior, Menu
from .scores import ScoreBoard, ScoreStore

logger = logging.getLogger(__name__)

MAIN_MENU = [
    ("Start Game", GameState.RUN),
    ("High Scores", GameState.SCORES),
    ("Help", GameState.HELP),
    ("Quit", GameState.EXIT),
]


class Session:
    """
    The per-frame entry point for the host.

    Each frame the host passes at most one Command to frame(); the session
    hands it to whatever is active (a menu while browsing, the game while
    playing) and returns a Snapshot to draw.
    """

    def __init__(
        self,
        config: Config,
        scores: Optional[ScoreStore] = None,
        player: str = "PLAYER",
        spawner: Optional[AppleSpawner] = None,
    ):
        self.config = config
        self.scores = scores if scores is not None else ScoreBoard()
        self.player = player
        self.game = Game(config, spawner)
        self.main_menu: Menu[GameState] = Menu(MAIN_MENU, EndBehavior.WRAP)
        self.score_menu: Menu[Optional[str]] = self._build_score_menu()
        # lines shown under the game-over banner
        self.notices: List[str] = []

    @property
    def state(self) -> GameState:
        return self.game.state

    @property
    def running(self) -> bool:
        return self.game.running

    def _build_score_menu(self) -> Menu[Optional[str]]:
        entries = [(f"{name}  {score}", name) for name, score in self.scores.top()]
        if not entries:
            entries = [(NO_SCORES, None)]
        return Menu(entries, EndBehavior.CLAMP, font_size=self.config.font_size * 3 // 4)

    def _record(self, score: int) -> None:
        try:
            self.scores.record(self.player, score)
        except DuplicateNameError as exc:
            logger.warning("score %d not saved: %s", score, exc)
            self.notices.append(NAME_TAKEN.format(name=exc.name))

    def _game_over(self) -> None:
        self.notices = [BOARD_FILLED] if self.game.won else []
        self._record(self.game.score)

    def frame(self, command: Command = Command.NONE) -> Snapshot:
        if command is Command.BACK:
            self.game.back()
            return self.snapshot()

        state = self.game.state
        if state is GameState.START:
            self._browse_main(command)
        elif state is GameState.SCORES:
            if command is Command.UP:
                self.score_menu.prev()
            elif command is Command.DOWN:
                self.score_menu.next()
        elif state is GameState.RUN:
            self.game.advance(command)
            if self.game.state is GameState.END:
                self._game_over()
        elif state is GameState.END:
            if command is not Command.NONE:
                self.game.restart()
                self.notices = []
                logger.info("new game")
        # HELP waits for BACK; EXIT is final

        return self.snapshot()

    def _browse_main(self, command: Command) -> None:
        if command is Command.UP:
            self.main_menu.prev()
        elif command is Command.DOWN:
            self.main_menu.next()
        elif command in (Command.RIGHT, Command.CONFIRM):
            target = self.main_menu.select()
            if target is GameState.SCORES:
                self.score_menu = self._build_score_menu()
            self.game.choose(target)

    def snapshot(self) -> Snapshot:
        state = self.game.state
        if state is GameState.START:
            return self.game.snapshot(menu=self.main_menu.view())
        if state is GameState.SCORES:
            return self.game.snapshot(menu=self.score_menu.view())
        if state is GameState.HELP:
            return self.game.snapshot(text=HELP_TEXT)
        if state is GameState.END and self.notices:
            return self.game.snapshot(notice="\n".join(self.notices))
        return self.game.snapshot()
