# render.py
"""
Turns a Snapshot into drawing requests.

Nothing here knows about pixels or fonts: everything is expressed through
the two primitives of a RenderTarget, and the host does the rest. Which
screen gets drawn depends on snapshot.state alone.
"""
from __future__ import annotations

from typing import Protocol, Tuple

from .config import APPLE, BODY, END_TEXT, HEAD, MENU_HINT, TEXT, TITLE, Color, Config
from .game import GameState, Snapshot
from .geometry import Point
from .menu import MenuView


class RenderTarget(Protocol):
    def fill_cell(self, point: Point, color: Color) -> None:
        ...

    def draw_text(self, text: str, pos: Tuple[int, int], size: int, color: Color,
                  centered: bool = False) -> None:
        """Draw `text` with its top edge at pos[1]; pos[0] is the left edge,
        or the horizontal centre when `centered`."""
        ...


# ---------- Screens ----------
def draw_menu(target: RenderTarget, menu: MenuView, config: Config) -> None:
    mid = config.window_size // 2
    size = menu.font_size or config.font_size
    color = menu.color or TEXT
    line = size * 1.5
    top = config.window_size / 2 - line
    for i, row in enumerate(menu.rows()):
        target.draw_text(row, (mid, int(top + line * i)), size, color, centered=True)


def draw_start(target: RenderTarget, snapshot: Snapshot, config: Config) -> None:
    mid = config.window_size // 2
    target.draw_text(TITLE, (mid, 80), 80, TEXT, centered=True)
    target.draw_text(MENU_HINT, (mid, 200), 25, TEXT, centered=True)
    if snapshot.menu is not None:
        draw_menu(target, snapshot.menu, config)


def draw_scores(target: RenderTarget, snapshot: Snapshot, config: Config) -> None:
    target.draw_text("HIGH SCORES", (config.window_size // 2, 80), 60, TEXT, centered=True)
    if snapshot.menu is not None:
        draw_menu(target, snapshot.menu, config)


def draw_board(target: RenderTarget, snapshot: Snapshot, config: Config) -> None:
    target.fill_cell(snapshot.head, HEAD)
    for segment in snapshot.body:
        target.fill_cell(segment, BODY)
    target.fill_cell(snapshot.apple, APPLE)
    target.draw_text(str(snapshot.score), (40, 40), config.font_size * 2, TEXT)


def draw_end(target: RenderTarget, snapshot: Snapshot, config: Config) -> None:
    mid = config.window_size // 2
    target.draw_text(END_TEXT, (mid, mid - config.font_size // 2), config.font_size, TEXT,
                     centered=True)
    if snapshot.notice:
        target.draw_text(snapshot.notice, (mid, mid + config.font_size * 2),
                         config.font_size // 2, TEXT, centered=True)


def draw(target: RenderTarget, snapshot: Snapshot, config: Config) -> None:
    state = snapshot.state
    if state is GameState.START:
        draw_start(target, snapshot, config)
    elif state is GameState.HELP:
        target.draw_text(snapshot.text or "", (40, 80), 30, TEXT)
    elif state is GameState.SCORES:
        draw_scores(target, snapshot, config)
    elif state is GameState.RUN:
        draw_board(target, snapshot, config)
    elif state is GameState.END:
        draw_end(target, snapshot, config)
    # EXIT: nothing to draw
