# display.py
from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

import pygame  # type: ignore

from .config import BACKGROUND, Config
from .geometry import Command, Point

KEYMAP = {
    pygame.K_UP: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_RETURN: Command.CONFIRM,
    pygame.K_KP_ENTER: Command.CONFIRM,
    pygame.K_SPACE: Command.CONFIRM,
    pygame.K_ESCAPE: Command.BACK,
}


# ---------- Input ----------
def poll_command(events: Iterable[pygame.event.Event]) -> Optional[Command]:
    """
    Reduce one frame's events to a single Command (the first mapped key wins).
    Returns None when the window was closed.
    """
    command = Command.NONE
    for event in events:
        if event.type == pygame.QUIT:
            return None
        if event.type == pygame.KEYDOWN and command is Command.NONE:
            command = KEYMAP.get(event.key, Command.NONE)
    return command


# ---------- Output ----------
class PygameTarget:
    """RenderTarget backed by a pygame Surface."""

    def __init__(self, surface: pygame.Surface, config: Config):
        self.surface = surface
        self.cell_size = config.cell_size
        self.fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            self.fonts[size] = pygame.font.SysFont(None, size)
        return self.fonts[size]

    def clear(self) -> None:
        self.surface.fill(BACKGROUND)

    def fill_cell(self, point: Point, color: Tuple[int, int, int]) -> None:
        rect = pygame.Rect(point.x * self.cell_size, point.y * self.cell_size,
                           self.cell_size, self.cell_size)
        pygame.draw.rect(self.surface, color, rect)

    def draw_text(self, text: str, pos: Tuple[int, int], size: int,
                  color: Tuple[int, int, int], centered: bool = False) -> None:
        font = self._font(size)
        x, y = pos
        # pygame fonts render a single line at a time
        for line in text.split("\n"):
            img = font.render(line, True, color)
            left = x - img.get_width() // 2 if centered else x
            self.surface.blit(img, (left, y))
            y += font.get_linesize()
