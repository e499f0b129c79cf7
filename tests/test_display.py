import pygame

from gridsnake.config import Config
from gridsnake.display import PygameTarget, poll_command
from gridsnake.geometry import Command, Point


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_arrow_keys_map_to_directions():
    assert poll_command([key(pygame.K_UP)]) is Command.UP
    assert poll_command([key(pygame.K_LEFT)]) is Command.LEFT


def test_escape_is_back_and_return_confirms():
    assert poll_command([key(pygame.K_ESCAPE)]) is Command.BACK
    assert poll_command([key(pygame.K_RETURN)]) is Command.CONFIRM


def test_no_events_is_none_command():
    assert poll_command([]) is Command.NONE


def test_first_mapped_key_wins():
    events = [key(pygame.K_a), key(pygame.K_DOWN), key(pygame.K_UP)]
    assert poll_command(events) is Command.DOWN


def test_window_close_returns_none():
    events = [key(pygame.K_UP), pygame.event.Event(pygame.QUIT)]
    assert poll_command(events) is None


def test_fill_cell_paints_grid_square():
    config = Config()
    surface = pygame.Surface((config.window_size, config.window_size))
    target = PygameTarget(surface, config)
    target.clear()
    target.fill_cell(Point(1, 2), (255, 0, 0))
    size = config.cell_size
    assert tuple(surface.get_at((size + 5, 2 * size + 5)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)
