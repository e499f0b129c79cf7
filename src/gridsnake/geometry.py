# geometry.py
from enum import Enum
from typing import NamedTuple, Optional


class Direction(Enum):
    """Grid offsets (dx, dy); y grows downward."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Point(NamedTuple):
    x: int
    y: int

    def moved(self, direction: Direction) -> "Point":
        return Point(self.x + direction.dx, self.y + direction.dy)


class Command(Enum):
    """One logical input per frame, produced by the host's input source."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CONFIRM = "confirm"
    BACK = "back"
    NONE = "none"

    @property
    def direction(self) -> Optional[Direction]:
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}
