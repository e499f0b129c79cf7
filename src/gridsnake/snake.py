# snake.py
from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Iterable, Optional

from .config import Config
from .geometry import Direction, Point


class MoveOutcome(Enum):
    ALIVE = "alive"
    COLLIDED = "collided"


class Snake:
    """
    A head plus an ordered body; body[0] is the cell the head just left,
    body[-1] is the tail.

    move() only ever grows the body. Whoever drives the snake decides
    whether to shrink() afterwards, which is how eating works: an apple
    tick simply skips the shrink.
    """

    def __init__(self, head: Point, body: Iterable[Point], grid_size: int,
                 heading: Direction = Direction.UP):
        self.head = head
        self.body: Deque[Point] = deque(body)
        self.grid_size = grid_size
        self.heading = heading

    @classmethod
    def spawn(cls, config: Config) -> "Snake":
        """Head at the board centre, body trailing straight down below it."""
        centre = config.grid_size // 2
        head = Point(centre, centre)
        body = [Point(head.x, head.y + i) for i in range(1, config.initial_length)]
        return cls(head, body, config.grid_size)

    def __len__(self) -> int:
        return len(self.body) + 1

    def occupies(self, point: Point) -> bool:
        return point == self.head or point in self.body

    def move(self, direction: Optional[Direction] = None) -> MoveOutcome:
        # None keeps going the way we went last
        if direction is not None:
            self.heading = direction

        self.body.appendleft(self.head)
        self.head = self.head.moved(self.heading)

        # Wall collision
        if not (0 <= self.head.x < self.grid_size and 0 <= self.head.y < self.grid_size):
            return MoveOutcome.COLLIDED

        # Self collision (the old head is in body now, so reversing is fatal)
        if self.head in self.body:
            return MoveOutcome.COLLIDED

        return MoveOutcome.ALIVE

    def shrink(self) -> Point:
        """Drop the oldest tail segment and return it."""
        return self.body.pop()
