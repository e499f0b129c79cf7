# apple.py
from __future__ import annotations

import logging
from typing import Optional

import numpy as np  # type: ignore

from .config import Config
from .errors import ConfigurationError
from .geometry import Point
from .snake import Snake

logger = logging.getLogger(__name__)


class AppleSpawner:
    """Places apples uniformly at random on free cells (rejection sampling)."""

    def __init__(self, config: Config, rng: Optional[np.random.Generator] = None):
        self.grid_size = config.grid_size
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

    def place(self, snake: Snake) -> Point:
        if len(snake) >= self.grid_size * self.grid_size:
            raise ConfigurationError("no free cell left for an apple")

        while True:
            ax, ay = self.rng.integers(0, self.grid_size, size=2)
            apple = Point(int(ax), int(ay))
            if not snake.occupies(apple):
                logger.debug("apple placed at %s", apple)
                return apple
