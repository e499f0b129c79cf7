# ticker.py
from .errors import ConfigurationError


class TickScheduler:
    """
    Turns the host's frame clock into simulation steps.

    tick() is called once per frame and returns True on every `delay`-th
    call, so at 60 fps a delay of 10 moves the snake six times a second.
    """

    def __init__(self, delay: int):
        if delay < 1:
            raise ConfigurationError(f"tick delay must be at least 1, got {delay}")
        self.delay = delay
        self.count = 0

    def tick(self) -> bool:
        self.count += 1
        if self.count >= self.delay:
            self.count = 0
            return True
        return False

    def reset(self) -> None:
        self.count = 0
