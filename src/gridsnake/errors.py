# errors.py


class GridSnakeError(Exception):
    """Base class for errors raised by gridsnake."""


class ConfigurationError(GridSnakeError):
    """Raised at setup time when a component is built with unusable settings."""


class DuplicateNameError(GridSnakeError):
    """Raised by a score store when the name is already on the board."""

    def __init__(self, name: str):
        super().__init__(f"name already recorded: {name!r}")
        self.name = name
