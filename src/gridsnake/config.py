# config.py
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigurationError

Color = Tuple[int, int, int]

# ----- Colors -----
BACKGROUND = (0, 0, 0)
BODY   = (0, 117, 44)
HEAD   = (0, 228, 48)
APPLE  = (230, 41, 55)
TEXT   = (200, 200, 200)

# ----- Screen text -----
TITLE = "SNAKE"
MENU_HINT = "Use up and down to move\nand right to confirm selection."
END_TEXT = "GAME OVER\nPRESS ANY KEY TO PLAY AGAIN"
HELP_TEXT = (
    "Your goal is to collect the red fruits\n"
    "without running into yourself or the walls.\n"
    "Use the arrow keys to move your snake.\n"
    "Your score is shown in the upper left corner.\n"
    "Press escape at any time to return to the\n"
    "main menu."
)
NO_SCORES = "No scores yet"
BOARD_FILLED = "BOARD FILLED!"
NAME_TAKEN = "NAME {name} IS TAKEN, SCORE NOT SAVED\nPLAY UNDER ANOTHER --name"


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    grid_size: int = 20
    window_size: int = 800
    font_size: int = 40
    fps: int = 60
    tick_delay: int = 10       # lower = faster snake
    initial_length: int = 3
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_size < 2:
            raise ConfigurationError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.initial_length < 1:
            raise ConfigurationError(f"initial_length must be positive, got {self.initial_length}")
        # snake is laid downward from the centre cell
        if self.grid_size // 2 + self.initial_length - 1 >= self.grid_size:
            raise ConfigurationError(
                f"a snake of length {self.initial_length} does not fit "
                f"a {self.grid_size}x{self.grid_size} grid"
            )
        if self.tick_delay < 1:
            raise ConfigurationError(f"tick_delay must be at least 1, got {self.tick_delay}")
        if self.fps < 1:
            raise ConfigurationError(f"fps must be at least 1, got {self.fps}")
        if self.window_size < self.grid_size:
            raise ConfigurationError("window_size must give every cell at least one pixel")

    @property
    def cell_size(self) -> int:
        """Pixels per grid cell."""
        return self.window_size // self.grid_size
