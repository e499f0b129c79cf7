# menu.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from .config import Color
from .errors import ConfigurationError

T = TypeVar("T")


class EndBehavior(Enum):
    WRAP = "wrap"    # past the last row lands on the first, and back
    CLAMP = "clamp"  # stops at either end


@dataclass(frozen=True)
class MenuView:
    """What a renderer needs to draw a menu."""
    labels: Tuple[str, ...]
    index: int
    left_sel: str
    right_sel: str
    # None means the renderer default
    font_size: Optional[int] = None
    color: Optional[Color] = None

    def rows(self) -> List[str]:
        return [
            f"{self.left_sel}{label}{self.right_sel}" if i == self.index else label
            for i, label in enumerate(self.labels)
        ]


class Menu(Generic[T]):
    """
    A selectable list of (label, value) pairs.

    The menu never acts on a selection itself; select() hands back the
    value and the caller decides what it means.
    """

    def __init__(
        self,
        items: Sequence[Tuple[str, T]],
        end_behavior: EndBehavior = EndBehavior.WRAP,
        left_sel: str = "> ",
        right_sel: str = " <",
        index: int = 0,
        font_size: Optional[int] = None,
        color: Optional[Color] = None,
    ):
        if not items:
            raise ConfigurationError("a menu needs at least one item")
        if not 0 <= index < len(items):
            raise ConfigurationError(f"start index {index} outside 0..{len(items) - 1}")
        self.items: List[Tuple[str, T]] = list(items)
        self.end_behavior = end_behavior
        self.left_sel = left_sel
        self.right_sel = right_sel
        self.index = index
        self.font_size = font_size
        self.color = color

    def __len__(self) -> int:
        return len(self.items)

    def toggle_end_behavior(self) -> None:
        """Switch between wrapping and clamping."""
        if self.end_behavior is EndBehavior.WRAP:
            self.end_behavior = EndBehavior.CLAMP
        else:
            self.end_behavior = EndBehavior.WRAP

    def _step(self, delta: int) -> None:
        target = self.index + delta
        if self.end_behavior is EndBehavior.WRAP:
            self.index = target % len(self.items)
        else:
            self.index = min(max(target, 0), len(self.items) - 1)

    def next(self) -> None:
        self._step(1)

    def prev(self) -> None:
        self._step(-1)

    def select(self) -> T:
        return self.items[self.index][1]

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(label for label, _ in self.items)

    def view(self) -> MenuView:
        return MenuView(self.labels, self.index, self.left_sel, self.right_sel,
                        self.font_size, self.color)

    def rows(self) -> List[str]:
        """Labels with the selected one wrapped in the selection markers."""
        return self.view().rows()
