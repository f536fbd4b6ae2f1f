"""
Coderlayout type definitions.

A tmux layout is a tree: every Split is a rectangle holding either a single
pane or a nesting of child Splits laid out side by side or stacked.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import DegenerateInputError


class Orientation(Enum):
    """Direction in which a nesting lays out its children."""

    HORIZONTAL = "horizontal"  # left to right, rendered with {}
    VERTICAL = "vertical"      # top to bottom, rendered with []


@dataclass(frozen=True)
class PaneRef:
    """Leaf node naming one physical pane."""

    id: int
    # Digits as they appeared in parsed input; None renders the plain int.
    source: Optional[str] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Nesting:
    """Ordered children sharing a parent rectangle."""

    orientation: Orientation
    children: tuple["Split", ...]

    def __post_init__(self):
        # Lists are accepted for convenience but stored as a tuple.
        object.__setattr__(self, "children", tuple(self.children))
        if not self.children:
            raise DegenerateInputError("a nesting needs at least one child")


@dataclass(frozen=True)
class Split:
    """A rectangle of the window and what it contains."""

    width: int
    height: int
    x: int
    y: int
    content: Union[PaneRef, Nesting]
    # "{width}x{height},{x},{y}" as written in parsed input, leading zeros
    # included; None renders from the ints.
    source: Optional[str] = field(default=None, compare=False, repr=False)

    @property
    def dims(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_pane(self) -> bool:
        return isinstance(self.content, PaneRef)

    def __str__(self) -> str:
        from .serializer import render
        return render(self)


@dataclass(frozen=True)
class LayoutString:
    """A complete layout: checksum prefix plus root Split."""

    checksum: str
    root: Split

    def __str__(self) -> str:
        from .serializer import render
        return render(self)


LayoutNode = Union[LayoutString, Split, PaneRef, Nesting]


@dataclass(frozen=True)
class WindowInfo:
    """One window as reported by the multiplexer."""

    window_id: str
    name: str
    active: bool
    layout_string: str
