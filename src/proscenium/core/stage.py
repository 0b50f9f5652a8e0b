"""Stage geometry and the layout state carried between placements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Aspect(Enum):
    """Dominant orientation of a stage."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Stage:
    """An absolute rectangle on the canvas.

    All four edges are absolute coordinates. The same type describes both
    the space available for a production and the placement an item ended
    up with.
    """

    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def aspect(self) -> Aspect:
        """Horizontal if wider than tall, otherwise vertical (ties included)."""
        if self.width > self.height:
            return Aspect.HORIZONTAL
        return Aspect.VERTICAL


# Where an item ended up, as reported by a performer
Placement = Stage


@dataclass(frozen=True)
class LayoutCursor:
    """Running layout state threaded through a negotiation.

    Offsets track where the next item's pinned edge begins, sizes
    accumulate the space consumed so far and margins are configuration.
    A cursor is never modified; directors return a new one per step.
    """

    x_offset: float = 0.0
    y_offset: float = 0.0
    horizontal_margin: float = 0.0
    vertical_margin: float = 0.0
    x_size: float = 0.0
    y_size: float = 0.0
