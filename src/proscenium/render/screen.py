"""Character grid that render cues draw into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

import numpy as np
from numpy.typing import NDArray

from ..core.stage import Placement
from ..errors import ScreenBoundsError

# A deferred draw operation produced by a performer
Cue = Callable[["Screen"], None]


@dataclass
class Screen:
    """A fixed-size grid of single characters, blank by default.

    Rows are indexed top to bottom and columns left to right, matching the
    stage coordinates performers resolve.
    """

    width: int
    height: int
    buffer: NDArray[np.str_] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.width = int(self.width)
        self.height = int(self.height)
        self.buffer = np.full((self.height, self.width), " ", dtype="<U1")

    def write(self, row: int, col: int, text: str) -> None:
        """Write text into a row, starting at a column.

        Raises:
            ScreenBoundsError: If any character would land outside the grid
        """
        if not text:
            return
        if not (0 <= row < self.height) or col < 0 or col + len(text) > self.width:
            raise ScreenBoundsError(
                f"Cannot write {len(text)} characters at row {row}, column {col} "
                f"on a {self.width}x{self.height} screen"
            )
        self.buffer[row, col:col + len(text)] = list(text)

    def rows(self) -> list[str]:
        """Get the grid contents as one string per row."""
        return ["".join(row) for row in self.buffer]

    def clear(self) -> None:
        self.buffer[:, :] = " "


def make_screen(width: float, height: float) -> Screen:
    """Create a blank screen; float stage extents are truncated."""
    return Screen(int(width), int(height))


def perform(performances: Iterable[tuple[Placement, Cue]], screen: Screen) -> Screen:
    """Run every cue against the screen, in order."""
    for _, cue in performances:
        cue(screen)
    return screen


def format_screen(screen: Screen) -> str:
    """Frame the screen with a border and an even-column ruler."""
    width = screen.width
    ruler = "".join(str(idx % 10) if idx % 2 == 0 else " " for idx in range(width))
    lines = [
        "-" * (width + 2),
        f"|{ruler}|",
        f"|{'-' * width}|",
    ]
    lines.extend(f"|{row}|" for row in screen.rows())
    lines.append(f"|{'-' * width}|")
    return "\n".join(lines)
