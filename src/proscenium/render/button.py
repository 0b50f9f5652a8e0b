"""Text button performer."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.bounds import extract, resolve_single
from ..core.instruction import Instruction
from ..core.stage import Placement, Stage
from ..errors import DegenerateGeometryError
from .screen import Cue, Screen


def split_value(number: int) -> tuple[int, int]:
    """Split a number in two halves, the second one taking the remainder."""
    return number // 2, number // 2 + number % 2


@dataclass(frozen=True)
class ButtonPerformer:
    """Resolves text items into bordered buttons.

    The button asks for as many columns as its text plus borders. The
    instruction's upper bounds decide how much of that it gets: a flexible
    bound caps the request, a fixed one overrides it. Text that doesn't fit
    is truncated when drawn.

    Attributes:
        border_size: Border thickness per side, in cells
        text_height: Rows needed by the text itself
    """

    border_size: int = 1
    text_height: int = 1

    def resolve(self, instruction: Instruction, text: str) -> tuple[Placement, Cue]:
        """Resolve an instruction for one button.

        Args:
            instruction: Bounds handed out by the director
            text: The button label

        Returns:
            Tuple of (placement, cue drawing the button)
        """
        borders = self.border_size * 2

        # Directors give absolute positions, so the upper bound is turned
        # into the room left after the start edge
        x_start = extract(instruction.horizontal.low)
        x_relative_end = extract(instruction.horizontal.high) - x_start
        wanted = min(len(text), int(max(x_relative_end, 0)))
        x_end = resolve_single(instruction.horizontal.high, x_start + wanted + borders)

        y_start = extract(instruction.vertical.low)
        y_end = y_start + resolve_single(
            instruction.vertical.high, self.text_height + borders
        )

        # Bottom is the last occupied row, hence the -1
        placement = Stage(x_start, x_end, y_start, y_end - 1)
        return placement, self._cue(text, placement)

    def footprint(self, placement: Placement) -> Stage:
        """Area covered by a placement; its bottom is the last drawn row."""
        return Stage(placement.left, placement.right, placement.top, placement.bottom + 1)

    def _cue(self, text: str, placement: Placement) -> Cue:
        border = self.border_size

        def draw(screen: Screen) -> None:
            col_start = int(placement.left)
            col_end = int(placement.right)
            row_start = int(placement.top)
            row_end = int(placement.bottom)

            if col_start >= col_end:
                raise DegenerateGeometryError(
                    f"Button {text!r} has no width: columns {col_start}..{col_end}"
                )
            if row_start >= row_end:
                raise DegenerateGeometryError(
                    f"Button {text!r} has no height: rows {row_start}..{row_end}"
                )

            final_width = col_end - col_start
            label = text[: max(final_width - border * 2, 0)]
            left_padding, right_padding = split_value(final_width - len(label))
            text_row = row_start + (row_end - row_start) // 2

            filler = max(final_width - border * 2, 0)
            edge = "|" + "-" * filler + "|"
            blank = "|" + " " * filler + "|"

            screen.write(row_start, col_start, edge)
            for row in range(row_start + 1, row_end):
                if row != text_row:
                    screen.write(row, col_start, blank)

            # A two-row frame has its text on the top edge
            screen.write(text_row, col_start, "|")
            screen.write(text_row, col_start + left_padding, label)
            screen.write(
                text_row,
                col_start + left_padding + len(label),
                " " * (right_padding - border) + "|",
            )
            screen.write(row_end, col_start, edge)

        return draw
