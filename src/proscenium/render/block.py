"""Solid block performer for items with an explicit size."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.bounds import extract, resolve_axis
from ..core.instruction import Instruction
from ..core.stage import Placement, Stage
from ..errors import DegenerateGeometryError
from .screen import Cue, Screen


@dataclass(frozen=True)
class Block:
    """A rectangle that would like to be ``width`` by ``height`` cells."""

    width: float
    height: float
    fill: str = "#"

    def __post_init__(self) -> None:
        if len(self.fill) != 1:
            raise ValueError(f"Block fill must be a single character, got {self.fill!r}")


@dataclass(frozen=True)
class BlockPerformer:
    """Resolves blocks by testing their far edges against each axis.

    The near edge starts at the lower bound. The far edge is the near edge
    plus the block's size, run through the axis resolution rules.
    """

    def resolve(self, instruction: Instruction, block: Block) -> tuple[Placement, Cue]:
        left = extract(instruction.horizontal.low)
        top = extract(instruction.vertical.low)
        right = resolve_axis(instruction.horizontal, left + block.width)
        bottom = resolve_axis(instruction.vertical, top + block.height)

        placement = Stage(left, right, top, bottom)
        return placement, self._cue(block, placement)

    def _cue(self, block: Block, placement: Placement) -> Cue:
        def draw(screen: Screen) -> None:
            col_start, col_end = int(placement.left), int(placement.right)
            row_start, row_end = int(placement.top), int(placement.bottom)
            if col_start >= col_end or row_start >= row_end:
                raise DegenerateGeometryError(f"Block placement {placement} has no area")

            line = block.fill * (col_end - col_start)
            for row in range(row_start, row_end):
                screen.write(row, col_start, line)

        return draw
