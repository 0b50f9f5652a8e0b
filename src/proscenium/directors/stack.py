"""Stacking directors: horizontal, vertical and adaptive."""

from __future__ import annotations

from dataclasses import replace

from ..core.bounds import AxisRange, lenient, strict
from ..core.instruction import Instruction
from ..core.stage import Aspect, LayoutCursor, Placement, Stage
from .base import Director


def horizontal_next(stage: Stage, cursor: LayoutCursor) -> Instruction:
    """Pin the left edge right after the previous item, allow up to the stage's right edge."""
    return Instruction(
        horizontal=AxisRange(
            strict(cursor.x_offset + cursor.horizontal_margin),
            lenient(stage.right),
        ),
        vertical=AxisRange(strict(stage.top), lenient(stage.bottom)),
    )


def horizontal_advance(
    stage: Stage, placement: Placement, cursor: LayoutCursor
) -> LayoutCursor:
    # +1 is the separator column between stacked items, not a margin
    return replace(
        cursor,
        x_offset=cursor.x_offset
        + (placement.right - placement.left)
        + 1
        + cursor.horizontal_margin,
        x_size=cursor.x_size + placement.left + placement.right,
    )


def vertical_next(stage: Stage, cursor: LayoutCursor) -> Instruction:
    """Pin the top edge right below the previous item, allow up to the stage's bottom edge."""
    return Instruction(
        horizontal=AxisRange(strict(stage.left), lenient(stage.right)),
        vertical=AxisRange(
            strict(cursor.y_offset + cursor.vertical_margin),
            lenient(stage.bottom),
        ),
    )


def vertical_advance(
    stage: Stage, placement: Placement, cursor: LayoutCursor
) -> LayoutCursor:
    return replace(
        cursor,
        y_offset=cursor.y_offset
        + (placement.bottom - placement.top)
        + 1
        + cursor.vertical_margin,
        y_size=cursor.y_size + placement.top + placement.bottom + 1,
    )


def adaptive_next(stage: Stage, cursor: LayoutCursor) -> Instruction:
    """Stack along the stage's longer axis."""
    if stage.aspect() is Aspect.HORIZONTAL:
        return horizontal_next(stage, cursor)
    return vertical_next(stage, cursor)


def adaptive_advance(
    stage: Stage, placement: Placement, cursor: LayoutCursor
) -> LayoutCursor:
    if stage.aspect() is Aspect.HORIZONTAL:
        return horizontal_advance(stage, placement, cursor)
    return vertical_advance(stage, placement, cursor)


HORIZONTALLY = Director("horizontal", horizontal_next, horizontal_advance)
VERTICALLY = Director("vertical", vertical_next, vertical_advance)
MAGICALLY = Director("adaptive", adaptive_next, adaptive_advance)
