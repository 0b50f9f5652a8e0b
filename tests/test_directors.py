"""Tests for the stacking directors."""

import pytest

from proscenium.core import AxisRange, Fixed, Flexible, Instruction, LayoutCursor, Stage
from proscenium.directors import DIRECTORS, HORIZONTALLY, MAGICALLY, VERTICALLY, Director, get_director

WIDE_STAGE = Stage(0, 200, 0, 40)
TALL_STAGE = Stage(0, 20, 0, 60)
SQUARE_STAGE = Stage(0, 30, 0, 30)

CURSORS = [
    LayoutCursor(),
    LayoutCursor(x_offset=12, y_offset=7, horizontal_margin=2, vertical_margin=3),
    LayoutCursor(x_offset=-4, y_offset=100, x_size=9, y_size=-2),
]


def test_horizontal_first_instruction():
    """The first item is pinned to the stage origin and may use the full width."""
    instruction = HORIZONTALLY.next(WIDE_STAGE, LayoutCursor())

    assert instruction == Instruction(
        horizontal=AxisRange(Fixed(0), Flexible(200)),
        vertical=AxisRange(Fixed(0), Flexible(40)),
    )


def test_horizontal_stacks_after_previous_item():
    cursor = HORIZONTALLY.advance(WIDE_STAGE, Stage(0, 40, 0, 40), LayoutCursor())
    assert cursor.x_offset == 41

    instruction = HORIZONTALLY.next(WIDE_STAGE, cursor)
    assert instruction.horizontal == AxisRange(Fixed(41), Flexible(200))


def test_horizontal_next_applies_margin():
    cursor = LayoutCursor(x_offset=10, horizontal_margin=2)
    instruction = HORIZONTALLY.next(WIDE_STAGE, cursor)
    assert instruction.horizontal.low == Fixed(12)


def test_horizontal_advance_updates_x_only():
    cursor = LayoutCursor(x_offset=5, y_offset=3, horizontal_margin=2, vertical_margin=1, x_size=4, y_size=6)
    placement = Stage(7, 17, 0, 2)

    advanced = HORIZONTALLY.advance(WIDE_STAGE, placement, cursor)

    assert advanced.x_offset == 5 + 10 + 1 + 2
    assert advanced.x_size == 4 + 7 + 17
    assert (advanced.y_offset, advanced.y_size) == (3, 6)
    assert (advanced.horizontal_margin, advanced.vertical_margin) == (2, 1)


def test_vertical_next_pins_top_edge():
    cursor = LayoutCursor(y_offset=9, vertical_margin=1)
    instruction = VERTICALLY.next(TALL_STAGE, cursor)

    assert instruction == Instruction(
        horizontal=AxisRange(Fixed(0), Flexible(20)),
        vertical=AxisRange(Fixed(10), Flexible(60)),
    )


def test_vertical_advance_updates_y_only():
    cursor = LayoutCursor(x_offset=4, y_offset=5, vertical_margin=2, x_size=8)
    placement = Stage(0, 10, 5, 8)

    advanced = VERTICALLY.advance(TALL_STAGE, placement, cursor)

    assert advanced.y_offset == 5 + 3 + 1 + 2
    assert advanced.y_size == 5 + 8 + 1
    assert (advanced.x_offset, advanced.x_size) == (4, 8)


@pytest.mark.parametrize("cursor", CURSORS)
@pytest.mark.parametrize("placement", [Stage(0, 10, 0, 3), Stage(5, 6, 2, 30), Stage(3, 3, 1, 1)])
def test_stacking_offsets_grow_by_extent_plus_separator(cursor, placement):
    """Each director moves its own offset by extent + 1 + margin and nothing else."""
    horizontal = HORIZONTALLY.advance(WIDE_STAGE, placement, cursor)
    assert horizontal.x_offset - cursor.x_offset == placement.width + 1 + cursor.horizontal_margin
    assert horizontal.y_offset == cursor.y_offset

    vertical = VERTICALLY.advance(TALL_STAGE, placement, cursor)
    assert vertical.y_offset - cursor.y_offset == placement.height + 1 + cursor.vertical_margin
    assert vertical.x_offset == cursor.x_offset


@pytest.mark.parametrize("cursor", CURSORS)
@pytest.mark.parametrize(
    "stage,delegate",
    [(WIDE_STAGE, HORIZONTALLY), (TALL_STAGE, VERTICALLY), (SQUARE_STAGE, VERTICALLY)],
)
def test_adaptive_delegates_by_aspect(stage, delegate, cursor):
    """Wide stages stack horizontally, everything else vertically."""
    placement = Stage(1, 9, 2, 5)

    assert MAGICALLY.next(stage, cursor) == delegate.next(stage, cursor)
    assert MAGICALLY.advance(stage, placement, cursor) == delegate.advance(stage, placement, cursor)


def test_directors_do_not_touch_their_inputs():
    cursor = LayoutCursor(x_offset=1)
    HORIZONTALLY.advance(WIDE_STAGE, Stage(1, 5, 0, 2), cursor)
    assert cursor == LayoutCursor(x_offset=1)


def test_registry_lookup():
    assert set(DIRECTORS) == {"horizontal", "vertical", "adaptive"}
    assert get_director("adaptive") is MAGICALLY
    with pytest.raises(ValueError, match="Unknown director"):
        get_director("diagonal")


def test_custom_director_uses_same_contract():
    """Any pair of functions with the right shape makes a director."""
    pinned = Director(
        "pinned",
        lambda stage, cursor: HORIZONTALLY.next(stage, LayoutCursor()),
        lambda stage, placement, cursor: cursor,
    )
    cursor = LayoutCursor(x_offset=30)

    assert pinned.next(WIDE_STAGE, cursor).horizontal.low == Fixed(0)
    assert pinned.advance(WIDE_STAGE, Stage(0, 5, 0, 5), cursor) is cursor
    assert repr(pinned) == "Director('pinned')"
