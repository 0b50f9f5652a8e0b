"""The negotiation loop: drives a director and a performer across items.

Each item goes through three steps. The director turns the stage and the
current cursor into an instruction, the performer resolves the instruction
and the item into a placement plus a render token, and the director
advances the cursor from that placement. The cursor produced by one item
is the input of the next, so items are always handled in order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Protocol, TypeVar, runtime_checkable

from .core.instruction import Instruction
from .core.stage import LayoutCursor, Placement, Stage
from .directors.base import Director
from .errors import StageOverflowError

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
ItemT_contra = TypeVar("ItemT_contra", contravariant=True)
TokenT = TypeVar("TokenT")
TokenT_co = TypeVar("TokenT_co", covariant=True)


@runtime_checkable
class Performer(Protocol[ItemT_contra, TokenT_co]):
    """Protocol for anything that can put an item on stage.

    Any object with a ``resolve()`` method returning a placement and an
    opaque render token satisfies this protocol.
    """

    def resolve(self, instruction: Instruction, item: ItemT_contra) -> tuple[Placement, TokenT_co]:
        """Resolve an instruction for one item."""
        ...


@dataclass(frozen=True)
class Production(Generic[TokenT]):
    """Outcome of a negotiation run.

    Attributes:
        performances: One (placement, token) pair per item, in item order
        cursor: Layout state after the last item
    """

    performances: tuple[tuple[Placement, TokenT], ...]
    cursor: LayoutCursor

    @property
    def placements(self) -> list[Placement]:
        return [placement for placement, _ in self.performances]

    @property
    def tokens(self) -> list[TokenT]:
        return [token for _, token in self.performances]

    def __iter__(self) -> Iterator[tuple[Placement, TokenT]]:
        return iter(self.performances)

    def __len__(self) -> int:
        return len(self.performances)


def footprint(performer: Performer, placement: Placement) -> Stage:
    """Get the area a placement covers, with exclusive right and bottom edges.

    Performers whose placements report the last occupied row or column
    instead provide a ``footprint()`` method doing the conversion.
    """
    convert = getattr(performer, "footprint", None)
    if convert is None:
        return placement
    return convert(placement)


def overflows(stage: Stage, area: Stage) -> bool:
    """Check whether an area runs past any edge of the stage.

    Right and bottom edges are exclusive on both sides: an area whose
    bottom equals the stage bottom still fits.
    """
    return (
        area.left < stage.left
        or area.right > stage.right
        or area.top < stage.top
        or area.bottom > stage.bottom
    )


def act(
    stage: Stage,
    cursor: LayoutCursor,
    director: Director,
    performer: Performer[ItemT, TokenT],
    item: ItemT,
) -> tuple[LayoutCursor, tuple[Placement, TokenT]]:
    """Place a single item.

    Args:
        stage: The stage the item is placed on
        cursor: Layout state before this item
        director: Policy computing the instruction and the next cursor
        performer: Resolves the instruction into a placement
        item: Content to place, passed through to the performer

    Returns:
        Tuple of (next cursor, (placement, token))
    """
    instruction = director.next(stage, cursor)
    placement, token = performer.resolve(instruction, item)
    return director.advance(stage, placement, cursor), (placement, token)


def run(
    stage: Stage,
    cursor: LayoutCursor,
    director: Director,
    performer: Performer[ItemT, TokenT],
    items: Iterable[ItemT],
    *,
    check_overflow: bool = False,
) -> Production[TokenT]:
    """Negotiate a placement for every item, in order.

    Every item is placed, even when it ends up past the stage edges.
    Errors raised by the performer propagate unchanged.

    Args:
        stage: The stage shared by all items
        cursor: Initial layout state (usually zero offsets with margins set)
        director: Policy used for every item
        performer: Resolves instructions into placements
        items: Content items to place
        check_overflow: Raise instead of warning when a placement leaves the stage

    Returns:
        Production with one performance per item and the final cursor

    Raises:
        StageOverflowError: If ``check_overflow`` is set and a placement
            extends past the stage
    """
    performances: list[tuple[Placement, TokenT]] = []

    for index, item in enumerate(items):
        cursor, performance = act(stage, cursor, director, performer, item)
        placement = performance[0]
        logger.debug(
            "Placed item %d with %r at %r; cursor now %r",
            index,
            director,
            placement,
            cursor,
        )

        if overflows(stage, footprint(performer, placement)):
            if check_overflow:
                raise StageOverflowError(
                    f"Item {index} placed at {placement} overflows stage {stage}"
                )
            logger.warning("Item %d placed at %r overflows stage %r", index, placement, stage)

        performances.append(performance)

    return Production(performances=tuple(performances), cursor=cursor)
