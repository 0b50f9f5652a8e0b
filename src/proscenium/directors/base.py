"""Director values: a pair of pure layout functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..core.instruction import Instruction
from ..core.stage import LayoutCursor, Placement, Stage

InstructFn = Callable[[Stage, LayoutCursor], Instruction]
AdvanceFn = Callable[[Stage, Placement, LayoutCursor], LayoutCursor]


@dataclass(frozen=True)
class Director:
    """Interprets the stage and suggests (or enforces) placement upon it.

    A director holds no state of its own. The same instance is reused for
    every item of a production; everything that changes between items is
    carried by the ``LayoutCursor``.

    Attributes:
        name: Name used for lookup and logging
        next: Computes the instruction for the next item
        advance: Computes the cursor after an item has been placed
    """

    name: str
    next: InstructFn
    advance: AdvanceFn

    def __repr__(self) -> str:
        return f"Director({self.name!r})"
