"""Core layout negotiation types."""

from .bounds import (
    AxisRange,
    BoundKind,
    Fixed,
    Flexible,
    extract,
    lenient,
    resolve_axis,
    resolve_single,
    strict,
)
from .instruction import Instruction
from .stage import Aspect, LayoutCursor, Placement, Stage

__all__ = [
    "Aspect",
    "AxisRange",
    "BoundKind",
    "Fixed",
    "Flexible",
    "Instruction",
    "LayoutCursor",
    "Placement",
    "Stage",
    "extract",
    "lenient",
    "resolve_axis",
    "resolve_single",
    "strict",
]
