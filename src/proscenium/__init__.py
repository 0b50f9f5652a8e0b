"""proscenium - constraint-based sequential layout negotiation."""

from .core import (
    Aspect,
    AxisRange,
    Fixed,
    Flexible,
    Instruction,
    LayoutCursor,
    Placement,
    Stage,
    lenient,
    resolve_axis,
    resolve_single,
    strict,
)
from .directors import DIRECTORS, HORIZONTALLY, MAGICALLY, VERTICALLY, Director, get_director
from .errors import DegenerateGeometryError, ProsceniumError, ScreenBoundsError, StageOverflowError
from .negotiation import Performer, Production, act, run

__all__ = [
    "Aspect",
    "AxisRange",
    "DIRECTORS",
    "DegenerateGeometryError",
    "Director",
    "Fixed",
    "Flexible",
    "HORIZONTALLY",
    "Instruction",
    "LayoutCursor",
    "MAGICALLY",
    "Performer",
    "Placement",
    "Production",
    "ProsceniumError",
    "ScreenBoundsError",
    "Stage",
    "StageOverflowError",
    "VERTICALLY",
    "act",
    "get_director",
    "lenient",
    "resolve_axis",
    "resolve_single",
    "run",
    "strict",
]
