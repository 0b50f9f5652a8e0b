"""Director policies for stacking items on a stage."""

from .base import AdvanceFn, Director, InstructFn
from .stack import HORIZONTALLY, MAGICALLY, VERTICALLY

# Registry of available directors, by name
DIRECTORS: dict[str, Director] = {
    HORIZONTALLY.name: HORIZONTALLY,
    VERTICALLY.name: VERTICALLY,
    MAGICALLY.name: MAGICALLY,
}


def get_director(name: str) -> Director:
    """Look up a director by name.

    Raises:
        ValueError: If no director is registered under ``name``
    """
    director = DIRECTORS.get(name)
    if director is None:
        raise ValueError(
            f"Unknown director: {name} (expected one of {', '.join(DIRECTORS)})"
        )
    return director


__all__ = [
    "AdvanceFn",
    "DIRECTORS",
    "Director",
    "HORIZONTALLY",
    "InstructFn",
    "MAGICALLY",
    "VERTICALLY",
    "get_director",
]
