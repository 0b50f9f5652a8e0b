"""Exceptions raised at the boundaries of a production."""

from __future__ import annotations


class ProsceniumError(Exception):
    """Base class for proscenium errors."""


class DegenerateGeometryError(ProsceniumError, ValueError):
    """A placement has no extent on one of its axes."""


class StageOverflowError(ProsceniumError, ValueError):
    """A placement extends past the edges of its stage."""


class ScreenBoundsError(ProsceniumError, IndexError):
    """A draw operation wrote outside the character grid."""
