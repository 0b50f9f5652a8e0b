"""Directional bounds and the rules that resolve them to concrete values.

A bound is a one-sided threshold on an axis. A ``Fixed`` bound cannot be
overruled. A ``Flexible`` bound leaves room for expression: the value may
fall short of it but never run past it.

Examples (as an ``AxisRange(low, high)``):
    [Fixed(0),    Fixed(20)]     - Must start at 0, must end at 20
    [Fixed(0),    Flexible(20)]  - Must start at 0, may end at 20, but not past it
    [Flexible(0), Fixed(20)]     - May start at 0, but not before it, and must end at 20
    [Flexible(0), Flexible(20)]  - Anywhere within 0-20
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Fixed:
    """An immovable threshold."""

    value: float


@dataclass(frozen=True)
class Flexible:
    """A soft threshold that may be undershot but not exceeded."""

    value: float


BoundKind = Fixed | Flexible


@dataclass(frozen=True)
class AxisRange:
    """Lower and upper bounds for one axis.

    Interpreted as left -> right or top -> bottom depending on usage. No
    ordering is enforced between the two values.
    """

    low: BoundKind
    high: BoundKind


def strict(value: float) -> Fixed:
    """Create a bound that cannot be overruled."""
    return Fixed(float(value))


def lenient(value: float) -> Flexible:
    """Create a bound with room for expression."""
    return Flexible(float(value))


def extract(bound: BoundKind) -> float:
    """Get the threshold of a bound regardless of its kind."""
    if not isinstance(bound, (Fixed, Flexible)):
        raise TypeError(f"Not a bound: {bound!r}")
    return bound.value


def resolve_single(bound: BoundKind, incoming: float) -> float:
    """Resolve one bound against an incoming value.

    Args:
        bound: The threshold to test against
        incoming: The value the content would like to use

    Returns:
        ``min(bound, incoming)`` for a flexible bound, the bound itself
        for a fixed one.
    """
    if isinstance(bound, Flexible):
        return min(bound.value, incoming)
    if isinstance(bound, Fixed):
        return bound.value
    raise TypeError(f"Not a bound: {bound!r}")


def resolve_axis(axis: AxisRange, incoming: float) -> float:
    """Resolve a full axis against an incoming value.

    Every (low, high) combination is handled explicitly:

    - Fixed/Fixed: the floor if ``incoming`` is below it, otherwise the
      upper bound. ``incoming`` is discarded once the floor is cleared.
    - Fixed/Flexible and Flexible/Flexible: the floor if ``incoming`` is
      below it, otherwise ``incoming`` capped at the upper bound.
    - Flexible/Fixed: always the upper bound.

    Args:
        axis: Lower and upper bounds of the axis
        incoming: Provisional value tested against the bounds

    Returns:
        The resolved value
    """
    low, high = axis.low, axis.high

    if isinstance(low, Fixed) and isinstance(high, Fixed):
        if incoming < low.value:
            return low.value
        return high.value

    if isinstance(low, Fixed) and isinstance(high, Flexible):
        if incoming < low.value:
            return low.value
        return min(high.value, incoming)

    if isinstance(low, Flexible) and isinstance(high, Flexible):
        if incoming < low.value:
            return low.value
        return min(high.value, incoming)

    if isinstance(low, Flexible) and isinstance(high, Fixed):
        return high.value

    raise TypeError(f"Unsupported bound combination: {low!r}, {high!r}")
