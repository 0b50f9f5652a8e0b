"""What performers receive from directors."""

from __future__ import annotations

from dataclasses import dataclass

from .bounds import AxisRange


@dataclass(frozen=True)
class Instruction:
    horizontal: AxisRange
    vertical: AxisRange
