"""Rounding helpers shared by distance resolution and pricing."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def round_to_step(value: float, step: int) -> int:
    """Round to the nearest multiple of ``step``, halves rounding up."""
    return int(math.floor(value / step + 0.5)) * step
