"""Rounding and wording helpers shared by the pipeline stages."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` with ties going towards positive infinity.

    Builtin ``round`` rounds ties to even (``round(12.5) == 12``), which
    would shift scores sitting exactly on a bucket boundary.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_percent(value: float) -> int:
    return int(round_half_up(value))


def pluralize(count: int, noun: str) -> str:
    """``pluralize(1, "task") -> "1 task"``, ``pluralize(3, "task") -> "3 tasks"``."""
    return f"{count} {noun}{'s' if count > 1 else ''}"
