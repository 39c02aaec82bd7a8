"""Inclusive random ranges drawn from the operating system's entropy source."""

from __future__ import annotations

import random

_source = random.SystemRandom()


def range_float(start: float, end: float) -> float:
    """Return a random float between ``start`` and ``end``."""
    if start == end:
        return start
    if start > end:
        raise ValueError(f"empty range: {start} > {end}")
    return _source.uniform(start, end)


def range_int(start: int, end: int) -> int:
    """Return a random integer between ``start`` and ``end``, both inclusive."""
    if start == end:
        return start
    if start > end:
        raise ValueError(f"empty range: {start} > {end}")
    return _source.randint(start, end)