"""Numeric and boolean randomizers.

These mirror the classic PostgreSQL recipes built on ``random()``::

    SELECT random() * (high - low) + low;               -- random_between
    SELECT floor(random() * (high - low + 1) + low);    -- random_int_between
    SELECT random() < 0.75;                             -- random_bool
"""

from __future__ import annotations

import math
import random
from typing import Optional

from seed_data.errors import InvalidRangeError
from seed_data.generators._utils import resolve_rng


def random_between(
    start: float, end: float, *, rng: Optional[random.Random] = None
) -> float:
    """Return a float uniformly distributed in ``[start, end)``.

    When ``start == end`` the single admissible value ``start`` is returned.

    Raises
    ------
    InvalidRangeError
        If ``start > end``. Bounds are never swapped silently.
    """
    if start > end:
        raise InvalidRangeError(start, end)
    r = resolve_rng(rng)
    value = start + r.random() * (end - start)
    # Float rounding can land exactly on ``end`` for wide ranges
    if value >= end and end > start:
        value = math.nextafter(end, start)
    return value


def random_int_between(
    low: int, high: int, *, rng: Optional[random.Random] = None
) -> int:
    """Return an integer uniformly distributed in the inclusive range ``[low, high]``."""
    if low > high:
        raise InvalidRangeError(low, high)
    return resolve_rng(rng).randint(low, high)


def random_bool(
    weight: float = 0.5, *, rng: Optional[random.Random] = None
) -> bool:
    """Return ``True`` with probability ``weight``.

    A uniform draw in ``[0, 1)`` is compared against ``weight``, so
    ``weight=0`` never yields ``True`` and ``weight=1`` always does.
    """
    if not 0.0 <= weight <= 1.0:
        raise InvalidRangeError(
            0.0, weight, f"invalid range: weight must be within [0, 1], got {weight!r}"
        )
    return resolve_rng(rng).random() < weight
