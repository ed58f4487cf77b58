"""Random dates and timestamps relative to a reference instant.

The SQL originals add or subtract ``random()``-scaled intervals from
``now()``; here the offset is a whole number of days drawn uniformly from
an inclusive range. ``date`` references give ``date`` results and
``datetime`` references give ``datetime`` results.
"""

from __future__ import annotations

import random
from datetime import date, datetime, timedelta
from typing import Optional, TypeVar

from seed_data.errors import InvalidRangeError
from seed_data.generators._utils import resolve_rng

DAYS_PER_YEAR = 365

D = TypeVar("D", date, datetime)


def _draw_days(min_days: int, max_days: int, rng: Optional[random.Random]) -> int:
    if min_days > max_days:
        raise InvalidRangeError(min_days, max_days)
    return resolve_rng(rng).randint(min_days, max_days)


def random_date_offset(
    reference: D,
    min_days: int,
    max_days: int,
    *,
    rng: Optional[random.Random] = None,
) -> D:
    """Return ``reference`` shifted by a random day count in ``[min_days, max_days]``.

    Negative offsets move into the past, positive ones into the future.
    """
    return reference + timedelta(days=_draw_days(min_days, max_days, rng))


def random_date_before(
    reference: Optional[D] = None,
    min_days: int = 1,
    max_days: int = 29,
    *,
    rng: Optional[random.Random] = None,
) -> D:
    """Return a date between ``max_days`` and ``min_days`` days before ``reference``.

    With the defaults and a reference of 2019-01-09 the result lies in
    2018-12-11 .. 2019-01-08.
    """
    ref = reference if reference is not None else date.today()
    return ref - timedelta(days=_draw_days(min_days, max_days, rng))


def random_date_after(
    reference: Optional[D] = None,
    min_days: int = 1,
    max_days: int = DAYS_PER_YEAR,
    *,
    rng: Optional[random.Random] = None,
) -> D:
    """Return a date between ``min_days`` and ``max_days`` days after ``reference``."""
    ref = reference if reference is not None else date.today()
    return ref + timedelta(days=_draw_days(min_days, max_days, rng))


def random_future_date(
    reference: Optional[D] = None, *, rng: Optional[random.Random] = None
) -> D:
    """Return a date within the next twelve months (1 to 365 days ahead)."""
    return random_date_after(reference, 1, DAYS_PER_YEAR, rng=rng)


def random_date_of_birth(
    reference: Optional[D] = None,
    *,
    max_age_years: int = 18,
    min_age_years: int = 0,
    rng: Optional[random.Random] = None,
) -> D:
    """Return a birth date for someone aged between ``min_age_years`` and ``max_age_years``.

    Years are scaled by 365 days, so ``max_age_years=18`` always gives an
    age under eighteen calendar years.
    """
    if min_age_years < 0:
        raise InvalidRangeError(
            0, min_age_years, f"invalid range: min_age_years must be >= 0, got {min_age_years!r}"
        )
    ref = reference if reference is not None else date.today()
    days = _draw_days(
        min_age_years * DAYS_PER_YEAR, max_age_years * DAYS_PER_YEAR, rng
    )
    return ref - timedelta(days=days)


def random_timestamp_between(
    start: datetime, end: datetime, *, rng: Optional[random.Random] = None
) -> datetime:
    """Return a timestamp uniformly distributed in ``[start, end)`` at second resolution."""
    if start > end:
        raise InvalidRangeError(start, end)
    span = int((end - start).total_seconds())
    if span <= 0:
        return start
    return start + timedelta(seconds=resolve_rng(rng).randrange(span))
