"""Stateless randomizers for seed data.

Each function takes primitive inputs and an optional ``rng`` keyword
(a :class:`random.Random`) and returns a primitive value.
"""

from .numeric import random_between, random_bool, random_int_between
from .sampling import random_choice, reservoir_sample, sample_rows
from .strings import (
    ALPHANUMERIC,
    DIGITS,
    HEX_DIGITS,
    LOWERCASE,
    UPPERCASE,
    random_string,
)
from .temporal import (
    DAYS_PER_YEAR,
    random_date_after,
    random_date_before,
    random_date_of_birth,
    random_date_offset,
    random_future_date,
    random_timestamp_between,
)

__all__ = [
    "random_between",
    "random_int_between",
    "random_bool",
    "random_choice",
    "sample_rows",
    "reservoir_sample",
    "random_string",
    "UPPERCASE",
    "LOWERCASE",
    "DIGITS",
    "ALPHANUMERIC",
    "HEX_DIGITS",
    "DAYS_PER_YEAR",
    "random_date_offset",
    "random_date_before",
    "random_date_after",
    "random_future_date",
    "random_date_of_birth",
    "random_timestamp_between",
]
