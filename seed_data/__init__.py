"""Randomized seed-data generation.

Python renditions of the PostgreSQL seed-data recipes (``random()``,
``generate_series``, ``unnest``, ``string_agg`` and date arithmetic),
plus a declarative table layer that composes them.
"""

from .config import ColumnSpec, SeedConfig, TableSpec
from .errors import (
    EmptyCandidatesError,
    InvalidLengthError,
    InvalidRangeError,
    SeedDataError,
)
from .generators import (
    random_between,
    random_bool,
    random_choice,
    random_date_after,
    random_date_before,
    random_date_of_birth,
    random_date_offset,
    random_future_date,
    random_int_between,
    random_string,
    random_timestamp_between,
    reservoir_sample,
    sample_rows,
)
from .tables import build_rows, build_table, load_table_spec, sample_frame
from .validation import (
    ValidationResult,
    check_boolean_ratio,
    check_dates_within_window,
    check_mean_close_to,
    check_string_shape,
    check_uniform_frequencies,
    check_values_within_range,
)

__version__ = "0.1.0"

__all__ = [
    "ColumnSpec",
    "SeedConfig",
    "TableSpec",
    "SeedDataError",
    "InvalidRangeError",
    "EmptyCandidatesError",
    "InvalidLengthError",
    "random_between",
    "random_int_between",
    "random_bool",
    "random_choice",
    "sample_rows",
    "reservoir_sample",
    "random_string",
    "random_date_offset",
    "random_date_before",
    "random_date_after",
    "random_future_date",
    "random_date_of_birth",
    "random_timestamp_between",
    "build_rows",
    "build_table",
    "sample_frame",
    "load_table_spec",
    "ValidationResult",
    "check_values_within_range",
    "check_mean_close_to",
    "check_boolean_ratio",
    "check_uniform_frequencies",
    "check_string_shape",
    "check_dates_within_window",
]
