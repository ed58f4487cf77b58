"""Configuration objects for seed-data runs and table definitions.

:class:`SeedConfig` carries run-wide settings (seed and reference
date). :class:`TableSpec` and :class:`ColumnSpec` describe a seed table
declaratively so it can be kept in a JSON file next to the fixtures that
use it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from seed_data.generators.strings import UPPERCASE

ColumnKind = Literal[
    "sequence",
    "int_range",
    "float_range",
    "boolean",
    "choice",
    "string",
    "date_before",
    "date_after",
    "date_of_birth",
]

Number = Union[int, float]


@dataclass(frozen=True)
class SeedConfig:
    """Run-wide settings for building seed tables.

    Attributes
    ----------
    seed: Optional RNG seed. ``None`` gives a different table on every run.
    reference: Reference date that relative date columns are computed from.
        ``None`` means today.
    """

    seed: Optional[int] = None
    reference: Optional[date] = None

    def __post_init__(self) -> None:
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)

    def reference_date(self) -> date:
        return self.reference if self.reference is not None else date.today()


class ColumnSpec(BaseModel):
    """One column of a seed table and the randomizer that fills it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1, description="Column name in the output table")
    kind: ColumnKind = Field(description="Which randomizer produces the values")

    # sequence
    start: int = Field(default=1, description="First value of a sequence column")
    # int_range / float_range
    low: Optional[Number] = Field(default=None, description="Lower bound")
    high: Optional[Number] = Field(default=None, description="Upper bound")
    precision: Optional[int] = Field(
        default=None, ge=0, description="Decimal places for float_range values"
    )
    # boolean
    weight: float = Field(default=0.5, ge=0.0, le=1.0, description="P(True)")
    # choice
    choices: Optional[List[Union[str, int, float]]] = Field(
        default=None, description="Candidate values for a choice column"
    )
    # string
    length: Optional[int] = Field(default=None, ge=0, description="String length")
    alphabet: str = Field(default=UPPERCASE, min_length=1)
    prefix: str = Field(default="", description="Literal prefix before the random part")
    # date_before / date_after
    min_days: Optional[int] = Field(default=None)
    max_days: Optional[int] = Field(default=None)
    # date_of_birth
    min_age_years: int = Field(default=0, ge=0)
    max_age_years: int = Field(default=18, ge=0)

    @model_validator(mode="after")
    def _check_kind_parameters(self) -> "ColumnSpec":
        if self.kind in ("int_range", "float_range"):
            if self.low is None or self.high is None:
                raise ValueError(f"column {self.name!r}: {self.kind} requires low and high")
            if self.low > self.high:
                raise ValueError(
                    f"column {self.name!r}: invalid range low={self.low} > high={self.high}"
                )
            if self.kind == "int_range" and not (
                float(self.low).is_integer() and float(self.high).is_integer()
            ):
                raise ValueError(f"column {self.name!r}: int_range bounds must be integers")
        elif self.kind == "choice" and not self.choices:
            raise ValueError(f"column {self.name!r}: choice requires non-empty choices")
        elif self.kind == "string" and self.length is None:
            raise ValueError(f"column {self.name!r}: string requires length")
        elif self.kind in ("date_before", "date_after"):
            lo, hi = self.day_bounds()
            if lo > hi:
                raise ValueError(
                    f"column {self.name!r}: invalid range min_days={lo} > max_days={hi}"
                )
        elif self.kind == "date_of_birth" and self.min_age_years > self.max_age_years:
            raise ValueError(
                f"column {self.name!r}: min_age_years must be <= max_age_years"
            )
        return self

    def day_bounds(self) -> tuple[int, int]:
        """Day-offset range with per-kind defaults applied.

        ``date_before`` defaults to the last 29 days, ``date_after`` to the
        next twelve months.
        """
        default_max = 29 if self.kind == "date_before" else 365
        lo = self.min_days if self.min_days is not None else 1
        hi = self.max_days if self.max_days is not None else default_max
        return lo, hi


class TableSpec(BaseModel):
    """A named seed table: row count plus ordered column definitions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    rows: int = Field(default=10, ge=0, description="Number of rows to generate")
    columns: List[ColumnSpec] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_unique_columns(self) -> "TableSpec":
        names = [c.name for c in self.columns]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate column names: {duplicates}")
        return self

    def with_rows(self, rows: int) -> "TableSpec":
        if rows < 0:
            raise ValueError(f"rows must be >= 0, got {rows}")
        return self.model_copy(update={"rows": rows})

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]
