"""Build whole seed tables from declarative column specs.

A :class:`~seed_data.config.TableSpec` plays the role of the cookbook's
``SELECT <column expressions> FROM generate_series(1, n)``: every row is
numbered and each column is filled by one randomizer.
"""

from __future__ import annotations

import json
import math
import random
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
import structlog

from seed_data.config import ColumnSpec, SeedConfig, TableSpec
from seed_data.errors import InvalidRangeError
from seed_data.generators import (
    random_between,
    random_bool,
    random_choice,
    random_date_after,
    random_date_before,
    random_date_of_birth,
    random_int_between,
    random_string,
)
from seed_data.generators._utils import resolve_rng

logger = structlog.get_logger(__name__)

MAX_SPEC_BYTES = 1024 * 1024  # 1 MiB; table specs are small hand-written files


def _floor_to_precision(value: float, precision: int, low: float, high: float) -> float:
    """Round ``value`` down to ``precision`` decimals, staying inside ``[low, high)``."""
    scale = 10**precision
    floored = math.floor(value * scale) / scale
    if floored >= high > low:
        floored = (math.ceil(high * scale) - 1) / scale
    return max(floored, low)


def column_value(
    column: ColumnSpec, row_index: int, rng: random.Random, reference: date
) -> Any:
    """Produce the value of ``column`` for the zero-based ``row_index``."""
    kind = column.kind
    if kind == "sequence":
        return column.start + row_index
    if kind == "int_range":
        return random_int_between(int(column.low), int(column.high), rng=rng)
    if kind == "float_range":
        value = random_between(float(column.low), float(column.high), rng=rng)
        if column.precision is not None:
            value = _floor_to_precision(
                value, column.precision, float(column.low), float(column.high)
            )
        return value
    if kind == "boolean":
        return random_bool(column.weight, rng=rng)
    if kind == "choice":
        return random_choice(column.choices or [], rng=rng)
    if kind == "string":
        return column.prefix + random_string(
            column.length or 0, column.alphabet, rng=rng
        )
    if kind == "date_before":
        lo, hi = column.day_bounds()
        return random_date_before(reference, lo, hi, rng=rng)
    if kind == "date_after":
        lo, hi = column.day_bounds()
        return random_date_after(reference, lo, hi, rng=rng)
    if kind == "date_of_birth":
        return random_date_of_birth(
            reference,
            max_age_years=column.max_age_years,
            min_age_years=column.min_age_years,
            rng=rng,
        )
    raise ValueError(f"unsupported column kind: {kind!r}")


def build_rows(
    spec: TableSpec,
    *,
    rng: Optional[random.Random] = None,
    reference: Optional[date] = None,
) -> List[Dict[str, Any]]:
    """Generate ``spec.rows`` rows as dictionaries keyed by column name.

    Columns are filled left to right within a row, so a seeded ``rng``
    gives the same table every time for the same spec.
    """
    r = resolve_rng(rng)
    ref = reference if reference is not None else date.today()
    rows: List[Dict[str, Any]] = []
    for i in range(spec.rows):
        rows.append({col.name: column_value(col, i, r, ref) for col in spec.columns})
    return rows


def build_table(
    spec: TableSpec,
    *,
    config: Optional[SeedConfig] = None,
    rows: Optional[int] = None,
) -> pd.DataFrame:
    """Generate ``spec`` as a :class:`pandas.DataFrame`.

    Parameters
    ----------
    spec:
        Table definition.
    config:
        Seed and reference date. Defaults to an unseeded run relative to today.
    rows:
        Optional override of ``spec.rows``.
    """
    config = config or SeedConfig()
    if rows is not None:
        spec = spec.with_rows(rows)

    records = build_rows(spec, rng=config.make_rng(), reference=config.reference_date())
    frame = pd.DataFrame.from_records(records, columns=spec.column_names)
    logger.info(
        "table_built",
        table=spec.name,
        rows=len(frame),
        columns=len(spec.columns),
        seed=config.seed,
    )
    return frame


def sample_frame(
    frame: pd.DataFrame, k: int = 1, *, rng: Optional[random.Random] = None
) -> pd.DataFrame:
    """Pick ``k`` random rows of ``frame`` (``ORDER BY random() LIMIT k``).

    The original index is preserved so callers can trace sampled rows back.
    """
    if k < 1:
        raise InvalidRangeError(1, k, f"invalid range: count must be >= 1, got {k!r}")
    r = resolve_rng(rng)
    keys = [r.random() for _ in range(len(frame))]
    return (
        frame.assign(_sort_key=keys)
        .sort_values("_sort_key", kind="mergesort")
        .head(k)
        .drop(columns="_sort_key")
    )


def load_table_spec(path: str | Path) -> TableSpec:
    """Load and validate a table spec from a JSON file.

    Raises
    ------
    ValueError
        If the file exceeds :data:`MAX_SPEC_BYTES` or is not valid JSON.
    pydantic.ValidationError
        If the JSON does not describe a valid table.
    """
    path = Path(path)
    size = path.stat().st_size
    if size > MAX_SPEC_BYTES:
        raise ValueError(
            f"Spec file {path} is {size} bytes; exceeds limit of {MAX_SPEC_BYTES} bytes"
        )
    with path.open("r", encoding="utf-8") as fh:
        try:
            payload = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Spec file {path} is not valid JSON: {exc}") from exc

    spec = TableSpec.model_validate(payload)
    logger.debug("table_spec_loaded", path=str(path), table=spec.name)
    return spec
