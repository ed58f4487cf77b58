"""Render the PostgreSQL expression behind each randomizer.

The Python generators reproduce the cookbook's SQL recipes; this module
goes the other way and emits those recipes, so a seed table can be built
inside the database with the same shape as :func:`seed_data.tables.build_table`.

Examples
--------
>>> random_int_sql(1, 6)
'floor(random() * 6 + 1)::int'
>>> random_choice_sql(["A", "B"])
"(ARRAY['A', 'B'])[floor(random() * 2 + 1)::int]"
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional, Sequence, Union

from seed_data.config import ColumnSpec, TableSpec
from seed_data.errors import EmptyCandidatesError, InvalidLengthError, InvalidRangeError
from seed_data.generators.strings import UPPERCASE
from seed_data.generators.temporal import DAYS_PER_YEAR

ROW_ALIAS = "s"
ROW_COLUMN = "i"
ROW_REF = f"{ROW_ALIAS}.{ROW_COLUMN}"

_PLAIN_IDENT = re.compile(r"[a-z_][a-z0-9_]*")

SqlValue = Union[str, int, float]


def quote_ident(name: str) -> str:
    """Double-quote ``name`` unless it is a plain lowercase identifier."""
    if _PLAIN_IDENT.fullmatch(name):
        return name
    return '"' + name.replace('"', '""') + '"'


def quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def _num(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _date_ref(reference: Optional[date]) -> str:
    return "CURRENT_DATE" if reference is None else f"DATE '{reference.isoformat()}'"


def random_between_sql(low: float, high: float) -> str:
    """``random()`` scaled to ``[low, high)``."""
    if low > high:
        raise InvalidRangeError(low, high)
    return f"random() * {_num(high - low)} + {_num(low)}"


def random_int_sql(low: int, high: int) -> str:
    """Integer in ``[low, high]`` via the ``floor(random() * n + low)`` idiom."""
    if low > high:
        raise InvalidRangeError(low, high)
    return f"floor(random() * {high - low + 1} + {low})::int"


def random_bool_sql(weight: float = 0.5) -> str:
    if not 0.0 <= weight <= 1.0:
        raise InvalidRangeError(
            0.0, weight, f"invalid range: weight must be within [0, 1], got {weight!r}"
        )
    return f"(random() < {_num(weight)})"


def random_choice_sql(choices: Sequence[SqlValue]) -> str:
    """Index a literal array at a random 1-based position.

    Numeric candidates stay numeric; any string makes the whole array text.
    """
    if len(choices) == 0:
        raise EmptyCandidatesError("candidates")
    if all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in choices):
        items = ", ".join(_num(c) for c in choices)
    else:
        items = ", ".join(quote_literal(str(c)) for c in choices)
    return f"(ARRAY[{items}])[floor(random() * {len(choices)} + 1)::int]"


def random_string_sql(
    length: int, alphabet: str = UPPERCASE, *, row_ref: Optional[str] = None
) -> str:
    """``string_agg`` of random ``substr`` picks over ``generate_series``.

    Pass ``row_ref`` when the expression sits in a multi-row ``SELECT``;
    without a reference to the outer row PostgreSQL evaluates the
    subquery once and every row gets the same string.
    """
    if length < 0:
        raise InvalidLengthError(length)
    if not alphabet:
        raise EmptyCandidatesError("alphabet")
    if length == 0:
        return "''"
    pick = (
        f"substr({quote_literal(alphabet)}, "
        f"floor(random() * {len(alphabet)} + 1)::int, 1)"
    )
    where = f" WHERE {row_ref} IS NOT NULL" if row_ref else ""
    return f"(SELECT string_agg({pick}, '') FROM generate_series(1, {length}){where})"


def random_date_sql(
    min_days: int,
    max_days: int,
    *,
    before: bool = False,
    reference: Optional[date] = None,
) -> str:
    """Reference date plus (or minus) a random day count in ``[min_days, max_days]``."""
    if min_days > max_days:
        raise InvalidRangeError(min_days, max_days)
    op = "-" if before else "+"
    return f"{_date_ref(reference)} {op} {random_int_sql(min_days, max_days)}"


def random_date_of_birth_sql(
    max_age_years: int = 18,
    min_age_years: int = 0,
    *,
    reference: Optional[date] = None,
) -> str:
    return random_date_sql(
        min_age_years * DAYS_PER_YEAR,
        max_age_years * DAYS_PER_YEAR,
        before=True,
        reference=reference,
    )


def column_expression_sql(
    column: ColumnSpec, *, reference: Optional[date] = None
) -> str:
    """SQL expression producing one value of ``column`` per row of ``s(i)``."""
    kind = column.kind
    if kind == "sequence":
        offset = column.start - 1
        if offset == 0:
            return ROW_REF
        return f"{ROW_REF} {'+' if offset > 0 else '-'} {abs(offset)}"
    if kind == "int_range":
        return random_int_sql(int(column.low), int(column.high))
    if kind == "float_range":
        expr = random_between_sql(float(column.low), float(column.high))
        if column.precision is not None:
            # keeps the upper bound exclusive
            scale = 10**column.precision
            return (
                f"greatest(floor(({expr})::numeric * {scale}) / {scale}, "
                f"{_num(float(column.low))})"
            )
        return expr
    if kind == "boolean":
        return random_bool_sql(column.weight)
    if kind == "choice":
        return random_choice_sql(column.choices or [])
    if kind == "string":
        expr = random_string_sql(column.length or 0, column.alphabet, row_ref=ROW_REF)
        if column.prefix:
            return f"{quote_literal(column.prefix)} || {expr}"
        return expr
    if kind in ("date_before", "date_after"):
        lo, hi = column.day_bounds()
        return random_date_sql(lo, hi, before=kind == "date_before", reference=reference)
    if kind == "date_of_birth":
        return random_date_of_birth_sql(
            column.max_age_years, column.min_age_years, reference=reference
        )
    raise ValueError(f"unsupported column kind: {kind!r}")


def render_column_sql(column: ColumnSpec, *, reference: Optional[date] = None) -> str:
    return f"{column_expression_sql(column, reference=reference)} AS {quote_ident(column.name)}"


def render_select_sql(
    spec: TableSpec,
    *,
    rows: Optional[int] = None,
    reference: Optional[date] = None,
) -> str:
    """Render ``spec`` as a ``SELECT ... FROM generate_series(1, n)`` statement."""
    n = spec.rows if rows is None else rows
    if n < 0:
        raise ValueError(f"rows must be >= 0, got {n}")
    columns = ",\n".join(
        f"    {render_column_sql(col, reference=reference)}" for col in spec.columns
    )
    return (
        f"SELECT\n{columns}\n"
        f"FROM generate_series(1, {n}) AS {ROW_ALIAS}({ROW_COLUMN});"
    )
