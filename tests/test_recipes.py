"""Tests for PostgreSQL recipe rendering."""

from datetime import date

import pytest

from seed_data.config import ColumnSpec, TableSpec
from seed_data.errors import EmptyCandidatesError, InvalidLengthError, InvalidRangeError
from seed_data.presets import USERS_TABLE
from seed_data.recipes import (
    column_expression_sql,
    quote_ident,
    quote_literal,
    random_between_sql,
    random_bool_sql,
    random_choice_sql,
    random_date_of_birth_sql,
    random_date_sql,
    random_int_sql,
    random_string_sql,
    render_column_sql,
    render_select_sql,
)


class TestScalarRecipes:
    """Test single-expression recipes."""

    def test_random_between(self):
        assert random_between_sql(5, 25) == "random() * 20 + 5"
        assert random_between_sql(0.5, 1.0) == "random() * 0.5 + 0.5"

    def test_random_int(self):
        assert random_int_sql(1, 6) == "floor(random() * 6 + 1)::int"
        assert random_int_sql(-3, 3) == "floor(random() * 7 + -3)::int"

    def test_random_bool(self):
        assert random_bool_sql() == "(random() < 0.5)"
        assert random_bool_sql(0.75) == "(random() < 0.75)"

    def test_random_choice_text(self):
        assert random_choice_sql(["A", "B", "C", "D"]) == (
            "(ARRAY['A', 'B', 'C', 'D'])[floor(random() * 4 + 1)::int]"
        )

    def test_random_choice_numeric(self):
        assert random_choice_sql([1, 2.5]) == "(ARRAY[1, 2.5])[floor(random() * 2 + 1)::int]"

    def test_random_choice_escapes_quotes(self):
        assert "'O''Brien'" in random_choice_sql(["O'Brien"])

    def test_random_string(self):
        sql = random_string_sql(10, "ABC")
        assert sql == (
            "(SELECT string_agg(substr('ABC', floor(random() * 3 + 1)::int, 1), '') "
            "FROM generate_series(1, 10))"
        )

    def test_random_string_correlated_with_row(self):
        sql = random_string_sql(3, "AB", row_ref="s.i")
        assert sql.endswith("FROM generate_series(1, 3) WHERE s.i IS NOT NULL)")

    def test_random_string_zero_length(self):
        assert random_string_sql(0) == "''"

    def test_dates(self):
        assert random_date_sql(1, 365) == "CURRENT_DATE + floor(random() * 365 + 1)::int"
        assert random_date_sql(1, 29, before=True, reference=date(2019, 1, 9)) == (
            "DATE '2019-01-09' - floor(random() * 29 + 1)::int"
        )
        assert random_date_of_birth_sql() == (
            "CURRENT_DATE - floor(random() * 6571 + 0)::int"
        )

    def test_invalid_arguments_match_python_generators(self):
        with pytest.raises(InvalidRangeError):
            random_between_sql(2, 1)
        with pytest.raises(InvalidRangeError):
            random_int_sql(2, 1)
        with pytest.raises(InvalidRangeError):
            random_bool_sql(2)
        with pytest.raises(EmptyCandidatesError):
            random_choice_sql([])
        with pytest.raises(InvalidLengthError):
            random_string_sql(-1)
        with pytest.raises(EmptyCandidatesError):
            random_string_sql(3, "")
        with pytest.raises(InvalidRangeError):
            random_date_sql(5, 1)


class TestQuoting:
    def test_plain_identifiers_are_bare(self):
        assert quote_ident("user_id") == "user_id"

    def test_other_identifiers_are_quoted(self):
        assert quote_ident("User Id") == '"User Id"'
        assert quote_ident('a"b') == '"a""b"'

    def test_literal(self):
        assert quote_literal("it's") == "'it''s'"


class TestColumnRendering:
    """Test column and table statements."""

    def test_sequence_offsets(self):
        assert column_expression_sql(ColumnSpec(name="id", kind="sequence")) == "s.i"
        assert column_expression_sql(ColumnSpec(name="id", kind="sequence", start=100)) == "s.i + 99"
        assert column_expression_sql(ColumnSpec(name="id", kind="sequence", start=0)) == "s.i - 1"

    def test_float_precision_rounds_down(self):
        """Test precision floors the value so ``high`` stays exclusive."""
        col = ColumnSpec(name="amount", kind="float_range", low=5, high=10, precision=2)
        assert render_column_sql(col) == (
            "greatest(floor((random() * 5 + 5)::numeric * 100) / 100, 5) AS amount"
        )
        assert "round(" not in render_column_sql(col)

    def test_prefixed_string(self):
        col = ColumnSpec(name="ref", kind="string", length=2, alphabet="AB", prefix="ORD-")
        assert render_column_sql(col).startswith("'ORD-' || (SELECT string_agg(")

    def test_select_statement(self):
        spec = TableSpec(
            name="t",
            rows=5,
            columns=[
                ColumnSpec(name="id", kind="sequence"),
                ColumnSpec(name="flag", kind="boolean", weight=0.25),
            ],
        )
        assert render_select_sql(spec) == (
            "SELECT\n"
            "    s.i AS id,\n"
            "    (random() < 0.25) AS flag\n"
            "FROM generate_series(1, 5) AS s(i);"
        )

    def test_select_rows_override_and_reference(self):
        sql = render_select_sql(USERS_TABLE, rows=3, reference=date(2019, 1, 9))
        assert sql.endswith("FROM generate_series(1, 3) AS s(i);")
        assert "CURRENT_DATE" not in sql
        assert "DATE '2019-01-09' - floor(random() * 6571 + 0)::int AS date_of_birth" in sql
        for name in USERS_TABLE.column_names:
            assert f"AS {name}" in sql

    def test_negative_rows_rejected(self):
        with pytest.raises(ValueError):
            render_select_sql(USERS_TABLE, rows=-1)
