"""Unit tests for date and timestamp randomizers."""

import random
from datetime import date, datetime, timedelta, timezone

import pytest

from seed_data.errors import InvalidRangeError
from seed_data.generators import (
    DAYS_PER_YEAR,
    random_date_after,
    random_date_before,
    random_date_of_birth,
    random_date_offset,
    random_future_date,
    random_timestamp_between,
)
from seed_data.generators import temporal
from seed_data.validation import check_dates_within_window

REFERENCE = date(2019, 1, 9)


class TestRandomDateBefore:
    """Test dates in the recent past."""

    def test_last_29_days_window(self):
        """Test offsets 1..29 before 2019-01-09 stay in 2018-12-11 .. 2019-01-08."""
        rng = random.Random(2019)
        values = [random_date_before(REFERENCE, 1, 29, rng=rng) for _ in range(2_000)]
        assert all(v < REFERENCE for v in values)
        assert min(values) >= date(2018, 12, 11)
        result = check_dates_within_window(
            values, date(2018, 12, 11), REFERENCE, exclude=REFERENCE
        )
        assert result.ok, result.message

    def test_window_endpoints_are_reachable(self):
        rng = random.Random(4)
        values = {random_date_before(REFERENCE, 1, 29, rng=rng) for _ in range(5_000)}
        assert date(2018, 12, 11) in values
        assert date(2019, 1, 8) in values

    def test_defaults_to_today(self, monkeypatch):
        """Test an omitted reference falls back to today's date."""

        class _FrozenDate(date):
            @classmethod
            def today(cls):
                return cls(2019, 1, 9)

        monkeypatch.setattr(temporal, "date", _FrozenDate)
        values = [random_date_before(rng=random.Random(i)) for i in range(200)]
        result = check_dates_within_window(
            values, date(2018, 12, 11), REFERENCE, exclude=REFERENCE
        )
        assert result.ok, result.message

    def test_inverted_offsets_raise(self):
        with pytest.raises(InvalidRangeError):
            random_date_before(REFERENCE, 30, 1)


class TestRandomDateAfter:
    """Test future dates."""

    def test_future_date_within_twelve_months(self):
        rng = random.Random(1)
        values = [random_future_date(REFERENCE, rng=rng) for _ in range(2_000)]
        result = check_dates_within_window(
            values,
            REFERENCE + timedelta(days=1),
            REFERENCE + timedelta(days=DAYS_PER_YEAR),
        )
        assert result.ok, result.message

    def test_custom_window(self):
        rng = random.Random(2)
        value = random_date_after(REFERENCE, 10, 10, rng=rng)
        assert value == date(2019, 1, 19)


class TestRandomDateOffset:
    """Test signed day offsets."""

    def test_negative_to_positive_range(self):
        rng = random.Random(3)
        values = [random_date_offset(REFERENCE, -3, 3, rng=rng) for _ in range(1_000)]
        assert {(v - REFERENCE).days for v in values} == set(range(-3, 4))

    def test_datetime_reference_keeps_type_and_time(self):
        now = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        value = random_date_offset(now, 1, 5, rng=random.Random(0))
        assert isinstance(value, datetime)
        assert value.tzinfo is timezone.utc
        assert (value.hour, value.minute) == (12, 30)

    def test_inverted_offsets_raise(self):
        with pytest.raises(InvalidRangeError, match="invalid range"):
            random_date_offset(REFERENCE, 5, -5)


class TestRandomDateOfBirth:
    """Test birth dates for bounded ages."""

    def test_under_eighteen(self):
        rng = random.Random(18)
        values = [random_date_of_birth(REFERENCE, rng=rng) for _ in range(2_000)]
        eighteenth_birthday_cutoff = date(2001, 1, 9)
        assert all(eighteenth_birthday_cutoff < v <= REFERENCE for v in values)

    def test_age_band(self):
        rng = random.Random(30)
        values = [
            random_date_of_birth(REFERENCE, min_age_years=21, max_age_years=30, rng=rng)
            for _ in range(1_000)
        ]
        ages_in_days = [(REFERENCE - v).days for v in values]
        assert min(ages_in_days) >= 21 * DAYS_PER_YEAR
        assert max(ages_in_days) <= 30 * DAYS_PER_YEAR

    def test_min_age_above_max_age_raises(self):
        with pytest.raises(InvalidRangeError):
            random_date_of_birth(REFERENCE, min_age_years=40, max_age_years=30)

    def test_negative_min_age_raises(self):
        with pytest.raises(InvalidRangeError, match="min_age_years"):
            random_date_of_birth(REFERENCE, min_age_years=-1)


class TestRandomTimestampBetween:
    """Test uniform timestamps."""

    def test_within_half_open_interval(self):
        start = datetime(2024, 1, 1)
        end = datetime(2024, 1, 2)
        rng = random.Random(9)
        values = [random_timestamp_between(start, end, rng=rng) for _ in range(1_000)]
        assert all(start <= v < end for v in values)
        assert all(v.microsecond == 0 for v in values)

    def test_equal_bounds_return_start(self):
        ts = datetime(2024, 1, 1, 8)
        assert random_timestamp_between(ts, ts) == ts

    def test_inverted_bounds_raise(self):
        with pytest.raises(InvalidRangeError):
            random_timestamp_between(datetime(2024, 2, 1), datetime(2024, 1, 1))
