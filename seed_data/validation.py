"""Sanity checks for generated seed data.

Each check returns a :class:`ValidationResult` rather than raising, so a
batch of checks can be run over a table and reported together.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Hashable, Iterable, Optional, Sequence


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: str = ""


def check_values_within_range(
    values: Sequence[float],
    low: float,
    high: float,
    *,
    inclusive_high: bool = False,
) -> ValidationResult:
    if not values:
        return ValidationResult(False, "no values to validate")
    for idx, v in enumerate(values):
        too_high = v > high if inclusive_high else v >= high
        if v < low or too_high:
            bracket = "]" if inclusive_high else ")"
            return ValidationResult(
                False, f"value {v!r} at index {idx} outside [{low}, {high}{bracket}"
            )
    return ValidationResult(True, f"all {len(values)} values within range")


def check_mean_close_to(
    values: Sequence[float], expected: float, *, tolerance: float
) -> ValidationResult:
    """Validate that the sample mean is within ``tolerance`` of ``expected``.

    ``tolerance`` is absolute, in the units of the values.
    """
    if not values:
        return ValidationResult(False, "no values to validate")
    mean = sum(values) / len(values)
    if abs(mean - expected) > tolerance:
        return ValidationResult(
            False,
            f"mean {mean:.4f} differs from expected {expected:.4f} by more than {tolerance}",
        )
    return ValidationResult(True, f"mean {mean:.4f} close to expected {expected:.4f}")


def check_boolean_ratio(
    values: Sequence[bool], expected: float, *, tolerance: float = 0.02
) -> ValidationResult:
    """Validate the fraction of ``True`` values against ``expected``."""
    if not values:
        return ValidationResult(False, "no values to validate")
    ratio = sum(1 for v in values if v) / len(values)
    if abs(ratio - expected) > tolerance:
        return ValidationResult(
            False,
            f"true ratio {ratio:.4f} outside {expected} +/- {tolerance}",
        )
    return ValidationResult(True, f"true ratio {ratio:.4f} within tolerance")


def check_uniform_frequencies(
    values: Sequence[Hashable],
    candidates: Iterable[Hashable],
    *,
    tolerance: float = 0.02,
) -> ValidationResult:
    """Validate that only ``candidates`` occur, each with frequency about ``1/n``.

    Parameters
    ----------
    values:
        Observed draws.
    candidates:
        The set that was sampled from.
    tolerance:
        Allowed absolute deviation of each frequency from ``1/n``.
    """
    expected_set = set(candidates)
    if not values or not expected_set:
        return ValidationResult(False, "no values or candidates to validate")

    counts = Counter(values)
    unexpected = set(counts) - expected_set
    if unexpected:
        return ValidationResult(False, f"unexpected values drawn: {sorted(map(repr, unexpected))}")

    target = 1.0 / len(expected_set)
    total = len(values)
    for candidate in expected_set:
        freq = counts.get(candidate, 0) / total
        if abs(freq - target) > tolerance:
            return ValidationResult(
                False,
                f"frequency of {candidate!r} is {freq:.4f}, expected {target:.4f} +/- {tolerance}",
            )
    return ValidationResult(True, f"{len(expected_set)} candidates drawn uniformly")


def check_string_shape(
    values: Sequence[str], length: int, alphabet: str, *, prefix: str = ""
) -> ValidationResult:
    if not values:
        return ValidationResult(False, "no values to validate")
    allowed = set(alphabet)
    for idx, s in enumerate(values):
        if not s.startswith(prefix):
            return ValidationResult(False, f"value {s!r} at index {idx} lacks prefix {prefix!r}")
        body = s[len(prefix):]
        if len(body) != length:
            return ValidationResult(
                False, f"value {s!r} at index {idx} has length {len(body)}, expected {length}"
            )
        stray = set(body) - allowed
        if stray:
            return ValidationResult(
                False, f"value {s!r} at index {idx} uses characters outside alphabet: {sorted(stray)}"
            )
    return ValidationResult(True, f"all {len(values)} strings well formed")


def check_dates_within_window(
    values: Sequence[date],
    earliest: date,
    latest: date,
    *,
    exclude: Optional[date] = None,
) -> ValidationResult:
    """Validate ``earliest <= d <= latest`` for every date, optionally forbidding ``exclude``."""
    if not values:
        return ValidationResult(False, "no dates to validate")
    for idx, d in enumerate(values):
        if d < earliest or d > latest:
            return ValidationResult(
                False, f"date {d} at index {idx} outside {earliest} .. {latest}"
            )
        if exclude is not None and d == exclude:
            return ValidationResult(False, f"date {d} at index {idx} equals excluded {exclude}")
    return ValidationResult(
        True, f"all {len(values)} dates within {earliest} .. {latest}"
    )
