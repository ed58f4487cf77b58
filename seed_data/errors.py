"""Errors raised by the seed-data randomizers.

Every error is a local validation failure raised at the call boundary.
They all derive from :class:`SeedDataError`, itself a :class:`ValueError`,
so callers may catch whichever level suits them.
"""

from __future__ import annotations

from typing import Any


class SeedDataError(ValueError):
    """Base class for invalid randomizer input."""


class InvalidRangeError(SeedDataError):
    """Raised when a lower bound exceeds its upper bound."""

    def __init__(self, start: Any, end: Any, message: str | None = None) -> None:
        self.start = start
        self.end = end
        super().__init__(message or f"invalid range: start={start!r} > end={end!r}")


class EmptyCandidatesError(SeedDataError):
    """Raised when sampling from an empty candidate list or alphabet."""

    def __init__(self, what: str = "candidates") -> None:
        self.what = what
        super().__init__(f"no candidates: {what} must not be empty")


class InvalidLengthError(SeedDataError):
    """Raised when a negative string length is requested."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"invalid length: {length!r} (must be >= 0)")
