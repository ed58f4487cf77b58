"""List and row sampling.

``random_choice`` stands in for the ``UNNEST`` + ``ORDER BY random() LIMIT 1``
idiom, and ``sample_rows`` for ``ORDER BY random() LIMIT k`` over a table.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, TypeVar

from seed_data.errors import EmptyCandidatesError, InvalidRangeError
from seed_data.generators._utils import resolve_rng

T = TypeVar("T")

SAMPLING_METHODS = ("shuffle", "reservoir")


def random_choice(
    candidates: Sequence[T], *, rng: Optional[random.Random] = None
) -> T:
    """Pick one element of ``candidates`` with probability ``1/n``.

    Raises
    ------
    EmptyCandidatesError
        If ``candidates`` is empty.
    """
    if len(candidates) == 0:
        raise EmptyCandidatesError("candidates")
    r = resolve_rng(rng)
    return candidates[r.randrange(len(candidates))]


def _check_count(k: int) -> None:
    if k < 1:
        raise InvalidRangeError(1, k, f"invalid range: count must be >= 1, got {k!r}")


def sample_rows(
    rows: Iterable[T],
    k: int = 1,
    *,
    method: str = "shuffle",
    rng: Optional[random.Random] = None,
) -> List[T]:
    """Select ``k`` rows without replacement.

    With ``method="shuffle"`` every row is given an independent uniform
    key, rows are sorted by key and the first ``k`` kept. This is good
    enough for seed data but materialises the whole input. Use
    ``method="reservoir"`` for long streams.

    When ``k`` exceeds the number of rows, all rows are returned in random
    order.
    """
    _check_count(k)
    if method == "reservoir":
        return reservoir_sample(rows, k, rng=rng)
    if method != "shuffle":
        raise ValueError(
            f"unknown sampling method {method!r}; expected one of {SAMPLING_METHODS}"
        )

    r = resolve_rng(rng)
    keyed = [(r.random(), idx, row) for idx, row in enumerate(rows)]
    # idx breaks key ties without comparing the rows themselves
    keyed.sort(key=lambda item: (item[0], item[1]))
    return [row for _key, _idx, row in keyed[:k]]


def reservoir_sample(
    rows: Iterable[T], k: int, *, rng: Optional[random.Random] = None
) -> List[T]:
    """Uniformly sample ``k`` rows from a stream in one pass (Algorithm R).

    Memory use is bounded by ``k``. Fewer than ``k`` input rows are all
    returned, shuffled.
    """
    _check_count(k)
    r = resolve_rng(rng)
    reservoir: List[T] = []
    for seen, row in enumerate(rows):
        if seen < k:
            reservoir.append(row)
            continue
        j = r.randrange(seen + 1)
        if j < k:
            reservoir[j] = row
    r.shuffle(reservoir)
    return reservoir
