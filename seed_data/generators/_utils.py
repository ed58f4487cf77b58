"""Shared helpers for the randomizer modules."""

import random
from typing import Optional


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    """Return ``rng`` or a fresh OS-seeded generator when it is ``None``.

    A fresh instance per call keeps callers from sharing hidden state.
    Pass ``random.Random(seed)`` to make output reproducible.
    """
    return rng if rng is not None else random.Random()
