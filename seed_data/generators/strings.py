"""Fixed-length pseudo-random strings.

Equivalent to the SQL recipe that aggregates ``substr(alphabet, ...)``
picks with ``string_agg`` over ``generate_series(1, length)``.
"""

from __future__ import annotations

import random
import string
from typing import Optional

from seed_data.errors import EmptyCandidatesError, InvalidLengthError
from seed_data.generators._utils import resolve_rng

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
ALPHANUMERIC = string.ascii_letters + string.digits
HEX_DIGITS = "0123456789abcdef"


def random_string(
    length: int,
    alphabet: str = UPPERCASE,
    *,
    rng: Optional[random.Random] = None,
) -> str:
    """Return ``length`` characters drawn independently from ``alphabet``.

    Repeated characters in ``alphabet`` are kept and therefore weight the
    draw.

    Raises
    ------
    InvalidLengthError
        If ``length`` is negative.
    EmptyCandidatesError
        If ``alphabet`` is empty.
    """
    if length < 0:
        raise InvalidLengthError(length)
    if not alphabet:
        raise EmptyCandidatesError("alphabet")
    if length == 0:
        return ""
    r = resolve_rng(rng)
    return "".join(r.choices(alphabet, k=length))
