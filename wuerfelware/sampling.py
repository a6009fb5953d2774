"""
Unbiased random indexes from a 64-bit random source.

Taking ``x % n`` of a uniform 64-bit value favours the residues below
``2**64 % n``. We instead only accept draws below the largest multiple of
``n`` that fits (rejection sampling), so every index in ``[0, n)`` is backed by
exactly the same number of accepted draws.
"""

import logging
import secrets
import threading
from typing import Protocol

logger = logging.getLogger(__name__)

RAND_MAX = 2**64 - 1


class RandomSource(Protocol):
    def next_u64(self) -> int:
        """Return a uniformly distributed integer in [0, 2**64)."""
        ...


class SystemRandomSource:
    """Operating system CSPRNG via ``secrets``."""

    def next_u64(self) -> int:
        return secrets.randbits(64)


class LockedRandomSource:
    """Serialises draws on a source shared between threads."""

    def __init__(self, source: RandomSource) -> None:
        self._source = source
        self._lock = threading.Lock()

    def next_u64(self) -> int:
        with self._lock:
            return self._source.next_u64()


def rejection_limit(n: int) -> int:
    """Exclusive upper bound for accepted draws when sampling from [0, n).

    Always a multiple of ``n`` and never above RAND_MAX.
    """
    if n < 1 or n > RAND_MAX:
        raise ValueError(f"Upper bound must be in 1..{RAND_MAX}, got {n}")
    return RAND_MAX - (RAND_MAX % n)


def next_index(source: RandomSource, exclusive_upper_bound: int) -> int:
    n = exclusive_upper_bound
    limit = rejection_limit(n)
    # No retry cap: each round is rejected with probability < n / 2**64.
    while True:
        x = source.next_u64()
        if not 0 <= x <= RAND_MAX:
            raise ValueError(f"Random source returned {x}, outside the 64-bit range")
        if x < limit:
            return x % n
        logger.debug("Rejected draw at or above %d (n=%d)", limit, n)
