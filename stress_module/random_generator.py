"""Shared pseudo-random source for the stress items.

One RandomGenerator is owned by each StressModule and handed to item handlers
through ItemContext, so tests can inject a deterministic source instead of the
wall-clock seeded default.

Thread Safety:
    Every draw takes the same lock, so hosts that call items from several
    threads see a consistent generator state.
"""

import logging
import random
import string
import threading
import time
from typing import Optional

logger = logging.getLogger(__name__)

# Upper bound of raw() draws, same as glibc's rand()
RAND_MAX = 2**31 - 1

ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase


class RandomGenerator:
    """Bounded integers, approximate reals and alphanumeric strings.

    Usage:
        >>> rng = RandomGenerator()
        >>> rng.seed()
        >>> rng.uniform_int(1, 6)
        4
        >>> len(rng.random_string(249))
        249

    Args:
        source: Optional random.Random (or anything with randint/random/seed)
            to draw from. An injected source is assumed to be seeded by its
            owner, so seed() is not required before drawing.
    """

    def __init__(self, source: Optional[random.Random] = None) -> None:
        self._source = source if source is not None else random.Random()
        self._seeded = source is not None
        self._lock = threading.Lock()

    @property
    def seeded(self) -> bool:
        return self._seeded

    def seed(self, value: Optional[int] = None) -> None:
        """Seed the generator once, from wall-clock seconds by default.

        Raises:
            RuntimeError: If the generator was already seeded.
        """
        with self._lock:
            if self._seeded:
                raise RuntimeError("Random generator is already seeded")
            if value is None:
                value = int(time.time())
            self._source.seed(value)
            self._seeded = True
        logger.debug("Random generator seeded with %s", value)

    def raw(self) -> int:
        """Draw an integer in [0, RAND_MAX]."""
        with self._lock:
            self._require_seeded()
            return self._source.randint(0, RAND_MAX)

    def uniform_int(self, low: int, high: int) -> int:
        """Draw an integer uniformly from [low, high], both ends inclusive."""
        if low > high:
            raise ValueError(f"Empty range: {low} > {high}")
        with self._lock:
            self._require_seeded()
            return self._source.randint(low, high)

    def uniform_real(self, low: float, high: float) -> float:
        """Return low + raw() / (high - low + 1).

        This is not a uniform draw over [low, high); the formula is kept as is
        so values match what existing item consumers already collect.
        """
        return low + self.raw() / (high - low + 1)

    def random_string(self, length: int) -> str:
        """Build a string of exactly `length` characters from ALPHABET."""
        if length < 0:
            raise ValueError(f"Length must not be negative, got {length}")
        size = len(ALPHABET)
        with self._lock:
            self._require_seeded()
            return "".join(
                ALPHABET[int(self._source.random() * size)] for _ in range(length)
            )

    def _require_seeded(self) -> None:
        if not self._seeded:
            raise RuntimeError("Random generator used before seed()")
