#!/usr/bin/env python3
"""
Random Sources
==============
Entropy providers consumed by every random choice the engine makes.

Two interchangeable profiles:
- CryptoRandomSource: secrets.SystemRandom (os.urandom backed), safe to share
  between threads
- FastRandomSource: random.Random, seedable and reproducible, not
  thread-safe

Both expose the same small contract: an unbiased index in [0, n) and n random
bytes. Everything else (coin flips, weighted choices) is built on top of
``next_int`` so that a source which always returns 0 deterministically picks
the first eligible option.
"""

import random
import secrets
from abc import ABC, abstractmethod
from typing import Sequence


class RandomSource(ABC):
    """Capability contract for a source of randomness."""

    @abstractmethod
    def next_int(self, n: int) -> int:
        """Return an unbiased integer in [0, n)."""

    @abstractmethod
    def next_bytes(self, n: int) -> bytes:
        """Return ``n`` random bytes."""

    def coin_flip(self) -> bool:
        return self.next_int(2) == 0

    def weighted_choice(self, weights: Sequence[int]) -> int:
        """
        Choose an index with probability proportional to its weight.

        Weights are non-negative integers; zero-weight options are never
        chosen.

        Raises
        ------
        ValueError
            If a weight is negative or all weights are zero.
        """
        if any(w < 0 for w in weights):
            raise ValueError(f"Weights must be non-negative: {list(weights)}")
        total = sum(weights)
        if total <= 0:
            raise ValueError("At least one weight must be positive")

        r = self.next_int(total)
        cumulative = 0
        for index, weight in enumerate(weights):
            cumulative += weight
            if r < cumulative:
                return index

        # Unreachable for a conforming next_int
        raise ValueError(f"next_int({total}) returned out-of-range value {r}")

    @staticmethod
    def _check_bound(n: int):
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")


class CryptoRandomSource(RandomSource):
    """
    Cryptographically secure random source.

    Backed by ``secrets.SystemRandom`` which reads the operating system
    entropy pool; it keeps no state of its own, so concurrent use from
    several threads is safe.
    """

    profile = 'crypto'

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def next_int(self, n: int) -> int:
        self._check_bound(n)
        return self._rng.randrange(n)

    def next_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class FastRandomSource(RandomSource):
    """
    Fast, non-cryptographic random source.

    Seed it for reproducible phrases in tests and demos. Never use it for
    real passphrases.
    """

    profile = 'fast'

    def __init__(self, seed: int = None):
        self._rng = random.Random(seed)

    def next_int(self, n: int) -> int:
        self._check_bound(n)
        return self._rng.randrange(n)

    def next_bytes(self, n: int) -> bytes:
        return bytes(self._rng.getrandbits(8) for _ in range(n))


RANDOM_PROFILES = {
    'crypto': CryptoRandomSource,
    'fast': FastRandomSource,
}


def get_random_source(profile: str = 'crypto') -> RandomSource:
    """
    Create a random source for a named profile.

    Raises
    ------
    ValueError
        If the profile is unknown
    """
    factory = RANDOM_PROFILES.get((profile or '').lower())
    if factory is None:
        available = ', '.join(sorted(RANDOM_PROFILES))
        raise ValueError(f"Unknown random profile '{profile}'. Available profiles: {available}")
    return factory()


# Global instance
_default_rng = CryptoRandomSource()


def get_rng() -> RandomSource:
    """Get the shared cryptographically secure random source."""
    return _default_rng


__all__ = [
    'RandomSource',
    'CryptoRandomSource',
    'FastRandomSource',
    'RANDOM_PROFILES',
    'get_random_source',
    'get_rng',
]
