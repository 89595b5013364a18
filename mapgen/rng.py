from __future__ import annotations

"""Deterministic random source shared by every stochastic step of map generation."""

import random

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _stable_hash(*args: int) -> int:
    """
    Combine integer arguments into a single 64-bit integer using a deterministic mixing routine.
    Ensures repeatable results across Python runs (unlike built-in hash()).
    """
    x = 0x345678ABCDEF1234  # Arbitrary non-zero start value.
    for a in args:
        a &= _MASK64
        a ^= a >> 33
        a = (a * 0xFF51AFD7ED558CCD) & _MASK64
        a ^= a >> 33
        x ^= a
        x = (x * 0xC4CEB9FE1A85EC53) & _MASK64
    return x


class SeededRandom:
    """
    Reproducible stream of floats in [0, 1) built from a single integer seed.

    Two instances created from the same seed return identical sequences when
    called the same number of times in the same order. Any integer is a legal
    seed, including zero and negative values.
    """

    __slots__ = ("seed", "_rng")

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(_stable_hash(seed))

    def random(self) -> float:
        """Return the next float in [0, 1)."""
        return self._rng.random()

    def derive_seed(self) -> int:
        """Draw a 32-bit seed for an independent sub-generator (e.g. a noise function)."""
        return int(self._rng.random() * 0xFFFFFFFF)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed})"


__all__ = ["SeededRandom", "_stable_hash"]
