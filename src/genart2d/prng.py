"""
Seeded pseudo-random stream shared by every randomised helper in the package.

Functions that draw random numbers take an optional ``prng``; when omitted they use the
process-wide instance returned by get_prng(). Code that needs isolation (tests, threads)
should create its own Prng.
"""
from __future__ import annotations

import hashlib
from typing import Optional, Union

import numpy as np
import structlog

logger = structlog.get_logger()

Seed = Union[str, int, None]


def _seed_to_int(seed: Seed) -> Optional[int]:
    if seed is None:
        return None
    if isinstance(seed, bool):
        seed = int(seed)
    if isinstance(seed, int):
        # numpy SeedSequence rejects negatives
        return seed if seed >= 0 else _seed_to_int(str(seed))
    if isinstance(seed, float) and seed.is_integer() and seed >= 0:
        return int(seed)
    digest = hashlib.sha256(str(seed).encode("utf-8")).digest()
    return int.from_bytes(digest[:16], "little")


class Prng:
    """
    Deterministic stream of floats in [0, 1) backed by numpy's PCG64.

    Identical seeds give identical sequences on every platform. String seeds are hashed,
    so "my-seed" is as valid as 42.
    """

    def __init__(self, seed: Seed = None):
        self.seed: Seed = None
        self._gen: np.random.Generator
        self.reseed(seed)

    def reseed(self, seed: Seed) -> None:
        self.seed = seed
        self._gen = np.random.default_rng(_seed_to_int(seed))

    @property
    def generator(self) -> np.random.Generator:
        return self._gen

    def next(self) -> float:
        return float(self._gen.random())

    def __call__(self) -> float:
        return self.next()


_prng: Optional[Prng] = None


def get_prng() -> Prng:
    """Return the process-wide Prng, creating an unseeded one on first use."""
    global _prng
    if _prng is None:
        _prng = Prng()
    return _prng


def seed_prng(seed: Seed) -> Prng:
    """
    Reseed the process-wide Prng for reproducible output:

        seed_prng("my-seed")
        random_in_range(0, 100)  # same value on every run
    """
    prng = get_prng()
    prng.reseed(seed)
    logger.debug("prng_seeded", seed=seed)
    return prng


def resolve_prng(prng: Optional[Prng]) -> Prng:
    return prng if prng is not None else get_prng()
