"""Random helpers and small collection/string utilities."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

_default_rng = random.Random()


def _rng(rng: random.Random | None) -> random.Random:
    return _default_rng if rng is None else rng


def get_random(rng: random.Random | None = None) -> float:
    """Return a uniformly distributed float in [0, 1)."""
    return _rng(rng).random()


def get_random_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer in [low, high)."""
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return _rng(rng).randrange(low, high)


def get_random_gaussian(mu: float, sigma: float, rng: random.Random | None = None) -> float:
    """Return a sample of the normal distribution N(mu, sigma)."""
    if sigma < 0:
        raise ValueError("sigma must not be negative")
    return _rng(rng).gauss(mu, sigma)


def find_class(classes: Iterable[Sequence[int]], v: int) -> list[int]:
    """Return the first class containing ``v``, or an empty list."""
    for cls in classes:
        if v in cls:
            return list(cls)
    return []


def tokenize(line: str, delimiter: str) -> list[str]:
    """Split ``line`` on every occurrence of ``delimiter``."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return line.split(delimiter)