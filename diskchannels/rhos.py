"""Generators of per-vertex loads (rhos)."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from .graph import Graph
from .utils import _rng, get_random, get_random_gaussian


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _bounded_gaussian(mu: float, sigma: float, rng: random.Random | None) -> float:
    rho = get_random_gaussian(mu, sigma, rng)
    while rho < 0 or rho > 1:
        rho = get_random_gaussian(mu, sigma, rng)
    return rho


def generate_uniform_rhos(
    n: int, inf: float, sup: float, rng: random.Random | None = None
) -> list[float]:
    """Draw ``n`` uniform values in [0, 1], keeping only those in [inf, sup]."""
    if inf > sup or sup < 0 or inf > 1:
        raise ValueError(f"bounds [{inf}, {sup}] do not meet [0, 1]")
    rhos = []
    for _ in range(n):
        rho = get_random(rng)
        while rho < inf or rho > sup:
            rho = get_random(rng)
        rhos.append(rho)
    return rhos


def generate_gaussian_rhos(
    n: int, mu: float, sigma: float, rng: random.Random | None = None
) -> list[float]:
    """Draw ``n`` values from N(mu, sigma), rejecting those outside [0, 1]."""
    return [_bounded_gaussian(mu, sigma, rng) for _ in range(n)]


def generate_double_gaussian_rhos(
    n: int,
    mu1: float,
    sigma1: float,
    mu2: float,
    sigma2: float,
    ratio: float,
    rng: random.Random | None = None,
) -> list[float]:
    """Draw ``round(n * ratio)`` values from the first law and the rest from
    the second, then shuffle them."""
    n1 = _round_half_away(n * ratio)
    rhos = generate_gaussian_rhos(n1, mu1, sigma1, rng)
    rhos += generate_gaussian_rhos(n - n1, mu2, sigma2, rng)
    _rng(rng).shuffle(rhos)
    return rhos


def generate_spatial_gaussian_rhos(
    graph: Graph, parts: int, params: Sequence[float], rng: random.Random | None = None
) -> list[float]:
    """Draw each vertex's load from the normal law of the cell it lies in.

    The unit square is cut into ``parts`` equal square cells, so ``parts``
    must be a perfect square. ``params`` holds ``(mu, sigma)`` for each cell,
    cell ``row + side * col`` at index ``2 * id``.
    """
    side = math.isqrt(parts) if parts > 0 else 0
    if side == 0 or side * side != parts:
        raise ValueError("parts must be a positive perfect square")
    if len(params) != 2 * parts:
        raise ValueError(f"expected {2 * parts} parameters, got {len(params)}")

    rhos = []
    for v, pos in enumerate(graph.positions):
        if pos is None:
            raise ValueError(f"vertex {v} has no position")
        row = min(int(pos[0] * side), side - 1)
        col = min(int(pos[1] * side), side - 1)
        cell = row + side * col
        rhos.append(_bounded_gaussian(params[2 * cell], params[2 * cell + 1], rng))
    return rhos