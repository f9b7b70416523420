"""Random unit disk graph generation."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

from .graph import Graph
from .utils import get_random


def generate_unit_disk_graph(
    n: int,
    r: float,
    rhos: Iterable[float] | None = None,
    rng: random.Random | None = None,
) -> Graph:
    """Place ``n`` points uniformly in the unit square and link those whose
    disks of radius ``r`` overlap (centre distance at most ``2 * r``)."""
    graph = Graph(n, rhos)
    points = []
    for i in range(n):
        x = get_random(rng)
        y = get_random(rng)
        points.append((x, y))
        graph.positions[i] = (x, y, 0.0)

    for i, (xi, yi) in enumerate(points):
        for j in range(i + 1, n):
            xj, yj = points[j]
            if math.hypot(xi - xj, yi - yj) <= 2 * r:
                graph.add_edge(i, j)
    return graph