"""Throughput model for access points sharing radio channels.

Each channel's vertices contend through a Glauber-like Markov chain on
independent sets. The long-run share of time a vertex spends in the set
gives its achievable throughput. Loads are then served in rounds until
either every load is met or the channel's time runs out.
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence

from .graph import Graph
from .utils import _rng

EPSILON = 0.001
LAMBDA = 10.0
ITERATIONS = 1000


def _steps_for(n: int) -> int:
    return int(5 * 2 ** math.sqrt(n))


def connected_components_partition(
    graph: Graph, color_class: Sequence[int]
) -> list[list[int]]:
    """Split ``color_class`` into the connected components of the subgraph
    it induces, each listed in depth-first visiting order."""
    members = list(color_class)
    visited: set[int] = set()
    components: list[list[int]] = []
    for start in members:
        if start in visited:
            continue
        visited.add(start)
        component = [start]
        stack = [iter(graph.colored_neighbors(start, members))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    component.append(neighbor)
                    stack.append(iter(graph.colored_neighbors(neighbor, members)))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def evaluate_performance_arbitrary_saturated(
    graph: Graph,
    components: Iterable[Sequence[int]],
    iterations: int,
    steps: int,
    lam: float,
    rng: random.Random | None = None,
) -> list[float]:
    """Run the insert/delete/drag chain ``iterations`` times on every
    component and count, per vertex, how often it ends in the independent set.
    """
    generator = _rng(rng)
    components = [list(component) for component in components]
    if steps > 0 and any(not component for component in components):
        raise ValueError("components must not be empty")

    neighbor_sets = {
        u: set(graph.neighbors(u)) for component in components for u in component
    }
    p_delete = 1.0 / (1.0 + lam)
    p_insert = lam / (1.0 + lam)
    counts = [0.0] * len(graph)

    for _ in range(iterations):
        for component in components:
            independent: set[int] = set()
            for _ in range(steps):
                u = generator.choice(component)
                if u in independent:
                    if generator.random() < p_delete:
                        independent.discard(u)
                    continue
                blocking = neighbor_sets[u] & independent
                if not blocking:
                    if generator.random() < p_insert:
                        independent.add(u)
                elif len(blocking) == 1:
                    independent -= blocking
                    independent.add(u)
            for v in independent:
                counts[v] += 1.0
    return counts


def model_for_one_color(
    graph: Graph, subgraph: Sequence[int], rng: random.Random | None = None
) -> list[float]:
    """Throughput of each vertex of ``subgraph`` when all of them share one
    channel. The graph's loads are not modified."""
    n = len(graph)
    rhos = list(graph.rhos)
    performance = [0.0] * n
    steps = _steps_for(n)
    time_ratio = 1.0

    while time_ratio > EPSILON:
        active = [u for u in subgraph if rhos[u] > EPSILON]
        if not active:
            break

        counts = evaluate_performance_arbitrary_saturated(
            graph,
            connected_components_partition(graph, active),
            ITERATIONS,
            steps,
            LAMBDA,
            rng,
        )
        share = [count / ITERATIONS for count in counts]

        run_for = time_ratio
        for u in active:
            if share[u] > EPSILON:
                run_for = min(run_for, rhos[u] / share[u])
            else:
                share[u] = 0.0

        for u in active:
            served = run_for * share[u]
            performance[u] += served
            rhos[u] -= served
        time_ratio -= run_for

    return performance


def performance_model(
    graph: Graph,
    allocation: Iterable[Sequence[int]],
    rng: random.Random | None = None,
) -> list[float]:
    """Throughput of every vertex, given the vertices placed on each channel.

    Vertices absent from the allocation get 0.
    """
    performance = [0.0] * len(graph)
    for color_class in allocation:
        members = list(color_class)
        per_channel = model_for_one_color(graph, members, rng)
        for u in members:
            performance[u] = per_channel[u]
    return performance