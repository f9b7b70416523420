"""Undirected graph with per-vertex loads and positions."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


class Graph:
    """An undirected graph on vertices ``0..n-1``.

    Each vertex carries a load in ``rhos`` (1.0 by default) and an optional
    3D position in ``positions``.
    """

    def __init__(self, n: int, rhos: Iterable[float] | None = None) -> None:
        if n < 0:
            raise ValueError("number of vertices must not be negative")
        self._n = n
        self._adjacency: list[set[int]] = [set() for _ in range(n)]
        self.rhos: list[float] = [1.0] * n if rhos is None else [float(r) for r in rhos]
        if len(self.rhos) != n:
            raise ValueError(f"expected {n} rhos, got {len(self.rhos)}")
        self.positions: list[tuple[float, ...] | None] = [None] * n

    def __len__(self) -> int:
        return self._n

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)

    def are_adjacent(self, u: int, v: int) -> bool:
        self._check(u)
        self._check(v)
        return v in self._adjacency[u]

    def neighbors(self, v: int) -> list[int]:
        """Neighbours of ``v`` in increasing order."""
        self._check(v)
        return sorted(self._adjacency[v])

    def colored_neighbors(self, v: int, color_class: Sequence[int]) -> list[int]:
        """Neighbours of ``v`` inside ``color_class``, in the class's order."""
        if v not in color_class:
            raise ValueError("Vertex does not belong to the specified color class.")
        adjacent = self._adjacency[v]
        return [u for u in color_class if u != v and u in adjacent]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield each edge once as ``(i, j)`` with ``i < j``, in row order."""
        for i, adjacent in enumerate(self._adjacency):
            for j in sorted(adjacent):
                if j > i:
                    yield i, j

    def print_edges(self, out: TextIO | None = None) -> None:
        """Write a list of the edges to ``out`` (standard output by default)."""
        out = sys.stdout if out is None else out
        out.write("Graph edges:\n")
        for i, j in self.edges():
            out.write(f"({i}, {j})\n")

    def write_matrix(self, out: TextIO) -> None:
        """Write the adjacency matrix as rows of ``0``/``1`` values."""
        for adjacent in self._adjacency:
            out.write("".join(f"{1 if j in adjacent else 0} " for j in range(self._n)))
            out.write("\n")