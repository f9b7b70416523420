"""Command line entry point: evaluate a random single-channel deployment."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from .generator import generate_unit_disk_graph
from .performance import performance_model
from .rhos import generate_uniform_rhos

DEFAULT_SIZE = 50
DEFAULT_RADIUS = 0.144  # gives an edge density of roughly 0.2
RHO_LOW = 0.1
RHO_HIGH = 0.6


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a random unit disk graph of access points on one "
        "radio channel and evaluate their throughput."
    )
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="number of vertices")
    parser.add_argument("--radius", type=float, default=DEFAULT_RADIUS, help="disk radius")
    parser.add_argument(
        "--output-dir", type=Path, default=Path("results"), help="where result files go"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def _write_values(path: Path, values) -> None:
    with path.open("w") as out:
        for u, value in enumerate(values):
            out.write(f"{u} {value:g}\n")


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)

    graph = generate_unit_disk_graph(args.size, args.radius, rng=rng)
    rhos = generate_uniform_rhos(args.size, RHO_LOW, RHO_HIGH, rng)
    graph.rhos = list(rhos)

    allocation = [list(range(args.size))]
    performance = performance_model(graph, allocation, rng)

    out_dir: Path = args.output_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    with (out_dir / "exemple_graph.txt").open("w") as out:
        for u, v in graph.edges():
            out.write(f"{u} {v}\n")
    _write_values(out_dir / "exemple_rhos.txt", rhos)
    with (out_dir / "exemple_allocation.txt").open("w") as out:
        for u in range(args.size):
            out.write(f"{u} 0\n")
    _write_values(out_dir / "exemple_model_performances.txt", performance)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())