# diskchannels

Tools for studying radio channel allocation on random wireless networks.
The package uses only the Python standard library.

## What is in it

- **`diskchannels.graph.Graph`**: an undirected graph on the vertices `0..n-1`. Each vertex stands for an access point and edges mark interference.
  - Every vertex has a load in `graph.rhos`. The loads default to `1.0`. If you pass `rhos` to `Graph(n, rhos)`, the list must have exactly `n` values, otherwise `ValueError` is raised.
  - Every vertex has a position in `graph.positions`. A position is a tuple, or `None` when it has not been set.
  - `len(graph)` is the number of vertices.
  - `add_edge(u, v)` adds an edge and `are_adjacent(u, v)` tests for one. Both raise `IndexError` when a vertex is out of range.
  - `neighbors(v)` returns the neighbours of `v` in increasing order.
  - `colored_neighbors(v, color_class)` returns the neighbours of `v` that are in `color_class`, in the order of the class. It raises `ValueError` when `v` is not in the class.
  - `edges()` yields every edge once, as `(i, j)` with `i < j`.
  - `print_edges(out)` writes a `Graph edges:` header and then one `(i, j)` line per edge. It writes to standard output when `out` is omitted.
  - `write_matrix(out)` writes the adjacency matrix as rows of `0`/`1` values.
- **`diskchannels.generator.generate_unit_disk_graph(n, r, rhos=None, rng=None)`** places `n` points uniformly in the unit square. Each position is stored as `(x, y, 0.0)`. Two points are joined when the distance between them is at most `2 * r`.
- **`diskchannels.rhos`**: load generators.
  - `generate_uniform_rhos(n, inf, sup)` draws uniform values in [0, 1) and keeps only those inside `[inf, sup]`. It raises `ValueError` when the bounds do not meet [0, 1].
  - `generate_gaussian_rhos(n, mu, sigma)` draws from a normal law and rejects values outside [0, 1].
  - `generate_double_gaussian_rhos(n, mu1, sigma1, mu2, sigma2, ratio)` draws `round(n * ratio)` values from the first law and the rest from the second, then shuffles them. Halves are rounded away from zero.
  - `generate_spatial_gaussian_rhos(graph, parts, params)` cuts the unit square into `parts` equal cells, so `parts` must be a perfect square. It then draws each vertex's load from the law of the cell the vertex lies in. `params` holds a `(mu, sigma)` pair for each cell, so it has `2 * parts` values. Every vertex needs a position.
- **`diskchannels.performance`**: the throughput model.
  - `connected_components_partition(graph, color_class)` splits a channel into the connected components of the subgraph it induces.
  - `evaluate_performance_arbitrary_saturated(graph, components, iterations, steps, lam)` runs an insert / delete / drag Markov chain over independent sets. For each vertex it counts how many runs end with that vertex in the set.
  - `model_for_one_color(graph, subgraph)` hands out channel time in rounds until the loads are served or the time runs out. It leaves `graph.rhos` untouched.
  - `performance_model(graph, allocation)` applies this to every channel of an allocation. Vertices that appear in no channel get `0`.
  - The chain uses `LAMBDA = 10.0`, `ITERATIONS = 1000` runs per round and `int(5 * 2 ** sqrt(n))` steps per run. Expect it to take a while on graphs of a few dozen vertices.
- **`diskchannels.utils`**: small helpers.
  - `get_random`, `get_random_int` and `get_random_gaussian` draw random values.
  - `find_class(classes, v)` returns the first class containing `v`, or `[]`.
  - `tokenize(line, delimiter)` splits a line on a non-empty delimiter.

Every random function takes an optional `rng`, which is a `random.Random`. Pass a seeded instance to get results you can reproduce. When `rng` is omitted, the functions share one module-level generator.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install .[test]
```

## Library use

```python
import random

from diskchannels.generator import generate_unit_disk_graph
from diskchannels.rhos import generate_uniform_rhos
from diskchannels.performance import performance_model

rng = random.Random(42)
n = 20
rhos = generate_uniform_rhos(n, 0.1, 0.6, rng=rng)
graph = generate_unit_disk_graph(n, 0.144, rhos=rhos, rng=rng)

# Every access point on one channel.
allocation = [list(range(n))]
performance = performance_model(graph, allocation, rng=rng)

for vertex, (rho, served) in enumerate(zip(rhos, performance)):
    print(vertex, round(rho, 3), round(served, 3))
```

An allocation is a list of channels. Each channel is a list of vertex indices. The result has one value per vertex of the graph.

## Command line

```
diskchannels
```

This command runs an example experiment:

1. It builds a unit disk graph with 50 vertices and radius 0.144, which gives an edge density of about 0.2.
2. It draws uniform loads in [0.1, 0.6].
3. It puts every vertex on a single channel.
4. It evaluates the throughput of each vertex.

Options:

- `--size N`: number of vertices (default 50).
- `--radius R`: disk radius (default 0.144).
- `--output-dir DIR`: where the result files go. The default is `results` in the current directory. The directory is created if needed.
- `--seed S`: random seed, for runs you can reproduce.

Files written:

- `exemple_graph.txt`: one `u v` line per edge.
- `exemple_rhos.txt`: `vertex rho` lines.
- `exemple_allocation.txt`: `vertex 0` lines, because every vertex is on channel 0.
- `exemple_model_performances.txt`: `vertex performance` lines.

## What it does not do

The package evaluates allocations that you supply. It does not search for good channel allocations, check that an allocation is valid, or read allocations from files.

## Tests

```
pytest
```