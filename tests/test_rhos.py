import random

import pytest

from diskchannels.graph import Graph
from diskchannels.rhos import (
    generate_double_gaussian_rhos,
    generate_gaussian_rhos,
    generate_spatial_gaussian_rhos,
    generate_uniform_rhos,
)


def test_uniform_within_bounds():
    rhos = generate_uniform_rhos(200, 0.1, 0.6, random.Random(1))
    assert len(rhos) == 200
    assert all(0.1 <= r <= 0.6 for r in rhos)


def test_uniform_reproducible():
    first = generate_uniform_rhos(10, 0.2, 0.4, random.Random(5))
    second = generate_uniform_rhos(10, 0.2, 0.4, random.Random(5))
    assert first == second
    assert len(first) == 10
    assert len(set(first)) == 10
    assert all(0.2 <= r <= 0.4 for r in first)


@pytest.mark.parametrize("inf, sup", [(0.6, 0.1), (1.5, 2.0), (-2.0, -1.0)])
def test_uniform_bad_bounds(inf, sup):
    with pytest.raises(ValueError):
        generate_uniform_rhos(3, inf, sup, random.Random(0))


def test_gaussian_in_unit_interval():
    rhos = generate_gaussian_rhos(300, 0.5, 0.4, random.Random(2))
    assert len(rhos) == 300
    assert all(0.0 <= r <= 1.0 for r in rhos)


def test_double_gaussian_split_and_length():
    rhos = generate_double_gaussian_rhos(10, 0.2, 0.001, 0.8, 0.001, 0.25, random.Random(3))
    assert len(rhos) == 10
    low = [r for r in rhos if r < 0.5]
    assert len(low) == 3
    assert all(abs(r - 0.2) < 0.01 for r in low)
    assert all(abs(r - 0.8) < 0.01 for r in rhos if r >= 0.5)


def test_double_gaussian_all_first_law():
    rhos = generate_double_gaussian_rhos(6, 0.3, 0.001, 0.9, 0.001, 1.0, random.Random(4))
    assert all(abs(r - 0.3) < 0.01 for r in rhos)


def _graph_with_positions(positions):
    g = Graph(len(positions))
    for v, (x, y) in enumerate(positions):
        g.positions[v] = (x, y, 0.0)
    return g


def test_spatial_uses_cell_parameters():
    g = _graph_with_positions([(0.1, 0.1), (0.9, 0.1), (0.1, 0.9), (0.9, 0.9)])
    means = [0.1, 0.3, 0.5, 0.7]
    params = [value for mu in means for value in (mu, 0.0001)]
    rhos = generate_spatial_gaussian_rhos(g, 4, params, random.Random(6))
    assert len(rhos) == 4
    for rho, mu in zip(rhos, means):
        assert abs(rho - mu) < 0.01


def test_spatial_single_cell():
    g = _graph_with_positions([(0.2, 0.7), (1.0, 1.0)])
    rhos = generate_spatial_gaussian_rhos(g, 1, [0.4, 0.0], random.Random(7))
    assert rhos == [0.4, 0.4]


def test_spatial_parts_must_be_square():
    g = _graph_with_positions([(0.5, 0.5)])
    with pytest.raises(ValueError):
        generate_spatial_gaussian_rhos(g, 3, [0.5, 0.1] * 3, random.Random(0))


def test_spatial_params_length():
    g = _graph_with_positions([(0.5, 0.5)])
    with pytest.raises(ValueError):
        generate_spatial_gaussian_rhos(g, 4, [0.5, 0.1], random.Random(0))


def test_spatial_requires_positions():
    with pytest.raises(ValueError):
        generate_spatial_gaussian_rhos(Graph(2), 1, [0.5, 0.1], random.Random(0))