import math

import numpy as np
import pytest

from prm_roadmap.domain.entities.geometry import Point
from prm_roadmap.domain.roadmap.neighbors import (
    count_edges,
    directed_connectivity,
    distance_matrix,
    intersection_connectivity,
    nearest_neighbors,
    neighbor_relation,
    union_connectivity,
)

SQUARE = [Point(0, 0), Point(10, 0), Point(0, 10), Point(10, 10)]

# 0 picks 1, 1 picks 2, 2 and 3 pick each other
LINE = [Point(0, 0), Point(10, 0), Point(11, 0), Point(12, 0)]


def test_distance_matrix_is_symmetric_with_zero_diagonal():
    rng = np.random.default_rng(3)
    nodes = [Point(float(x), float(y)) for x, y in rng.uniform(0, 100, size=(25, 2))]
    d = distance_matrix(nodes)
    assert d.shape == (25, 25)
    assert np.array_equal(d, d.T)
    assert np.all(np.diag(d) == 0)


def test_distance_matrix_values_on_square():
    d = distance_matrix(SQUARE)
    assert d[0, 1] == 10.0 and d[0, 2] == 10.0
    assert d[0, 3] == pytest.approx(10 * math.sqrt(2))
    assert d[1, 2] == pytest.approx(10 * math.sqrt(2))


def test_distance_matrix_empty_and_single():
    assert distance_matrix([]).shape == (0, 0)
    assert np.array_equal(distance_matrix([Point(1, 1)]), np.zeros((1, 1)))


def test_nearest_neighbors_drops_largest_first():
    row = np.array([0.0, 3.0, 1.0, 3.0, 2.0])
    assert nearest_neighbors(row, 2) == (2, 4)


def test_nearest_neighbors_ties_remove_first_occurrence():
    row = np.array([0.0, 5.0, 5.0, 1.0])
    assert nearest_neighbors(row, 2) == (2, 3)


def test_nearest_neighbors_does_not_mutate_row():
    row = np.array([0.0, 3.0, 1.0, 2.0])
    nearest_neighbors(row, 1)
    assert row.tolist() == [0.0, 3.0, 1.0, 2.0]


def test_nearest_neighbors_no_pruning_when_k_covers_row():
    row = np.array([4.0, 0.0, 2.0])
    assert nearest_neighbors(row, 2) == (0, 2)
    assert nearest_neighbors(row, 10) == (0, 2)


def test_zero_distance_duplicates_are_never_selected():
    row = np.array([0.0, 0.0, 4.0, 2.0])
    assert nearest_neighbors(row, 2) == (2, 3)


def test_neighbor_relation_is_directed():
    rel = neighbor_relation(distance_matrix(LINE), 1)
    assert rel == {0: (1,), 1: (2,), 2: (3,), 3: (2,)}


def test_directed_connectivity_keeps_asymmetry():
    rel = neighbor_relation(distance_matrix(LINE), 1)
    adj = directed_connectivity(rel, 4)
    assert adj[0, 1] == 1 and adj[1, 0] == 0
    assert adj[1, 2] == 1 and adj[2, 1] == 0
    assert adj[2, 3] == 1 and adj[3, 2] == 1
    assert not np.array_equal(adj, adj.T)


def test_union_and_intersection_are_symmetric():
    rel = neighbor_relation(distance_matrix(LINE), 1)
    union = union_connectivity(rel, 4)
    inter = intersection_connectivity(rel, 4)
    assert np.array_equal(union, union.T) and np.array_equal(inter, inter.T)
    assert count_edges(union) == 3
    assert count_edges(inter) == 1
    assert inter[2, 3] == 1


def test_each_row_has_at_most_k_ones():
    rng = np.random.default_rng(11)
    nodes = [Point(float(x), float(y)) for x, y in rng.uniform(0, 50, size=(40, 2))]
    for k in (1, 3, 7, 39, 60):
        adj = directed_connectivity(neighbor_relation(distance_matrix(nodes), k), 40)
        assert set(np.unique(adj)) <= {0.0, 1.0}
        assert np.all(adj.sum(axis=1) == min(k, 39))


def test_square_k2_keeps_the_two_sides():
    rel = neighbor_relation(distance_matrix(SQUARE), 2)
    assert rel == {0: (1, 2), 1: (0, 3), 2: (0, 3), 3: (1, 2)}
