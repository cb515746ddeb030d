import math

import networkx as nx
import pytest
from community import community_louvain

from graphcommunities.algorithms.modularity import modularity
from graphcommunities.exceptions import EmptyGraphError, IncompletePartitionError
from graphcommunities.generators import chained_cliques, planted_partition


@pytest.fixture
def triangle():
    """Three mutually adjacent vertices."""
    return nx.Graph([(1, 2), (2, 3), (3, 1)])


@pytest.fixture
def cliques():
    """Two 5-cliques joined by a single bridge (5, 6)."""
    return chained_cliques(2, 5)


# --- Known Values ---


def test_triangle_single_community_is_zero(triangle):
    assert modularity(triangle, {1: 1, 2: 1, 3: 1}) == pytest.approx(0.0)


def test_triangle_singletons(triangle):
    """Every vertex alone: Q = -sum (k_i / 2m)^2 = -3 * (2/6)^2."""
    assert modularity(triangle, {1: 1, 2: 2, 3: 3}) == pytest.approx(-1.0 / 3.0)


def test_trivial_partitions_are_finite(cliques):
    together = {v: 0 for v in cliques.nodes()}
    apart = {v: v for v in cliques.nodes()}

    assert math.isfinite(modularity(cliques, together))
    assert math.isfinite(modularity(cliques, apart))


def test_accepts_dense_label_array(cliques):
    labels = [0] + [1] * 5 + [2] * 5
    as_dict = {v: labels[v] for v in range(1, 11)}

    assert modularity(cliques, labels) == pytest.approx(modularity(cliques, as_dict))


# --- Agreement With Reference Implementations ---


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_matches_python_louvain(seed):
    """Cross-check on random unweighted graphs and partitions."""
    G = planted_partition(3, 8, p_intra=0.6, p_inter=0.05, seed=seed)
    partition = {v: (v * 7 + seed) % 4 for v in G.nodes()}

    expected = community_louvain.modularity(partition, G)
    assert modularity(G, partition) == pytest.approx(expected)


def test_matches_networkx(cliques):
    communities = [set(range(1, 6)), set(range(6, 11))]
    partition = {v: i for i, c in enumerate(communities) for v in c}

    expected = nx.community.modularity(cliques, communities)
    assert modularity(cliques, partition) == pytest.approx(expected)


# --- Errors ---


def test_zero_edge_graph_raises():
    G = nx.Graph()
    G.add_nodes_from([1, 2, 3])

    with pytest.raises(EmptyGraphError):
        modularity(G, {1: 1, 2: 2, 3: 3})


def test_missing_vertex_raises(triangle):
    with pytest.raises(IncompletePartitionError) as excinfo:
        modularity(triangle, {1: 1, 2: 1})

    assert excinfo.value.vertices == [3]
    assert isinstance(excinfo.value, KeyError)


def test_short_label_array_raises(triangle):
    """Index 0 is unused, so [0, 1, 1] has no label for vertex 3."""
    with pytest.raises(IncompletePartitionError) as excinfo:
        modularity(triangle, [0, 1, 1])

    assert excinfo.value.vertices == [3]
