import networkx as nx
import numpy as np
import pytest

from graphcommunities.algorithms.pagerank import pagerank
from graphcommunities.exceptions import EmptyGraphError, InvalidParameterError
from graphcommunities.generators import chained_cliques, karate_club


@pytest.fixture
def weighted_digraph():
    """1 links to 2 (weight 3) and 3 (weight 1); both link back to 1."""
    G = nx.DiGraph()
    G.add_weighted_edges_from([(1, 2, 3.0), (1, 3, 1.0), (2, 1, 1.0), (3, 1, 1.0)])
    return G


# --- Scenarios ---


def test_triangle_is_uniform():
    G = nx.Graph([(1, 2), (2, 3), (3, 1)])
    scores = pagerank(G, damping=0.85)

    assert scores.shape == (3,)
    assert np.allclose(scores, 1.0 / 3.0)


def test_directed_two_cycle_is_balanced():
    G = nx.DiGraph([(1, 2), (2, 1)])
    scores = pagerank(G)

    assert scores[0] == pytest.approx(scores[1])


def test_weights_shift_rank(weighted_digraph):
    weighted = pagerank(weighted_digraph)
    unweighted = pagerank(weighted_digraph, weight=None)

    assert weighted[1] > weighted[2]
    assert unweighted[1] == pytest.approx(unweighted[2])


# --- Properties ---


@pytest.mark.parametrize(
    "G",
    [
        karate_club(),
        chained_cliques(3, 4),
        nx.DiGraph([(1, 2), (2, 3), (3, 1), (3, 4)]),  # vertex 4 is dangling
    ],
)
def test_scores_form_a_distribution(G):
    scores = pagerank(G)

    assert len(scores) == G.number_of_nodes()
    assert scores.sum() == pytest.approx(1.0)
    assert (scores >= 0).all()


def test_agrees_with_networkx():
    """Without dangling vertices the normalized fixed point matches nx.pagerank."""
    G = karate_club()
    scores = pagerank(G, weight=None)
    reference = nx.pagerank(G, alpha=0.85, weight=None)

    expected = np.array([reference[v] for v in range(1, G.number_of_nodes() + 1)])
    assert np.allclose(scores, expected, atol=1e-4)


def test_hub_ranks_highest():
    G = nx.star_graph(5)
    G = nx.relabel_nodes(G, {v: v + 1 for v in G.nodes()})

    assert int(np.argmax(pagerank(G))) + 1 == 1


def test_deterministic():
    G = karate_club()
    assert np.array_equal(pagerank(G), pagerank(G))


# --- Errors ---


@pytest.mark.parametrize("damping", [0.0, 1.0, -0.2, 1.5])
def test_invalid_damping(damping):
    with pytest.raises(InvalidParameterError):
        pagerank(nx.Graph([(1, 2)]), damping=damping)


def test_invalid_tolerance():
    with pytest.raises(InvalidParameterError):
        pagerank(nx.Graph([(1, 2)]), tolerance=0.0)


def test_empty_graph():
    with pytest.raises(EmptyGraphError):
        pagerank(nx.Graph())
