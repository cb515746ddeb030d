import networkx as nx
import numpy as np
import pytest

from graphcommunities import (
    FastLPA,
    KClique,
    LabelPropagation,
    Louvain,
    PageRank,
    community_detection,
    compute,
)
from graphcommunities.exceptions import InvalidParameterError
from graphcommunities.generators import chained_cliques


@pytest.fixture
def triangle():
    return nx.Graph([(1, 2), (2, 3), (3, 1)])


@pytest.fixture
def cliques():
    return chained_cliques(2, 6)


# --- Dispatch ---


@pytest.mark.parametrize(
    "algorithm", [Louvain(), KClique(), LabelPropagation(seed=0), FastLPA()]
)
def test_triangle_single_community(triangle, algorithm):
    partition = compute(algorithm, triangle)

    assert set(partition) == {1, 2, 3}
    assert len(set(partition.values())) == 1


def test_pagerank_returns_scores(triangle):
    scores = compute(PageRank(damping=0.85), triangle)

    assert isinstance(scores, np.ndarray)
    assert np.allclose(scores, 1.0 / 3.0)


def test_unknown_selector(triangle):
    with pytest.raises(TypeError):
        compute("louvain", triangle)


def test_community_detection_rejects_pagerank(triangle):
    with pytest.raises(TypeError):
        community_detection(triangle, PageRank())


def test_bulk_mode_must_be_synchronous(triangle):
    with pytest.raises(InvalidParameterError):
        compute(FastLPA(synchronous=False), triangle)


def test_selectors_are_immutable():
    algo = LabelPropagation()
    with pytest.raises(AttributeError):
        algo.max_iterations = 5


# --- Reproducibility ---


@pytest.mark.parametrize(
    "algorithm",
    [Louvain(), KClique(), FastLPA(), LabelPropagation(synchronous=True, seed=5)],
)
def test_repeat_runs_match(cliques, algorithm):
    assert community_detection(cliques, algorithm) == community_detection(cliques, algorithm)


def test_rng_overrides_seed(cliques):
    algo = LabelPropagation(seed=1)
    first = compute(algo, cliques, rng=np.random.default_rng(9))
    second = compute(algo, cliques, rng=np.random.default_rng(9))

    assert first == second


def test_input_graph_is_not_mutated(cliques):
    before = (sorted(cliques.nodes()), sorted(cliques.edges()))
    for algorithm in (Louvain(), KClique(), LabelPropagation(seed=0), FastLPA(), PageRank()):
        compute(algorithm, cliques)

    assert (sorted(cliques.nodes()), sorted(cliques.edges())) == before
