import pytest

from graphcommunities.exceptions import InvalidParameterError
from graphcommunities.generators import chained_cliques, karate_club, planted_partition


def test_chained_cliques_shape():
    G = chained_cliques(3, 4)

    assert sorted(G.nodes()) == list(range(1, 13))
    # 3 cliques of 6 edges plus 2 bridges
    assert G.number_of_edges() == 20
    assert G.has_edge(4, 5)
    assert G.has_edge(8, 9)
    assert not G.has_edge(1, 5)


@pytest.mark.parametrize("r, k", [(1, 4), (3, 2)])
def test_chained_cliques_bounds(r, k):
    with pytest.raises(InvalidParameterError):
        chained_cliques(r, k)


def test_planted_partition_reproducible():
    first = planted_partition(3, 5, p_intra=0.8, p_inter=0.1, seed=4)
    second = planted_partition(3, 5, p_intra=0.8, p_inter=0.1, seed=4)

    assert sorted(first.nodes()) == list(range(1, 16))
    assert sorted(first.edges()) == sorted(second.edges())


def test_planted_partition_extremes():
    G = planted_partition(2, 4, p_intra=1.0, p_inter=0.0, seed=0)

    assert G.number_of_edges() == 12
    assert not G.has_edge(4, 5)


def test_planted_partition_bad_probability():
    with pytest.raises(InvalidParameterError):
        planted_partition(2, 4, p_intra=1.5)


def test_karate_club_is_one_based():
    G = karate_club()

    assert sorted(G.nodes()) == list(range(1, 35))
    assert G.number_of_edges() == 78
