import os

import matplotlib.pyplot as plt
import pytest

from graphcommunities.algorithms.kclique import kclique
from graphcommunities.algorithms.louvain import louvain
from graphcommunities.exceptions import IncompletePartitionError
from graphcommunities.generators import chained_cliques, karate_club
from graphcommunities.visualization import plot_community_graph, plot_community_sizes


@pytest.fixture
def viz_path(tmp_path):
    """Expected location of the HTML map inside a fresh directory."""
    return str(tmp_path / "temp_viz" / "map.html")


def test_html_generation(viz_path):
    """The interactive map is a standalone HTML page with the vis script."""
    G = karate_club()
    plot_community_graph(G, louvain(G), path=viz_path)

    assert os.path.exists(viz_path)

    with open(viz_path, "r", encoding="utf-8") as f:
        content = f.read().lower()
        assert "<html>" in content or "<!doctype html>" in content
        assert "<script" in content


def test_incomplete_partition_fails_fast(viz_path):
    """K-Clique leaves the pendant vertex unassigned; nothing is written."""
    G = chained_cliques(2, 4)
    G.add_edge(8, 9)
    partition = kclique(G)

    with pytest.raises(IncompletePartitionError):
        plot_community_graph(G, partition, path=viz_path)
    assert not os.path.exists(viz_path)


def test_size_histogram_saved(tmp_path):
    path = str(tmp_path / "plots" / "sizes.png")
    fig, ax = plot_community_sizes(louvain(karate_club()), path=path)

    assert os.path.exists(path)
    assert ax.get_yscale() == "log"
    plt.close(fig)


def test_size_histogram_on_given_axes():
    """Two 5-cliques give one bar of height 2 at size 5."""
    partition = {v: 1 if v <= 5 else 2 for v in range(1, 11)}
    fig, given = plt.subplots()

    returned_fig, ax = plot_community_sizes(partition, ax=given)

    assert ax is given
    assert returned_fig is fig
    assert sum(patch.get_height() for patch in ax.patches) == 2
    plt.close(fig)
