import logging
import os
from typing import Mapping, Optional, Tuple

import matplotlib.pyplot as plt
import networkx as nx
from pyvis.network import Network

from graphcommunities.analysis import check_complete_partition, community_sizes
from graphcommunities.constants import MAX_RENDERED_NODES

logger = logging.getLogger(__name__)


def plot_community_graph(
    G: nx.Graph,
    partition: Mapping[int, int],
    path: str = "results/community_map.html",
    max_nodes: int = MAX_RENDERED_NODES,
) -> str:
    """
    Writes an interactive HTML map of G colored by community.

    The partition must cover every vertex; this is checked before anything is
    rendered. Large graphs are cut down to the `max_nodes` highest-degree
    vertices. Nodes are sized by degree and grouped by community id.

    Args:
        G (nx.Graph): The graph to draw.
        partition (Mapping[int, int]): Vertex -> community id for all vertices.
        path (str): Where the HTML file is saved.
        max_nodes (int): Upper bound on rendered vertices.

    Returns:
        str: The path written.

    Raises:
        IncompletePartitionError: If some vertex has no community.
    """
    logger.info("--- Rendering Community Map ---")
    check_complete_partition(G, partition)

    output_dir = os.path.dirname(path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    degrees = dict(G.degree())
    top_nodes = sorted(degrees, key=degrees.get, reverse=True)[:max_nodes]
    G_sub = G.subgraph(top_nodes)

    logger.info(f"  Rendering {len(top_nodes)} of {G.number_of_nodes()} vertices...")

    net = Network(
        height="100vh",
        width="100%",
        bgcolor="#222222",
        font_color="white",
        directed=G.is_directed(),
        cdn_resources="remote",
    )

    for node in G_sub.nodes():
        comm_id = int(partition[node])
        degree = degrees[node]
        net.add_node(
            int(node),
            label=str(node),
            title=f"Vertex: {node}\nDegree: {degree}\nCommunity: {comm_id}",
            value=degree,
            group=comm_id,
        )

    for u, v in G_sub.edges():
        net.add_edge(int(u), int(v), color="#555555")

    net.force_atlas_2based()
    net.save_graph(path)
    logger.info(f"  Interactive map saved to: {path}")
    return path


def plot_community_sizes(
    partition: Mapping[int, int],
    ax: Optional[plt.Axes] = None,
    path: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Draws the community size distribution as a histogram with log-scaled counts.

    Args:
        partition (Mapping[int, int]): Vertex -> community.
        ax (plt.Axes): Axes to draw on. A new figure is created when omitted.
        path (str): If given, the figure is also saved there (e.g. a PNG).

    Returns:
        Tuple[plt.Figure, plt.Axes]: The figure and the axes holding the plot.
    """
    sizes = community_sizes(partition)
    logger.info(f"Communities: {len(sizes)}, largest sizes: {sizes[:5]}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    ax.hist(sizes, bins=min(50, max(len(sizes), 1)), color="teal", edgecolor="black")
    ax.set_title(f"Community Sizes ({len(sizes)} communities)")
    ax.set_xlabel("Vertices per community")
    ax.set_ylabel("Communities")
    ax.set_yscale("log")

    if path is not None:
        output_dir = os.path.dirname(path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        fig.savefig(path)
        logger.info(f"  Size histogram saved to: {path}")
    return fig, ax
