import logging
from typing import Optional

import networkx as nx
import numpy as np

from graphcommunities.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def chained_cliques(r: int, k: int) -> nx.Graph:
    """
    Builds r cliques of k vertices each, chained into a path.

    Clique i occupies vertices (i-1)*k + 1 .. i*k; the last vertex of clique i
    is joined to the first vertex of clique i + 1.

    Args:
        r (int): Number of cliques, at least 2.
        k (int): Vertices per clique, at least 3.
    """
    if r < 2:
        raise InvalidParameterError(f"The number of cliques r must be 2 or greater, got {r}")
    if k < 3:
        raise InvalidParameterError(f"The clique size k must be 3 or greater, got {k}")

    G = nx.Graph()
    G.add_nodes_from(range(1, r * k + 1))
    for i in range(r):
        start = i * k + 1
        members = range(start, start + k)
        G.add_edges_from((u, v) for u in members for v in members if u < v)

    G.add_edges_from((i * k, i * k + 1) for i in range(1, r))
    return G


def planted_partition(
    n_communities: int = 4,
    nodes_per_community: int = 10,
    p_intra: float = 0.5,
    p_inter: float = 0.01,
    seed: Optional[int] = None,
) -> nx.Graph:
    """
    Samples a planted-partition graph on vertices 1..n.

    Vertices in the same block are joined with probability p_intra, vertices
    in different blocks with probability p_inter.
    """
    if n_communities < 1 or nodes_per_community < 1:
        raise InvalidParameterError("Community count and size must be positive.")
    for name, p in (("p_intra", p_intra), ("p_inter", p_inter)):
        if not 0.0 <= p <= 1.0:
            raise InvalidParameterError(f"{name} must lie in [0, 1], got {p}")

    rng = np.random.default_rng(seed)
    n = n_communities * nodes_per_community
    block = np.arange(n) // nodes_per_community

    # Upper-triangular coin flips, vectorized over all vertex pairs
    rows, cols = np.triu_indices(n, k=1)
    probs = np.where(block[rows] == block[cols], p_intra, p_inter)
    keep = rng.random(len(rows)) < probs

    G = nx.Graph()
    G.add_nodes_from(range(1, n + 1))
    G.add_edges_from(zip((rows[keep] + 1).tolist(), (cols[keep] + 1).tolist()))

    logger.debug(f"Planted partition: {n} vertices, {G.number_of_edges()} edges")
    return G


def karate_club() -> nx.Graph:
    """Zachary's karate club with vertices relabeled to 1..34."""
    G = nx.karate_club_graph()
    return nx.relabel_nodes(G, {v: v + 1 for v in G.nodes()})
