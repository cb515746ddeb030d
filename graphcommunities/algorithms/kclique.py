import logging
from collections import defaultdict
from typing import Dict, FrozenSet, List, Tuple

import networkx as nx

from graphcommunities.graph import check_dense_vertices

logger = logging.getLogger(__name__)

Triangle = Tuple[int, int, int]


def find_triangles(G: nx.Graph) -> List[Triangle]:
    """
    Enumerates every triangle of G exactly once.

    For each vertex v and neighbor w > v, every common neighbor u > w closes
    the triangle (v, w, u). Runs in O(sum of squared degrees).

    Returns:
        List[Triangle]: Sorted vertex triples in discovery order.
    """
    triangles: List[Triangle] = []
    adjacency = {v: set(G.neighbors(v)) for v in G.nodes()}

    for v in sorted(adjacency):
        neighbors_v = adjacency[v]
        for w in sorted(x for x in neighbors_v if x > v):
            for u in sorted(neighbors_v & adjacency[w]):
                if u > w:
                    triangles.append((v, w, u))

    return triangles


def clique_overlap_graph(triangles: List[Triangle]) -> nx.Graph:
    """
    Builds the graph over triangle indices where two triangles are adjacent
    iff they share exactly two vertices.

    Two distinct triangles share exactly two vertices precisely when they share
    an edge, so triangles are bucketed by their three edges and only pairs
    within a bucket are linked.
    """
    T = nx.Graph()
    T.add_nodes_from(range(len(triangles)))

    by_edge: defaultdict = defaultdict(list)
    for idx, (a, b, c) in enumerate(triangles):
        for edge in ((a, b), (a, c), (b, c)):
            by_edge[edge].append(idx)

    for members in by_edge.values():
        for i in range(len(members)):
            for j in range(i + 1, len(members)):
                T.add_edge(members[i], members[j])

    return T


def clique_communities(G: nx.Graph) -> List[FrozenSet[int]]:
    """
    Clique-percolation communities built from triangles (k = 3 only).

    Each connected component of the clique-overlap graph becomes one
    community: the union of its triangles' vertices. Communities may overlap
    and are ordered by their first-discovered triangle.
    """
    triangles = find_triangles(G)
    T = clique_overlap_graph(triangles)

    components = sorted(nx.connected_components(T), key=min)
    communities = [
        frozenset(v for idx in component for v in triangles[idx])
        for component in components
    ]

    logger.debug(f"Triangles: {len(triangles)}, overlap edges: {T.number_of_edges()}")
    return communities


def kclique(G: nx.Graph) -> Dict[int, int]:
    """
    Detects communities by 3-clique percolation.

    Args:
        G (nx.Graph): Undirected graph on vertices 1..n.

    Returns:
        Dict[int, int]: Vertex -> community id (1..k). A vertex lying in
        several communities keeps the lowest id. Vertices that belong to no
        triangle are absent from the result.
    """
    logger.info("--- K-Clique Community Detection ---")

    n = check_dense_vertices(G)
    if G.is_directed():
        G = G.to_undirected()

    communities = clique_communities(G)

    partition: Dict[int, int] = {}
    for community_id, members in enumerate(communities, start=1):
        for v in members:
            partition.setdefault(v, community_id)

    unassigned = n - len(partition)
    logger.info(f"Communities found: {len(communities)}")
    if unassigned:
        logger.warning(f"{unassigned} vertices belong to no triangle and are unassigned.")

    return partition
