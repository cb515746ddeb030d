"""
Graph k-means (experimental).

Clusters vertices around k centroid vertices using shortest-path (hop)
distance: assign every vertex to its nearest centroid, move each centroid to
the medoid of its cluster, repeat until the assignment is stable.
"""

import logging
from typing import Dict, List, Optional, Sequence

import networkx as nx
import numpy as np

from graphcommunities.algorithms.kclique import clique_overlap_graph, find_triangles
from graphcommunities.constants import DEFAULT_KMEANS_MAX_ITERATIONS
from graphcommunities.exceptions import InvalidGraphError, InvalidParameterError
from graphcommunities.graph import check_dense_vertices

logger = logging.getLogger(__name__)


def _distance_matrix(G: nx.Graph, n: int) -> np.ndarray:
    """Hop distances between all vertex pairs; unreachable pairs are inf."""
    dist = np.full((n + 1, n + 1), np.inf)
    for source, lengths in nx.all_pairs_shortest_path_length(G):
        for target, d in lengths.items():
            dist[source, target] = d
    return dist


def graph_kmeans(
    G: nx.Graph,
    k: int,
    max_iterations: int = DEFAULT_KMEANS_MAX_ITERATIONS,
    centroids: Optional[Sequence[int]] = None,
    rng: Optional[np.random.Generator] = None,
) -> Dict[int, int]:
    """
    Partitions G into k clusters around medoid vertices.

    Args:
        G (nx.Graph): Connected graph on vertices 1..n. Edge direction is
            ignored when measuring hop distance.
        k (int): Number of clusters; must be smaller than n.
        max_iterations (int): Cap on assign/update rounds.
        centroids (Sequence[int]): Initial centroid vertices. Drawn at random
            from `rng` when omitted.
        rng (np.random.Generator): Used only to draw missing centroids.

    Returns:
        Dict[int, int]: Vertex -> centroid vertex of its cluster.

    Raises:
        InvalidParameterError: k outside 1..n-1 or bad centroids.
        InvalidGraphError: G is not connected.
    """
    logger.info(f"--- Graph k-means (k={k}) ---")

    n = check_dense_vertices(G)
    if k < 1 or k >= n:
        raise InvalidParameterError(f"k must satisfy 1 <= k < {n} (vertex count), got {k}")
    undirected = G.to_undirected(as_view=True) if G.is_directed() else G
    if not nx.is_connected(undirected):
        raise InvalidGraphError(
            f"Graph k-means needs a connected graph; found "
            f"{nx.number_connected_components(undirected)} components"
        )

    if centroids is None:
        if rng is None:
            rng = np.random.default_rng()
        current: List[int] = [int(c) for c in rng.permutation(n)[:k] + 1]
    else:
        current = [int(c) for c in centroids]
        if len(current) != k or len(set(current)) != k:
            raise InvalidParameterError(f"Expected {k} distinct centroids, got {current}")

    dist = _distance_matrix(undirected, n)
    vertices = np.arange(1, n + 1)
    assignments: Dict[int, int] = {}

    for iteration in range(1, max_iterations + 1):
        nearest = np.argmin(dist[np.ix_(vertices, current)], axis=1)
        new_assignments = {int(v): current[i] for v, i in zip(vertices, nearest)}

        if new_assignments == assignments:
            logger.debug(f"Assignments stable after {iteration} rounds")
            break
        assignments = new_assignments

        for i, centroid in enumerate(current):
            members = [v for v, c in assignments.items() if c == centroid]
            if not members:
                continue
            total = dist[np.ix_(members, members)].sum(axis=1)
            current[i] = members[int(np.argmin(total))]

    logger.info(f"Clusters found: {len(set(assignments.values()))}")
    return assignments


def clique_seeded_kmeans(
    G: nx.Graph,
    max_iterations: int = DEFAULT_KMEANS_MAX_ITERATIONS,
    rng: Optional[np.random.Generator] = None,
) -> Dict[int, int]:
    """
    Graph k-means seeded from triangle structure.

    k is the number of connected components of the clique-overlap graph and
    each seed is a random vertex of the first triangle in one component.
    """
    if rng is None:
        rng = np.random.default_rng()

    triangles = find_triangles(G)
    T = clique_overlap_graph(triangles)
    components = sorted(nx.connected_components(T), key=min)

    centroids: List[int] = []
    for component in components:
        for v in rng.permutation(triangles[min(component)]):
            if int(v) not in centroids:
                centroids.append(int(v))
                break

    return graph_kmeans(G, len(centroids), max_iterations=max_iterations, centroids=centroids)
