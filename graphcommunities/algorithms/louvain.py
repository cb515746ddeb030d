import logging
from typing import Dict, List, Tuple

import networkx as nx

from graphcommunities.algorithms.modularity import modularity
from graphcommunities.constants import LOUVAIN_THRESHOLD
from graphcommunities.graph import check_dense_vertices

logger = logging.getLogger(__name__)


def _local_phase(G: nx.Graph, n: int) -> List[int]:
    """
    One sweep of greedy moves starting from singleton communities.

    Each candidate move is scored by recomputing the global modularity from
    scratch. A vertex takes the first neighbor community with the strictly
    largest gain and stays put if no move improves modularity.

    Returns:
        List[int]: Dense label array (index 0 unused).
    """
    labels = list(range(n + 1))

    for v in range(1, n + 1):
        best_community = labels[v]
        best_delta = 0.0
        base_q = modularity(G, labels)
        tried = {labels[v]}

        for u in sorted(G.neighbors(v)):
            candidate = labels[u]
            if candidate in tried:
                continue
            tried.add(candidate)

            labels[v] = candidate
            delta = modularity(G, labels) - base_q
            if delta > best_delta:
                best_delta = delta
                best_community = candidate

        labels[v] = best_community

    return labels


def _aggregate(G: nx.Graph, labels: List[int], n: int) -> Tuple[nx.Graph, List[int]]:
    """
    Collapses every community into a single vertex.

    Aggregate vertices are numbered 1..k in order of first appearance. Two of
    them are joined when any edge runs between their members; multiplicities
    are dropped.

    Returns:
        Tuple[nx.Graph, List[int]]: The aggregate graph and the round-local
        remap array (old vertex -> aggregate vertex, index 0 unused).
    """
    new_ids: Dict[int, int] = {}
    remap = [0] * (n + 1)
    for v in range(1, n + 1):
        remap[v] = new_ids.setdefault(labels[v], len(new_ids) + 1)

    H = nx.Graph()
    H.add_nodes_from(range(1, len(new_ids) + 1))
    for u, v in G.edges():
        a, b = remap[u], remap[v]
        if a != b:
            H.add_edge(a, b)

    return H, remap


def louvain(G: nx.Graph, threshold: float = LOUVAIN_THRESHOLD) -> Dict[int, int]:
    """
    Detects communities by alternating local moves and aggregation (Louvain).

    Each outer iteration runs exactly one local sweep on the working graph,
    then replaces the working graph by its community aggregate. Iteration stops
    once a pass gains no more than `threshold` modularity, or the aggregate has
    no edges left. The per-round remap arrays are composed to label the
    original vertices; the composed partition with the highest modularity on
    the original graph is returned.

    Args:
        G (nx.Graph): Graph on vertices 1..n. Directed graphs are symmetrized.
        threshold (float): Minimum modularity gain to keep iterating.

    Returns:
        Dict[int, int]: Vertex -> community id (dense, starting at 1).

    Raises:
        EmptyGraphError: If G has more than one vertex but no edges.
    """
    logger.info("--- Louvain Community Detection ---")

    n = check_dense_vertices(G)
    if G.is_directed():
        G = G.to_undirected()

    if n == 0:
        return {}
    if n == 1:
        return {1: 1}

    membership = list(range(n + 1))
    best_membership = list(membership)
    best_q = modularity(G, membership)

    working = G
    prev_q = float("-inf")
    current_q = best_q
    rounds = 0

    while current_q - prev_q > threshold:
        prev_q = current_q
        rounds += 1

        labels = _local_phase(working, working.number_of_nodes())
        current_q = modularity(working, labels)

        working, remap = _aggregate(working, labels, working.number_of_nodes())
        membership = [remap[c] for c in membership]

        q_original = modularity(G, membership)
        logger.debug(
            f"Round {rounds}: {working.number_of_nodes()} communities, "
            f"Q(working)={current_q:.4f}, Q(original)={q_original:.4f}"
        )
        if q_original > best_q:
            best_q = q_original
            best_membership = list(membership)

        if working.number_of_edges() == 0:
            break

    partition = {v: best_membership[v] for v in range(1, n + 1)}

    logger.info(f"Rounds: {rounds}")
    logger.info(f"Communities found: {len(set(partition.values()))}")
    logger.info(f"Modularity (Q): {best_q:.4f}")

    return partition
