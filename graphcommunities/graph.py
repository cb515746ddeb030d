import logging
from typing import List, Sequence, Tuple, Union

import networkx as nx

from graphcommunities.constants import DEFAULT_WEIGHT_ATTR
from graphcommunities.exceptions import InvalidGraphError

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]
WeightedEdge = Tuple[int, int, float]
EdgeList = Union[List[Edge], List[WeightedEdge]]


def check_dense_vertices(G: nx.Graph) -> int:
    """
    Validates that the vertices of G are exactly the integers 1..n.

    Every engine indexes dense arrays by vertex id, so gaps, zero, negative or
    non-integer ids are rejected up front.

    Returns:
        int: The vertex count n.
    """
    n = G.number_of_nodes()
    nodes = set(G.nodes())
    if nodes != set(range(1, n + 1)):
        bad = sorted(
            (v for v in nodes if not isinstance(v, int) or v < 1 or v > n),
            key=repr,
        )
        raise InvalidGraphError(
            f"Vertices must be the integers 1..{n}; offending ids: {bad[:10]}"
        )
    return n


def sorted_edge_list(
    G: nx.Graph, weighted: bool = False, weight: str = DEFAULT_WEIGHT_ATTR
) -> EdgeList:
    """
    Derives the lexicographically sorted (source, target[, weight]) list of G.

    Undirected edges are emitted in both directions so that every vertex sees
    all of its neighbors as out-edges. Missing weights default to 1.0.
    """
    directed = G.is_directed()
    edges: list = []
    if weighted:
        for u, v, w in G.edges(data=weight, default=1.0):
            edges.append((u, v, float(w)))
            if not directed:
                edges.append((v, u, float(w)))
    else:
        for u, v in G.edges():
            edges.append((u, v))
            if not directed:
                edges.append((v, u))
    edges.sort()
    logger.debug(f"Derived sorted edge list with {len(edges)} entries")
    return edges


def is_sorted_edge_list(edge_list: Sequence[tuple]) -> bool:
    """True if edge_list is ordered by (source, target)."""
    return all(
        edge_list[i][:2] <= edge_list[i + 1][:2] for i in range(len(edge_list) - 1)
    )
