"""
Bulk synchronous label propagation over a sorted edge list.

The edge list is ordered by (source, target), so all out-edges of a vertex sit
in one contiguous run. Neighbor labels are tallied in a dense, reusable count
buffer indexed by label instead of a per-vertex dict; only the entries touched
by the current vertex are reset afterwards.

Ties go to the numerically largest label, which makes the result a pure
function of the edge list.
"""

import logging
from typing import Dict, List, Sequence, Union

import networkx as nx

from graphcommunities.constants import DEFAULT_MAX_ITERATIONS, DEFAULT_WEIGHT_ATTR
from graphcommunities.exceptions import InvalidGraphError, InvalidParameterError
from graphcommunities.graph import (
    check_dense_vertices,
    is_sorted_edge_list,
    sorted_edge_list,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _max_argmax_in_seen(
    seen_label_counts: List[Number], seen_labels: List[int], n_seen_labels: int
) -> int:
    """Largest label among those with the maximal count (or weight)."""
    maximal_count: Number = 0
    max_maximal_label = 0
    for i in range(n_seen_labels):
        label = seen_labels[i]
        label_count = seen_label_counts[label]
        if label_count > maximal_count:
            maximal_count = label_count
            max_maximal_label = label
        elif label_count == maximal_count and label > max_maximal_label:
            max_maximal_label = label
    return max_maximal_label


def _label_propagation_sweep(
    pres_labels: List[int],
    next_labels: List[int],
    seen_labels: List[int],
    seen_label_counts: List[Number],
    edge_list: Sequence[tuple],
    weighted: bool,
) -> bool:
    """
    One synchronous sweep over the whole edge list.

    Votes read `pres_labels` and land in `next_labels`, which is then copied
    back into `pres_labels`.

    Returns:
        bool: True if no label changed (stationary state).
    """
    readpos = 0
    n_edges = len(edge_list)

    while readpos < n_edges:
        node = edge_list[readpos][0]
        n_seen_labels = 0

        while readpos < n_edges and edge_list[readpos][0] == node:
            edge = edge_list[readpos]
            neighbor_label = pres_labels[edge[1]]
            if seen_label_counts[neighbor_label] == 0:
                seen_labels[n_seen_labels] = neighbor_label
                n_seen_labels += 1
            seen_label_counts[neighbor_label] += edge[2] if weighted else 1
            readpos += 1

        next_labels[node] = _max_argmax_in_seen(
            seen_label_counts, seen_labels, n_seen_labels
        )

        for i in range(n_seen_labels):
            seen_label_counts[seen_labels[i]] = 0

    stationary = pres_labels == next_labels
    pres_labels[:] = next_labels
    return stationary


def fast_label_propagation_edges(
    edge_list: Sequence[tuple],
    num_vertices: int,
    synchronous: bool = True,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Dict[int, int]:
    """
    Runs bulk label propagation on a pre-sorted edge list.

    Args:
        edge_list: (source, target) or (source, target, weight) tuples, sorted
            lexicographically by (source, target). An undirected graph must list
            each edge in both directions. Weights must be positive.
        num_vertices (int): n; vertex ids are 1..n.
        synchronous (bool): Must be True; only the synchronous mode exists.
        max_iterations (int): Maximum number of sweeps.

    Returns:
        Dict[int, int]: Vertex -> label for every vertex 1..n.

    Raises:
        InvalidParameterError: Asynchronous mode requested, a non-positive
            iteration cap, or an unsorted edge list.
        InvalidGraphError: An edge endpoint outside 1..n, or tuples of mixed
            (or unsupported) length.
    """
    if not synchronous:
        raise InvalidParameterError(
            "Bulk label propagation only supports synchronous updates."
        )
    if max_iterations < 1:
        raise InvalidParameterError(f"max_iterations must be >= 1, got {max_iterations}")
    if not is_sorted_edge_list(edge_list):
        raise InvalidParameterError("Edge list must be sorted by (source, target).")

    arity = len(edge_list[0]) if edge_list else 2
    if arity not in (2, 3):
        raise InvalidGraphError(f"Edges must be 2- or 3-tuples, got {tuple(edge_list[0])}")
    for edge in edge_list:
        if len(edge) != arity:
            raise InvalidGraphError(f"Edge {tuple(edge)} is not a {arity}-tuple like the first edge")
        if not (1 <= edge[0] <= num_vertices and 1 <= edge[1] <= num_vertices):
            raise InvalidGraphError(f"Edge {edge[:2]} has an endpoint outside 1..{num_vertices}")

    weighted = arity == 3
    logger.info(
        f"--- Bulk Label Propagation ({'weighted' if weighted else 'unweighted'}) ---"
    )

    pres_labels = list(range(num_vertices + 1))
    next_labels = list(pres_labels)
    seen_labels = [0] * (num_vertices + 1)
    seen_label_counts: List[Number] = [0.0 if weighted else 0] * (num_vertices + 1)

    stationary, iteration = not edge_list, 0
    while not stationary and iteration < max_iterations:
        stationary = _label_propagation_sweep(
            pres_labels,
            next_labels,
            seen_labels,
            seen_label_counts,
            edge_list,
            weighted,
        )
        iteration += 1

    if not stationary:
        logger.warning(f"Bulk label propagation stopped at the cap of {max_iterations} sweeps.")

    partition = {v: pres_labels[v] for v in range(1, num_vertices + 1)}
    logger.info(f"Sweeps: {iteration}, communities found: {len(set(partition.values()))}")
    return partition


def fast_label_propagation(
    G: nx.Graph,
    synchronous: bool = True,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    weighted: bool = False,
    weight: str = DEFAULT_WEIGHT_ATTR,
) -> Dict[int, int]:
    """
    Bulk label propagation on a networkx graph.

    Derives the sorted edge list once (both directions for undirected graphs,
    with weights when `weighted`) and hands it to
    `fast_label_propagation_edges`.
    """
    n = check_dense_vertices(G)
    edge_list = sorted_edge_list(G, weighted=weighted, weight=weight)
    return fast_label_propagation_edges(
        edge_list, n, synchronous=synchronous, max_iterations=max_iterations
    )
