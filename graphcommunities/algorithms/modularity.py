import logging
from collections import defaultdict
from typing import Mapping, Sequence, Union

import networkx as nx
import numpy as np

from graphcommunities.exceptions import EmptyGraphError, IncompletePartitionError

logger = logging.getLogger(__name__)

# Either a {vertex: community} dict or a dense label array indexed by vertex.
PartitionLike = Union[Mapping[int, int], Sequence[int], np.ndarray]


def modularity(G: nx.Graph, partition: PartitionLike) -> float:
    """
    Computes the Newman-Girvan modularity of a partition.

    Q = (1/2m) * sum_ij [A_ij - k_i * k_j / 2m] * delta(c_i, c_j)

    Evaluated per community as sum_c [L_c / m - (D_c / 2m)^2], where L_c is the
    number of edges inside community c and D_c the total degree of its members.
    Edges are counted without weights.

    Args:
        G (nx.Graph): Undirected graph without self-loops.
        partition: Community of every vertex, as a dict or as a dense label
            array indexed by vertex.

    Returns:
        float: The modularity value.

    Raises:
        EmptyGraphError: If G has no edges (Q is undefined).
        IncompletePartitionError: If the partition has no label for a vertex
            of G (a missing dict key, or a label array that is too short).
    """
    m = G.number_of_edges()
    if m == 0:
        raise EmptyGraphError("Modularity is undefined for a graph with no edges.")

    if isinstance(partition, Mapping):
        missing = [v for v in G.nodes() if v not in partition]
    else:
        missing = [v for v in G.nodes() if v >= len(partition)]
    if missing:
        raise IncompletePartitionError(missing)

    degree_sum: defaultdict = defaultdict(int)
    intra_edges: defaultdict = defaultdict(int)

    for v, k in G.degree():
        degree_sum[partition[v]] += k

    for u, v in G.edges():
        c = partition[u]
        if c == partition[v]:
            intra_edges[c] += 1

    two_m = 2.0 * m
    return float(
        sum(intra_edges[c] / m - (d / two_m) ** 2 for c, d in degree_sum.items())
    )
