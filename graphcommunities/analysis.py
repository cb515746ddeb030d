import logging
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Mapping, Set

import networkx as nx
from sklearn.metrics import adjusted_rand_score

from graphcommunities.exceptions import IncompletePartitionError

logger = logging.getLogger(__name__)


def number_of_communities(partition: Mapping[int, int]) -> int:
    """Count of distinct community ids in the partition."""
    return len(set(partition.values()))


def community_sizes(partition: Mapping[int, int]) -> List[int]:
    """Community sizes, largest first."""
    return sorted(Counter(partition.values()).values(), reverse=True)


def communities_from_partition(partition: Mapping[int, int]) -> Dict[int, Set[int]]:
    """Inverts vertex -> community into community -> set of vertices."""
    communities: defaultdict = defaultdict(set)
    for node, comm_id in partition.items():
        communities[comm_id].add(node)
    return dict(communities)


def community_of(partition: Mapping[int, int], vertex: int) -> int:
    """
    Looks up the community of a single vertex.

    Raises:
        IncompletePartitionError: If the vertex has no assignment (e.g. it lies
            in no triangle under K-Clique detection).
    """
    try:
        return partition[vertex]
    except KeyError:
        raise IncompletePartitionError([vertex]) from None


def check_complete_partition(
    G: nx.Graph, partition: Mapping[int, int]
) -> None:
    """Raises IncompletePartitionError unless every vertex of G is assigned."""
    missing = [v for v in G.nodes() if v not in partition]
    if missing:
        raise IncompletePartitionError(missing)


def partition_similarity(
    nodes: Iterable[int], first: Mapping[int, int], second: Mapping[int, int]
) -> float:
    """
    Adjusted Rand index between two partitions over the given vertices.

    1.0 means identical groupings (up to relabeling); values near 0 mean
    agreement no better than chance.
    """
    nodes = list(nodes)
    missing = [v for v in nodes if v not in first or v not in second]
    if missing:
        raise IncompletePartitionError(missing)

    score = adjusted_rand_score([first[v] for v in nodes], [second[v] for v in nodes])
    logger.debug(f"Partition similarity (ARI): {score:.4f}")
    return float(score)
