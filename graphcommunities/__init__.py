"""
GraphCommunities: community detection and vertex ranking on networkx graphs.

Graphs use the dense vertex ids 1..n. Pick an engine with one of the selector
types and run it through `compute`:

    from graphcommunities import Louvain, chained_cliques, compute

    partition = compute(Louvain(), chained_cliques(2, 5))
"""

import logging
import sys

from .detection import (
    Algorithm,
    FastLPA,
    KClique,
    LabelPropagation,
    Louvain,
    PageRank,
    community_detection,
    compute,
)
from .algorithms import modularity
from .analysis import (
    check_complete_partition,
    communities_from_partition,
    community_of,
    community_sizes,
    number_of_communities,
    partition_similarity,
)
from .exceptions import (
    EmptyGraphError,
    GraphCommunitiesError,
    GraphFormatError,
    IncompletePartitionError,
    InvalidGraphError,
    InvalidParameterError,
)
from .generators import chained_cliques, karate_club, planted_partition
from .graph_io import load_edge_list, save_edge_list


def setup_logging(debug_mode: bool = False) -> None:
    """Configures the logging format and level for scripts using the library."""
    level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


__all__ = [
    # Dispatch
    "compute",
    "community_detection",
    "Algorithm",
    "Louvain",
    "KClique",
    "LabelPropagation",
    "FastLPA",
    "PageRank",
    "modularity",
    # Partitions
    "number_of_communities",
    "community_sizes",
    "communities_from_partition",
    "community_of",
    "check_complete_partition",
    "partition_similarity",
    # Graphs
    "chained_cliques",
    "planted_partition",
    "karate_club",
    "load_edge_list",
    "save_edge_list",
    # Errors
    "GraphCommunitiesError",
    "GraphFormatError",
    "InvalidGraphError",
    "EmptyGraphError",
    "InvalidParameterError",
    "IncompletePartitionError",
    # Logging
    "setup_logging",
]

__version__ = "0.1.0"
