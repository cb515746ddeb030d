"""
Community detection and ranking engines.

This package contains modules for:
1. Partition quality (Newman-Girvan modularity)
2. Community detection (Louvain, 3-clique percolation, label propagation)
3. Vertex ranking (PageRank power iteration)
4. Experimental clustering (graph k-means)
"""

# 1. Partition Quality
from .modularity import modularity

# 2. Community Detection
from .louvain import louvain
from .kclique import (
    find_triangles,
    clique_overlap_graph,
    clique_communities,
    kclique,
)
from .label_propagation import label_propagation
from .fast_label_propagation import (
    fast_label_propagation,
    fast_label_propagation_edges,
)

# 3. Ranking
from .pagerank import pagerank

# 4. Experimental
from .kmeans import graph_kmeans, clique_seeded_kmeans

__all__ = [
    # Quality
    "modularity",
    # Communities
    "louvain",
    "find_triangles",
    "clique_overlap_graph",
    "clique_communities",
    "kclique",
    "label_propagation",
    "fast_label_propagation",
    "fast_label_propagation_edges",
    # Ranking
    "pagerank",
    # Experimental
    "graph_kmeans",
    "clique_seeded_kmeans",
]
