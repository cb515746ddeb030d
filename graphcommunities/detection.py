"""
Algorithm selectors and the single dispatch entry point.

Each engine is described by a small frozen dataclass carrying its parameters;
`compute` switches on the selector type and runs the matching engine.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

import networkx as nx
import numpy as np

from graphcommunities.algorithms.fast_label_propagation import fast_label_propagation
from graphcommunities.algorithms.kclique import kclique
from graphcommunities.algorithms.label_propagation import label_propagation
from graphcommunities.algorithms.louvain import louvain
from graphcommunities.algorithms.pagerank import pagerank
from graphcommunities.constants import (
    DEFAULT_DAMPING,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    DEFAULT_WEIGHT_ATTR,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Louvain:
    """Modularity optimization by local moves and aggregation."""


@dataclass(frozen=True)
class KClique:
    """3-clique percolation."""


@dataclass(frozen=True)
class LabelPropagation:
    synchronous: bool = False
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    seed: Optional[int] = None


@dataclass(frozen=True)
class FastLPA:
    synchronous: bool = True  # asynchronous bulk mode is not implemented
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    weighted: bool = False


@dataclass(frozen=True)
class PageRank:
    damping: float = DEFAULT_DAMPING
    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    weight: Optional[str] = DEFAULT_WEIGHT_ATTR


Algorithm = Union[Louvain, KClique, LabelPropagation, FastLPA, PageRank]
CommunityAlgorithm = Union[Louvain, KClique, LabelPropagation, FastLPA]


def compute(
    algorithm: Algorithm,
    G: nx.Graph,
    rng: Optional[np.random.Generator] = None,
) -> Union[Dict[int, int], np.ndarray]:
    """
    Runs the engine selected by `algorithm` on G.

    Args:
        algorithm: One of Louvain, KClique, LabelPropagation, FastLPA, PageRank.
        G (nx.Graph): Graph on vertices 1..n. It is never modified.
        rng (np.random.Generator): Randomness for LabelPropagation; overrides
            the selector's seed.

    Returns:
        Dict[int, int] for the community engines, or np.ndarray of PageRank
        scores (entry v - 1 for vertex v).
    """
    logger.debug(f"Dispatching {algorithm!r} on graph with {G.number_of_nodes()} vertices")

    if isinstance(algorithm, Louvain):
        return louvain(G)
    elif isinstance(algorithm, KClique):
        return kclique(G)
    elif isinstance(algorithm, LabelPropagation):
        return label_propagation(
            G,
            synchronous=algorithm.synchronous,
            max_iterations=algorithm.max_iterations,
            rng=rng,
            seed=algorithm.seed,
        )
    elif isinstance(algorithm, FastLPA):
        return fast_label_propagation(
            G,
            synchronous=algorithm.synchronous,
            max_iterations=algorithm.max_iterations,
            weighted=algorithm.weighted,
        )
    elif isinstance(algorithm, PageRank):
        return pagerank(
            G,
            damping=algorithm.damping,
            tolerance=algorithm.tolerance,
            max_iterations=algorithm.max_iterations,
            weight=algorithm.weight,
        )
    raise TypeError(f"Unknown algorithm selector: {algorithm!r}")


def community_detection(
    G: nx.Graph,
    algorithm: CommunityAlgorithm,
    rng: Optional[np.random.Generator] = None,
) -> Dict[int, int]:
    """Same as `compute`, restricted to engines that return a partition."""
    if isinstance(algorithm, PageRank):
        raise TypeError("PageRank returns scores, not communities; use compute().")
    return compute(algorithm, G, rng=rng)
