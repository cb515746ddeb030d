import logging
from typing import Optional

import networkx as nx
import numpy as np

from graphcommunities.constants import (
    DEFAULT_DAMPING,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    DEFAULT_WEIGHT_ATTR,
)
from graphcommunities.exceptions import EmptyGraphError, InvalidParameterError
from graphcommunities.graph import check_dense_vertices

logger = logging.getLogger(__name__)


def pagerank(
    G: nx.Graph,
    damping: float = DEFAULT_DAMPING,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    weight: Optional[str] = DEFAULT_WEIGHT_ATTR,
) -> np.ndarray:
    """
    Ranks vertices by PageRank using synchronous power iteration.

    Each step sets x_i = (1 - d) + d * sum_{j -> i} w_ji * x_j / W_j, where W_j
    is the total out-weight of j, using the previous step's scores throughout.
    Undirected graphs act as symmetric directed graphs. Vertices without
    out-edges pass nothing on. The result is normalized to sum to 1.

    Args:
        G (nx.Graph): Graph or DiGraph on vertices 1..n.
        damping (float): Damping factor d, strictly between 0 and 1.
        tolerance (float): Stop when the largest per-vertex change is below this.
        max_iterations (int): Iteration cap.
        weight (str): Edge attribute holding weights; None treats G as unweighted.
            Edges lacking the attribute count as weight 1.

    Returns:
        np.ndarray: Scores of length n; entry v - 1 belongs to vertex v.
    """
    logger.info("--- PageRank (Power Iteration) ---")

    if not 0.0 < damping < 1.0:
        raise InvalidParameterError(f"Damping factor must lie in (0, 1), got {damping}")
    if tolerance <= 0:
        raise InvalidParameterError(f"Tolerance must be positive, got {tolerance}")
    if max_iterations < 1:
        raise InvalidParameterError(f"max_iterations must be >= 1, got {max_iterations}")

    n = check_dense_vertices(G)
    if n == 0:
        raise EmptyGraphError("PageRank needs at least one vertex.")

    # Row j holds the out-edges of vertex j + 1 (symmetric when undirected)
    A = nx.to_scipy_sparse_array(
        G, nodelist=list(range(1, n + 1)), weight=weight, format="csr", dtype=float
    )
    out_weight = np.asarray(A.sum(axis=1)).ravel()
    inv_out_weight = np.divide(
        1.0, out_weight, out=np.zeros_like(out_weight), where=out_weight > 0
    )
    A_T = A.T.tocsr()

    scores = np.full(n, 1.0 / n)
    converged = False
    iteration = 0

    for iteration in range(1, max_iterations + 1):
        new_scores = (1.0 - damping) + damping * (A_T @ (scores * inv_out_weight))
        delta = np.max(np.abs(new_scores - scores))
        scores = new_scores
        if delta < tolerance:
            converged = True
            break

    if not converged:
        logger.warning(f"PageRank did not converge within {max_iterations} iterations.")

    scores = scores / scores.sum()
    logger.info(f"Iterations: {iteration}, top vertex: {int(np.argmax(scores)) + 1}")
    return scores
