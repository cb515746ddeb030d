import logging
from typing import Dict, List, Optional

import networkx as nx
import numpy as np

from graphcommunities.constants import DEFAULT_MAX_ITERATIONS
from graphcommunities.exceptions import InvalidParameterError
from graphcommunities.graph import check_dense_vertices

logger = logging.getLogger(__name__)


def _label_propagation_sweep(
    neighbors: List[np.ndarray],
    labels: np.ndarray,
    synchronous: bool,
    rng: np.random.Generator,
) -> bool:
    """
    Visits every vertex once, in random order, adopting the majority neighbor label.

    In synchronous mode all votes read the labels as they stood when the sweep
    began; otherwise an update is visible to every later vertex in the sweep.
    Ties are broken uniformly at random.

    Returns:
        bool: True if any label changed.
    """
    n = len(labels) - 1
    source = labels.copy() if synchronous else labels
    changed = False

    for v in rng.permutation(n) + 1:
        nbrs = neighbors[v]
        if nbrs.size == 0:
            continue

        values, counts = np.unique(source[nbrs], return_counts=True)
        tied = values[counts == counts.max()]
        new_label = tied[0] if tied.size == 1 else rng.choice(tied)

        if new_label != labels[v]:
            labels[v] = new_label
            changed = True

    return changed


def label_propagation(
    G: nx.Graph,
    synchronous: bool = False,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> Dict[int, int]:
    """
    Detects communities by label propagation.

    Every vertex starts labelled with its own id; each sweep lets vertices take
    the most frequent label among their neighbors (successors for a DiGraph).
    Stops after a sweep without changes, or after `max_iterations` sweeps.

    Args:
        G (nx.Graph): Graph on vertices 1..n.
        synchronous (bool): Apply updates only at the end of each sweep.
        max_iterations (int): Maximum number of sweeps.
        rng (np.random.Generator): Source of visiting order and tie-breaks.
        seed (int): Seed for a fresh generator when `rng` is not given.

    Returns:
        Dict[int, int]: Vertex -> label. Labels are vertex ids, not dense.
    """
    mode = "Synchronous" if synchronous else "Asynchronous"
    logger.info(f"--- Label Propagation ({mode}) ---")

    if max_iterations < 1:
        raise InvalidParameterError(f"max_iterations must be >= 1, got {max_iterations}")

    n = check_dense_vertices(G)
    if rng is None:
        rng = np.random.default_rng(seed)

    labels = np.arange(n + 1)
    neighbors = [np.empty(0, dtype=int)] + [
        np.fromiter(G.neighbors(v), dtype=int) for v in range(1, n + 1)
    ]

    converged = False
    sweeps = 0
    while sweeps < max_iterations:
        sweeps += 1
        if not _label_propagation_sweep(neighbors, labels, synchronous, rng):
            converged = True
            break

    if not converged:
        logger.warning(f"Label propagation stopped at the cap of {max_iterations} sweeps.")

    partition = {v: int(labels[v]) for v in range(1, n + 1)}
    logger.info(f"Sweeps: {sweeps}, communities found: {len(set(partition.values()))}")
    return partition
