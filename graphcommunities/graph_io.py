import logging
import os

import networkx as nx
import pandas as pd

from graphcommunities.constants import DEFAULT_WEIGHT_ATTR
from graphcommunities.exceptions import GraphFormatError
from graphcommunities.graph import check_dense_vertices

logger = logging.getLogger(__name__)


def load_edge_list(
    path: str, weighted: bool = False, directed: bool = False
) -> nx.Graph:
    """
    Reads a graph from a two-column (source, target) edge file.

    Columns may be separated by whitespace or commas; lines starting with '#'
    are skipped, and so is a leading header row (e.g. "source,destination").
    A weighted file carries a third column. Node ids must be positive
    integers; the graph gets vertices 1..max_id so ids that never appear in
    an edge become isolated vertices.

    Args:
        path (str): Path to the edge file.
        weighted (bool): Expect a third 'weight' column.
        directed (bool): Build a DiGraph instead of a Graph.

    Returns:
        nx.Graph: Graph (or DiGraph) on vertices 1..n.

    Raises:
        FileNotFoundError: If `path` does not exist.
        GraphFormatError: On malformed rows, missing or non-positive node ids,
            non-positive weights, or a wrong number of columns.
    """
    logger.info(f"Loading edge list from {path}...")
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    expected = 3 if weighted else 2
    try:
        df = pd.read_csv(path, sep=r"[\s,]+", comment="#", header=None, engine="python")
    except pd.errors.EmptyDataError:
        df = pd.DataFrame(columns=range(expected))
    except pd.errors.ParserError as e:
        logger.error(f"Could not parse {path}: {e}")
        raise GraphFormatError(f"Could not parse {path}: {e}") from e

    if df.shape[1] != expected:
        raise GraphFormatError(
            f"Expected {expected} columns in {path}, found {df.shape[1]}"
        )
    df.columns = ["source", "target", "weight"][:expected]

    # A header row such as "source,destination" names the columns.
    if len(df) and pd.to_numeric(df.loc[0, ["source", "target"]], errors="coerce").isna().all():
        logger.debug(f"Skipping header row {df.loc[0].tolist()} in {path}")
        df = df.iloc[1:].reset_index(drop=True)

    ids = df[["source", "target"]].apply(pd.to_numeric, errors="coerce")
    if ids.isna().any().any():
        bad_rows = ids.index[ids.isna().any(axis=1)].tolist()
        logger.error(f"Missing or non-numeric node ids in rows {bad_rows[:10]}")
        raise GraphFormatError(f"Missing or non-numeric node ids in rows {bad_rows[:10]}")
    if ((ids % 1) != 0).any().any():
        raise GraphFormatError("Node ids must be integers.")
    if (ids <= 0).any().any():
        raise GraphFormatError("Node ids must be positive (1-based).")
    ids = ids.astype(int)

    G = nx.DiGraph() if directed else nx.Graph()
    n = int(ids.to_numpy().max()) if len(ids) else 0
    G.add_nodes_from(range(1, n + 1))

    if weighted:
        weights = pd.to_numeric(df["weight"], errors="coerce")
        if weights.isna().any() or (weights <= 0).any():
            raise GraphFormatError("Edge weights must be positive numbers.")
        G.add_weighted_edges_from(
            zip(ids["source"].tolist(), ids["target"].tolist(), weights.tolist()),
            weight=DEFAULT_WEIGHT_ATTR,
        )
    else:
        G.add_edges_from(zip(ids["source"].tolist(), ids["target"].tolist()))

    logger.info(f"Loaded {G.number_of_nodes()} vertices and {G.number_of_edges()} edges.")
    return G


def save_edge_list(G: nx.Graph, path: str, weighted: bool = False) -> None:
    """
    Writes G as an edge file readable by `load_edge_list`.

    A path ending in ".csv" gets comma-separated columns under a
    "source,target[,weight]" header; any other path gets headerless
    whitespace-separated columns.

    Isolated vertices are not written, so isolated vertices above the largest
    edge endpoint do not survive a round trip.
    """
    check_dense_vertices(G)

    output_dir = os.path.dirname(path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    if weighted:
        rows = [(u, v, w) for u, v, w in G.edges(data=DEFAULT_WEIGHT_ATTR, default=1.0)]
        df = pd.DataFrame(rows, columns=["source", "target", "weight"])
    else:
        df = pd.DataFrame(list(G.edges()), columns=["source", "target"])

    if path.lower().endswith(".csv"):
        df.to_csv(path, index=False)
    else:
        df.to_csv(path, sep=" ", header=False, index=False)
    logger.info(f"Saved {len(df)} edges to {path}")
