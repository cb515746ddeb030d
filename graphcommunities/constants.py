"""Default parameters shared by the detection engines."""

# Louvain stops once a full pass improves modularity by no more than this.
LOUVAIN_THRESHOLD: float = 1e-3

# Sweep / iteration cap for label propagation and PageRank.
DEFAULT_MAX_ITERATIONS: int = 100

# PageRank
DEFAULT_DAMPING: float = 0.85
DEFAULT_TOLERANCE: float = 1e-6
DEFAULT_WEIGHT_ATTR: str = "weight"

# Graph k-means
DEFAULT_KMEANS_MAX_ITERATIONS: int = 1000

# Interactive map
MAX_RENDERED_NODES: int = 500
