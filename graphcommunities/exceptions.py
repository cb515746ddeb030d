"""
GraphCommunities Exceptions

Every failure the library reports is one of these. Each also derives from the
closest builtin so callers can catch ``ValueError`` / ``KeyError`` generically.
"""


class GraphCommunitiesError(Exception):
    """Base class for all library errors"""
    pass


class GraphFormatError(GraphCommunitiesError, ValueError):
    """Malformed edge-list data: bad node ids, wrong column count, unparsable rows"""
    pass


class InvalidGraphError(GraphCommunitiesError, ValueError):
    """Graph vertices are not the dense integers 1..n"""
    pass


class EmptyGraphError(GraphCommunitiesError, ValueError):
    """The graph has no edges (or no vertices) where the computation needs them"""
    pass


class InvalidParameterError(GraphCommunitiesError, ValueError):
    """An algorithm parameter is outside its valid domain"""
    pass


class IncompletePartitionError(GraphCommunitiesError, KeyError):
    """A partition has no community for a vertex that was queried"""

    def __init__(self, vertices):
        self.vertices = sorted(vertices)
        preview = ", ".join(str(v) for v in self.vertices[:10])
        if len(self.vertices) > 10:
            preview += ", ..."
        super().__init__(
            f"{len(self.vertices)} vertex(es) have no community assigned: {preview}"
        )

    def __str__(self) -> str:
        return self.args[0]
