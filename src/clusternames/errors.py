"""Error types for clusternames."""


class ClusterNamesError(Exception):
    """Base exception for clusternames errors."""
    pass


class FormatError(ClusterNamesError, ValueError):
    """A name or identifier does not follow the expected naming convention."""
    pass
