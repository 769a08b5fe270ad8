from __future__ import annotations


class InvalidParameterError(ValueError):
    """
    Raised when (n, k) does not describe a generalized Petersen graph.

    reason: "n too small" | "k out of range"
    """

    def __init__(self, reason: str, message: str, *, n: int, k: int):
        super().__init__(message)
        self.reason = reason
        self.n = n
        self.k = k


class GraphConstructionError(RuntimeError):
    """Raised when an edge list cannot be materialized as a graph."""
