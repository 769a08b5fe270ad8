from .adjlist import adj_from_edges
from .build import build_undirected

__all__ = [
    "adj_from_edges",
    "build_undirected",
]
