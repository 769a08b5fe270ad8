from __future__ import annotations

from typing import List, Sequence, Tuple

from gpetersen.errors import GraphConstructionError


def _check_edges(vertex_count: int, edges: Sequence[Tuple[int, int]]) -> None:
    """Raise GraphConstructionError unless every endpoint lies in [0, vertex_count)."""
    if vertex_count < 0:
        raise GraphConstructionError(f"vertex_count must be non-negative, got {vertex_count}")
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise GraphConstructionError(
                f"edge ({u}, {v}) has an endpoint outside [0, {vertex_count})"
            )


def adj_from_edges(edges: Sequence[Tuple[int, int]], vertex_count: int) -> List[List[int]]:
    """
    Build a 0..vertex_count-1 adjacency list from undirected edges.

    Returns:
      adj[u] = sorted list of neighbors of u
    """
    _check_edges(vertex_count, edges)
    neigh = [set() for _ in range(vertex_count)]
    for u, v in edges:
        neigh[u].add(v)
        neigh[v].add(u)
    return [sorted(s) for s in neigh]
