from __future__ import annotations

import logging
from typing import Sequence, Tuple

import networkx as nx

from .adjlist import _check_edges

logger = logging.getLogger(__name__)


def _is_directed(create_using) -> bool:
    if create_using is None:
        return False
    if isinstance(create_using, type):
        return issubclass(create_using, nx.DiGraph)
    return create_using.is_directed()


def build_undirected(
    vertex_count: int,
    edges: Sequence[Tuple[int, int]],
    create_using=None,
) -> nx.Graph:
    """
    Materialize an undirected graph on vertices {0..vertex_count-1}.

    create_using follows the networkx generator convention: None, a graph
    class, or a graph instance (which is cleared first).

    Edges and the target type are checked before the graph is touched, so
    bad input never clears a caller's graph or yields a partial one.
    """
    _check_edges(vertex_count, edges)
    if _is_directed(create_using):
        raise nx.NetworkXError("Directed Graph not supported")

    G = nx.empty_graph(0, create_using)
    G.add_nodes_from(range(vertex_count))
    G.add_edges_from(edges)
    logger.debug(
        "built %s with %d nodes and %d edges",
        type(G).__name__,
        G.number_of_nodes(),
        G.number_of_edges(),
    )
    return G
