"""
Generalized Petersen graphs GP(n, k).

GP(n, k) has 2n vertices: an outer n-cycle on 0..n-1, an inner graph on
n..2n-1 joining i+n to ((i+k) mod n)+n, and n spokes i -- i+n. When
gcd(n, k) = g > 1 the inner graph splits into g disjoint cycles of length
n/g; nothing below treats that case separately.
"""
from __future__ import annotations

import logging
import math
import operator
from typing import List, Tuple

import networkx as nx

from gpetersen.errors import InvalidParameterError
from gpetersen.factory.adjlist import adj_from_edges
from gpetersen.factory.build import build_undirected

logger = logging.getLogger(__name__)


def _as_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, not bool")
    return operator.index(value)


def validate_parameters(n: int, k: int) -> None:
    """
    Check that (n, k) describes a generalized Petersen graph:
    n >= 3 and 0 < k < n/2 (i.e. 2k < n, so k = n/2 is rejected).
    """
    n = _as_int(n, "n")
    k = _as_int(k, "k")
    if n < 3:
        raise InvalidParameterError("n too small", "n must be at least 3.", n=n, k=k)
    if not (k > 0 and 2 * k < n):
        raise InvalidParameterError(
            "k out of range", "k must be positive and less than n/2.", n=n, k=k
        )


def generalized_petersen_edges(n: int, k: int) -> List[Tuple[int, int]]:
    """
    Edge list of GP(n, k), assuming (n, k) already validated.

    Exactly 3n edges, grouped in triples per outer vertex i = 0..n-1:
      (i, (i+1) % n)          outer cycle
      (i, i+n)                spoke
      (i+n, (i+k) % n + n)    inner cycle / star
    """
    edges: List[Tuple[int, int]] = [(0, 0)] * (3 * n)
    j = 0
    for i in range(n):
        edges[j] = (i, (i + 1) % n)
        edges[j + 1] = (i, i + n)
        edges[j + 2] = (i + n, (i + k) % n + n)
        j += 3
    return edges


def inner_cycle_structure(n: int, k: int) -> Tuple[int, int]:
    """
    (number of inner cycles, length of each) for validated (n, k).
    """
    g = math.gcd(n, k)
    return g, n // g


def generalized_petersen(n: int, k: int, create_using=None) -> nx.Graph:
    """
    Return the generalized Petersen graph GP(n, k) as a NetworkX graph.

    Nodes 0..n-1 are the outer ring, n..2n-1 the inner ring.

    Raises:
      InvalidParameterError if n < 3 or not 0 < k < n/2.
      TypeError if n or k is not an integer.
    """
    validate_parameters(n, k)
    n, k = operator.index(n), operator.index(k)
    edges = generalized_petersen_edges(n, k)
    logger.debug("GP(%d,%d): %d vertices, %d edges", n, k, 2 * n, len(edges))
    G = build_undirected(2 * n, edges, create_using)
    G.graph["name"] = f"GP({n},{k})"
    return G


def generalized_petersen_adj(n: int, k: int) -> List[List[int]]:
    """
    GP(n, k) as a 0..2n-1 adjacency list (adj[u] sorted).
    """
    validate_parameters(n, k)
    n, k = operator.index(n), operator.index(k)
    return adj_from_edges(generalized_petersen_edges(n, k), 2 * n)
