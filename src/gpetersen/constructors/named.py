from __future__ import annotations

from typing import Dict, Tuple

import networkx as nx

from .generalized_petersen import generalized_petersen

# family name -> (n, k)
NAMED_PARAMETERS: Dict[str, Tuple[int, int]] = {
    "Petersen": (5, 2),
    "Durer": (6, 2),
    "Mobius-Kantor": (8, 3),
    "Dodecahedron": (10, 2),
    "Desargues": (10, 3),
    "Nauru": (12, 5),
}


def _named(name: str, create_using=None) -> nx.Graph:
    n, k = NAMED_PARAMETERS[name]
    G = generalized_petersen(n, k, create_using)
    G.graph["name"] = name
    return G


def petersen_graph(create_using=None) -> nx.Graph:
    """The Petersen graph, GP(5,2)."""
    return _named("Petersen", create_using)


def prism_graph(n: int, create_using=None) -> nx.Graph:
    """The n-prism C_n x K_2, GP(n,1). GP(4,1) is the cube."""
    G = generalized_petersen(n, 1, create_using)
    G.graph["name"] = f"Prism({n})"
    return G


def durer_graph(create_using=None) -> nx.Graph:
    return _named("Durer", create_using)


def mobius_kantor_graph(create_using=None) -> nx.Graph:
    return _named("Mobius-Kantor", create_using)


def dodecahedral_graph(create_using=None) -> nx.Graph:
    return _named("Dodecahedron", create_using)


def desargues_graph(create_using=None) -> nx.Graph:
    return _named("Desargues", create_using)


def nauru_graph(create_using=None) -> nx.Graph:
    return _named("Nauru", create_using)
