"""
gpetersen: constructors for generalized Petersen graphs GP(n, k) and their
well-known members, backed by NetworkX.
"""

import logging

from .errors import InvalidParameterError, GraphConstructionError
from .constructors.generalized_petersen import (
    validate_parameters,
    generalized_petersen_edges,
    inner_cycle_structure,
    generalized_petersen,
    generalized_petersen_adj,
)
from .constructors.named import (
    NAMED_PARAMETERS,
    petersen_graph,
    prism_graph,
    durer_graph,
    mobius_kantor_graph,
    dodecahedral_graph,
    desargues_graph,
    nauru_graph,
)

# Graph factory
from .factory.build import build_undirected
from .factory.adjlist import adj_from_edges

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "InvalidParameterError",
    "GraphConstructionError",
    # Constructors
    "validate_parameters",
    "generalized_petersen_edges",
    "inner_cycle_structure",
    "generalized_petersen",
    "generalized_petersen_adj",
    # Named members
    "NAMED_PARAMETERS",
    "petersen_graph",
    "prism_graph",
    "durer_graph",
    "mobius_kantor_graph",
    "dodecahedral_graph",
    "desargues_graph",
    "nauru_graph",
    # Factory
    "build_undirected",
    "adj_from_edges",
]
