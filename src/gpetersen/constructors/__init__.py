from .generalized_petersen import (
    validate_parameters,
    generalized_petersen_edges,
    inner_cycle_structure,
    generalized_petersen,
    generalized_petersen_adj,
)
from .named import (
    NAMED_PARAMETERS,
    petersen_graph,
    prism_graph,
    durer_graph,
    mobius_kantor_graph,
    dodecahedral_graph,
    desargues_graph,
    nauru_graph,
)

__all__ = [
    "validate_parameters",
    "generalized_petersen_edges",
    "inner_cycle_structure",
    "generalized_petersen",
    "generalized_petersen_adj",
    "NAMED_PARAMETERS",
    "petersen_graph",
    "prism_graph",
    "durer_graph",
    "mobius_kantor_graph",
    "dodecahedral_graph",
    "desargues_graph",
    "nauru_graph",
]
