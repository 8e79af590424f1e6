"""
Storage backends.

All four backends implement the full capability set from
:mod:`gtheory.core.traits` and convert losslessly into one another:

- GraphDefinition: plain edge list, the canonical conversion form
- AdjacencyList: outgoing adjacency lists
- AdjacencyListIn: outgoing and incoming adjacency lists
- AdjacencyMatrix: dense edge-id matrix
"""

from .adjacency_list import AdjacencyList
from .adjacency_list_in import AdjacencyListIn
from .adjacency_matrix import AdjacencyMatrix
from .base import BaseStorage, EdgeRecord
from .definition import GraphDefinition

BACKENDS = (GraphDefinition, AdjacencyList, AdjacencyListIn, AdjacencyMatrix)

__all__ = [
    "EdgeRecord",
    "BaseStorage",
    "GraphDefinition",
    "AdjacencyList",
    "AdjacencyListIn",
    "AdjacencyMatrix",
    "BACKENDS",
]
