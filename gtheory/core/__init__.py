"""Identifiers, the node interner and the capability contracts."""

from .ids import EdgeId, NodeId, Weight, zero_weight
from .interner import NodeInterner, NodeRecord
from .traits import EdgeWeights, GraphBase, MutableStorage, Storage, StorageConvert

__all__ = [
    "NodeId",
    "EdgeId",
    "Weight",
    "zero_weight",
    "NodeRecord",
    "NodeInterner",
    "GraphBase",
    "EdgeWeights",
    "MutableStorage",
    "StorageConvert",
    "Storage",
]
