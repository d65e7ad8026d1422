"""
Dynamic connectivity: union-find over the integer ids [0, N).

The package implements the three classical union-find algorithms behind a
common interface:
- QuickFind   - flat trees, O(1) find, O(n) union
- QuickUnion  - parent pointers, union links roots, trees may degenerate
- QuickUnionW - union by size, trees at most log2(n) deep

Sequences are immutable: `union` returns a new sequence.

Example Usage:
    >>> from connectivity import QuickUnionW
    >>> uf = QuickUnionW.of_size(5).union(0, 1).union(2, 1)
    >>> uf.connected(0, 2)
    True
    >>> uf.connected(3, 4)
    False
"""

from connectivity.factories import (
    VARIANT_TO_CLASS,
    apply_unions,
    apply_unions_verbose,
    create_sequence,
)
from connectivity.partition import (
    component_count,
    component_of,
    depth,
    height,
    root_to_members,
    roots,
    same_partition,
    sequence_to_components,
)
from connectivity.quick_find import QuickFind
from connectivity.quick_union import QuickUnion
from connectivity.sequence import DynamicConnectivitySequence, SimpleUnion
from connectivity.types import (
    Component,
    Components,
    Element,
    ElementOutOfRangeError,
    Elements,
    Pair,
    Variant,
    Weights,
)
from connectivity.weighted import QuickUnionW

__all__ = [
    # Sequences
    "DynamicConnectivitySequence",
    "SimpleUnion",
    "QuickFind",
    "QuickUnion",
    "QuickUnionW",
    # Types
    "Component",
    "Components",
    "Element",
    "ElementOutOfRangeError",
    "Elements",
    "Pair",
    "Variant",
    "Weights",
    # Factories
    "VARIANT_TO_CLASS",
    "apply_unions",
    "apply_unions_verbose",
    "create_sequence",
    # Partition
    "component_count",
    "component_of",
    "depth",
    "height",
    "root_to_members",
    "roots",
    "same_partition",
    "sequence_to_components",
]
