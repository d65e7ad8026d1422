"""
Queries on the partition and the forest held by a sequence.

These only rely on `find` and `elems`, so they work on every variant.
"""

from collections import defaultdict

from connectivity.sequence import SimpleUnion
from connectivity.types import Component, Components, Element


def roots(sequence: SimpleUnion) -> frozenset[Element]:
    """Returns the root of every component."""
    return frozenset(e for e, parent in enumerate(sequence.elems) if e == parent)


def root_to_members(sequence: SimpleUnion) -> dict[Element, frozenset[Element]]:
    """Maps each root to the elements of its component."""
    members: defaultdict[Element, set[Element]] = defaultdict(set)
    for e in range(sequence.size):
        members[sequence.find(e)].add(e)
    return {root: frozenset(component) for root, component in members.items()}


def sequence_to_components(sequence: SimpleUnion) -> Components:
    """
    Extract the partition induced by `connected`.

    Root ids differ between variants for the same unions, the components do
    not, so comparing variants goes through this function.
    """
    return frozenset(root_to_members(sequence).values())


def component_count(sequence: SimpleUnion) -> int:
    return len(roots(sequence))


def component_of(sequence: SimpleUnion, e: Element) -> Component:
    root = sequence.find(e)
    return frozenset(x for x in range(sequence.size) if sequence.find(x) == root)


def depth(sequence: SimpleUnion, e: Element) -> int:
    """Number of parent links between e and its root."""
    elems = sequence.elems
    e = sequence.check(e)
    hops = 0
    while elems[e] != e:
        e = elems[e]
        hops += 1
    return hops


def height(sequence: SimpleUnion) -> int:
    """Depth of the deepest element, 0 for an empty or flat forest."""
    return max((depth(sequence, e) for e in range(sequence.size)), default=0)


def same_partition(a: SimpleUnion, b: SimpleUnion) -> bool:
    """True if both sequences induce the same components."""
    return a.size == b.size and sequence_to_components(a) == sequence_to_components(b)
