"""
Type definitions for dynamic connectivity.

Elements are dense integer ids in [0, N). A sequence stores one integer per
element (its root or its parent, depending on the variant), and the weighted
variant stores one more integer per element for the size of each tree.
"""

from collections.abc import Set
from enum import Enum

type Element = int
type Elements = tuple[Element, ...]  # elems[e] -> root or parent of e
type Weights = tuple[int, ...]  # weights[r] -> size of the tree rooted at r
type Pair = tuple[Element, Element]
type Component = Set[Element]
type Components = frozenset[frozenset[Element]]


class Variant(Enum):
    """The closed set of union-find algorithms."""

    QUICK_FIND = "quick-find"
    QUICK_UNION = "quick-union"
    WEIGHTED = "weighted"


class ElementOutOfRangeError(IndexError):
    """Raised when an element id falls outside [0, N)."""

    def __init__(self, element: Element, size: int) -> None:
        self.element = element
        self.size = size
        super().__init__(f"Element {element} out of range [0, {size})")


__all__ = [
    "Component",
    "Components",
    "Element",
    "ElementOutOfRangeError",
    "Elements",
    "Pair",
    "Variant",
    "Weights",
]
