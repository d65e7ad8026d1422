"""
Shared contract of the union-find variants.

Hierarchy:
    DynamicConnectivitySequence (abstract)
    └── SimpleUnion (abstract)  - root chasing shared by all variants
        ├── QuickFind           - flat trees, O(1) find, O(n) union
        ├── QuickUnion          - unbalanced trees, O(n) find
        └── QuickUnionW         - union by size, O(log n) find

Every sequence is a frozen value: `union` returns a new generation and leaves
the receiver untouched (copy-on-write over tuples).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Self

from connectivity.types import Element, ElementOutOfRangeError, Elements


@dataclass(frozen=True)
class DynamicConnectivitySequence(ABC):
    """Interface shared by all union-find variants."""

    @abstractmethod
    def union(self, p: Element, q: Element) -> DynamicConnectivitySequence:
        """
        Merge the components containing p and q.

        Args:
            p: Element id to union.
            q: Element id to union.

        Returns:
            A new sequence in which p and q are connected.
        """
        pass

    @abstractmethod
    def connected(self, p: Element, q: Element) -> bool:
        """Returns True if p and q belong to the same component."""
        pass

    @abstractmethod
    def find(self, e: Element) -> Element:
        """Returns the root id of the component containing e."""
        pass


@dataclass(frozen=True)
class SimpleUnion(DynamicConnectivitySequence):
    """
    Root chasing over a parent array.

    For QuickFind every tree is flat, so the walk stops after one step.
    QuickUnion trees can be O(n) deep and QuickUnionW trees O(log n) deep,
    which is why the walk is a loop rather than a recursion.

    Attributes:
        elems: elems[e] is the parent of e; a root is its own parent.
    """

    elems: Elements

    def __post_init__(self) -> None:
        elems = self.elems
        size = len(elems)
        for e, parent in enumerate(elems):
            if not 0 <= parent < size:
                raise ValueError(
                    f"Parent {parent} of element {e} out of range [0, {size})"
                )

        # A walk stops at a self-loop or at an element already known to reach one
        reaches_root = [False] * size
        for start in range(size):
            path: list[Element] = []
            on_path: set[Element] = set()
            e = start
            while not reaches_root[e] and elems[e] != e:
                if e in on_path:
                    raise ValueError(
                        f"Parent pointers form a cycle through element {e}"
                    )
                on_path.add(e)
                path.append(e)
                e = elems[e]
            reaches_root[e] = True
            for visited in path:
                reaches_root[visited] = True

    @classmethod
    def of_size(cls, n: int) -> Self:
        """Creates a sequence of n elements, each in its own component."""
        if n < 0:
            raise ValueError(f"Size must be non-negative, got {n}")
        return cls(tuple(range(n)))

    @property
    def size(self) -> int:
        return len(self.elems)

    def __len__(self) -> int:
        return self.size

    def check(self, e: Element) -> Element:
        """Returns e unchanged, or raises ElementOutOfRangeError."""
        if not 0 <= e < len(self.elems):
            raise ElementOutOfRangeError(e, len(self.elems))
        return e

    def root_of(self, e: Element) -> Element:
        elems = self.elems
        e = self.check(e)
        root = elems[e]
        while root != e:
            e = root
            root = elems[e]
        return e

    def find(self, e: Element) -> Element:
        return self.root_of(e)

    def connected(self, p: Element, q: Element) -> bool:
        return self.find(p) == self.find(q)


__all__ = ["DynamicConnectivitySequence", "SimpleUnion"]
