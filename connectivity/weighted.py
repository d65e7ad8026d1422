"""
Weighted quick-union (union by size).

Each root carries the number of elements of its tree. Merging always hangs
the lighter tree under the heavier root, so a tree of k elements is at most
log2(k) deep.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, replace
from typing import Self

from connectivity.sequence import SimpleUnion
from connectivity.types import Element, Weights

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuickUnionW(SimpleUnion):
    """
    Forest of parent pointers balanced by tree size.

    Attributes:
        elems: elems[e] is the parent of e.
        weights: weights[r] is the size of the tree rooted at r. Entries of
            non-root elements are stale and never read.
    """

    weights: Weights

    def __post_init__(self) -> None:
        super().__post_init__()
        if len(self.weights) != len(self.elems):
            raise ValueError(
                f"Expected {len(self.elems)} weights, got {len(self.weights)}"
            )

        sizes = Counter(self.root_of(e) for e in range(self.size))
        for root, size in sizes.items():
            if self.weights[root] != size:
                raise ValueError(
                    f"Weight {self.weights[root]} of root {root} does not match "
                    f"its tree size {size}"
                )

    @classmethod
    def of_size(cls, n: int) -> Self:
        if n < 0:
            raise ValueError(f"Size must be non-negative, got {n}")
        return cls(tuple(range(n)), (1,) * n)

    def weight(self, e: Element) -> int:
        """Returns the size of the component containing e."""
        return self.weights[self.root_of(e)]

    def union(self, p: Element, q: Element) -> QuickUnionW:
        root_p = self.root_of(p)
        root_q = self.root_of(q)
        if root_p == root_q:
            return self

        # On equal weights the root of q survives
        if self.weights[root_p] > self.weights[root_q]:
            return self._attach(root_q, root_p)
        return self._attach(root_p, root_q)

    def _attach(self, lighter: Element, heavier: Element) -> QuickUnionW:
        logger.debug(
            f"QuickUnionW: attach {lighter} (weight {self.weights[lighter]}) "
            f"under {heavier} (weight {self.weights[heavier]})"
        )
        elems = list(self.elems)
        elems[lighter] = heavier
        weights = list(self.weights)
        weights[heavier] += weights[lighter]
        return replace(self, elems=tuple(elems), weights=tuple(weights))


__all__ = ["QuickUnionW"]
