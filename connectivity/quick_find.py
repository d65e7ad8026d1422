"""
Quick-find: every element points directly at its root.

find is a single lookup, union rewrites every element of the absorbed
component.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from connectivity.sequence import SimpleUnion
from connectivity.types import Element

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuickFind(SimpleUnion):
    """Flat forest: elems[e] is always the root of e."""

    def __post_init__(self) -> None:
        super().__post_init__()
        for e, root in enumerate(self.elems):
            if self.elems[root] != root:
                raise ValueError(
                    f"Element {e} points at {root}, which is not a root"
                )

    def union(self, p: Element, q: Element) -> QuickFind:
        if self.connected(p, q):
            return self

        old_root = self.elems[p]
        new_root = self.elems[q]
        logger.debug(f"QuickFind: relabel component {old_root} as {new_root}")
        return replace(
            self,
            elems=tuple(new_root if root == old_root else root for root in self.elems),
        )


__all__ = ["QuickFind"]
