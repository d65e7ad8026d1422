"""
Quick-union: elements point at their parent, union links two roots.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from connectivity.sequence import SimpleUnion
from connectivity.types import Element

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuickUnion(SimpleUnion):
    """
    Unbalanced forest of parent pointers.

    union attaches the root of p under the root of q without checking whether
    they are already connected; in that case both roots are the same and the
    root is re-pointed at itself, which changes nothing. No balancing is
    applied, so a chain of unions can produce a tree of depth n - 1.
    """

    def union(self, p: Element, q: Element) -> QuickUnion:
        root_p = self.root_of(p)
        root_q = self.root_of(q)
        logger.debug(f"QuickUnion: attach {root_p} under {root_q}")

        elems = list(self.elems)
        elems[root_p] = root_q
        return replace(self, elems=tuple(elems))


__all__ = ["QuickUnion"]
