"""
Factory functions for creating and driving connectivity sequences.

Functions:
    create_sequence(variant, n)         - Fresh sequence of n singletons
    apply_unions(sequence, pairs)       - Fold union over a pair sequence
    apply_unions_verbose(sequence, pairs) - Same, yielding merging pairs
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import reduce

from connectivity.quick_find import QuickFind
from connectivity.quick_union import QuickUnion
from connectivity.sequence import SimpleUnion
from connectivity.types import Pair, Variant
from connectivity.weighted import QuickUnionW

logger = logging.getLogger(__name__)

VARIANT_TO_CLASS: dict[Variant, type[SimpleUnion]] = {
    Variant.QUICK_FIND: QuickFind,
    Variant.QUICK_UNION: QuickUnion,
    Variant.WEIGHTED: QuickUnionW,
}


def create_sequence(variant: Variant, n: int) -> SimpleUnion:
    """Creates a sequence of n elements for the given variant."""
    logger.debug(f"Creating {variant.value} sequence of {n} elements")
    return VARIANT_TO_CLASS[variant].of_size(n)


def apply_unions[S: SimpleUnion](sequence: S, pairs: Iterable[Pair]) -> S:
    """Returns the sequence obtained by calling union on every pair in order."""
    return reduce(lambda acc, pair: acc.union(*pair), pairs, sequence)


def apply_unions_verbose[S: SimpleUnion](
    sequence: S, pairs: Iterable[Pair]
) -> Iterator[tuple[Pair, S]]:
    """
    Applies the pairs in order, yielding those that merged two components.

    Pairs whose elements are already connected are skipped, as in the
    classic union-find client.

    Yields:
        (pair, sequence) with the sequence right after the merge.
    """
    for p, q in pairs:
        if sequence.connected(p, q):
            logger.debug(f"Skipping ({p}, {q}): already connected")
            continue
        sequence = sequence.union(p, q)
        yield (p, q), sequence
