"""
Module used to read union-find inputs.

The format is the classic one: the first line holds the number of elements,
every following line a pair of element ids to union.

    10
    4 3
    3 8
    # comments and blank lines are ignored
    6 5
"""

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from connectivity.types import Pair

logger = logging.getLogger(__name__)

COMMENT = "#"


def lines_to_pairs(lines: Iterable[str]) -> tuple[int, tuple[Pair, ...]]:
    """
    Parses the element count and the pairs of a union-find input.

    Returns:
        (n, pairs)

    Raises:
        ValueError: If the count is missing or a line is not a pair of integers.
    """
    n: int | None = None
    pairs: list[Pair] = []

    for number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT):
            continue

        fields = stripped.split()
        try:
            values = [int(field) for field in fields]
        except ValueError:
            raise ValueError(
                f"Line {number}: expected integers, got {stripped!r}"
            ) from None

        if n is None:
            if len(values) != 1 or values[0] < 0:
                raise ValueError(
                    f"Line {number}: expected a non-negative element count, got {stripped!r}"
                )
            n = values[0]
            continue

        if len(values) != 2:
            raise ValueError(f"Line {number}: expected a pair, got {stripped!r}")
        pairs.append((values[0], values[1]))

    if n is None:
        raise ValueError("Missing element count")

    logger.debug(f"Read {len(pairs)} pairs over {n} elements")
    return n, tuple(pairs)


def path_to_pairs(path: str | Path) -> tuple[int, tuple[Pair, ...]]:
    """Reads a union-find input file, "-" meaning standard input."""
    if str(path) == "-":
        return lines_to_pairs(sys.stdin)
    with open(path, "r") as file:
        return lines_to_pairs(file)
