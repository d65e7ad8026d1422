"""
Run a union-find input through one of the connectivity algorithms.

Prints every pair that merges two components, then the number of components,
as the classic union-find client does.

Usage:
    uv run python main.py data.txt --variant quick-union --table
    cat data.txt | uv run python main.py -
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from connectivity import (
    ElementOutOfRangeError,
    SimpleUnion,
    Variant,
    apply_unions_verbose,
    component_count,
    create_sequence,
    height,
)
from constants import DEFAULT_VARIANT, LOG_FORMAT
from utils.display import display_sequence
from utils.loader import path_to_pairs

logger = logging.getLogger(__name__)


def run(
    path: str | Path,
    variant: Variant = DEFAULT_VARIANT,
    show_table: bool = False,
    console: Console | None = None,
) -> SimpleUnion:
    """
    Applies the pairs of the input file and reports the merges.

    Returns:
        The final sequence.
    """
    n, pairs = path_to_pairs(path)
    logger.info(f"Loaded {len(pairs)} pairs over {n} elements")
    logger.info(f"Algorithm: {variant.value}")

    sequence = create_sequence(variant, n)
    for (p, q), sequence in apply_unions_verbose(sequence, pairs):
        print(f"{p} {q}")
    print(f"{component_count(sequence)} components")

    logger.info(f"Forest height: {height(sequence)}")
    if show_table:
        display_sequence(sequence, console)
    return sequence


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve dynamic connectivity")
    parser.add_argument("input", help="Union-find input file, - for stdin")
    parser.add_argument(
        "--variant",
        choices=[variant.value for variant in Variant],
        default=DEFAULT_VARIANT.value,
        help="Union-find algorithm to use",
    )
    parser.add_argument(
        "--table", action="store_true", help="Show the final forest and components"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        run(args.input, Variant(args.variant), show_table=args.table)
    except (OSError, ValueError, ElementOutOfRangeError) as error:
        logger.error(str(error))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
