"""
Rendering of connectivity sequences with rich.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from connectivity import QuickUnionW, SimpleUnion, depth, root_to_members
from constants import COMPONENT_SEPARATOR


def sequence_to_table(sequence: SimpleUnion) -> Table:
    """One row per element: its parent, root and depth (and weight at roots)."""
    weighted = isinstance(sequence, QuickUnionW)

    table = Table(title=type(sequence).__name__)
    table.add_column("element", justify="right")
    table.add_column("parent", justify="right")
    table.add_column("root", justify="right")
    table.add_column("depth", justify="right")
    if weighted:
        table.add_column("weight", justify="right")

    for e, parent in enumerate(sequence.elems):
        is_root = e == parent
        row = [
            Text(str(e), style="bold" if is_root else ""),
            str(parent),
            str(sequence.find(e)),
            str(depth(sequence, e)),
        ]
        if weighted:
            row.append(str(sequence.weights[e]) if is_root else "")
        table.add_row(*row)
    return table


def components_to_table(sequence: SimpleUnion) -> Table:
    """One row per component, largest first."""
    table = Table(title="Components")
    table.add_column("root", justify="right")
    table.add_column("size", justify="right")
    table.add_column("elements")

    members = root_to_members(sequence)
    for root in sorted(members, key=lambda r: (-len(members[r]), r)):
        component = members[root]
        table.add_row(
            str(root),
            str(len(component)),
            COMPONENT_SEPARATOR.join(str(e) for e in sorted(component)),
        )
    return table


def display_sequence(sequence: SimpleUnion, console: Console | None = None) -> None:
    console = console or Console()
    console.print(sequence_to_table(sequence))
    console.print(components_to_table(sequence))
