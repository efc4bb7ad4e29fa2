from typing import TYPE_CHECKING, Sequence

from .chain import Chain
from .shared import format_pair, printf

if TYPE_CHECKING:
    from .table import Table


def render_buckets(buckets: Sequence[Chain]) -> str:
    lines = []
    for i, chain in enumerate(buckets):
        pairs = " -> ".join(format_pair(e.key, e.value) for e in chain)
        lines.append("{0:d}: {1:s}\n".format(i, pairs))
    return "".join(lines)


def print_table(table: "Table", name: str):
    printf("== {0:s} ==\n", name)
    printf("{0:s}", render_buckets(table.buckets))
