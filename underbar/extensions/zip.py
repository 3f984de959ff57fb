from __future__ import annotations

from ..collection import as_sequence
from ..types import *
from .core import each, map, reduce


def zip(*sequences: Sequence[Any]) -> List[Tuple[Any, ...]]:
    """
    pair up the i-th elements of every sequence. the result is as long as the longest
    input; positions past the end of a shorter one hold MISSING. inputs are not modified.
    """
    columns = [as_sequence(seq, "zip").values() for seq in sequences]
    if not columns:
        return []

    longest = reduce(map(columns, len), max)
    rows: List[Tuple[Any, ...]] = []

    def add_row(_value, position, _range):
        rows.append(tuple(map(columns, lambda column: column[position] if position < len(column) else MISSING)))

    each(range(longest), add_row)
    return rows
