from __future__ import annotations

from ..collection import as_sequence
from ..errors import InvalidArgumentType
from ..types import *
from .core import contains, every, filter, reject, some, uniq


def intersection(*sequences: Sequence[T]) -> List[T]:
    """
    distinct values present in every sequence, ordered as they first appear in the first one.
    a value outside the first sequence cannot be in all of them, so only the first is scanned.
    """
    if not sequences:
        raise InvalidArgumentType("intersection", "at least one sequence", ())
    head, *others = [as_sequence(seq, "intersection") for seq in sequences]

    def shared_by_all(value):
        return every(others, lambda other: contains(other, value))

    return filter(uniq(head), shared_by_all)


def difference(seq: Sequence[T], *others: Sequence[T]) -> List[T]:
    """values of seq found in none of the others, original order and duplicates kept"""
    source = as_sequence(seq, "difference")
    excluded = [as_sequence(other, "difference") for other in others]

    def found_elsewhere(value):
        return some(excluded, lambda other: contains(other, value))

    return reject(source, found_elsewhere)
