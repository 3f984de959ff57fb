from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Mapping as MappingABC, Sequence as SequenceABC

import numpy as np
import pandas as pd

from .errors import InvalidArgumentType
from .types import *

# strings are sequences to python but never collections here
_SCALAR_SEQUENCES = (str, bytes, bytearray)


# --- abstract base class ---

class IterableCollection(ABC, Generic[K, T]):
    """
    a collection resolved to one of its two shapes.
    every combinator walks `pairs()` and never inspects the raw object again.
    """

    def __init__(self, source: Any):
        self.source = source

    @abstractmethod
    def pairs(self) -> List[Tuple[K, T]]:
        """snapshot of (index-or-key, value) pairs in visiting order"""
        pass

    @property
    @abstractmethod
    def is_sequence(self) -> bool:
        pass

    def values(self) -> List[T]:
        return [value for _, value in self.pairs()]

    def __len__(self) -> int:
        return len(self.pairs())


class SequenceCollection(IterableCollection[int, T]):
    """ordered sequence, visited by ascending index"""

    def __init__(self, source: Any):
        super().__init__(source)
        # numpy scalars become plain python values so strict equality behaves
        self._items: List[T] = source.tolist() if isinstance(source, np.ndarray) else list(source)

    @property
    def is_sequence(self) -> bool: return True

    def pairs(self) -> List[Tuple[int, T]]:
        return list(enumerate(self._items))

    def values(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SequenceCollection(length={len(self._items)})"


class MappingCollection(IterableCollection[Any, T]):
    """keyed mapping, every key visited exactly once"""

    def __init__(self, source: Any):
        super().__init__(source)
        if isinstance(source, pd.Series):
            # tolist() turns numpy scalars into plain python values
            self._items: List[Tuple[Any, T]] = list(zip(source.index.tolist(), source.tolist()))
        else:
            self._items = list(source.items())

    @property
    def is_sequence(self) -> bool: return False

    def pairs(self) -> List[Tuple[Any, T]]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MappingCollection(keys={len(self._items)})"


# --- boundary helpers ---

def is_sequence(obj: Any) -> bool:
    """true for anything underbar treats as an ordered sequence"""
    if isinstance(obj, np.ndarray):
        # a 0-d array is a scalar
        return obj.ndim > 0
    return isinstance(obj, SequenceABC) and not isinstance(obj, _SCALAR_SEQUENCES)


def is_mapping(obj: Any) -> bool:
    """true for anything underbar treats as a keyed mapping"""
    return isinstance(obj, (MappingABC, pd.Series))


def as_collection(obj: Any, operation: str = "each") -> IterableCollection:
    """resolve obj to its collection shape or fail with InvalidArgumentType"""
    if isinstance(obj, IterableCollection):
        return obj
    if is_sequence(obj):
        return SequenceCollection(obj)
    if is_mapping(obj):
        return MappingCollection(obj)
    raise InvalidArgumentType(operation, "a sequence or mapping", obj)


def as_sequence(obj: Any, operation: str) -> SequenceCollection:
    """like as_collection, but mappings are rejected too"""
    if isinstance(obj, SequenceCollection):
        return obj
    if is_sequence(obj):
        return SequenceCollection(obj)
    raise InvalidArgumentType(operation, "a sequence", obj)


def ensure_callable(func: Any, operation: str) -> None:
    if not callable(func):
        raise InvalidArgumentType(operation, "a callable", func)
