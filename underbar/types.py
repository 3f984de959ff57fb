from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Hashable, Sequence, Mapping
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], Any]
Selector = Callable[[T], U]
Accumulator = Callable[[U, T], U]
# called with (value, index-or-key, collection)
IteratorCallback = Callable[[T, Any, Any], Any]


class _Missing:
    """marker for a value that is not there (short zip rows, empty first/last, failed plucks)"""
    _instance: Optional['_Missing'] = None

    def __new__(cls) -> '_Missing':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def strict_equals(a: Any, b: Any) -> bool:
    """value equality without coercion: 1, 1.0 and True are three different values"""
    if a is b:
        return True
    return type(a) is type(b) and bool(a == b)
