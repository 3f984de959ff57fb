from __future__ import annotations
from collections.abc import Mapping as MappingABC, Sequence as SequenceABC

import pandas as pd

from ..collection import as_collection, as_sequence, ensure_callable, is_sequence
from ..errors import InvalidArgumentType, MissingMethod
from ..types import *

# distinguishes "no initial value" from every real value, falsy ones included
_OMITTED = object()


def _identity(value: T) -> T:
    return value


# --- iteration core ---

def each(collection: Any, iterator: IteratorCallback) -> None:
    """
    call iterator(value, index, collection) for every element of a sequence,
    or iterator(value, key, collection) for every entry of a mapping.
    """
    ensure_callable(iterator, "each")
    # pairs are snapshotted, so mutation inside iterator cannot skip or repeat visits
    for key, value in as_collection(collection, "each").pairs():
        iterator(value, key, collection)


# --- positional access ---

def first(seq: Sequence[T], n: Any = MISSING) -> Union[T, List[T]]:
    """first element, or a list of the first n elements. n=None counts as omitted."""
    items = as_sequence(seq, "first").values()
    if n is MISSING or n is None:
        return items[0] if items else MISSING
    return items[:n]


def last(seq: Sequence[T], n: Any = MISSING) -> Union[T, List[T], Sequence[T]]:
    """
    last element, or a list of the last n elements. n=None counts as omitted.
    asking for too many returns seq untouched.
    """
    items = as_sequence(seq, "last").values()
    if n is MISSING or n is None:
        return items[-1] if items else MISSING
    start = len(items) - n
    if start < 0:
        return seq
    return items[start:]


def index_of(seq: Sequence[T], target: Any) -> int:
    """lowest index holding target, -1 when absent"""
    for index, value in as_sequence(seq, "index_of").pairs():
        if strict_equals(value, target):
            return index
    return -1


# --- filtering ---

def filter(collection: Any, predicate: Predicate[T]) -> List[T]:
    """values for which predicate is truthy, in visiting order"""
    ensure_callable(predicate, "filter")
    results: List[T] = []

    def keep(value, _key, _collection):
        if predicate(value):
            results.append(value)

    each(collection, keep)
    return results


def reject(collection: Any, predicate: Predicate[T]) -> List[T]:
    """the complement of filter"""
    ensure_callable(predicate, "reject")
    return filter(collection, lambda value: not predicate(value))


def uniq(collection: Any) -> List[T]:
    """first occurrence of each distinct value. works for unhashable values too."""
    results: List[T] = []

    def add_unseen(value, _key, _collection):
        if not contains(results, value):
            results.append(value)

    each(collection, add_unseen)
    return results


# --- projection ---

def map(collection: Any, fn: Selector[T, U]) -> List[U]:
    """fn(value) for every element, same length and order"""
    ensure_callable(fn, "map")
    results: List[U] = []
    each(collection, lambda value, _key, _collection: results.append(fn(value)))
    return results


def _lookup(item: Any, name: Any) -> Any:
    if isinstance(item, (MappingABC, pd.Series)):
        try:
            return item[name] if name in item else MISSING
        except TypeError:
            # unhashable name
            return MISSING
    if isinstance(name, int) and is_sequence(item):
        items = item if isinstance(item, SequenceABC) else item.tolist()
        return items[name] if -len(items) <= name < len(items) else MISSING
    if isinstance(name, str):
        return getattr(item, name, MISSING)
    return MISSING


def pluck(collection: Any, name: Any) -> List[Any]:
    """
    the named property of every element. mappings are indexed by key, sequences
    by position, anything else is read as an attribute. failed lookups give MISSING.
    """
    return map(collection, lambda item: _lookup(item, name))


def invoke(collection: T, method: Union[str, Callable[..., Any]],
           args: Optional[Iterable[Any]] = None) -> T:
    """
    call a method on every element for its side effects.
    a string names a method on the element, a callable is called with the element first.
    returns the collection it was given.
    """
    call_args = tuple(args) if args is not None else ()

    if isinstance(method, str):
        def call(item, _key, _collection):
            bound = getattr(item, method, None)
            if not callable(bound):
                raise MissingMethod(method, item)
            bound(*call_args)
    elif callable(method):
        def call(item, _key, _collection):
            method(item, *call_args)
    else:
        raise InvalidArgumentType("invoke", "a method name or a callable", method)

    each(collection, call)
    return collection


# --- reduction ---

def reduce(collection: Any, fn: Accumulator[U, T], initial: Any = _OMITTED) -> U:
    """
    left fold of fn(accumulator, value) over the collection.
    without an initial value the first visited value seeds the fold.
    an empty collection with no initial value reduces to MISSING.
    """
    ensure_callable(fn, "reduce")
    state = {'acc': initial, 'seeded': initial is not _OMITTED}

    def step(value, _key, _collection):
        if state['seeded']:
            state['acc'] = fn(state['acc'], value)
        else:
            state['acc'] = value
            state['seeded'] = True

    each(collection, step)
    return state['acc'] if state['seeded'] else MISSING


def contains(collection: Any, target: Any) -> bool:
    """true if some value strictly equals target"""
    return reduce(collection, lambda found, value: found or strict_equals(value, target), False)


def every(collection: Any, predicate: Optional[Predicate[T]] = None) -> bool:
    """true if predicate holds for all values (truthiness without a predicate). vacuously true."""
    test = predicate if predicate is not None else _identity
    ensure_callable(test, "every")
    return reduce(collection, lambda passed, value: passed and bool(test(value)), True)


def some(collection: Any, predicate: Optional[Predicate[T]] = None) -> bool:
    """true if predicate holds for any value (truthiness without a predicate). false when empty."""
    test = predicate if predicate is not None else _identity
    ensure_callable(test, "some")
    return not every(collection, lambda value: not test(value))
