import suite
import numpy as np
import pandas as pd
from dgen import from_schema
from underbar import (
    each, first, last, index_of, filter, reject, uniq, map, pluck, invoke,
    reduce, contains, every, some, MISSING, InvalidArgumentType, MissingMethod
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# test data schemas
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 100}),
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr']},
}

numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
scores = {'ann': 91, 'bob': 78, 'cy': 85}


# each() tests

@test("each visits sequence elements in index order with the collection")
def test_each_sequence():
    seen = []
    source = ['a', 'b', 'c']
    each(source, lambda value, index, coll: seen.append((value, index, coll is source)))
    assert_that(seen == [('a', 0, True), ('b', 1, True), ('c', 2, True)], f"got {seen}")


@test("each visits every mapping key exactly once")
def test_each_mapping():
    seen = {}
    each(scores, lambda value, key, _: seen.__setitem__(key, seen.get(key, []) + [value]))
    assert_that(seen == {'ann': [91], 'bob': [78], 'cy': [85]}, f"got {seen}")


@test("each is not disturbed by an iterator that mutates the sequence")
def test_each_mutation():
    source = [1, 2, 3]
    seen = []

    def grow(value, index, coll):
        seen.append(value)
        coll.append(value * 10)

    each(source, grow)
    assert_that(seen == [1, 2, 3], f"should visit the original three elements, got {seen}")


@test("each accepts numpy arrays and pandas series")
def test_each_numpy_pandas():
    seen = []
    each(np.array([1, 2, 3]), lambda value, index, _: seen.append((value, index)))
    assert_that(seen == [(1, 0), (2, 1), (3, 2)], f"numpy: got {seen}")
    assert_that(all(type(v) is int for v, _ in seen), "numpy scalars should become python ints")

    labelled = []
    each(pd.Series([10, 20], index=['x', 'y']), lambda value, key, _: labelled.append((key, value)))
    assert_that(labelled == [('x', 10), ('y', 20)], f"series: got {labelled}")


@test("each rejects non-collections and non-callables")
def test_each_invalid():
    assert_raises(InvalidArgumentType, each, 42, lambda *a: None)
    assert_raises(InvalidArgumentType, each, "abc", lambda *a: None)
    error = assert_raises(InvalidArgumentType, each, [1], "not callable")
    assert_that("each" in str(error), f"message should name the operation: {error}")
    assert_that(isinstance(error, TypeError), "should also be a TypeError")


# first() / last() tests

@test("first and last without n return single elements")
def test_first_last_single():
    assert_that(first(numbers) == 1, "first should be 1")
    assert_that(last(numbers) == 10, "last should be 10")
    assert_that(first((7, 8)) == 7, "tuples are sequences")


@test("first and last with n return sub-lists")
def test_first_last_n():
    assert_that(first(numbers, 3) == [1, 2, 3], "first 3")
    assert_that(last(numbers, 3) == [8, 9, 10], "last 3")
    assert_that(first(numbers, 0) == [], "first 0 is empty")
    assert_that(last(numbers, 0) == [], "last 0 is empty")


@test("last returns the sequence untouched when n is too large")
def test_last_overflow():
    result = last(numbers, 50)
    assert_that(result is numbers, "should return the original sequence")
    assert_that(first(numbers, 50) == numbers, "first should just return everything")


@test("first and last never throw on degenerate input")
def test_first_last_degenerate():
    assert_that(first([]) is MISSING, "first of empty is MISSING")
    assert_that(last([]) is MISSING, "last of empty is MISSING")
    assert_that(first([], 2) == [], "first n of empty")
    assert_that(last([1, 2], -1) == [], "negative n for last is empty")
    assert_that(first([1, 2, 3], None) == 1, "None counts as an omitted n for first")
    assert_that(last([1, 2, 3], None) == 3, "None counts as an omitted n for last")
    assert_that(last([], None) is MISSING, "None on an empty sequence")


@test("first rejects mappings")
def test_first_mapping():
    assert_raises(InvalidArgumentType, first, scores)


# index_of() tests

@test("index_of finds the lowest index")
def test_index_of():
    assert_that(index_of([5, 3, 5], 5) == 0, "lowest index")
    assert_that(index_of([5, 3, 5], 3) == 1, "middle")
    assert_that(index_of([5, 3, 5], 9) == -1, "absent is -1")


@test("index_of uses strict equality")
def test_index_of_strict():
    assert_that(index_of([1, True, 1.0], True) == 1, "True is not 1")
    assert_that(index_of([1, True, 1.0], 1.0) == 2, "1.0 is not 1")
    assert_that(index_of(['1'], 1) == -1, "no string coercion")


# filter() / reject() tests

@test("filter keeps truthy results in order")
def test_filter():
    evens = filter(numbers, lambda x: x % 2 == 0)
    assert_that(evens == [2, 4, 6, 8, 10], f"got {evens}")


@test("filter works on mappings")
def test_filter_mapping():
    passing = sorted(filter(scores, lambda s: s >= 80))
    assert_that(passing == [85, 91], f"got {passing}")


@test("filter and reject partition the collection")
def test_filter_reject_partition():
    people = from_schema(person_schema, seed=42).take(25)
    senior = filter(people, lambda p: p['age'] > 40)
    junior = reject(people, lambda p: p['age'] > 40)
    assert_that(len(senior) + len(junior) == len(people), "no omissions")
    assert_that(all(p not in junior for p in senior), "no overlap")
    assert_that(every(junior, lambda p: p['age'] <= 40), "reject keeps the falsy side")


@test("reject on an empty collection")
def test_reject_empty():
    assert_that(reject([], lambda x: True) == [], "empty in, empty out")


# uniq() tests

@test("uniq keeps first occurrences in order")
def test_uniq():
    assert_that(uniq([3, 1, 3, 2, 1]) == [3, 1, 2], "first-seen order")


@test("uniq is idempotent and handles unhashable values")
def test_uniq_idempotent():
    data = [[1], [2], [1], {'a': 1}, {'a': 1}]
    once_ = uniq(data)
    assert_that(once_ == [[1], [2], {'a': 1}], f"got {once_}")
    assert_that(uniq(once_) == once_, "uniq twice equals uniq once")


@test("uniq does not merge values of different types")
def test_uniq_strict():
    assert_that(uniq([1, True, 1.0, 1]) == [1, True, 1.0], "1, True and 1.0 are distinct")


# map() / pluck() tests

@test("map transforms every element")
def test_map():
    squares = map(numbers, lambda x: x * x)
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], f"got {squares}")


@test("pluck extracts keys from records")
def test_pluck_records():
    people = from_schema(person_schema, seed=7).take(5)
    names = pluck(people, 'name')
    assert_that(names == [p['name'] for p in people], "should match manual extraction")
    assert_that(all(isinstance(n, str) for n in names), "names are strings")


@test("pluck reads positions, attributes and reports missing values")
def test_pluck_shapes():
    assert_that(pluck([[1, 2], [3]], 1) == [2, MISSING], "positional lookup")
    assert_that(pluck([1 + 2j, 3j], 'imag') == [2.0, 3.0], "attribute lookup")
    assert_that(pluck([{'a': 1}, {}], 'a') == [1, MISSING], "missing key")
    assert_that(pluck([{'a': 1}], ['a']) == [MISSING], "unhashable key is a failed lookup")


# invoke() tests

@test("invoke calls a named method on every element and returns the list")
def test_invoke_by_name():
    lists = [[3, 1, 2], [9, 8]]
    result = invoke(lists, 'sort')
    assert_that(result is lists, "should return the original list")
    assert_that(lists == [[1, 2, 3], [8, 9]], f"got {lists}")


@test("invoke passes arguments through")
def test_invoke_args():
    lists = [[1], [2]]
    invoke(lists, 'append', [0])
    assert_that(lists == [[1, 0], [2, 0]], f"got {lists}")


@test("invoke calls a function with the element as receiver")
def test_invoke_callable():
    bags = [[], []]
    invoke(bags, lambda bag, a, b: bag.extend([a, b]), ('x', 'y'))
    assert_that(bags == [['x', 'y'], ['x', 'y']], f"got {bags}")


@test("invoke fails fast on unknown methods and bad method arguments")
def test_invoke_invalid():
    error = assert_raises(MissingMethod, invoke, [[1], 5], 'sort')
    assert_that("sort" in str(error), f"message should name the method: {error}")
    assert_raises(InvalidArgumentType, invoke, [1], 42)


# reduce() tests

@test("reduce folds with and without an initial value")
def test_reduce():
    add = lambda a, b: a + b
    assert_that(reduce([1, 2, 3], add, 0) == 6, "with seed")
    assert_that(reduce([1, 2, 3], add) == 6, "seeded from first element")
    assert_that(reduce([], add, 10) == 10, "empty with seed")
    assert_that(reduce([], add) is MISSING, "empty without seed")


@test("reduce honours falsy initial values")
def test_reduce_falsy_seed():
    calls = []

    def track(acc, value):
        calls.append((acc, value))
        return acc

    reduce(['a', 'b'], track, 0)
    assert_that(calls == [(0, 'a'), (0, 'b')], f"0 is a real seed: {calls}")
    assert_that(reduce(['a', 'b'], lambda acc, v: acc + v, '') == 'ab', "empty string seed")
    assert_that(reduce([1], lambda acc, v: acc or v, False) == 1, "False seed")
    assert_that(reduce([1, 2], lambda acc, v: (acc, v), None) == ((None, 1), 2), "None seed")


@test("reduce works on mappings")
def test_reduce_mapping():
    assert_that(reduce(scores, lambda a, b: a + b, 0) == 254, "sum of scores")


# contains() / every() / some() tests

@test("contains uses strict equality")
def test_contains():
    assert_that(contains([1, 2, 3], 2), "2 is there")
    assert_that(not contains([1, 2, 3], 4), "4 is not")
    assert_that(not contains([1, 2, 3], 2.0), "2.0 is not 2")
    assert_that(contains(scores, 78), "mapping values are searched")
    assert_that(not contains([], None), "empty contains nothing")


@test("every is vacuously true and defaults to truthiness")
def test_every():
    assert_that(every([], lambda x: False), "vacuous truth")
    assert_that(every([2, 4], lambda x: x % 2 == 0), "all even")
    assert_that(not every([2, 3], lambda x: x % 2 == 0), "not all even")
    assert_that(every([1, 'a', True]), "all truthy")
    assert_that(not every([1, 0]), "0 is falsy")


@test("some is false on empty and defaults to truthiness")
def test_some():
    assert_that(not some([], lambda x: True), "empty is false")
    assert_that(some([1, 3, 4], lambda x: x % 2 == 0), "one even")
    assert_that(not some([1, 3], lambda x: x % 2 == 0), "no even")
    assert_that(some([0, None, 'x']), "one truthy")
    assert_that(not some([0, None, '']), "none truthy")


if __name__ == "__main__":
    suite.main(title="underbar core operations test")
