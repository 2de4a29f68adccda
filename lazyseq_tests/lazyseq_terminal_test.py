import numpy as np
import pandas as pd
import suite
from collections import namedtuple
from lazyseq import S, sequence_of, as_sequence, empty, from_range, MISSING, NotFoundError, EXHAUSTED

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

Person = namedtuple('Person', ['name', 'age', 'city'])

sample_people = [
    Person('alice', 25, 'nyc'),
    Person('bob', 30, 'la'),
    Person('charlie', 25, 'nyc'),
    Person('diana', 35, 'chicago'),
    Person('eve', 28, 'la')
]

sample_numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def _counting(values):
    """generator source plus a list holding how many elements it has handed out."""
    pulled = [0]

    def gen():
        for value in values:
            pulled[0] += 1
            yield value

    return as_sequence(gen()), pulled


# --- count ---

@test("count with and without predicate")
def test_count():
    assert_that(S(sample_numbers).count() == 10, "count should see every element")
    assert_that(S(sample_numbers).count(lambda x: x > 7) == 3, "count with predicate should count matches")
    assert_that(empty().count() == 0, "empty count should be 0")


@test("count drains the sequence")
def test_count_drains():
    seq, pulled = _counting(sample_numbers)
    seq.count(lambda x: x == 1)
    assert_that(pulled[0] == 10, "count should pull every element")
    assert_that(seq.pull() is EXHAUSTED, "the sequence should be exhausted afterwards")


# --- first / first_or_default ---

@test("first returns the first match")
def test_first():
    assert_that(S(sample_people).first().name == 'alice', "first without predicate is the first element")
    assert_that(S(sample_people).first(lambda p: p.city == 'la').name == 'bob', "first match should be bob")


@test("first raises NotFoundError when nothing matches")
def test_first_not_found():
    error = assert_raises(NotFoundError, lambda: S(sample_numbers).first(lambda x: x > 100), "no match should raise")
    assert_that(isinstance(error, ValueError), "NotFoundError should be a ValueError")
    assert_raises(NotFoundError, lambda: empty().first(), "empty sequence should raise")


@test("first_or_default returns MISSING when nothing matches")
def test_first_or_default():
    assert_that(S(sample_numbers).first_or_default(lambda x: x > 100) is MISSING, "should return the absent marker")
    assert_that(empty().first_or_default() is MISSING, "empty should return the absent marker")
    assert_that(empty().first_or_default(default=-1) == -1, "an explicit default should be returned")
    assert_that(S([0, None]).first_or_default() == 0, "a falsy element is still a real element")
    assert_that(S([None]).first_or_default() is None, "None is an element, not the absent marker")


@test("first stops pulling at the match")
def test_first_short_circuits():
    seq, pulled = _counting(sample_numbers)
    assert_that(seq.first(lambda x: x % 3 == 0) == 3, "first multiple of three is 3")
    assert_that(pulled[0] == 3, "first should not pull past the match")
    assert_that(seq.first() == 4, "the next terminal call continues after the match")


# --- any / all ---

@test("any checks for existence")
def test_any():
    assert_that(not empty().any(), "any on empty should be false")
    assert_that(S(sample_numbers).any(), "any on non-empty should be true")
    assert_that(S(sample_numbers).any(lambda x: x > 9), "some number is above 9")
    assert_that(not S(sample_numbers).any(lambda x: x > 10), "no number is above 10")


@test("any short-circuits without draining")
def test_any_short_circuits():
    seq, pulled = _counting(sample_numbers)
    assert_that(seq.any(), "non-empty source should be true")
    assert_that(pulled[0] == 1, "any without predicate needs a single pull")
    assert_that(seq.any(lambda x: x == 5), "5 is still ahead")
    assert_that(pulled[0] == 5, "any should stop at the match")


@test("all checks every element")
def test_all():
    assert_that(empty().all(lambda x: False), "all on empty is vacuously true")
    assert_that(S(sample_numbers).all(lambda x: x > 0), "all numbers are positive")
    assert_that(not S(sample_numbers).all(lambda x: x < 10), "10 fails the predicate")

    seq, pulled = _counting(sample_numbers)
    assert_that(not seq.all(lambda x: x < 3), "3 fails the predicate")
    assert_that(pulled[0] == 3, "all should stop at the first failure")


# --- for_each ---

@test("for_each calls back once per element with its index")
def test_for_each():
    calls = []
    sequence_of('a', 'b', 'c').for_each(lambda item, index: calls.append((item, index)))
    assert_that(calls == [('a', 0), ('b', 1), ('c', 2)], f"unexpected calls: {calls}")

    calls = []
    empty().for_each(lambda item, index: calls.append((item, index)))
    assert_that(calls == [], "empty sequence should never call back")


@test("for_each legacy mode adds one trailing call")
def test_for_each_legacy():
    calls = []
    sequence_of('a', 'b').for_each(lambda item, index: calls.append((item, index)), legacy_trailing_call=True)
    assert_that(calls == [('a', 0), ('b', 1), (None, 2)], f"unexpected calls: {calls}")

    calls = []
    empty().for_each(lambda item, index: calls.append((item, index)), legacy_trailing_call=True)
    assert_that(calls == [(None, 0)], "empty sequence makes exactly the trailing call")


@test("for_each propagates callback errors")
def test_for_each_errors():
    def callback(item, index):
        if index == 1:
            raise KeyError(item)

    assert_raises(KeyError, lambda: sequence_of(1, 2, 3).for_each(callback), "callback errors should propagate")


# --- conversions ---

@test("list, set and dict conversions")
def test_conversions():
    assert_that(S(sample_numbers).to.list() == sample_numbers, "list conversion failed")
    assert_that(S([1, 2, 2, 3]).to.set() == {1, 2, 3}, "set conversion should remove duplicates")
    by_name = S(sample_people).to.dict(lambda p: p.name)
    assert_that(by_name['diana'] == sample_people[3], "dict should map key to element")
    ages = S(sample_people).to.dict(lambda p: p.name, lambda p: p.age)
    assert_that(ages == {'alice': 25, 'bob': 30, 'charlie': 25, 'diana': 35, 'eve': 28}, "dict with value selector")


@test("numpy and pandas conversions")
def test_numpy_pandas_conversions():
    arr = from_range(1, 4).select(lambda x: x * 1.5).to.array()
    assert_that(isinstance(arr, np.ndarray), "should return ndarray")
    assert_that(np.array_equal(arr, np.array([1.5, 3.0, 4.5, 6.0])), f"array conversion failed: {arr}")

    series = S(sample_numbers).where(lambda x: x % 5 == 0).to.pandas()
    assert_that(isinstance(series, pd.Series) and series.tolist() == [5, 10], "series conversion failed")

    df = S(sample_people).select(lambda p: p._asdict()).to.df()
    assert_that(isinstance(df, pd.DataFrame), "should return dataframe")
    assert_that(list(df.columns) == ['name', 'age', 'city'] and len(df) == 5, "dataframe shape is wrong")


if __name__ == "__main__":
    suite.run(title="lazyseq terminal operations test suite")
