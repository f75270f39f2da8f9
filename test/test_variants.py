"""
Tests for the behaviour specific to each of the adaptor variants
"""

import copy
import itertools

from reiterate import (
    CopyReiterate,
    CopyReiterator,
    ReentrantPullError,
    Reiterate,
    Reiterator,
)
from reiterate.development import counting_source

import pytest


def test_cursor_types():
    assert isinstance(iter(Reiterate([])), Reiterator)
    assert isinstance(Reiterate([]).cursor(), Reiterator)
    assert isinstance(iter(CopyReiterate([])), CopyReiterator)
    assert isinstance(CopyReiterate([]).cursor(), CopyReiterator)


@pytest.mark.parametrize("chunk_size", [1, 2, 7, 64])
def test_same_object_for_every_cursor(chunk_size):
    rows = Reiterate(([i] for i in range(100)), chunk_size=chunk_size)

    first = list(rows)
    second = list(rows)

    assert first == second
    assert all(a is b for a, b in zip(first, second))


@pytest.mark.parametrize("chunk_size", [1, 3, 64])
def test_reference_stays_valid_while_cache_grows(chunk_size):
    rows = Reiterate(({"id": i} for i in itertools.count()), chunk_size=chunk_size)

    held = next(iter(rows))
    grower = iter(rows)
    for _ in range(1000):
        next(grower)

    assert rows.frontier == 1000
    assert held == {"id": 0}
    assert next(iter(rows)) is held
    assert rows.cached()[0] is held


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        Reiterate([1], chunk_size=0)


def test_reference_cache_hit_during_pull():
    seen = []

    def peeking():
        yield "a"
        seen.append(next(behind))
        yield "b"

    letters = Reiterate(peeking())
    behind = iter(letters)
    cursor = iter(letters)

    assert next(cursor) == "a"
    assert next(cursor) == "b"
    assert seen == ["a"]
    assert behind.position == 1


def test_copy_cache_hit_during_pull():
    def peeking():
        yield "a"
        next(behind)
        yield "b"

    letters = CopyReiterate(peeking())
    behind = iter(letters)
    cursor = iter(letters)

    assert next(cursor) == "a"
    with pytest.raises(ReentrantPullError):
        next(cursor)
    assert behind.position == 0
    assert letters.frontier == 1


def test_copies_are_returned():
    rows = CopyReiterate(iter([[1], [2]]))

    first = next(iter(rows))
    again = next(iter(rows))
    assert first == again == [1]
    assert first is not again

    first.append(3)
    assert next(iter(rows)) == [1]
    assert rows.cached() == ([1],)


def test_immutable_items_are_not_duplicated():
    words = CopyReiterate(iter(["alpha", "beta"]))

    a = list(words)
    b = list(words)
    assert a == b == ["alpha", "beta"]
    assert a[0] is b[0]


def test_custom_copier():
    calls = []

    def copier(item):
        calls.append(item)
        return copy.deepcopy(item)

    source, counter = counting_source([[[1]], [[2]]])
    rows = CopyReiterate(source, copier=copier)
    assert rows.copier is copier

    first = list(rows)
    second = list(rows)
    first[0][0].append(5)

    assert second == [[[1]], [[2]]]
    assert len(calls) == 4
    assert counter.pulls == 2


def test_copy_reiterate_frontier_readable_during_pull():
    frontiers = []

    def reporting():
        yield 1
        frontiers.append(numbers.frontier)
        yield 2

    numbers = CopyReiterate(reporting())
    assert list(numbers) == [1, 2]
    assert frontiers == [1]


def test_failed_copy_keeps_position():
    failed = []

    def copier(item):
        if item == 2 and not failed:
            failed.append(item)
            raise TypeError("cannot copy")
        return item

    numbers = CopyReiterate(iter([1, 2, 3]), copier=copier)
    cursor = iter(numbers)

    assert next(cursor) == 1
    with pytest.raises(TypeError):
        next(cursor)
    assert cursor.position == 1

    assert list(cursor) == [2, 3]
    assert list(numbers) == [1, 2, 3]
