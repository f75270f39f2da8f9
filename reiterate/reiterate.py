"""
Adaptor returning the cached items themselves.

Every cursor receives the very same object for a position, the object
stays stored in the cache and is never moved nor replaced while
the adaptor exists. Use it for items that consumers keep references to.
If you want every consumer to receive its own copy, use CopyReiterate.
"""

import logging
from typing import Iterable, Iterator

from reiterate.protocol import Cursor
from reiterate.util.guard import PullGuard
from reiterate.util.segmented_list import DEFAULT_CHUNK_SIZE, SegmentedList

logger = logging.getLogger(__name__)


class Reiterate[T]:
    """
    Wraps an iterable that can be iterated only once and allows
    iterating it any number of times.

    The source is advanced lazily, only when a cursor asks for a position
    no cursor has reached before. Each item is pulled exactly once
    and cached for the other cursors.

    Parameters
    ----------
    iterable:
        the source, ``iter()`` is called on it once, it may be infinite
    chunk_size:
        capacity of a single cache block

    Examples
    --------
    >>> words = Reiterate(w for w in ["a", "b", "c"])
    >>> list(words)
    ['a', 'b', 'c']
    >>> list(words)  # served from the cache
    ['a', 'b', 'c']
    """

    def __init__(self, iterable: Iterable[T], chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._source: Iterator[T] | None = iter(iterable)
        self._cache: SegmentedList[T] = SegmentedList(chunk_size)
        self._guard = PullGuard(self)

    @property
    def frontier(self) -> int:
        """
        Number of items pulled from the source so far.
        """
        return len(self._cache)

    @property
    def exhausted(self) -> bool:
        """
        True once the source signalled it has no more items.
        """
        return self._source is None

    def cursor(self) -> "Reiterator[T]":
        return Reiterator(self)

    def __iter__(self) -> "Reiterator[T]":
        return Reiterator(self)

    def cached(self) -> tuple[T, ...]:
        """
        Returns the items pulled so far, never touches the source.
        """
        return tuple(self._cache)

    def _get(self, position: int) -> T:
        return self._cache[position]

    def _pull(self) -> bool:
        """
        Pulls one item from the source into the cache.

        Returns
        -------
            False if the source is exhausted, True otherwise.

        Throws
        ------
            ReentrantPullError: if another pull is in progress
        """
        if self._source is None:
            return False

        with self._guard:
            try:
                item = next(self._source)
            except StopIteration:
                self._source = None
                logger.debug("Source exhausted after %d items", len(self._cache))
                return False
            self._cache.append(item)

        logger.debug("Pulled item, frontier is at %d", len(self._cache))
        return True

    def __repr__(self) -> str:
        return f"Reiterate(frontier={self.frontier}, exhausted={self.exhausted})"


class Reiterator[T](Cursor[T]):
    """
    An individual cursor, produced by iterating a Reiterate instance.
    """

    __slots__ = ()

    _adaptor: Reiterate[T]

    def __init__(self, adaptor: Reiterate[T]):
        super().__init__(adaptor)

    def __next__(self) -> T:
        adaptor = self._adaptor
        position = self._position

        # cache hits do not take the guard
        if position >= adaptor.frontier and not adaptor._pull():
            raise StopIteration

        self._position = position + 1
        return adaptor._get(position)
