"""
Adaptor returning copies of the cached items.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from reiterate.data_type import Copier
from reiterate.protocol import Cursor
from reiterate.util.guard import GuardedCell

logger = logging.getLogger(__name__)

_END = object()


@dataclass
class _CopyReiterateState[T]:
    # read and written together by every advance
    source: Iterator[T] | None
    cache: List[T] = field(default_factory=list)


class CopyReiterate[T]:
    """
    Wraps an iterable that can be iterated only once and allows
    iterating it any number of times, each cursor receives
    a copy of the cached item.

    Meant for small, cheaply duplicated items (numbers, strings, tuples).
    If consumers need to share the cached objects themselves,
    use Reiterate instead.

    Parameters
    ----------
    iterable:
        the source, ``iter()`` is called on it once, it may be infinite
    copier:
        copy policy, called on the cached item for every item returned.
        ``copy.copy`` by default, which returns immutable items as they are.

    Examples
    --------
    >>> rows = CopyReiterate(iter([[1], [2]]))
    >>> first = next(iter(rows))
    >>> first.append(3)
    >>> next(iter(rows))  # the cache is not affected
    [1]
    """

    def __init__(self, iterable: Iterable[T], copier: Copier[T] = copy.copy):
        self._copier = copier
        self._state: GuardedCell[_CopyReiterateState[T]] = GuardedCell(
            _CopyReiterateState(source=iter(iterable)),
            owner=self,
        )

    @property
    def frontier(self) -> int:
        """
        Number of items pulled from the source so far.
        """
        return len(self._state.peek().cache)

    @property
    def exhausted(self) -> bool:
        return self._state.peek().source is None

    @property
    def copier(self) -> Copier[T]:
        return self._copier

    def cursor(self) -> "CopyReiterator[T]":
        return CopyReiterator(self)

    def __iter__(self) -> "CopyReiterator[T]":
        return CopyReiterator(self)

    def cached(self) -> tuple[T, ...]:
        """
        Returns copies of the items pulled so far, never touches the source.
        """
        return tuple(map(self._copier, self._state.peek().cache))

    def __repr__(self) -> str:
        return f"CopyReiterate(frontier={self.frontier}, exhausted={self.exhausted})"


class CopyReiterator[T](Cursor[T]):
    """
    An individual cursor, produced by iterating a CopyReiterate instance.

    Unlike Reiterator, a cache hit also borrows the adaptor state,
    so advancing any cursor while the source is being pulled
    raises ReentrantPullError.
    """

    __slots__ = ()

    _adaptor: CopyReiterate[T]

    def __init__(self, adaptor: CopyReiterate[T]):
        super().__init__(adaptor)

    def __next__(self) -> T:
        position = self._position

        with self._adaptor._state.borrow() as state:
            if position == len(state.cache) and state.source is not None:
                pulled = next(state.source, _END)
                if pulled is _END:
                    state.source = None
                    logger.debug("Source exhausted after %d items", position)
                else:
                    state.cache.append(pulled)
                    logger.debug("Pulled item, frontier is at %d", len(state.cache))

            if position == len(state.cache):
                item = _END
            else:
                item = state.cache[position]

        # raised outside of the borrowed block,
        # contextmanager blocks treat StopIteration specially
        if item is _END:
            raise StopIteration
        copied = self._adaptor._copier(item)
        self._position = position + 1
        return copied
