"""
Cursor protocol shared by both adaptor variants.

An adaptor wraps a single-pass source and hands out cursors.
Each cursor keeps its own position, cursors reaching a new position
first pull the item from the source, the others read it from the cache.
"""

from abc import abstractmethod
from typing import Iterable, Iterator, Protocol, overload

from reiterate.data_type import CursorState, cursor_state


class Adaptor[T](Protocol):
    """
    What cursors need to know about the adaptor they iterate over.
    """

    @property
    def frontier(self) -> int: ...

    @property
    def exhausted(self) -> bool: ...

    def cursor(self) -> "Cursor[T]": ...

    def cached(self) -> tuple[T, ...]: ...


class Cursor[T](Iterator[T]):
    """
    A single consumer of an adaptor.

    Starts at position 0, moves forward only. Many cursors may exist
    at the same time, creating or dropping one has no effect
    on the adaptor or the other cursors.
    """

    __slots__ = ("_adaptor", "_position")

    def __init__(self, adaptor: Adaptor[T]):
        self._adaptor = adaptor
        self._position = 0

    @property
    def adaptor(self) -> Adaptor[T]:
        return self._adaptor

    @property
    def position(self) -> int:
        """
        Number of items this cursor has returned so far.
        """
        return self._position

    @property
    def state(self) -> CursorState:
        return cursor_state(
            self._position,
            self._adaptor.frontier,
            self._adaptor.exhausted,
        )

    def __iter__(self) -> Iterator[T]:
        return self

    @abstractmethod
    def __next__(self) -> T: ...

    @overload
    def advance(self) -> T | None: ...

    @overload
    def advance[D](self, default: D) -> T | D: ...

    def advance(self, default=None):
        """
        Returns the next item or default once there are no more items.

        Use next() instead if None is a valid item of the source.
        """
        return next(self, default)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._position}, "
            f"state={self.state.value}, adaptor={self._adaptor!r})"
        )


def make_cursor[T](adaptor: Iterable[T]) -> Iterator[T]:
    """
    Creates a new cursor at position 0.

    Equivalent to iter(adaptor), can be called any number of times.
    """
    return iter(adaptor)


@overload
def advance[T](cursor: Iterator[T]) -> T | None: ...


@overload
def advance[T, D](cursor: Iterator[T], default: D) -> T | D: ...


def advance(cursor, default=None):
    """
    Moves the cursor by one position.

    Returns
    -------
        The next item or ``default`` if the source has no more items.
        The terminal state is permanent, once ``default`` is returned,
        it is returned by every following call.
    """
    return next(cursor, default)
