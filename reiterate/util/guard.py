"""
Single-writer cells that fail instead of blocking on a second writer.

Both adaptors mutate state behind a handle shared by many cursors.
Only one mutation may be in progress at a time; an overlapping attempt
(only possible by reentrant use, there are no threads involved)
raises ReentrantPullError right away.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from reiterate.exception import ReentrantPullError

logger = logging.getLogger(__name__)


class PullGuard:
    """
    Marks a pull in progress.

    Use as a context manager, entering a guard that is already
    entered raises ReentrantPullError. The guard is released
    on every exit, including exceptions raised inside the block.

    Parameters
    ----------
    owner:
        object reported in the error, usually the adaptor
    """

    __slots__ = ("_owner", "_active")

    def __init__(self, owner: object | None = None):
        self._owner = owner
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def __enter__(self) -> "PullGuard":
        if self._active:
            logger.error("Reentrant pull detected on %r", self._owner)
            raise ReentrantPullError(self._owner)
        self._active = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._active = False


class GuardedCell[S]:
    """
    Holds a state record that can be borrowed by one caller at a time.

    Parameters
    ----------
    value:
        the state record
    owner:
        object reported in the error, usually the adaptor
    """

    __slots__ = ("_value", "_guard")

    def __init__(self, value: S, owner: object | None = None):
        self._value = value
        self._guard = PullGuard(owner)

    @property
    def borrowed(self) -> bool:
        return self._guard.active

    def peek(self) -> S:
        """
        Returns the record for inspection without borrowing it.
        The caller must not mutate it.
        """
        return self._value

    @contextmanager
    def borrow(self) -> Iterator[S]:
        """
        Borrows the record exclusively for the duration of the block.

        Throws
        ------
            ReentrantPullError: if the record is already borrowed
        """
        with self._guard:
            yield self._value
