"""
This module defines types shared by both adaptor variants
"""

from enum import Enum
from typing import Callable


class CursorState(Enum):
    """
    Where a cursor stands relative to the frontier of its adaptor.

    Members
    -------
    AT_FRONTIER:
        the next advance pulls a new item from the source
    BEHIND:
        the next advance is served from the cache
    EXHAUSTED:
        the source has ended and the cursor has read everything,
        every further advance returns the terminal marker
    """

    AT_FRONTIER = "at_frontier"
    BEHIND = "behind"
    EXHAUSTED = "exhausted"


type Copier[T] = Callable[[T], T]
"""
Copy policy of the value variant, returns a duplicate of a cached item.
"""


def cursor_state(position: int, frontier: int, exhausted: bool) -> CursorState:
    if position < frontier:
        return CursorState.BEHIND
    if exhausted:
        return CursorState.EXHAUSTED
    return CursorState.AT_FRONTIER
