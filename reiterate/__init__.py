"""
Adaptors turning a single-pass iterable into a reiterable one
"""

from reiterate.data_type import CursorState, Copier
from reiterate.exception import ReentrantPullError
from reiterate.protocol import Cursor, advance, make_cursor
from reiterate.reiterate import Reiterate, Reiterator
from reiterate.copy_reiterate import CopyReiterate, CopyReiterator
from reiterate.util.segmented_list import DEFAULT_CHUNK_SIZE

__all__ = [
    "Reiterate",
    "Reiterator",
    "CopyReiterate",
    "CopyReiterator",
    "Cursor",
    "CursorState",
    "Copier",
    "ReentrantPullError",
    "advance",
    "make_cursor",
    "DEFAULT_CHUNK_SIZE",
]
