from typing import Iterator, List

DEFAULT_CHUNK_SIZE = 64


class SegmentedList[T]:
    """
    Append-only list that stores its items in fixed capacity blocks.

    Each block is allocated at its full capacity up front, so growing
    the list only allocates a new block. Blocks holding items are never
    resized, copied or released, a slot keeps the object stored in it
    for the whole lifetime of the list.
    Items cannot be replaced nor removed.

    Parameters
    ----------
    chunk_size:
        capacity of a single block, must be at least 1
    """

    __slots__ = ("_chunk_size", "_chunks", "_len")

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError(f"Chunk size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size
        self._chunks: List[List[T | None]] = []
        self._len = 0

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunks(self) -> int:
        """
        Number of blocks allocated so far.
        """
        return len(self._chunks)

    def append(self, item: T) -> None:
        chunk, offset = divmod(self._len, self._chunk_size)
        if offset == 0:
            self._chunks.append([None] * self._chunk_size)
        self._chunks[chunk][offset] = item
        self._len += 1

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError(f"Index {index} out of range for {self._len} items")
        chunk, offset = divmod(index, self._chunk_size)
        return self._chunks[chunk][offset]

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        # bounded by the length at the time of the call,
        # items appended while iterating are not visited
        length = self._len
        for i in range(length):
            chunk, offset = divmod(i, self._chunk_size)
            yield self._chunks[chunk][offset]

    def __repr__(self) -> str:
        return f"SegmentedList(len={self._len}, chunks={len(self._chunks)})"
