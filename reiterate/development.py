"""
This module holds utilities for instrumenting sources during development
and testing, e.g. to verify how many times a source was pulled.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Tuple

from more_itertools import side_effect


@dataclass
class PullCounter:
    """
    Counts the items yielded by an instrumented source.

    Members
    -------
    pulls:
        number of items the source yielded so far
    finished:
        how many times the source finished, either by running out of items,
        by raising an exception or by being closed
    log:
        the items in the order they were yielded, if enabled
    """

    pulls: int = 0
    finished: int = 0
    keep_log: bool = False
    log: List[Any] = field(default_factory=list)

    def _on_item(self, item: Any) -> None:
        self.pulls += 1
        if self.keep_log:
            self.log.append(item)

    def _on_end(self) -> None:
        self.finished += 1

    def reset(self) -> None:
        self.pulls = 0
        self.finished = 0
        self.log.clear()


def counting_source[T](
    iterable: Iterable[T],
    keep_log: bool = False,
) -> Tuple[Iterator[T], PullCounter]:
    """
    Wraps the iterable so every item pulled from it is counted.

    Parameters
    ----------
    iterable:
        the source to instrument
    keep_log:
        also remember the yielded items

    Returns
    -------
        The instrumented single-pass iterator and its counter.
    """
    counter = PullCounter(keep_log=keep_log)
    source = side_effect(counter._on_item, iterable, after=counter._on_end)
    return source, counter
