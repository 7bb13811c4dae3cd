"""Iterator: walk an inclusive range of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Numbers:
    """The integers from ``start`` to ``end``, both included."""

    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        yield from range(self.start, self.end + 1)


def iterator_print(iterable: Iterable[object]) -> None:
    """Print each item of ``iterable`` on its own line."""
    for item in iterable:
        print(repr(item))