"""Iteration helpers over integer ranges and sequences of sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def int_range(begin: int, end: int) -> Iterator[int]:
    """Yield the integers from ``begin`` up to, but not including, ``end``."""
    index = begin
    while index < end:
        yield index
        index += 1


def chain_ranges(*args: Iterable[T]) -> Iterator[T]:
    """Yield the elements of every given sequence in turn, skipping empty ones."""
    for sequence in args:
        yield from sequence