"""Indexed max-priority queue over elements with small integer indices."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class IntegerPriorityQueue(Generic[T]):
    """Binary max-heap whose elements carry a distinct index below the capacity.

    ``less(a, b)`` orders elements; the element for which no other is greater
    is at the top.  ``index_of`` maps an element to its index.
    """

    def __init__(
        self,
        n: int = 0,
        less: Callable[[T, T], bool] = operator.lt,
        index_of: Callable[[T], int] = operator.index,
    ) -> None:
        self._size = 0
        self._less = less
        self._index_of = index_of
        self._heap: list[T | None] = [None]
        self._position: list[int] = []
        self.reserve(n)

    def __len__(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._position)

    def empty(self) -> bool:
        return self._size == 0

    def __contains__(self, index: int) -> bool:
        return 0 <= index < len(self._position) and self._position[index] != 0

    def reserve(self, n: int) -> None:
        if n < 0:
            raise ValueError("capacity must be non-negative")
        self._resize(self._heap, n + 1, None)
        self._resize(self._position, n, 0)

    def add(self, element: T) -> None:
        index = self._index_of(element)
        if not 0 <= index < len(self._position):
            raise IndexError(f"element index {index} out of range")
        if index in self:
            raise ValueError(f"element with index {index} is already queued")
        self._size += 1
        self._sift_up(self._size, element)

    def top(self) -> T:
        if self.empty():
            raise IndexError("top of an empty queue")
        return self._heap[1]

    def pop(self) -> T:
        """Remove the top element and return it."""
        top = self.top()
        self._position[self._index_of(top)] = 0
        old_size = self._size
        self._size -= 1
        if old_size > 1:
            self._sift_down(1, self._heap[old_size])
        return top

    def remove(self, index: int) -> None:
        if index not in self:
            raise KeyError(index)
        to_replace = self._position[index]
        self._position[index] = 0
        old_size = self._size
        self._size -= 1
        if to_replace == old_size:
            return
        element = self._heap[old_size]
        if self._less(element, self._heap[to_replace]):
            self._sift_down(to_replace, element)
        else:
            self._sift_up(to_replace, element)

    def increase_priority(self, element: T) -> None:
        self._sift_up(self._position_of(element), element)

    def decrease_priority(self, element: T) -> None:
        self._sift_down(self._position_of(element), element)

    def change_priority(self, element: T) -> None:
        i = self._position_of(element)
        if i > 1 and self._less(self._heap[i >> 1], element):
            self._sift_up(i, element)
        else:
            self._sift_down(i, element)

    def clear(self) -> None:
        self._size = 0
        self._position = [0] * len(self._position)

    def debug_string(self) -> str:
        return "".join(f"{element} " for element in self._heap[1 : self._size + 1])

    @staticmethod
    def _resize(items: list, size: int, fill) -> None:
        if size < len(items):
            del items[size:]
        else:
            items.extend([fill] * (size - len(items)))

    def _position_of(self, element: T) -> int:
        index = self._index_of(element)
        if index not in self:
            raise KeyError(index)
        return self._position[index]

    def _set(self, i: int, element: T) -> None:
        self._heap[i] = element
        self._position[self._index_of(element)] = i

    def _sift_up(self, i: int, element: T) -> None:
        while i > 1:
            parent = i >> 1
            parent_element = self._heap[parent]
            if not self._less(parent_element, element):
                break
            self._set(i, parent_element)
            i = parent
        self._set(i, element)

    def _sift_down(self, i: int, element: T) -> None:
        size = self._size
        while True:
            left = i * 2
            right = left + 1
            if right > size:
                if left <= size:
                    left_element = self._heap[left]
                    if self._less(element, left_element):
                        self._set(i, left_element)
                        i = left
                break
            left_element = self._heap[left]
            right_element = self._heap[right]
            if self._less(left_element, right_element):
                if not self._less(element, right_element):
                    break
                self._set(i, right_element)
                i = right
            else:
                if not self._less(element, left_element):
                    break
                self._set(i, left_element)
                i = left
        self._set(i, element)