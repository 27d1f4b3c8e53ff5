"""Union-find over non-negative integer elements."""

from __future__ import annotations

import sys
from typing import TextIO


class DisjointSets:
    """Disjoint sets with union by rank and path compression."""

    def __init__(self) -> None:
        self._parent: dict[int, int] = {}
        self._rank: dict[int, int] = {}
        self._num_sets = 0

    def add(self, element: int) -> None:
        if element < 0:
            raise ValueError(f"invalid element {element}")
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0
            self._num_sets += 1

    def union(self, x: int, y: int) -> None:
        for element in (x, y):
            if element not in self._parent:
                raise KeyError(element)
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return
        x_rank = self._rank[x_root]
        y_rank = self._rank[y_root]
        if x_rank < y_rank:
            self._parent[x_root] = y_root
        elif x_rank > y_rank:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        self._num_sets -= 1

    def find(self, element: int) -> int:
        """Return the representative of ``element``, or -1 if it was never added."""
        if element not in self._parent:
            return -1
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        node = element
        while node != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def clear(self) -> None:
        self._parent.clear()
        self._rank.clear()
        self._num_sets = 0

    def num_elements(self) -> int:
        return len(self._parent)

    def num_sets(self) -> int:
        return self._num_sets

    def debug_print(self, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        for element in sorted(self._parent):
            print(f"{element} : {self.find(element)}", file=out)