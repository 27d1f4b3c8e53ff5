"""Multimap from keys to the values watching them."""

from __future__ import annotations

from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Watcher(Generic[K, V]):
    """Keeps, for each key, the values stored for it in insertion order."""

    def __init__(self) -> None:
        self._watchers: dict[K, list[V]] = {}

    def store(self, key: K, value: V) -> None:
        self._watchers.setdefault(key, []).append(value)

    def watch(self, key: K) -> tuple[V, ...]:
        """Return the values stored for ``key``; empty if there are none."""
        return tuple(self._watchers.get(key, ()))