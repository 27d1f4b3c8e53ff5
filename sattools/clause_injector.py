"""Collection of clauses waiting to be added to a solver."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sattools.literal import Literal


class ClauseInjector:
    """Holds clauses in the order they were added."""

    def __init__(self) -> None:
        self._clauses: list[list[Literal]] = []

    def add_clause(self, literals: Iterable[Literal]) -> None:
        self._clauses.append(list(literals))

    def clear(self) -> None:
        self._clauses.clear()

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self) -> Iterator[list[Literal]]:
        return iter(self._clauses)

    def debug_string(self) -> str:
        return "".join(
            "\n" + "".join(f"{literal} " for literal in clause)
            for clause in self._clauses
        )