"""Assignment trail: assigned literals in order, with decision levels and reasons."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Protocol

from sattools.assignment import Assignment
from sattools.literal import Literal


class AssignmentType(IntEnum):
    """Why a literal was assigned; propagator ids start at FIRST_FREE_PROPAGATION_ID."""

    UNIT_REASON = 0
    SEARCH_DECISION = 1
    FIRST_FREE_PROPAGATION_ID = 3


@dataclass
class AssignmentInfo:
    """What is known about the assignment of one variable."""

    last_polarity: bool = False
    type: int = AssignmentType.UNIT_REASON
    level: int = 0
    trail_index: int = 0

    def debug_string(self) -> str:
        return (
            f"level: {self.level} |type: {int(self.type)} | "
            f"trail_index: {self.trail_index}"
        )


class _Propagator(Protocol):
    propagator_id: int

    def reason_clause(self, trail_index: int) -> Any: ...


class Trail:
    """Assigned literals in assignment order, grouped by decision level."""

    def __init__(self) -> None:
        self._assignment = Assignment()
        self._current = AssignmentInfo()
        self._infos: list[AssignmentInfo] = []
        self._trail: list[Literal | None] = []
        self._propagators: list[_Propagator | None] = []

    def register_propagator(self, propagator: _Propagator) -> None:
        """Give ``propagator`` the next free id and remember it."""
        if not self._propagators:
            self._propagators = [None] * AssignmentType.FIRST_FREE_PROPAGATION_ID
        propagator.propagator_id = len(self._propagators)
        self._propagators.append(propagator)

    def resize(self, num_vars: int) -> None:
        if num_vars < 0:
            raise ValueError("number of variables must be non-negative")
        self._assignment.resize(num_vars)
        self._infos = self._infos[:num_vars] + [
            AssignmentInfo() for _ in range(num_vars - len(self._infos))
        ]
        self._trail = self._trail[:num_vars] + [None] * (num_vars - len(self._trail))

    def enqueue(self, literal: Literal, propagator_id: int) -> None:
        """Assign ``literal`` true at the current level, with the given reason type."""
        position = self._current.trail_index
        if position >= len(self._trail):
            raise IndexError("trail is full; resize it first")
        self._assignment.assign_from_true_literal(literal)
        self._trail[position] = literal
        self._current.last_polarity = literal.is_positive()
        self._current.type = propagator_id
        self._infos[literal.variable()] = replace(self._current)
        self._current.trail_index += 1

    def enqueue_with_unit_reason(self, literal: Literal) -> None:
        self.enqueue(literal, AssignmentType.UNIT_REASON)

    def enqueue_search_decision(self, literal: Literal) -> None:
        self.enqueue(literal, AssignmentType.SEARCH_DECISION)

    def dequeue(self) -> None:
        """Unassign the last literal; the level becomes that of the one before."""
        if self._current.trail_index == 0:
            self._current.level = 0
            return
        self._current.trail_index -= 1
        position = self._current.trail_index
        self._assignment.unassign_literal(self._trail[position])
        if position == 0:
            self._current.level = 0
        else:
            previous = self._trail[position - 1]
            self._current.level = self._infos[previous.variable()].level

    def cancel_until(self, target_level: int) -> None:
        while self.current_decision_level() > target_level:
            self.dequeue()

    def new_decision_level(self) -> None:
        self._current.level += 1

    def current_decision_level(self) -> int:
        return self._current.level

    def index(self) -> int:
        """Number of literals currently on the trail."""
        return self._current.trail_index

    def __getitem__(self, index: int) -> Literal:
        if not 0 <= index < self._current.trail_index:
            raise IndexError(f"trail index {index} out of range")
        return self._trail[index]

    def decision_level(self, variable: int) -> int:
        return self.info(variable).level

    def reason(self, variable: int) -> Any:
        """Return the clause that propagated ``variable``, or None for decisions and units."""
        info = self.info(variable)
        if info.type < AssignmentType.FIRST_FREE_PROPAGATION_ID:
            return None
        return self._propagators[info.type].reason_clause(info.trail_index)

    def assignment(self) -> Assignment:
        return self._assignment

    def info(self, variable: int) -> AssignmentInfo:
        if not 0 <= variable < len(self._infos):
            raise IndexError(f"variable {variable} out of range")
        return self._infos[variable]

    def debug_string(self) -> str:
        result = ""
        level = 0
        for literal in self._trail[: self._current.trail_index]:
            if result:
                result += " "
            if self.info(literal.variable()).level != level:
                level += 1
                result += " | "
            result += str(literal)
        return result