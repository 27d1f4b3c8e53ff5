"""Decision policies choosing the next literal to branch on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from sattools.literal import Literal
from sattools.priority_queue import IntegerPriorityQueue
from sattools.trail import Trail

VARIABLE_ACTIVITY_DECAY = 0.95
INITIAL_VARIABLE_ACTIVITY = 0.0
DEFAULT_POLARITY = False
USE_PHASE_SAVING = False
MAX_ACTIVITY_VALUE = 1e100


class DecisionPolicy(ABC):
    """Chooses branching literals, informed of the solver's events."""

    def __init__(self, trail: Trail) -> None:
        self._trail = trail

    def increase_num_variables(self, num_variables: int) -> None:
        """Grow to ``num_variables`` variables."""

    @abstractmethod
    def next_branch(self) -> Literal: ...

    def on_unassign_literal(self, literal: Literal) -> None:
        """Called when ``literal`` is removed from the trail."""

    def on_conflict(self) -> None:
        """Called after each conflict."""

    def on_restart(self) -> None:
        """Called on each restart."""

    def literals_on_conflict(self, literals: Iterable[Literal]) -> None:
        """Called with the literals involved in a conflict."""

    def reset_decision_heuristics(self) -> None:
        """Forget what was learnt so far."""


class VSIDSDecisionPolicy(DecisionPolicy):
    """Branches on the unassigned variable with the highest decaying activity."""

    def __init__(self, trail: Trail) -> None:
        super().__init__(trail)
        self._ordering_initialised = False
        self._activity_increment = 1.0
        self._activities: list[float] = []
        self._use_phase_saving: list[bool] = []
        self._seen: list[bool] = []
        self._ordering: IntegerPriorityQueue[int] = IntegerPriorityQueue(
            0, less=self._less, index_of=lambda variable: variable
        )

    def _less(self, a: int, b: int) -> bool:
        return self._activities[a] < self._activities[b]

    def increase_num_variables(self, num_variables: int) -> None:
        old_num_variables = len(self._activities)
        if num_variables < old_num_variables:
            raise ValueError("the number of variables cannot decrease")
        added = num_variables - old_num_variables
        self._activities.extend([INITIAL_VARIABLE_ACTIVITY] * added)
        self._use_phase_saving.extend([USE_PHASE_SAVING] * added)
        self._seen = [False] * num_variables
        self._ordering.reserve(num_variables)
        if self._ordering_initialised:
            for variable in range(old_num_variables, num_variables):
                self._ordering.add(variable)

    def _initialize_variable_ordering(self) -> None:
        assignment = self._trail.assignment()
        without_activity: list[int] = []
        for variable, activity in enumerate(self._activities):
            if assignment.variable_is_assigned(variable):
                continue
            if activity > 0.0:
                self._ordering.add(variable)
            else:
                without_activity.append(variable)
        for variable in without_activity:
            self._ordering.add(variable)
        self._ordering_initialised = True

    def literals_on_conflict(self, literals: Iterable[Literal]) -> None:
        for literal in literals:
            variable = literal.variable()
            if self._trail.info(variable).level == 0 or self._seen[variable]:
                continue
            self._seen[variable] = True
            self._activities[variable] += self._activity_increment
            if variable in self._ordering:
                self._ordering.increase_priority(variable)
            else:
                self._ordering.add(variable)
            if self._activities[variable] > MAX_ACTIVITY_VALUE:
                self._rescale_variable_activities(1.0 / MAX_ACTIVITY_VALUE)

    def next_branch(self) -> Literal:
        if not self._ordering_initialised:
            self._initialize_variable_ordering()
        assignment = self._trail.assignment()
        while True:
            if self._ordering.empty():
                raise LookupError("no unassigned variable left to branch on")
            variable = self._ordering.pop()
            if not assignment.variable_is_assigned(variable):
                break
        polarity = DEFAULT_POLARITY
        if self._use_phase_saving[variable]:
            polarity = self._trail.info(variable).last_polarity
        return Literal.from_variable(variable, polarity)

    def on_conflict(self) -> None:
        self._activity_increment *= 1.0 / VARIABLE_ACTIVITY_DECAY
        self._seen = [False] * len(self._activities)

    def on_unassign_literal(self, literal: Literal) -> None:
        if self._trail.assignment().literal_is_assigned(literal):
            raise ValueError(f"literal {literal} is still assigned")
        if not self._ordering_initialised:
            return
        variable = literal.variable()
        if variable in self._ordering:
            self._ordering.increase_priority(variable)
        else:
            self._ordering.add(variable)

    def _rescale_variable_activities(self, scaling_factor: float) -> None:
        self._activity_increment *= scaling_factor
        self._activities = [activity * scaling_factor for activity in self._activities]