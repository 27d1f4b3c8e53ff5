"""Truth values of the variables, stored two bits per variable."""

from __future__ import annotations

from sattools.literal import Literal


class Assignment:
    """Keeps, for every variable, whether its positive or negative literal is true."""

    def __init__(self, num_variables: int = 0) -> None:
        self._bits: list[bool] = []
        self.resize(num_variables)

    def resize(self, num_variables: int) -> None:
        if num_variables < 0:
            raise ValueError("number of variables must be non-negative")
        size = num_variables * 2
        if size < len(self._bits):
            del self._bits[size:]
        else:
            self._bits.extend([False] * (size - len(self._bits)))

    def assign_from_true_literal(self, literal: Literal) -> None:
        if self.variable_is_assigned(literal.variable()):
            raise ValueError(f"variable of literal {literal} is already assigned")
        self._bits[literal.index()] = True

    def unassign_literal(self, literal: Literal) -> None:
        variable = literal.variable()
        if not self.variable_is_assigned(variable):
            raise ValueError(f"variable of literal {literal} is not assigned")
        base = variable << 1
        self._bits[base] = False
        self._bits[base + 1] = False

    def literal_is_true(self, literal: Literal) -> bool:
        return self._bits[literal.index()]

    def literal_is_false(self, literal: Literal) -> bool:
        return self._bits[literal.negated_index()]

    def literal_is_assigned(self, literal: Literal) -> bool:
        return self.variable_is_assigned(literal.variable())

    def variable_is_assigned(self, variable: int) -> bool:
        base = variable << 1
        return self._bits[base] or self._bits[base + 1]

    def true_literal_for_assigned_variable(self, variable: int) -> Literal:
        self._require_assigned(variable)
        return Literal.from_variable(variable, self._bits[variable << 1])

    def false_literal_for_assigned_variable(self, variable: int) -> Literal:
        self._require_assigned(variable)
        return Literal.from_variable(variable, not self._bits[variable << 1])

    def has_same_assignment_value(self, x: Literal, y: Literal) -> bool:
        return (
            self.literal_is_assigned(x)
            and self.literal_is_assigned(y)
            and self.literal_is_true(x) == self.literal_is_true(y)
        )

    def num_variables(self) -> int:
        return len(self._bits) // 2

    def _require_assigned(self, variable: int) -> None:
        if not self.variable_is_assigned(variable):
            raise ValueError(f"variable {variable} is not assigned")