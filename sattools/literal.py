"""Boolean literals with signed and index encodings."""

from __future__ import annotations

from functools import total_ordering


@total_ordering
class Literal:
    """A variable or its negation.

    The signed encoding uses ``x + 1`` for the 0-based variable ``x`` and
    ``-(x + 1)`` for its negation; ``0`` is never a literal.  The index
    encoding uses ``x << 1`` for the positive literal and ``(x << 1) ^ 1``
    for the negative one.
    """

    __slots__ = ("_index",)

    def __init__(self, signed_value: int) -> None:
        if signed_value == 0:
            raise ValueError("a literal cannot have the signed value 0")
        if signed_value > 0:
            self._index = (signed_value - 1) << 1
        else:
            self._index = ((-signed_value - 1) << 1) ^ 1

    @classmethod
    def from_index(cls, index: int) -> Literal:
        """Build a literal from its index encoding."""
        if index < 0:
            raise ValueError(f"invalid literal index {index}")
        literal = cls.__new__(cls)
        literal._index = index
        return literal

    @classmethod
    def from_variable(cls, variable: int, is_positive: bool) -> Literal:
        """Build the positive or negative literal of a 0-based variable."""
        if variable < 0:
            raise ValueError(f"invalid variable {variable}")
        index = variable << 1
        return cls.from_index(index if is_positive else index ^ 1)

    def variable(self) -> int:
        return self._index >> 1

    def is_positive(self) -> bool:
        return not self._index & 1

    def is_negative(self) -> bool:
        return bool(self._index & 1)

    def index(self) -> int:
        return self._index

    def negated_index(self) -> int:
        return self._index ^ 1

    def signed_value(self) -> int:
        magnitude = (self._index >> 1) + 1
        return -magnitude if self._index & 1 else magnitude

    def negated(self) -> Literal:
        return Literal.from_index(self.negated_index())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return self._index == other._index

    def __lt__(self, other: Literal) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return self._index < other._index

    def __hash__(self) -> int:
        return self._index

    def __str__(self) -> str:
        return str(self.signed_value())

    def __repr__(self) -> str:
        return f"Literal({self.signed_value()})"