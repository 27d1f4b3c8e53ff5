"""Restart policies deciding when a search should restart."""

from __future__ import annotations

from abc import ABC, abstractmethod

RESTART_PERIOD = 100


def luby(i: int) -> int:
    """Return the i-th term (i > 0) of the Luby sequence 1, 1, 2, 1, 1, 2, 4, ..."""
    if i <= 0:
        raise ValueError("the Luby sequence is defined for i > 0")
    while i > 2:
        msb = (i + 1).bit_length() - 1
        if (1 << msb) == i + 1:
            return 1 << (msb - 1)
        i -= (1 << msb) - 1
    return 1


class RestartPolicy(ABC):
    """Decides, after conflicts, whether the search should restart."""

    @abstractmethod
    def should_restart(self) -> bool: ...

    def on_conflict(self) -> None:
        """Record that a conflict happened."""


class LubyRestartPolicy(RestartPolicy):
    """Restarts after RESTART_PERIOD times the next Luby term conflicts."""

    def __init__(self) -> None:
        self._luby_count = 0
        self._conflicts_until_next_restart = RESTART_PERIOD

    def should_restart(self) -> bool:
        if self._conflicts_until_next_restart != 0:
            return False
        self._luby_count += 1
        self._conflicts_until_next_restart = RESTART_PERIOD * luby(self._luby_count + 1)
        return True

    def on_conflict(self) -> None:
        if self._conflicts_until_next_restart > 0:
            self._conflicts_until_next_restart -= 1


class NoRestartPolicy(RestartPolicy):
    """Never restarts."""

    def should_restart(self) -> bool:
        return False