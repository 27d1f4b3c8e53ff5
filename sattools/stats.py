"""Named statistics that print themselves as report lines."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TextIO

from sattools.printer import print_section, print_stat


class Stat(ABC):
    """A named statistic, optionally registered with a group."""

    def __init__(self, name: str, group: StatsGroup | None = None) -> None:
        self.name = name
        if group is not None:
            group.register_stat(self)

    @abstractmethod
    def value_string(self) -> str: ...

    def print(self, file: TextIO | None = None) -> None:
        print_stat(self.name, self.value_string(), file=file)


class StatsGroup:
    """Named collection of statistics printed together."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._stats: list[Stat] = []

    def register_stat(self, stat: Stat) -> None:
        self._stats.append(stat)

    def print(self, section: bool = False, file: TextIO | None = None) -> None:
        if section:
            print_section(self.name, file=file)
        for stat in self._stats:
            stat.print(file=file)


class DistributionStat(Stat):
    """Running minimum, maximum, sum, mean and deviation of added values."""

    def __init__(self, name: str, group: StatsGroup | None = None) -> None:
        super().__init__(name, group)
        self._sum = 0.0
        self._average = 0.0
        self._sum_squares_from_average = 0.0
        self._min = 0.0
        self._max = 0.0
        self._num = 0

    def sum(self) -> float:
        return self._sum

    def max(self) -> float:
        return self._max

    def min(self) -> float:
        return self._min

    def num(self) -> int:
        return self._num

    def average(self) -> float:
        return self._average

    def std_deviation(self) -> float:
        if self._num == 0:
            return math.nan
        return math.sqrt(self._sum_squares_from_average / self._num)

    def _add_to_distribution(self, value: float) -> None:
        if self._num == 0:
            self._min = self._max = self._sum = self._average = value
            self._num = 1
            return
        self._min = min(self._min, value)
        self._max = max(self._max, value)
        self._sum += value
        self._num += 1
        delta = value - self._average
        self._average = self._sum / self._num
        self._sum_squares_from_average += delta * (value - self._average)


class IntegerDistribution(DistributionStat):
    """Distribution of a sequence of integers."""

    def add(self, value: int) -> None:
        self._add_to_distribution(float(value))

    def value_string(self) -> str:
        return (
            f"{self._num} [{self.min():.2f}, {self.max():.2f}] "
            f"{self.average():.2f} {self.std_deviation():.2f} {self.sum():.2f}"
        )


class CounterStat(Stat):
    """Counts occurrences."""

    def __init__(self, name: str, group: StatsGroup | None = None) -> None:
        super().__init__(name, group)
        self._value = 0

    def increment(self) -> None:
        self._value += 1

    def value_string(self) -> str:
        return str(self._value)


class LiteralStat(Stat):
    """Sizes of literal sets, with their positive and negative counts."""

    def __init__(self, name: str, group: StatsGroup | None = None) -> None:
        super().__init__(name, group)
        self.literals = IntegerDistribution("literals")
        self.positive_literals = IntegerDistribution("|- postive literals", group)
        self.negative_literals = IntegerDistribution("|- negative literals", group)

    def add(self, size: int, pos: int, neg: int) -> None:
        self.literals.add(size)
        if pos != 0:
            self.positive_literals.add(pos)
        if neg != 0:
            self.negative_literals.add(neg)

    def value_string(self) -> str:
        return self.literals.value_string()