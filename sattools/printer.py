"""Comment-prefixed report lines in the style of DIMACS solver output."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from typing import Any, TextIO

_WIDTH = 80
_LEFT = 40
_COMMENT = "c "
_RATIO_WIDTH = 7


def _out(file: TextIO | None) -> TextIO:
    return file if file is not None else sys.stdout


def _fmt(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = int(a / b)
    return quotient, a - quotient * b


def print_section(title: str, file: TextIO | None = None) -> None:
    """Print ``title`` centred in a line of '=' characters."""
    length = _WIDTH - len(title) - len(_COMMENT)
    half, rem = _trunc_divmod(length, 2)
    left = "=" * max(half, 1)
    right = "=" * max(half + rem - 1, 1)
    print(f"{_COMMENT}{left}{title}{right}", file=_out(file))


def print_message(message: Any, file: TextIO | None = None) -> None:
    print(f"{_COMMENT}{_fmt(message)}", file=_out(file))


def print_labeled(label: str, value: Any, end: str = "", file: TextIO | None = None) -> None:
    print(f"{_COMMENT}{label} {_fmt(value)} {end}", file=_out(file))


def print_stat(
    name: str,
    value: Any,
    total: Any = None,
    end: str = "",
    file: TextIO | None = None,
) -> None:
    """Print a statistic with its value aligned on a fixed column.

    With ``total`` the line also shows the value as a percentage of it.
    """
    padding = " " * max(_WIDTH - len(name) - len(_COMMENT) - _LEFT, 1)
    head = f"{_COMMENT}{name}{padding}"
    if total is None:
        print(f"{head}{_fmt(value)} {end}", file=_out(file))
        return
    if total == 0:
        ratio = math.copysign(math.inf, value) if value else math.nan
    else:
        ratio = value / float(total)
    percent = format(ratio * 100, "g")
    print(
        f"{head}{_fmt(value).ljust(_RATIO_WIDTH)} / {_fmt(total)} == {percent}%{end}",
        file=_out(file),
    )


def print_sequence(label: str, values: Iterable[Any], file: TextIO | None = None) -> None:
    items = "".join(f"{_fmt(value)} " for value in values)
    print(f"{_COMMENT}{label}: {items}", file=_out(file))