"""Loader for DIMACS CNF files, plain or gzip-compressed."""

from __future__ import annotations

import os
from typing import Protocol

from sattools.literal import Literal
from sattools.stream_buffer import READ, StreamBuffer


class CNFError(ValueError):
    """The CNF input is malformed or disagrees with its header."""


class _Model(Protocol):
    def add_clause(self, literals: list[Literal]) -> object: ...


def _expect(stream: StreamBuffer, text: str) -> None:
    for expected in text:
        stream.advance()
        found = stream.current()
        if found != expected:
            raise CNFError(f"Expected {expected!r} in header: found {found!r}")


def load_cnf(filename: str | os.PathLike[str], model: _Model) -> None:
    """Read the clauses of ``filename`` into ``model`` via ``add_clause``.

    Raises CNFError when the number of variables or clauses differs from the
    ``p cnf`` header.
    """
    expected_num_vars = expected_num_clauses = 0
    num_vars = num_clauses = 0

    with StreamBuffer(filename, READ) as stream:
        try:
            while stream.current() != "\0":
                c = stream.current()
                if c == "c":
                    stream.skip_line()
                elif c == "p":
                    _expect(stream, " cnf")
                    stream.advance()
                    expected_num_vars = stream.read_int()
                    expected_num_clauses = stream.read_int()
                    stream.skip_line()
                else:
                    literals: list[Literal] = []
                    while (value := stream.read_int()) != 0:
                        literals.append(Literal(value))
                        num_vars = max(num_vars, abs(value))
                    model.add_clause(literals)
                    num_clauses += 1
                    stream.skip_line()
                stream.skip_whitespaces()
        except CNFError:
            raise
        except ValueError as exc:
            raise CNFError(str(exc)) from exc

    if expected_num_vars != num_vars:
        raise CNFError(f"Expected {expected_num_vars} variables: found {num_vars}")
    if expected_num_clauses != num_clauses:
        raise CNFError(
            f"Expected {expected_num_clauses} clauses: found {num_clauses}"
        )