"""Building blocks for SAT solvers: literals, assignments, trails, decision
and restart policies, data structures, statistics and DIMACS CNF reading."""

__version__ = "0.1.0"