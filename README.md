# sattools

Pure-Python building blocks for writing SAT solvers. The package has no
dependencies outside the standard library.

## Modules

### Literals and assignments

- `sattools.literal.Literal`: a variable or its negation. `Literal(-3)` builds
  it from its signed DIMACS value; `Literal.from_index(i)` and
  `Literal.from_variable(var, is_positive)` build it from the index encoding
  (`var << 1` for the positive literal, `(var << 1) ^ 1` for the negative one)
  or from a 0-based variable. It offers `variable()`, `is_positive()`,
  `is_negative()`, `index()`, `negated_index()`, `signed_value()` and
  `negated()`, is hashable, and orders by index. `str()` gives the signed
  value. `Literal(0)` raises `ValueError`.
- `sattools.assignment.Assignment`: the truth value of every variable.
  `assign_from_true_literal`, `unassign_literal`, `literal_is_true`,
  `literal_is_false`, `literal_is_assigned`, `variable_is_assigned`,
  `true_literal_for_assigned_variable`, `false_literal_for_assigned_variable`,
  `has_same_assignment_value` and `num_variables`. Assigning an already
  assigned variable, or unassigning an unassigned one, raises `ValueError`.

### Search state

- `sattools.trail.Trail`: assigned literals in order, grouped by decision
  level. Size it with `resize(num_vars)`, then use `enqueue`,
  `enqueue_with_unit_reason`, `enqueue_search_decision`, `dequeue`,
  `new_decision_level`, `cancel_until(level)`, `current_decision_level`,
  `index()` (number of literals on the trail), `trail[i]`, `info(var)`,
  `decision_level(var)`, `assignment()` and `debug_string()`.
  `AssignmentType` names the reason kinds (`UNIT_REASON`, `SEARCH_DECISION`,
  and `FIRST_FREE_PROPAGATION_ID` where propagator ids begin);
  `AssignmentInfo` holds the polarity, type, level and trail position of a
  variable. `register_propagator(p)` gives `p` the next free id in
  `p.propagator_id`; `reason(var)` then returns `p.reason_clause(trail_index)`
  for variables that propagator assigned, and `None` for decisions and unit
  assignments.
- `sattools.decision.VSIDSDecisionPolicy`: picks the unassigned variable with
  the highest activity and returns its negative literal. Call
  `increase_num_variables(n)` first; `literals_on_conflict(literals)` bumps
  activities, `on_conflict()` decays them, and `on_unassign_literal(literal)`
  puts a variable back among the candidates. `next_branch()` raises
  `LookupError` when no unassigned variable is left. `DecisionPolicy` is the
  abstract base class.
- `sattools.restart`: `luby(i)` returns the i-th term (i > 0) of the sequence
  1, 1, 2, 1, 1, 2, 4, ... `LubyRestartPolicy` restarts after 100 conflicts,
  then after 100 times the next Luby term; call `on_conflict()` after each
  conflict and ask `should_restart()`. `NoRestartPolicy` never restarts.
  `RestartPolicy` is the abstract base class.

### Data structures

- `sattools.priority_queue.IntegerPriorityQueue`: a binary max-heap of
  elements that each carry a distinct integer index below the capacity, with
  `add`, `top`, `pop`, `remove(index)`, `increase_priority`,
  `decrease_priority`, `change_priority`, `clear`, `reserve`, `len()` and
  `index in queue`. The ordering and the index of an element are given by
  the `less` and `index_of` arguments.
- `sattools.disjoint_sets.DisjointSets`: union-find with union by rank and
  path compression. `find` returns -1 for an element never added.
- `sattools.watcher.Watcher`: values stored per key; `watch(key)` returns them
  as a tuple, empty for an unknown key.
- `sattools.clause_injector.ClauseInjector`: clauses waiting to be added,
  kept in order; iterable and sized.
- `sattools.ranges`: `int_range(begin, end)` and `chain_ranges(*sequences)`,
  which yields the elements of every sequence in turn.

### Files and reports

- `sattools.stream_buffer.StreamBuffer`: character-level access to a file.
  Opened for reading (`"rb"`), it accepts plain and gzip-compressed files and
  offers `current()` (which is `"\0"` at the end of the input), `advance()`,
  `read_int()`, `skip_whitespaces()` and `skip_line()`. Opened with `"w"` it
  writes gzip-compressed output, with `"wT"` plain output, through `write`,
  `write_int` and `flush`. It is a context manager. A file that cannot be
  opened raises `OSError`; a malformed integer raises `ValueError`.
- `sattools.cnf_reader.load_cnf(filename, model)`: reads a DIMACS CNF file
  and calls `model.add_clause(literals)` with a list of `Literal` for each
  clause. It raises `CNFError` (a `ValueError`) on a malformed file or when
  the number of variables or clauses differs from the `p cnf` header.
- `sattools.stats`: `CounterStat`, `IntegerDistribution` (count, minimum,
  maximum, mean, standard deviation and sum) and `LiteralStat`, gathered in a
  `StatsGroup` and printed as report lines.
- `sattools.printer`: `print_section`, `print_message`, `print_labeled`,
  `print_stat` and `print_sequence` write `c `-prefixed lines to standard
  output or to a given file.

## Example

```python
from sattools.cnf_reader import load_cnf
from sattools.literal import Literal


class Model:
    def __init__(self):
        self.clauses = []

    def add_clause(self, literals):
        self.clauses.append(list(literals))


model = Model()
load_cnf("problem.cnf", model)
print([[str(lit) for lit in clause] for clause in model.clauses])

lit = Literal(-2)
assert lit.variable() == 1 and lit.is_negative()
assert lit.negated() == Literal(2)
```

## What it does not do

This is a toolkit, not a solver. It has no clause database, no unit
propagation, no conflict analysis and no search loop, and it installs no
command. Clause storage and propagators are left to the code that uses it;
a propagator only has to provide a `propagator_id` attribute and a
`reason_clause(trail_index)` method to work with `Trail`.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```