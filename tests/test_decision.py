import pytest

from sattools.decision import DecisionPolicy, VSIDSDecisionPolicy
from sattools.literal import Literal
from sattools.trail import Trail


def make_policy(num_vars=3):
    trail = Trail()
    trail.resize(num_vars)
    policy = VSIDSDecisionPolicy(trail)
    policy.increase_num_variables(num_vars)
    return trail, policy


def decide(trail, policy):
    trail.new_decision_level()
    literal = policy.next_branch()
    trail.enqueue_search_decision(literal)
    return literal


def backtrack_to_root(trail, policy):
    removed = [trail[i] for i in range(trail.index())]
    trail.cancel_until(0)
    for literal in removed:
        policy.on_unassign_literal(literal)


def test_decision_policy_is_abstract():
    with pytest.raises(TypeError):
        DecisionPolicy(Trail())


def test_first_branch_is_first_variable_negative():
    _, policy = make_policy()
    assert policy.next_branch() == Literal.from_variable(0, False)


def test_branches_cover_all_unassigned_variables_negatively():
    trail, policy = make_policy(4)
    decided = [decide(trail, policy) for _ in range(4)]
    assert sorted(literal.variable() for literal in decided) == [0, 1, 2, 3]
    assert all(literal.is_negative() for literal in decided)


def test_assigned_variables_are_skipped():
    trail, policy = make_policy()
    trail.enqueue_with_unit_reason(Literal(1))
    assert policy.next_branch() == Literal.from_variable(1, False)


def test_exhausted_queue_raises():
    trail, policy = make_policy(1)
    decide(trail, policy)
    with pytest.raises(LookupError):
        policy.next_branch()


def test_bumped_variable_is_chosen_after_backtrack():
    trail, policy = make_policy()
    decide(trail, policy)
    second = decide(trail, policy)
    policy.literals_on_conflict([second])
    backtrack_to_root(trail, policy)
    assert policy.next_branch().variable() == second.variable()


def test_later_bump_outweighs_earlier_after_decay():
    trail, policy = make_policy()
    first = decide(trail, policy)
    second = decide(trail, policy)
    decide(trail, policy)
    policy.literals_on_conflict([first])
    policy.on_conflict()
    policy.literals_on_conflict([second])
    backtrack_to_root(trail, policy)
    assert policy.next_branch().variable() == second.variable()
    trail.new_decision_level()
    trail.enqueue_search_decision(Literal.from_variable(second.variable(), False))
    assert policy.next_branch().variable() == first.variable()


def test_unassign_of_assigned_literal_raises():
    trail, policy = make_policy()
    literal = decide(trail, policy)
    with pytest.raises(ValueError):
        policy.on_unassign_literal(literal)


def test_decreasing_variables_raises():
    _, policy = make_policy(3)
    with pytest.raises(ValueError):
        policy.increase_num_variables(2)


def test_new_variables_join_initialised_ordering():
    trail, policy = make_policy(1)
    decide(trail, policy)
    trail.resize(2)
    policy.increase_num_variables(2)
    assert policy.next_branch() == Literal.from_variable(1, False)