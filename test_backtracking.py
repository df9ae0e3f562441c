import itertools
import operator
import unittest

import pytest

from csp import (Constraint, ConstraintSatisfactionProblem, InvalidOptionError, Status,
                 all_different_constraints, backtracking)
from csp.searcher import brute_force, generate_candidates

selectors = ['take_head', 'minimum_remaining_values',
             lambda unassigned: (unassigned[-1], unassigned[:-1])]


def canonical(assignments):
    return sorted(tuple(sorted(a.items(), key=repr)) for a in assignments)


def pigeonholes(n):
    """n pigeons, n - 1 holes."""
    pigeons = list(range(n))
    return ConstraintSatisfactionProblem(
        pigeons, {p: range(n - 1) for p in pigeons}, all_different_constraints(pigeons))


def arithmetic():
    """a + b == c, with a ternary constraint AC-3 can't propagate."""
    return ConstraintSatisfactionProblem(
        'abc', {v: range(1, 5) for v in 'abc'},
        [Constraint('abc', lambda a, b, c: a + b == c), Constraint('ab', operator.lt)])


@pytest.mark.parametrize('inference, selector', list(itertools.product([False, True], selectors)))
@pytest.mark.parametrize('name', ['australia', 'squares', 'queens5', 'queens6', 'arithmetic'])
def test_all_solutions_match_brute_force(request, queens, name, inference, selector):
    if name.startswith('queens'):
        problem = queens(int(name[-1]))
    elif name == 'arithmetic':
        problem = arithmetic()
    else:
        problem = request.getfixturevalue(name)

    expected = brute_force(problem, all_solutions=True)
    result = backtracking.solve(problem, all_solutions=True, ac3=inference,
                                variable_selector=selector)

    assert result.status is Status.SOLVED
    assert canonical(result.value) == canonical(expected.value)


@pytest.mark.parametrize('inference', [False, True])
@pytest.mark.parametrize('selector', selectors)
def test_first_solution_is_valid(queens, validate, inference, selector):
    problem = queens(8)
    result = backtracking.solve(problem, ac3=inference, variable_selector=selector)
    assert result.status is Status.SOLVED
    assert isinstance(result.value, dict)
    assert validate(problem, result.value)


@pytest.mark.parametrize('inference', [False, True])
def test_no_solution_is_proven(inference):
    result = backtracking.solve(pigeonholes(4), all_solutions=True, ac3=inference)
    assert result.status is Status.NO_SOLUTION
    assert result.proven


def test_take_head_tries_values_in_domain_order(queens):
    assert backtracking.solve(queens(4)).value == {0: 1, 1: 3, 2: 0, 3: 2}
    assert backtracking.solve(queens(4).with_domains({c: [3, 2, 1, 0] for c in range(4)})).value \
        == {0: 2, 1: 0, 2: 3, 3: 1}


def test_empty_problem_has_one_solution():
    problem = ConstraintSatisfactionProblem([], {})
    assert backtracking.solve(problem).value == {}
    assert list(generate_candidates(problem)) == [{}]


def test_custom_selector_sees_unassigned_variables(australia):
    seen = []

    def last(unassigned):
        seen.append(list(unassigned))
        return unassigned[-1], unassigned[:-1]

    result = backtracking.solve(australia, variable_selector=last)

    assert result.is_solved
    assert seen[0] == ['WA', 'NT', 'Q', 'NSW', 'V', 'SA', 'T']
    assert seen[1] == ['WA', 'NT', 'Q', 'NSW', 'V', 'SA']


def test_inference_assigns_forced_variables():
    seen = []

    def head(unassigned):
        seen.append(list(unassigned))
        return unassigned[0], unassigned[1:]

    problem = ConstraintSatisfactionProblem(
        'xyz', {'x': [1, 2, 3], 'y': [1, 2], 'z': [1, 2, 3]}, all_different_constraints('xyz'))
    result = backtracking.solve(problem, ac3=True, variable_selector=head)

    assert result.value == {'x': 1, 'y': 2, 'z': 3}
    # Choosing x = 1 forces y and z, so the search never selects them.
    assert seen == [['x', 'y', 'z']]


class SelectorTestCase(unittest.TestCase):
    def setUp(self):
        self.problem = ConstraintSatisfactionProblem(
            'abcd', {'a': [1, 2, 3], 'b': [1, 2], 'c': [1, 2, 3], 'd': [1, 2]})

    def test_take_head(self):
        self.assertEqual(('a', ['b', 'c', 'd']),
                         backtracking.take_head(['a', 'b', 'c', 'd'], self.problem))

    def test_minimum_remaining_values_breaks_ties_in_order(self):
        self.assertEqual(('b', ['a', 'c', 'd']),
                         backtracking.minimum_remaining_values(['a', 'b', 'c', 'd'], self.problem))
        self.assertEqual(('d', ['c', 'b']),
                         backtracking.minimum_remaining_values(['c', 'd', 'b'], self.problem))

    def test_minimum_remaining_values_reads_current_domains(self):
        reduced = self.problem.with_domain('c', [3])
        self.assertEqual(('c', ['a', 'b', 'd']),
                         backtracking.minimum_remaining_values(['a', 'b', 'c', 'd'], reduced))

    def test_unknown_selector(self):
        with self.assertRaises(InvalidOptionError):
            backtracking.solve(self.problem, variable_selector='most_constrained')
        with self.assertRaises(InvalidOptionError):
            backtracking.variable_selector_for(['take_head'])


def test_generate_candidates_order():
    problem = ConstraintSatisfactionProblem('ab', {'a': [1, 2], 'b': ['x', 'y']})
    assert list(generate_candidates(problem)) == [
        {'a': 1, 'b': 'x'}, {'a': 1, 'b': 'y'}, {'a': 2, 'b': 'x'}, {'a': 2, 'b': 'y'}]


@pytest.mark.parametrize('selector', [backtracking.take_head, backtracking.minimum_remaining_values])
def test_built_in_selector_functions_are_accepted(australia, validate, selector):
    assert backtracking.variable_selector_for(selector) is selector
    result = backtracking.solve(australia, variable_selector=selector)
    assert result.is_solved
    assert validate(australia, result.value)
    named = backtracking.solve(australia, variable_selector=selector.__name__)
    assert result.value == named.value
