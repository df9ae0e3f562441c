import pytest

from csp import Constraint, ConstraintSatisfactionProblem, all_different_constraints

australia_names = ['WA', 'NT', 'Q', 'NSW', 'V', 'SA', 'T']
australia_neighbors = [
    ('WA', 'NT'), ('NT', 'SA'), ('WA', 'SA'), ('NT', 'Q'), ('SA', 'Q'),
    ('Q', 'NSW'), ('SA', 'NSW'), ('SA', 'V'), ('NSW', 'V')
]
colors = ['red', 'green', 'blue']


def make_australia():
    constraints = [c for pair in australia_neighbors for c in all_different_constraints(pair)]
    return ConstraintSatisfactionProblem(
        australia_names, {name: colors for name in australia_names}, constraints)


def make_squares(x_domain=range(10), y_domain=range(10)):
    """y = x ** 2"""
    return ConstraintSatisfactionProblem(
        ['x', 'y'], {'x': x_domain, 'y': y_domain},
        [Constraint(['x', 'y'], lambda x, y: y == x * x)])


def make_queens(n):
    """One variable per column, valued by the row of that column's queen."""
    columns = list(range(n))
    constraints = []
    for i in columns:
        for j in columns[i + 1:]:
            constraints.append(Constraint(
                [i, j], lambda a, b, distance=j - i: a != b and abs(a - b) != distance))
    return ConstraintSatisfactionProblem(columns, {c: range(n) for c in columns}, constraints)


def is_valid_solution(csp, assignment):
    """Checks a solution without going through the solver's own helpers."""
    if set(assignment) != set(csp.variables):
        return False
    for variable, value in assignment.items():
        if value not in csp.domains[variable]:
            return False
    for constraint in csp.constraints:
        values = [assignment[v] for v in constraint.arguments()]
        if not constraint.predicate(*values):
            return False
    return True


@pytest.fixture
def australia():
    return make_australia()


@pytest.fixture
def squares():
    return make_squares()


@pytest.fixture
def queens():
    return make_queens


@pytest.fixture
def validate():
    return is_valid_solution
