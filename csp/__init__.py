"""
This package is a framework for solving constraint satisfaction problems.

Build a `ConstraintSatisfactionProblem` from variables, domains and
constraints, then hand it to `solve`:

    >>> from csp import ConstraintSatisfactionProblem, all_different_constraints, solve
    >>> problem = ConstraintSatisfactionProblem(
    ...     ['a', 'b'], {'a': [1, 2], 'b': [1, 2]}, all_different_constraints(['a', 'b']))
    >>> solve(problem).value
    {'a': 1, 'b': 2}

The solvers live in their own modules: `csp.ac3`, `csp.backtracking`,
`csp.min_conflicts` and `csp.searcher`.
"""

from .constraint import (BaseConstraint, Constraint, all_different_constraints,
                         boolean_domain, digit_domain, digit_domain_from_zero)
from .errors import CSPError, InvalidOptionError, UndeclaredVariableError, UnsupportedArityError
from .logging_utils import configure_logging
from .problem import CSP, ConstraintSatisfactionProblem
from .result import Result, Status
from .solver import solve

__all__ = [
    'BaseConstraint', 'Constraint', 'all_different_constraints',
    'boolean_domain', 'digit_domain', 'digit_domain_from_zero',
    'CSPError', 'InvalidOptionError', 'UndeclaredVariableError', 'UnsupportedArityError',
    'configure_logging',
    'CSP', 'ConstraintSatisfactionProblem',
    'Result', 'Status',
    'solve',
]
