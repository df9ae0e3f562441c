"""
Brute-force search: try every complete assignment.

Exponential in the number of variables, so only useful for small problems
and as an oracle to check the other solvers against.
"""

import itertools

from .logging_utils import get_logger
from .result import Result

logger = get_logger(__name__)


def generate_candidates(csp):
    """
    Generate every complete assignment of `csp`.

    Yields:
        dicts of variable -> value, with the last variable changing fastest.
    """
    domains = [csp.domain(variable) for variable in csp.variables]
    for values in itertools.product(*domains):
        yield dict(zip(csp.variables, values))


def brute_force(csp, all_solutions=False):
    """
    Solve `csp` by testing every complete assignment.

    Args:
        csp (ConstraintSatisfactionProblem): The problem to solve
        all_solutions (bool): Find every solution instead of the first one

    Returns:
        A `Result`: SOLVED with an assignment (or a list of them, if
        `all_solutions`), or a proven NO_SOLUTION.
    """
    solutions = (candidate for candidate in generate_candidates(csp)
                 if csp.is_solution(candidate))

    if all_solutions:
        found = list(solutions)
        logger.debug("brute force found %d solution(s)", len(found))
        return Result.solved(found) if found else Result.no_solution()

    first = next(solutions, None)
    return Result.solved(first) if first is not None else Result.no_solution()
