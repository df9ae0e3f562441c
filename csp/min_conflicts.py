"""
Min-conflicts local search, with a tabu list to get out of local minima.

Unlike backtracking this works on complete assignments and can't prove a
problem unsatisfiable: running out of iterations gives a NO_SOLUTION
result with `proven` set to False.
"""

import random as _random
from collections import deque

from . import config
from .errors import InvalidOptionError
from .logging_utils import get_logger
from .result import Result

logger = get_logger(__name__)


def random_source(random=None):
    """
    Get a `random.Random` from the `random` option.

    Args:
        random: A `random.Random` (used as is), an integer seed, or None
            for a fresh, unseeded generator
    """
    if isinstance(random, _random.Random):
        return random
    return _random.Random(random)


def random_initial_state(csp, rng):
    """
    Assign each variable a value drawn uniformly from its domain.
    """
    return {variable: rng.choice(csp.domain(variable)) for variable in csp.variables}


def optimized_initial_state(csp, rng):
    """
    Greedily build an initial assignment.

    Variables are assigned in order, each taking the value with the fewest
    conflicts with the variables assigned before it. A variable none of
    whose constraints can be checked against those yet gets a random value.
    """
    assignment = {}
    for variable in csp.variables:
        assignment[variable] = min_conflicts_value(csp, variable, assignment, rng)
    return assignment


def min_conflicts_value(csp, variable, assignment, rng):
    """
    Pick the value of `variable` conflicting least with `assignment`.

    Ties are broken at random; so is the whole choice when no constraint on
    `variable` has all its other arguments assigned.
    """
    domain = csp.domain(variable)
    comparable = [c for c in csp.constraints_on(variable)
                  if all(v == variable or v in assignment for v in c.arguments())]
    if not comparable:
        return rng.choice(domain)

    counts = {}
    for value in domain:
        candidate = dict(assignment)
        candidate[variable] = value
        counts[value] = sum(1 for c in comparable if not c.satisfies(candidate))
    fewest = min(counts.values())
    return rng.choice([value for value in domain if counts[value] == fewest])


def solve(csp, max_iterations=config.DEFAULT_MAX_ITERATIONS,
          optimize_initial_state=False, tabu_depth=config.DEFAULT_TABU_DEPTH,
          random=None):
    """
    Solve `csp` with min-conflicts.

    Args:
        csp (ConstraintSatisfactionProblem): The problem to solve
        max_iterations (int): The number of repairs to try before giving up
        optimize_initial_state (bool): Start from a greedy assignment
            instead of a random one
        tabu_depth (int): How many recent (variable, value) moves are
            forbidden, or None to forbid every move made so far
        random: A `random.Random`, a seed, or None

    Returns:
        A `Result`: SOLVED with the assignment, or an unproven NO_SOLUTION.

    Raises:
        InvalidOptionError: `max_iterations` or `tabu_depth` isn't a
            positive integer.
    """
    _check_positive('max_iterations', max_iterations)
    if tabu_depth is not None:
        _check_positive('tabu_depth', tabu_depth)

    if any(not csp.domain(variable) for variable in csp.variables):
        return Result.no_solution()

    rng = random_source(random)
    assignment = (optimized_initial_state(csp, rng) if optimize_initial_state
                  else random_initial_state(csp, rng))

    # Most recent move on the left; a full bounded deque drops the oldest.
    tabu = deque(maxlen=tabu_depth)

    for iteration in range(max_iterations):
        conflicted = csp.conflicted(assignment)
        if not conflicted:
            logger.debug("min-conflicts solved the problem after %d iterations", iteration)
            return Result.solved(assignment)

        if iteration and iteration % config.PROGRESS_LOG_INTERVAL == 0:
            logger.debug("[min-conflicts] iteration=%d, conflicted=%d, tabu=%d",
                         iteration, len(conflicted), len(tabu))

        variable = rng.choice(conflicted)
        value = _next_value(csp, variable, assignment, tabu, rng)

        assignment = dict(assignment)
        assignment[variable] = value
        tabu.appendleft((variable, value))

    if csp.is_solution(assignment):
        return Result.solved(assignment)

    logger.debug("min-conflicts gave up after %d iterations", max_iterations)
    return Result.no_solution(proven=False)


def _next_value(csp, variable, assignment, tabu, rng):
    """
    The least conflicting value of `variable` that isn't tabu, or a random
    one if they all are.
    """
    for value in csp.order_by_conflicts(variable, assignment):
        if (variable, value) not in tabu:
            return value
    return rng.choice(csp.domain(variable))


def _check_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidOptionError("{} must be a positive integer, got {!r}".format(name, value))
