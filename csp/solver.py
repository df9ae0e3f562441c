"""
The solve entry point: picks a method and chains AC-3 into search.
"""

from . import ac3 as _ac3
from . import backtracking, config, min_conflicts
from .errors import InvalidOptionError
from .logging_utils import get_logger
from .result import Status
from .searcher import brute_force

logger = get_logger(__name__)


def solve(csp, method=config.DEFAULT_METHOD, all_solutions=False, ac3=False,
          variable_selector=config.DEFAULT_VARIABLE_SELECTOR,
          max_iterations=config.DEFAULT_MAX_ITERATIONS,
          optimize_initial_state=False, tabu_depth=config.DEFAULT_TABU_DEPTH,
          random=None, arity_policy=config.DEFAULT_ARITY_POLICY):
    """
    Solve a constraint satisfaction problem.

    Options that don't apply to the chosen method are ignored.

    Args:
        csp (ConstraintSatisfactionProblem): The problem to solve
        method (str): 'backtracking', 'min_conflicts', 'brute_force', or
            'ac3' to reduce the problem with AC-3 and then backtrack
        all_solutions (bool): Return every solution rather than the first
            (backtracking, ac3 and brute_force)
        ac3 (bool): Run AC-3 inference during backtracking
        variable_selector: The backtracking variable ordering:
            'take_head', 'minimum_remaining_values' or a callable
        max_iterations (int): Min-conflicts iteration budget
        optimize_initial_state (bool): Greedy min-conflicts start
        tabu_depth (int): Min-conflicts tabu list bound, None for unbounded
        random: Min-conflicts random source: a `random.Random`, a seed or
            None
        arity_policy (str): What AC-3 does with constraints over more than
            two variables, 'skip' or 'fail'

    Returns:
        A `Result` with status SOLVED or NO_SOLUTION.

    Raises:
        InvalidOptionError: An option has a value no solver understands.
    """
    if method not in config.METHODS:
        raise InvalidOptionError("unknown method: {!r}".format(method))
    logger.debug("solving %r with %s", csp, method)

    if method == 'min_conflicts':
        return min_conflicts.solve(csp, max_iterations=max_iterations,
                                   optimize_initial_state=optimize_initial_state,
                                   tabu_depth=tabu_depth, random=random)
    if method == 'brute_force':
        return brute_force(csp, all_solutions=all_solutions)

    if method == 'ac3':
        reduction = _ac3.solve(csp, arity_policy=arity_policy)
        if reduction.status is Status.NO_SOLUTION:
            return reduction
        if reduction.status is Status.SOLVED:
            csp = csp.with_domains({v: (value,) for v, value in reduction.value.items()})
        else:
            csp = reduction.value

    return backtracking.solve(csp, all_solutions=all_solutions, ac3=ac3,
                              variable_selector=variable_selector,
                              arity_policy=arity_policy)
