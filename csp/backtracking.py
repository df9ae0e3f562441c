"""
Backtracking search.

Assigns one variable per level of recursion, trying its values in domain
order, and optionally runs AC-3 after every assignment to prune the rest
of the search.
"""

from . import ac3 as _ac3
from . import config
from .errors import InvalidOptionError
from .logging_utils import get_logger
from .result import Result

logger = get_logger(__name__)


def take_head(unassigned, csp):
    """
    Choose the first unassigned variable.
    """
    return unassigned[0], unassigned[1:]


def minimum_remaining_values(unassigned, csp):
    """
    Choose the variable with the fewest values left in its domain.

    Ties go to the variable that comes first in `unassigned`.
    """
    index = min(range(len(unassigned)), key=lambda i: len(csp.domain(unassigned[i])))
    return unassigned[index], unassigned[:index] + unassigned[index + 1:]


SELECTORS = {
    'take_head': take_head,
    'minimum_remaining_values': minimum_remaining_values,
}


def variable_selector_for(selector):
    """
    Turn the `variable_selector` option into a function
    (unassigned, csp) -> (variable, rest of unassigned).

    Args:
        selector: The name of a built-in selector, one of the built-in
            selector functions, or a callable taking the list of
            unassigned variables and returning a tuple of the variable to
            assign next and the list of the others

    Raises:
        InvalidOptionError: `selector` isn't a known name or a callable.
    """
    if selector in SELECTORS.values():
        return selector
    if callable(selector):
        return lambda unassigned, csp: selector(unassigned)
    if isinstance(selector, str) and selector in config.VARIABLE_SELECTORS:
        return SELECTORS[selector]
    raise InvalidOptionError("unknown variable selector: {!r}".format(selector))


class _Backtracker:
    """
    The options of one search, shared by every level of the recursion.
    """
    def __init__(self, select, ac3, all_solutions, arity_policy):
        self.select = select
        self.ac3 = ac3
        self.all_solutions = all_solutions
        self.arity_policy = arity_policy
        self.nodes = 0

    def backtrack(self, assignment, unassigned, csp):
        """
        Backtracking search.

        Args:
            assignment (dict): The consistent partial assignment so far
            unassigned (list): The variables still to be assigned
            csp: The problem, with domains narrowed by inference if AC-3 is
                on

        Returns:
            A list of complete assignments extending `assignment`: empty if
                there are none, at most one unless all solutions are wanted.
        """
        if not unassigned:
            return [assignment]

        self.nodes += 1
        (variable, rest) = self.select(unassigned, csp)

        solutions = []
        for value in csp.domain(variable):
            candidate = dict(assignment)
            candidate[variable] = value

            if not _admissible(csp, variable, candidate):
                continue

            next_csp, next_unassigned = csp, rest
            if self.ac3:
                inferred = _ac3.reduce(csp, candidate, rest, self.arity_policy)
                if inferred is None:
                    continue
                (next_csp, candidate, next_unassigned) = inferred

            found = self.backtrack(candidate, next_unassigned, next_csp)
            if found:
                if not self.all_solutions:
                    return found
                solutions.extend(found)

        return solutions


def _admissible(csp, variable, assignment):
    """
    Check the constraints that assigning `variable` may have completed.

    Every other covered constraint was checked when its last variable was
    assigned.
    """
    return all(c.satisfies(assignment) for c in csp.constraints_on(variable)
               if c.is_covered_by(assignment))


def solve(csp, all_solutions=False, ac3=False,
          variable_selector=config.DEFAULT_VARIABLE_SELECTOR,
          arity_policy=config.DEFAULT_ARITY_POLICY):
    """
    Solve `csp` with backtracking search.

    Args:
        csp (ConstraintSatisfactionProblem): The problem to solve
        all_solutions (bool): Find every solution instead of the first one
        ac3 (bool): Run AC-3 inference after each assignment
        variable_selector: 'take_head', 'minimum_remaining_values', or a
            callable (see `variable_selector_for`)
        arity_policy (str): How AC-3 inference treats constraints over more
            than two variables

    Returns:
        A `Result`: SOLVED with an assignment (or a list of every
        assignment, if `all_solutions`), or a proven NO_SOLUTION.
    """
    search = _Backtracker(variable_selector_for(variable_selector), ac3,
                          all_solutions, arity_policy)
    solutions = search.backtrack({}, list(csp.variables), csp)

    logger.debug("backtracking visited %d nodes, found %d solution(s)",
                 search.nodes, len(solutions))

    if not solutions:
        return Result.no_solution()
    return Result.solved(solutions if all_solutions else solutions[0])
