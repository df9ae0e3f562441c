"""
AC-3 domain reduction.

Enforces node consistency for unary constraints and arc consistency for
binary ones. Constraints over more than two variables aren't propagated;
what happens to them is decided by the arity policy (see `csp.config`).
"""

from collections import deque

from . import config
from .errors import InvalidOptionError, UnsupportedArityError
from .logging_utils import get_logger
from .result import Result

logger = get_logger(__name__)


class _Worklist:
    """
    A FIFO queue of constraints that holds each constraint at most once.
    """
    def __init__(self, constraints=()):
        self._queue = deque()
        self._queued = set()
        self.extend(constraints)

    def extend(self, constraints):
        for constraint in constraints:
            if id(constraint) not in self._queued:
                self._queued.add(id(constraint))
                self._queue.append(constraint)

    def pop(self):
        constraint = self._queue.popleft()
        self._queued.discard(id(constraint))
        return constraint

    def __len__(self):
        return len(self._queue)


def solve(csp, arity_policy=config.DEFAULT_ARITY_POLICY):
    """
    Reduce the domains of `csp` until every unary constraint is node
    consistent and every binary constraint arc consistent.

    Args:
        csp (ConstraintSatisfactionProblem): The problem to reduce
        arity_policy (str): 'skip' or 'fail', for constraints over more
            than two variables

    Returns:
        A `Result`: NO_SOLUTION if some domain was emptied; SOLVED with the
        assignment if every domain was narrowed to a single value (and that
        assignment satisfies every constraint); REDUCED with the reduced
        problem otherwise.

    Raises:
        UnsupportedArityError: `arity_policy` is 'fail' and the problem has a
            constraint over more than two variables.
    """
    _check_policy(arity_policy)

    domains = dict(csp.domains)
    worklist = _Worklist(csp.constraints)
    consistent = _propagate(csp, domains, worklist, arity_policy)

    if not consistent or any(not domain for domain in domains.values()):
        logger.debug("AC-3 emptied a domain; no solution")
        return Result.no_solution()

    if all(len(domain) == 1 for domain in domains.values()):
        assignment = {variable: domain[0] for variable, domain in domains.items()}
        # Skipped constraints still have to hold.
        if not csp.is_solution(assignment):
            logger.debug("AC-3 left one candidate, which violates a skipped constraint")
            return Result.no_solution()
        logger.debug("AC-3 solved the problem")
        return Result.solved(assignment)

    logger.debug("AC-3 reduced domain sizes from %d to %d values",
                 sum(len(d) for d in csp.domains.values()),
                 sum(len(d) for d in domains.values()))
    return Result.reduced(csp.with_domains(domains))


def reduce(csp, assignment, unassigned, arity_policy=config.DEFAULT_ARITY_POLICY):
    """
    Run AC-3 as an inference step during search.

    The domains of assigned variables are pinned to their values, then the
    constraints on unassigned variables are propagated. Any unassigned
    variable whose domain shrinks to a single value is assigned that value.

    Args:
        csp (ConstraintSatisfactionProblem): The problem being searched
        assignment (dict): The current partial assignment
        unassigned (list): The variables still to be assigned
        arity_policy (str): 'skip' or 'fail'

    Returns:
        A tuple (reduced csp, extended assignment, remaining unassigned
            variables), or None if some domain was emptied, in which case
            the current assignment can't be extended to a solution.
    """
    _check_policy(arity_policy)

    domains = dict(csp.domains)
    for variable, value in assignment.items():
        domains[variable] = (value,)

    remaining = set(unassigned)
    extended = dict(assignment)

    def fold(variable, domain):
        if len(domain) == 1 and variable in remaining:
            remaining.discard(variable)
            extended[variable] = domain[0]

    worklist = _Worklist(c for variable in unassigned for c in csp.constraints_on(variable))
    if not _propagate(csp, domains, worklist, arity_policy, fold):
        return None

    if len(extended) > len(assignment) and not csp.is_consistent(extended):
        return None

    return (csp.with_domains(domains),
            extended,
            [variable for variable in unassigned if variable in remaining])


def _check_policy(arity_policy):
    if arity_policy not in config.ARITY_POLICIES:
        raise InvalidOptionError("unknown arity policy: {!r}".format(arity_policy))


def _distinct_arguments(constraint):
    seen = []
    for variable in constraint.arguments():
        if variable not in seen:
            seen.append(variable)
    return seen


def _propagate(csp, domains, worklist, arity_policy, on_shrink=None):
    """
    Process `worklist` until it's empty, narrowing `domains` in place.

    Args:
        csp: The problem, used to find the constraints to revisit
        domains (dict): variable -> tuple of values, updated in place
        worklist (_Worklist): The constraints to process
        arity_policy (str): 'skip' or 'fail'
        on_shrink: Called as on_shrink(variable, new_domain) after a domain
            shrinks to something non-empty

    Returns:
        False as soon as a domain is emptied, True otherwise.
    """
    revisions = 0
    while worklist:
        constraint = worklist.pop()
        variables = _distinct_arguments(constraint)

        if len(variables) == 1:
            arcs = [(variables[0], None)]
        elif len(variables) == 2:
            (x, y) = variables
            arcs = [(x, y), (y, x)]
        else:
            if arity_policy == 'fail':
                raise UnsupportedArityError(constraint)
            continue

        for (x, y) in arcs:
            revisions += 1
            old_domain = domains[x]
            new_domain = (_revise_node(constraint, x, old_domain) if y is None
                          else _revise_arc(constraint, x, old_domain, y, domains[y]))
            if len(new_domain) == len(old_domain):
                continue

            domains[x] = new_domain
            if not new_domain:
                logger.debug("domain of %r emptied by %r", x, constraint)
                return False
            if on_shrink is not None:
                on_shrink(x, new_domain)
            worklist.extend(c for c in csp.constraints_on(x) if c is not constraint)

    logger.debug("AC-3 propagation done after %d revisions", revisions)
    return True


def _revise_node(constraint, variable, domain):
    """
    Keep the values of `variable` that satisfy a unary constraint.
    """
    return tuple(value for value in domain
                 if constraint.satisfies({variable: value}))


def _revise_arc(constraint, x, x_domain, y, y_domain):
    """
    Keep the values of `x` that some value of `y` supports.
    """
    return tuple(vx for vx in x_domain
                 if any(constraint.satisfies({x: vx, y: vy}) for vy in y_domain))
