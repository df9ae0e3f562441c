"""
The constraint satisfaction problem value, and the consistency checks the
solvers share.
"""

from types import MappingProxyType

from .errors import UndeclaredVariableError


class ConstraintSatisfactionProblem:
    """
    A constraint satisfaction problem: variables, their domains and the
    constraints over them.

    A problem is never modified once built. Domain reduction produces a new
    problem sharing the constraints of the old one.

    Attributes:
        variables (tuple): The problem's variables, in the order search
            considers them
        domains (mapping): A read-only mapping of variable -> tuple of
            candidate values, in the order search tries them
        constraints (tuple): The problem's constraints
    """
    def __init__(self, variables, domains, constraints=()):
        """
        Constructor.

        Args:
            variables: An iterable of unique, hashable variables
            domains: A mapping of variable -> iterable of values, with
                exactly one entry per variable
            constraints: An iterable of `BaseConstraint`

        Raises:
            UndeclaredVariableError: A domain or constraint mentions a
                variable that isn't in `variables`, or a variable has no
                domain.
            ValueError: A variable is listed twice.
        """
        self.variables = tuple(variables)
        if len(set(self.variables)) != len(self.variables):
            raise ValueError("duplicate variables: {!r}".format(self.variables))

        for variable in domains:
            if variable not in self.variables:
                raise UndeclaredVariableError(variable, 'domains')
        self.domains = MappingProxyType(
            {variable: self._domain_from(domains, variable) for variable in self.variables})

        self.constraints = tuple(constraints)
        for constraint in self.constraints:
            for variable in constraint.arguments():
                if variable not in self.domains:
                    raise UndeclaredVariableError(variable, repr(constraint))

        self._constraints_on = self._index_constraints()

    @staticmethod
    def _domain_from(domains, variable):
        try:
            return tuple(domains[variable])
        except KeyError:
            raise UndeclaredVariableError(variable, 'domains') from None

    def _index_constraints(self):
        index = {variable: [] for variable in self.variables}
        for constraint in self.constraints:
            for variable in set(constraint.arguments()):
                index[variable].append(constraint)
        return {variable: tuple(cs) for variable, cs in index.items()}

    def domain(self, variable):
        """
        Get the current domain of `variable`.

        Raises:
            UndeclaredVariableError: `variable` isn't part of the problem.
        """
        try:
            return self.domains[variable]
        except KeyError:
            raise UndeclaredVariableError(variable) from None

    def with_domains(self, domains):
        """
        Get a copy of this problem with some domains replaced.

        Args:
            domains: A mapping of variable -> new domain. Variables not in
                the mapping keep their current domain.

        Returns:
            A new `ConstraintSatisfactionProblem`.
        """
        new_domains = dict(self.domains)
        for variable, values in domains.items():
            if variable not in new_domains:
                raise UndeclaredVariableError(variable, 'domains')
            new_domains[variable] = values

        other = ConstraintSatisfactionProblem.__new__(ConstraintSatisfactionProblem)
        other.variables = self.variables
        other.domains = MappingProxyType({v: tuple(d) for v, d in new_domains.items()})
        other.constraints = self.constraints
        other._constraints_on = self._constraints_on
        return other

    def with_domain(self, variable, values):
        return self.with_domains({variable: values})

    def constraints_on(self, variable):
        """
        Find all the constraints having `variable` as an argument.

        Returns:
            A tuple of constraints, in the order they appear in the problem.
        """
        try:
            return self._constraints_on[variable]
        except KeyError:
            raise UndeclaredVariableError(variable) from None

    def is_consistent(self, assignment):
        """
        Determine if a (possibly partial) assignment violates no constraint.

        Constraints with an unassigned argument can't be violated yet, so
        they're ignored.

        Args:
            assignment (dict): variable -> value

        Returns:
            True iff every constraint covered by `assignment` is satisfied.
        """
        return all(c.satisfies(assignment) for c in self.constraints
                   if c.is_covered_by(assignment))

    def is_solution(self, assignment):
        """
        Determine if a complete assignment satisfies every constraint.
        """
        return all(c.satisfies(assignment) for c in self.constraints)

    def conflicted(self, assignment):
        """
        Find the variables taking part in a violated constraint.

        Args:
            assignment (dict): variable -> value

        Returns:
            A list of variables, in the problem's variable order.
        """
        violating = set()
        for constraint in self.constraints:
            if constraint.is_covered_by(assignment) and not constraint.satisfies(assignment):
                violating.update(constraint.arguments())
        return [v for v in self.variables if v in violating]

    def conflicts(self, variable, value, assignment):
        """
        Count the constraints on `variable` that would be violated if it
        took `value`, with everything else as in `assignment`.
        """
        candidate = dict(assignment)
        candidate[variable] = value
        return sum(1 for c in self.constraints_on(variable)
                   if c.is_covered_by(candidate) and not c.satisfies(candidate))

    def order_by_conflicts(self, variable, assignment):
        """
        Get the domain of `variable` sorted by `conflicts`, fewest first.

        Values with equal counts keep their domain order.
        """
        return sorted(self.domain(variable),
                      key=lambda value: self.conflicts(variable, value, assignment))

    def __eq__(self, other):
        if not isinstance(other, ConstraintSatisfactionProblem):
            return NotImplemented
        return (self.variables == other.variables
                and self.domains == other.domains
                and self.constraints == other.constraints)

    def __repr__(self):
        return "[CSP] {} variables, {} constraints: {}".format(
            len(self.variables), len(self.constraints), dict(self.domains))


CSP = ConstraintSatisfactionProblem
