"""
Constraints, and helpers for building the usual ones.
"""

import operator


class BaseConstraint:
    """
    A constraint in the CSP.

    Subclasses decide which variables they restrict and how to test an
    assignment. Constraints are compared by identity, so the same
    restriction added twice counts twice.
    """
    def arguments(self):
        """
        Get the variables this constraint restricts.

        This is an abstract method that should be implemented by subclasses.

        Returns:
            A tuple of variables, in the order the constraint reads them.
        """
        raise NotImplementedError

    def satisfies(self, assignment):
        """
        Determine if `assignment` satisfies this constraint.

        This is an abstract method that should be implemented by subclasses.

        Args:
            assignment (dict): variable -> value. Must assign every argument
                of the constraint; callers check `is_covered_by` first.
        """
        raise NotImplementedError

    @property
    def arity(self):
        return len(self.arguments())

    def covers(self, variable):
        """
        Determine if this constraint restricts the given variable.
        """
        return variable in self.arguments()

    def is_covered_by(self, assignment):
        """
        Determine if every argument of this constraint has a value in
        `assignment`, i.e. whether the constraint can be evaluated yet.
        """
        return all(variable in assignment for variable in self.arguments())


class Constraint(BaseConstraint):
    """
    A constraint given as its arguments and a predicate over their values.

    The predicate gets the arguments' values positionally, so

        Constraint(['a', 'b'], lambda a, b: a != b)

    says that `a` and `b` differ.

    Attributes:
        variables: A tuple of variables this constraint covers
        predicate: A callable taking one value per variable, returning a
            truthy value iff the values are allowed
    """
    def __init__(self, variables, predicate):
        self.variables = tuple(variables)
        self.predicate = predicate

    def arguments(self):
        return self.variables

    def satisfies(self, assignment):
        return bool(self.predicate(*[assignment[v] for v in self.variables]))

    def __repr__(self):
        name = getattr(self.predicate, '__name__', None) or repr(self.predicate)
        return "[Constraint] {}{}".format(name, list(self.variables))


def all_different_constraints(variables):
    """
    Create the constraints saying no two of `variables` take the same value.

    Args:
        variables: An iterable of variables

    Returns:
        A list of binary `!=` constraints, one for each unordered pair of
        variables, so k * (k - 1) / 2 of them for k variables.
    """
    variables = list(variables)
    return [Constraint((variables[i], other), operator.ne)
            for i in range(len(variables))
            for other in variables[i + 1:]]


def digit_domain():
    """1 through 9."""
    return tuple(range(1, 10))


def digit_domain_from_zero():
    """0 through 9."""
    return tuple(range(10))


def boolean_domain():
    return (True, False)
