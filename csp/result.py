"""
What the solvers return.
"""

from enum import Enum


class Status(Enum):
    SOLVED = 'solved'
    REDUCED = 'reduced'
    NO_SOLUTION = 'no_solution'


class Result:
    """
    The outcome of running a solver.

    Attributes:
        status (Status): What the solver concluded
        value: The assignment (or list of assignments, when all solutions
            were requested) if solved; the reduced problem if AC-3 reduced
            it; None if there's no solution
        proven (bool): False iff the solver gave up without exhausting the
            search space, i.e. `NO_SOLUTION` doesn't mean unsatisfiable
    """
    __slots__ = ('status', 'value', 'proven')

    def __init__(self, status, value=None, proven=True):
        self.status = status
        self.value = value
        self.proven = proven

    @classmethod
    def solved(cls, value):
        return cls(Status.SOLVED, value)

    @classmethod
    def reduced(cls, csp):
        return cls(Status.REDUCED, csp)

    @classmethod
    def no_solution(cls, proven=True):
        return cls(Status.NO_SOLUTION, None, proven)

    @property
    def is_solved(self):
        return self.status is Status.SOLVED

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return (self.status, self.value, self.proven) == (other.status, other.value, other.proven)

    def __repr__(self):
        if self.status is Status.NO_SOLUTION:
            return "Result({}, proven={})".format(self.status.value, self.proven)
        return "Result({}, {!r})".format(self.status.value, self.value)
