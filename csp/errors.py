"""
Exceptions raised by the constraint satisfaction framework.

Failing to find a solution is never an exception: it's reported through
the returned `Result`. These are raised for problems that are built wrong
or solvers that are configured wrong.
"""


class CSPError(Exception):
    pass


class UndeclaredVariableError(CSPError, KeyError):
    """
    A constraint or domain refers to a variable the problem doesn't declare.
    """
    def __init__(self, variable, context=None):
        self.variable = variable
        self.context = context
        CSPError.__init__(self, variable)

    def __str__(self):
        if self.context is None:
            return "undeclared variable: {!r}".format(self.variable)
        return "undeclared variable {!r} in {}".format(self.variable, self.context)


class UnsupportedArityError(CSPError, ValueError):
    """
    AC-3 was told to fail on a constraint it can't propagate.
    """
    def __init__(self, constraint):
        self.constraint = constraint
        CSPError.__init__(self, "{}-ary constraints are not supported: {!r}".format(
            len(constraint.arguments()), constraint))


class InvalidOptionError(CSPError, ValueError):
    pass
