"""
Default values for the solver options.

Everything here can be overridden per call with the keyword argument of
the same (lowercase, unprefixed) name.
"""

# ==== Dispatcher ============================================================

METHODS = ('backtracking', 'min_conflicts', 'ac3', 'brute_force')

DEFAULT_METHOD = 'backtracking'

# ==== Backtracking ==========================================================

VARIABLE_SELECTORS = ('take_head', 'minimum_remaining_values')

DEFAULT_VARIABLE_SELECTOR = 'take_head'

# ==== AC-3 ==================================================================

# What AC-3 does with a constraint over more than two variables:
# 'skip' leaves it to the consistency check, 'fail' raises.
ARITY_POLICIES = ('skip', 'fail')

DEFAULT_ARITY_POLICY = 'skip'

# ==== Min-conflicts =========================================================

DEFAULT_MAX_ITERATIONS = 10000

# None means the tabu list grows for the whole run.
DEFAULT_TABU_DEPTH = None

# Emit a progress line every this many iterations (at DEBUG level).
PROGRESS_LOG_INTERVAL = 1000
