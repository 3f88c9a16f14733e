"""Application constants."""

# Flat increment used when no equipment-specific increment applies
DEFAULT_WEIGHT_INCREMENT = 2.5

# Regression detection: how many of the newest history entries are inspected
REGRESSION_LOOKBACK = 2
# ...and how many of them must also be below the rep range to flag recovery
REGRESSION_MIN_MATCHES = 1

# Session analysis: prior performances considered per exercise
SESSION_HISTORY_WINDOW = 3

# Recovery score bands (total impact, inclusive upper bounds)
DELOAD_THRESHOLD = -5
REDUCE_INTENSITY_THRESHOLD = -3
CAUTION_THRESHOLD = -1

# Reps in reserve values at or above this are reported as "4+"
RIR_CEILING = 4

# Plan limits
MAX_EXERCISES_PER_ROUTINE = 20
MAX_LOGS_PAGE = 200
