GAP_CUTOFF = 3
CHECK_INVARIANTS = __debug__

MAX_SAMPLE_TIME_MS = 2000
SAMPLE_SEED = 42
VALUE_RANGE_FACTOR = 2
