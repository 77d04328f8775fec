import os
import sys

# Largest number of cells a matrix may hold.
MAX_LENGTH = sys.maxsize

# Random weights are drawn from the closed range [RANDOM_LOW, RANDOM_HIGH].
RANDOM_LOW = 0.0
RANDOM_HIGH = 1.0

_seed = os.environ.get("FEEDFORWARD_SEED")
RANDOM_SEED = int(_seed) if _seed else None

LOG_LEVEL = os.environ.get("FEEDFORWARD_LOG_LEVEL", "WARNING").upper()
