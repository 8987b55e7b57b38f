"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_NUM_GROUPS = 4

# Placement cost: |group average - student score| + SIZE_PENALTY * group size
PLACEMENT_SIZE_PENALTY = 10

MIN_CONSTRAINT_SIZE = 2
VIOLATION_COLOR_COUNT = 8
