"""Schedule and progression constants - single source of truth.

All generation/propagation logic must import from here.
Weekdays use a Sunday=0 convention (Sunday=0 ... Saturday=6).
"""

# Monday, Wednesday, Friday
LIFTING_DAYS_OF_WEEK: tuple[int, ...] = (1, 3, 5)
SLOTS_PER_WEEK = len(LIFTING_DAYS_OF_WEEK)

DEFAULT_HORIZON_WEEKS = 24

# +5% per week
WEEKLY_GROWTH_FACTOR = 1.05
WEIGHT_INCREMENT = 5

EVEN_WEEK_PATTERN: tuple[str, ...] = ("A", "B", "A")
ODD_WEEK_PATTERN: tuple[str, ...] = ("B", "A", "B")

DAY_LABELS: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
