"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_THRESHOLD_MINUTES = 15
DEFAULT_SHIFT_START = "08:00"
DEFAULT_HISTORY_DAYS = 30
DEFAULT_LATENESS_RULES = (
    {"minutes": 15, "amount": 50},
    {"minutes": 30, "amount": 100},
)
