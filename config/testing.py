SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SHIFT_START = "08:00"
LATE_THRESHOLD_MINUTES = 15
LATENESS_RULES = [
    {"minutes": 10, "amount": 100},
    {"minutes": 30, "amount": 200},
]
DEDUCTION_POLICY = "cumulative"

EVENTS_SEED_PATH = None
