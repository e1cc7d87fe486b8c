import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SHIFT_START = os.getenv("SHIFT_START", "08:00")
LATE_THRESHOLD_MINUTES = int(os.getenv("LATE_THRESHOLD_MINUTES", "15"))
LATENESS_RULES = os.getenv("LATENESS_RULES", "[]")
DEDUCTION_POLICY = os.getenv("DEDUCTION_POLICY", "cumulative")

EVENTS_SEED_PATH = os.getenv("EVENTS_SEED_PATH") or None
