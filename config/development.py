import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Lateness policy
SHIFT_START = os.getenv("SHIFT_START", "08:00")
LATE_THRESHOLD_MINUTES = int(os.getenv("LATE_THRESHOLD_MINUTES", "15"))
LATENESS_RULES = os.getenv("LATENESS_RULES", '[{"minutes": 15, "amount": 50}, {"minutes": 30, "amount": 100}]')
DEDUCTION_POLICY = os.getenv("DEDUCTION_POLICY", "cumulative")

# Optional JSON file with raw attendance events to start with
EVENTS_SEED_PATH = os.getenv("EVENTS_SEED_PATH", "data/seed_events.json")
