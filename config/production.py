import os

from config.reconciliation import (  # noqa: F401
    BREAK_REQUIRED_AFTER_HOURS,
    DAILY_OVERTIME_THRESHOLD_HOURS,
    DEDUCT_MATCHED_BREAKS,
    EARLY_DEPARTURE_HOUR,
    LATE_ARRIVAL_HOUR,
    LATE_GRACE_MINUTES,
    MAX_OVERNIGHT_CLOSURE_HOURS,
    MAX_SHIFT_HOURS,
    REQUIRED_BREAK_MINUTES,
    UNMATCHED_BREAK_MINUTES,
)

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
