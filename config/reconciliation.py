import os

# Chính sách đối soát chấm công (giờ làm thêm, đi muộn/về sớm, giờ nghỉ)
DAILY_OVERTIME_THRESHOLD_HOURS = os.getenv("DAILY_OVERTIME_THRESHOLD_HOURS", "8")
LATE_ARRIVAL_HOUR = int(os.getenv("LATE_ARRIVAL_HOUR", "9"))
EARLY_DEPARTURE_HOUR = int(os.getenv("EARLY_DEPARTURE_HOUR", "17"))
UNMATCHED_BREAK_MINUTES = int(os.getenv("UNMATCHED_BREAK_MINUTES", "30"))
MAX_SHIFT_HOURS = int(os.getenv("MAX_SHIFT_HOURS", "24"))
MAX_OVERNIGHT_CLOSURE_HOURS = int(os.getenv("MAX_OVERNIGHT_CLOSURE_HOURS", "16"))
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "0"))
BREAK_REQUIRED_AFTER_HOURS = os.getenv("BREAK_REQUIRED_AFTER_HOURS", "8")
REQUIRED_BREAK_MINUTES = int(os.getenv("REQUIRED_BREAK_MINUTES", "30"))
DEDUCT_MATCHED_BREAKS = bool(int(os.getenv("DEDUCT_MATCHED_BREAKS", "1")))
