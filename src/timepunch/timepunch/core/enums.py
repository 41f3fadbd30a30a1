from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Loại sự kiện chấm công thô nhận từ máy chấm công."""

    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
    BREAK_START = "break_start"
    BREAK_END = "break_end"


class PairingState(str, Enum):
    """Trạng thái của bộ ghép cặp trong một ngày công của một nhân viên."""

    IDLE = "IDLE"
    AWAITING_CHECKOUT = "AWAITING_CHECKOUT"
    ON_BREAK = "ON_BREAK"


class GroupBy(str, Enum):
    """Chiều gom nhóm cho báo cáo tổng hợp giờ công."""

    EMPLOYEE = "employee"
    DAY = "day"
    WEEK = "week"
    DEPARTMENT = "department"


class OvertimeBasis(str, Enum):
    """How an overtime figure was derived.

    Report-side numbers are always DAILY_THRESHOLD_APPROXIMATE; payable
    overtime comes from the backend payroll engine.
    """

    DAILY_THRESHOLD_APPROXIMATE = "daily_threshold_approximate"
