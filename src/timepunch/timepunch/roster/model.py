from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên, chỉ dùng để tra cứu nhãn/nhóm.

    Lưu ý: Roster data never feeds the hour computation itself.
    """

    employee_id: str
    first_name: str
    last_name: str
    employee_code: str = ""
    department: Optional[str] = None
    regular_shift: Optional[str] = None
    is_active: bool = True

    @property
    def display_name(self) -> str:
        full = f"{self.first_name} {self.last_name}".strip()
        return full or self.employee_code or self.employee_id

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Employee":
        return cls(
            employee_id=str(raw.get("id") or raw.get("employee_id") or ""),
            first_name=str(raw.get("first_name") or ""),
            last_name=str(raw.get("last_name") or ""),
            employee_code=str(raw.get("employee_code") or ""),
            department=(raw.get("department") or None),
            regular_shift=(raw.get("regular_shift") or None),
            is_active=bool(raw.get("is_active", True)),
        )


class Roster:
    """Read-only employee lookup keyed by employee id."""

    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id = {e.employee_id: e for e in employees}

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def display_name(self, employee_id: str) -> str:
        emp = self._by_id.get(employee_id)
        return emp.display_name if emp else employee_id

    def employee_code(self, employee_id: str) -> str:
        emp = self._by_id.get(employee_id)
        return emp.employee_code if emp else ""

    def department(self, employee_id: str) -> Optional[str]:
        emp = self._by_id.get(employee_id)
        return emp.department if emp else None
