from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_employees(self) -> Sequence[Employee]:
        """All employees, inactive ones included (their past punches still need labels)."""

        raise NotImplementedError
