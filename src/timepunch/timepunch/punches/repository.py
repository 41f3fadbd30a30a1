from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import PunchEvent


class PunchRepository(Protocol):
    def get_punches(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[PunchEvent]:
        """Raw punches whose local date falls in [start_date, end_date], unordered."""

        raise NotImplementedError
