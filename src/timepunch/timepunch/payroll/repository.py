from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import PayrollDocument


class PayrollRunRepository(Protocol):
    def list_overlapping(self, *, start: date, end: date) -> Sequence[PayrollDocument]:
        """Persisted runs (with line items) whose period may intersect [start, end]."""

        raise NotImplementedError
