from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime


class PunctualityStrategy(ABC):
    """Strategy Pattern: encapsulate how we flag late arrival / early departure."""

    @abstractmethod
    def is_late(self, *, work_date: date, first_check_in: datetime) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_early_departure(self, *, work_date: date, last_check_out: datetime) -> bool:
        raise NotImplementedError
