from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import HourSplit


class HoursSplitter(ABC):
    """Splitter interface (Strategy Pattern for regular/overtime hours)."""

    @abstractmethod
    def split(self, hours_worked: Decimal) -> HourSplit:
        raise NotImplementedError
