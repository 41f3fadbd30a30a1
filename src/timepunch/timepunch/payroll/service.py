from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.validators import require_date_range
from .model import PayrollRunSummary
from .reconciler import PayrollReconciler
from .repository import PayrollRunRepository


class PayrollReportService:
    """Use case: payroll summary over an arbitrary date range."""

    def __init__(
        self,
        payroll_runs: PayrollRunRepository,
        *,
        reconciler: Optional[PayrollReconciler] = None,
    ):
        self._payroll_runs = payroll_runs
        self._reconciler = reconciler or PayrollReconciler()

    def build_payroll_report(
        self,
        *,
        start: date,
        end: date,
        include_tip_credit_details: bool = False,
        statuses: Optional[Iterable[str]] = None,
    ) -> PayrollRunSummary:
        require_date_range(start, end)
        documents = self._payroll_runs.list_overlapping(start=start, end=end)
        return self._reconciler.reconcile(
            documents,
            start=start,
            end=end,
            statuses=statuses,
            include_tip_credit_details=include_tip_credit_details,
        )
