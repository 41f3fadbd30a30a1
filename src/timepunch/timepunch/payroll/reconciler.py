from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from ..common.amounts import has_amount, parse_amount
from .model import (
    LINE_ITEM_FIELDS,
    SUMMARY_FIELDS,
    TIP_CREDIT_FIELDS,
    PayrollDocument,
    PayrollRunSummary,
    RunContribution,
    TipCreditSummary,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

SOURCE_TOTAL = "total"
SOURCE_LINE_ITEMS = "line_items"


def overlaps(doc: PayrollDocument, *, start: date, end: date) -> bool:
    """run.period_start <= end and run.period_end >= start; runs without a period never match."""
    if doc.period_start is None or doc.period_end is None:
        return False
    return doc.period_start <= end and doc.period_end >= start


class PayrollReconciler:
    """Fold persisted payroll runs overlapping a window into one summary.

    Per run and per field, the run's own top-level total wins when present;
    otherwise its per-employee line items are summed. The two are never both
    added for the same field of the same run.
    """

    def select(
        self,
        documents: Iterable[PayrollDocument],
        *,
        start: date,
        end: date,
        statuses: Optional[Iterable[str]] = None,
    ) -> list[PayrollDocument]:
        wanted = {s.lower() for s in statuses} if statuses else None
        picked = [
            d
            for d in documents
            if overlaps(d, start=start, end=end) and (wanted is None or d.status.lower() in wanted)
        ]
        picked.sort(key=lambda d: (d.period_start, d.period_end, d.payroll_id))
        return picked

    def reconcile(
        self,
        documents: Iterable[PayrollDocument],
        *,
        start: date,
        end: date,
        statuses: Optional[Iterable[str]] = None,
        include_tip_credit_details: bool = False,
    ) -> PayrollRunSummary:
        included = self.select(documents, start=start, end=end, statuses=statuses)

        sums = {name: ZERO for name in SUMMARY_FIELDS}
        tip_sums = {name: ZERO for name in TIP_CREDIT_FIELDS}
        contributions = []
        employee_ids: set[str] = set()
        any_line_items = False

        for doc in included:
            amounts: dict[str, Decimal] = {}
            sources: dict[str, str] = {}

            for name, line_field in LINE_ITEM_FIELDS.items():
                amounts[name], sources[name] = self._field_value(
                    doc.totals, name, doc.calculations, lambda c, f=line_field: c.get(f)
                )
            amounts["total_hours"], sources["total_hours"] = self._field_value(
                doc.totals, "total_hours", self._hour_items(doc), self._line_hours
            )

            for name, value in amounts.items():
                sums[name] += value

            if include_tip_credit_details:
                for name, line_field in TIP_CREDIT_FIELDS.items():
                    value, _ = self._field_value(
                        doc.tip_credit_totals, name, doc.calculations, lambda c, f=line_field: _tip_value(c, f)
                    )
                    tip_sums[name] += value

            for calc in doc.calculations:
                any_line_items = True
                emp_id = calc.get("employee_id")
                if emp_id not in (None, ""):
                    employee_ids.add(str(emp_id))

            contributions.append(RunContribution(document=doc, amounts=amounts, sources=sources))

        if any_line_items:
            total_employees = len(employee_ids)
        else:
            total_employees = max((d.total_employees or 0 for d in included), default=0)

        logger.info(
            "reconciled %d payroll run(s) for %s..%s (%d employees)", len(included), start, end, total_employees
        )

        return PayrollRunSummary(
            period_start=start,
            period_end=end,
            total_employees=total_employees,
            payrolls=tuple(contributions),
            tip_credit_summary=TipCreditSummary(**tip_sums) if include_tip_credit_details else None,
            **sums,
        )

    @staticmethod
    def _field_value(totals: Mapping[str, Any], name: str, items, getter) -> tuple[Decimal, str]:
        if has_amount(totals.get(name)):
            return parse_amount(totals[name]), SOURCE_TOTAL
        return sum((parse_amount(getter(item)) for item in items), ZERO), SOURCE_LINE_ITEMS

    @staticmethod
    def _hour_items(doc: PayrollDocument):
        # Time summaries carry worked hours directly; calculations only as regular + overtime.
        return doc.time_summaries if doc.time_summaries else doc.calculations

    @staticmethod
    def _line_hours(item: Mapping[str, Any]) -> Decimal:
        if "hours_worked" in item:
            return parse_amount(item.get("hours_worked"))
        return parse_amount(item.get("regular_hours")) + parse_amount(item.get("overtime_hours"))


def _tip_value(calc: Mapping[str, Any], name: str) -> Any:
    if name in calc:
        return calc.get(name)
    nested = calc.get("tip_credit") or calc.get("tip_credit_info")
    if isinstance(nested, Mapping):
        return nested.get(name)
    return None
