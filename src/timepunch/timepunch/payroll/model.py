from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.amounts import format_money
from ..common.datetime_utils import coerce_date

ZERO = Decimal("0")

# Summary field -> per-employee calculation line-item field.
LINE_ITEM_FIELDS: dict[str, str] = {
    "total_gross_pay": "gross_pay",
    "total_net_pay": "net_pay",
    "total_deductions": "total_deductions",
    "total_food_gift_credit": "food_gift_credit",
    "total_paid_sick_leave_hours": "paid_sick_leave_hours",
    "total_paid_sick_leave_amount": "paid_sick_leave_amount",
}

TIP_CREDIT_FIELDS: dict[str, str] = {
    "total_tips_required": "tips_required",
    "total_tips_reported": "tips_reported",
    "total_shortfall": "tip_credit_shortfall",
}

SUMMARY_FIELDS: tuple[str, ...] = tuple(LINE_ITEM_FIELDS) + ("total_hours",)


@dataclass(frozen=True)
class PayrollDocument:
    """Một bảng lương đã lưu (payroll run) đọc từ backend.

    Values are kept raw (strings, numbers or None) so "field absent" can be
    told apart from "field is zero" when reconciling.
    """

    payroll_id: str
    period_start: Optional[date]
    period_end: Optional[date]
    status: str = ""
    total_employees: Optional[int] = None
    totals: Mapping[str, Any] = field(default_factory=dict)
    tip_credit_totals: Mapping[str, Any] = field(default_factory=dict)
    calculations: tuple[Mapping[str, Any], ...] = ()
    time_summaries: tuple[Mapping[str, Any], ...] = ()

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "PayrollDocument":
        # GET /payrolls/{id} nests the header under "payroll".
        header = raw.get("payroll") if isinstance(raw.get("payroll"), Mapping) else raw

        totals = {name: header.get(name) for name in SUMMARY_FIELDS if name in header}
        tip_summary = header.get("tip_credit_summary")
        tip_totals = dict(tip_summary) if isinstance(tip_summary, Mapping) else {}

        total_employees = header.get("total_employees")
        try:
            total_employees = int(total_employees) if total_employees not in (None, "") else None
        except (TypeError, ValueError):
            total_employees = None

        return cls(
            payroll_id=str(header.get("id") or ""),
            period_start=coerce_date(header.get("period_start")),
            period_end=coerce_date(header.get("period_end")),
            status=str(header.get("status") or ""),
            total_employees=total_employees,
            totals=totals,
            tip_credit_totals=tip_totals,
            calculations=tuple(c for c in (raw.get("calculations") or ()) if isinstance(c, Mapping)),
            time_summaries=tuple(t for t in (raw.get("time_summaries") or ()) if isinstance(t, Mapping)),
        )


@dataclass(frozen=True)
class RunContribution:
    """What one included run added to the summary, per field, and from where."""

    document: PayrollDocument
    amounts: Mapping[str, Decimal]
    sources: Mapping[str, str]

    def to_dict(self) -> dict:
        doc = self.document
        return {
            "id": doc.payroll_id,
            "period_start": doc.period_start.isoformat() if doc.period_start else None,
            "period_end": doc.period_end.isoformat() if doc.period_end else None,
            "status": doc.status,
            "amounts": {k: format_money(v) for k, v in self.amounts.items()},
            "sources": dict(self.sources),
        }


@dataclass(frozen=True)
class TipCreditSummary:
    total_tips_required: Decimal = ZERO
    total_tips_reported: Decimal = ZERO
    total_shortfall: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "total_tips_required": format_money(self.total_tips_required),
            "total_tips_reported": format_money(self.total_tips_reported),
            "total_shortfall": format_money(self.total_shortfall),
        }


@dataclass(frozen=True)
class PayrollRunSummary:
    period_start: date
    period_end: date
    total_employees: int
    total_gross_pay: Decimal = ZERO
    total_net_pay: Decimal = ZERO
    total_hours: Decimal = ZERO
    total_deductions: Decimal = ZERO
    total_food_gift_credit: Decimal = ZERO
    total_paid_sick_leave_hours: Decimal = ZERO
    total_paid_sick_leave_amount: Decimal = ZERO
    payrolls: tuple[RunContribution, ...] = ()
    tip_credit_summary: Optional[TipCreditSummary] = None

    def to_dict(self) -> dict:
        out = {
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "total_employees": self.total_employees,
            "total_gross_pay": format_money(self.total_gross_pay),
            "total_net_pay": format_money(self.total_net_pay),
            "total_hours": format_money(self.total_hours),
            "total_deductions": format_money(self.total_deductions),
            "total_food_gift_credit": format_money(self.total_food_gift_credit),
            "total_paid_sick_leave_hours": format_money(self.total_paid_sick_leave_hours),
            "total_paid_sick_leave_amount": format_money(self.total_paid_sick_leave_amount),
            "payrolls": [p.to_dict() for p in self.payrolls],
        }
        if self.tip_credit_summary is not None:
            out["tip_credit_summary"] = self.tip_credit_summary.to_dict()
        return out
