from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import PayrollDocument
from .repository import PayrollRunRepository


class MySQLPayrollRunRepository(PayrollRunRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_overlapping(self, *, start: date, end: date) -> Sequence[PayrollDocument]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, period_start, period_end, status, total_employees,
                       total_gross_pay, total_net_pay, total_deductions, total_hours,
                       total_food_gift_credit, total_paid_sick_leave_hours, total_paid_sick_leave_amount
                FROM payrolls
                WHERE period_start <= %s AND period_end >= %s
                ORDER BY period_start, id
                """,
                (end, start),
            )
            headers = fetchall(cur)
            if not headers:
                return []

            ids = [h["id"] for h in headers]
            cur.execute(
                f"""
                SELECT payroll_id, employee_id, employee_code, employee_name,
                       regular_hours, overtime_hours, break_hours,
                       gross_pay, total_deductions, net_pay,
                       food_gift_credit, paid_sick_leave_hours, paid_sick_leave_amount,
                       tips_required, tips_reported, tip_credit_shortfall
                FROM payroll_calculations
                WHERE payroll_id IN ({in_clause(ids)})
                """,
                tuple(ids),
            )
            calcs = defaultdict(list)
            for row in fetchall(cur):
                calcs[row["payroll_id"]].append(row)

            cur.execute(
                f"""
                SELECT payroll_id, employee_id, hours_worked
                FROM payroll_time_summaries
                WHERE payroll_id IN ({in_clause(ids)})
                """,
                tuple(ids),
            )
            summaries = defaultdict(list)
            for row in fetchall(cur):
                summaries[row["payroll_id"]].append(row)

        documents = []
        for h in headers:
            # NULL columns mean "no authoritative total"; drop them so line items are used.
            header = {k: v for k, v in h.items() if v is not None}
            header["calculations"] = calcs.get(h["id"], [])
            header["time_summaries"] = summaries.get(h["id"], [])
            documents.append(PayrollDocument.from_mapping(header))
        return documents
