from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.policy import ReconciliationPolicy
from .database.connection import DBConfig, DatabaseConnection
from .hours.pipeline import HoursPipeline
from .payroll.mysql_payroll_repository import MySQLPayrollRunRepository
from .payroll.service import PayrollReportService
from .punches.mysql_punch_repository import MySQLPunchRepository
from .reports.service import TimeReportService
from .roster.mysql_employee_repository import MySQLEmployeeRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    punches_repo: MySQLPunchRepository
    employees_repo: MySQLEmployeeRepository
    payroll_runs_repo: MySQLPayrollRunRepository

    pipeline: HoursPipeline
    time_report_service: TimeReportService
    payroll_report_service: PayrollReportService


def build_container(*, db_config: dict, policy: Optional[ReconciliationPolicy] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    punches_repo = MySQLPunchRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    payroll_runs_repo = MySQLPayrollRunRepository(conn)

    pipeline = HoursPipeline(policy or ReconciliationPolicy())
    time_report_service = TimeReportService(punches_repo, employees_repo, pipeline=pipeline)
    payroll_report_service = PayrollReportService(payroll_runs_repo)

    return Container(
        conn=conn,
        punches_repo=punches_repo,
        employees_repo=employees_repo,
        payroll_runs_repo=payroll_runs_repo,
        pipeline=pipeline,
        time_report_service=time_report_service,
        payroll_report_service=payroll_report_service,
    )
