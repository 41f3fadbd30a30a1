from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.validators import require_group_by, resolve_report_range
from ..container import Container
from .export import write_attendance_csv


def register(app: Flask, container: Container) -> None:
    def _range():
        return resolve_report_range(request.args.get("start"), request.args.get("end"), today=now_local().date())

    def _employee_id():
        return (request.args.get("employee_id") or "").strip() or None

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="attendance_report")
    def attendance_report():
        start, end = _range()
        rows = container.time_report_service.build_attendance_report(
            start=start, end=end, employee_id=_employee_id()
        )
        return jsonify(
            {
                "success": True,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "rows": [r.to_dict() for r in rows],
            }
        )

    @app.route("/api/reports/attendance.csv", methods=["GET"], endpoint="attendance_report_csv")
    def attendance_report_csv():
        start, end = _range()
        rows = container.time_report_service.build_attendance_report(
            start=start, end=end, employee_id=_employee_id()
        )

        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            write_attendance_csv(rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/time-summary", methods=["GET"], endpoint="time_summary_report")
    def time_summary_report():
        start, end = _range()
        group_by = require_group_by(request.args.get("group_by") or "employee")
        report = container.time_report_service.build_time_summary(start=start, end=end, group_by=group_by)
        return jsonify({"success": True, **report.to_dict()})

    @app.route("/api/reports/employee-time-summary", methods=["GET"], endpoint="employee_time_summary")
    def employee_time_summary():
        start, end = _range()
        summaries = container.time_report_service.build_employee_time_summaries(
            start=start, end=end, employee_id=_employee_id()
        )
        return jsonify(
            {
                "success": True,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "employees": [s.to_dict() for s in summaries],
            }
        )

    @app.route("/api/reports/break-compliance", methods=["GET"], endpoint="break_compliance_report")
    def break_compliance_report():
        start, end = _range()
        alerts = container.time_report_service.build_break_compliance_alerts(start=start, end=end)
        return jsonify(
            {
                "success": True,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "alerts": [a.to_dict() for a in alerts],
            }
        )
