from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.validators import parse_flag, resolve_report_range
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/payroll", methods=["GET"], endpoint="payroll_report")
    def payroll_report():
        start, end = resolve_report_range(
            request.args.get("start"), request.args.get("end"), today=now_local().date()
        )
        # ?status=approved&status=paid or ?status=approved,paid
        statuses = [s.strip() for raw in request.args.getlist("status") for s in raw.split(",") if s.strip()]

        summary = container.payroll_report_service.build_payroll_report(
            start=start,
            end=end,
            include_tip_credit_details=parse_flag(request.args.get("include_tip_credit_details")),
            statuses=statuses or None,
        )
        return jsonify({"success": True, **summary.to_dict()})
