from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, today
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    def _date_arg(name: str) -> Optional[date]:
        raw = request.args.get(name)
        return parse_iso_date(raw) if raw else None

    @app.route("/api/reports/daily", methods=["GET"], endpoint="report_daily")
    async def report_daily():
        report = await service.daily(_date_arg("date") or today())
        return jsonify(report.to_dict())

    @app.route("/api/reports/employee", methods=["GET"], endpoint="report_employee")
    async def report_employee():
        report = await service.employee(
            request.args.get("employeeId", ""),
            start=_date_arg("startDate"),
            end=_date_arg("endDate"),
        )
        body = report.to_dict()
        body["statuses"] = [r.status_label for r in report.records]
        return jsonify(body)

    @app.route("/api/reports/range", methods=["GET"], endpoint="report_range")
    async def report_range():
        report = await service.range(start=_date_arg("startDate"), end=_date_arg("endDate"))
        return jsonify(report.to_dict())
