from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, today
from ..container import Container


def register(app: Flask, container: Container) -> None:
    board = container.board

    def _board_view(term: str = "") -> dict:
        in_flight = container.synchronizer.in_flight()
        tracker = board.tracker
        rows = []
        for row in board.search(term):
            item = row.to_dict()
            item["dirty"] = tracker.is_dirty(row.employee_id)
            item["saving"] = row.employee_id in in_flight
            rows.append(item)
        return {
            "date": board.work_date.isoformat(),
            "rows": rows,
            "pending": [edit.to_dict() for edit in board.pending()],
            "pendingCount": len(tracker),
            "savingAll": container.synchronizer.saving_all,
        }

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_board")
    async def attendance_board():
        raw_date = request.args.get("date")
        work_date = parse_iso_date(raw_date) if raw_date else (board.work_date if board.loaded else today())
        load = await container.attendance_service.ensure_loaded(work_date)

        body = _board_view(request.args.get("q", ""))
        body["load"] = load.to_dict() if load else None
        status = 502 if load and not load.ok else 200
        return jsonify(body), status

    @app.route("/api/attendance/refresh", methods=["POST"], endpoint="attendance_refresh")
    async def attendance_refresh():
        load = await container.attendance_service.reload()
        body = _board_view()
        body["load"] = load.to_dict()
        return jsonify(body), (200 if load.ok else 502)

    @app.route("/api/attendance/<employee_id>", methods=["PATCH"], endpoint="attendance_edit")
    def attendance_edit(employee_id: str):
        data = request.get_json(silent=True) or {}
        row = container.attendance_service.edit(employee_id, data.get("field", ""), data.get("time"))
        return jsonify({"row": row.to_dict(), "dirty": board.tracker.is_dirty(employee_id)})

    @app.route("/api/attendance/<employee_id>/save", methods=["POST"], endpoint="attendance_save")
    async def attendance_save(employee_id: str):
        outcome = await container.synchronizer.save(employee_id)
        if outcome is None:
            return jsonify({"status": "noop", "message": f"Nothing to save for {employee_id}"}), 200
        return jsonify(outcome.to_dict()), (200 if outcome.succeeded else 502)

    @app.route("/api/attendance/save-all", methods=["POST"], endpoint="attendance_save_all")
    async def attendance_save_all():
        result = await container.synchronizer.save_all()
        body = result.to_dict()
        body["board"] = _board_view()
        return jsonify(body)
