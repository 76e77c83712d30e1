from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx
import pytest

from punch_sync.container import build_container
from punch_sync.main import create_app


class FakeBackend:
    """Script endpoint stand-in speaking the action/envelope protocol."""

    def __init__(self):
        self.employees = [
            {"id": "E1", "name": "Alice", "jobTitle": "Dev"},
            {"id": "E2", "name": "Bob", "jobTitle": "QA"},
        ]
        self.punches: dict[tuple[str, str], dict] = {}
        self.locked: set[str] = set()
        self.adjustments: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            params = dict(request.url.params)
        else:
            params = {k: v[0] for k, v in parse_qs(request.content.decode(), keep_blank_values=True).items()}
        action = params.get("action")

        if action == "getEmployees":
            return self._ok(self.employees)
        if action == "generateReport" and params.get("reportType") == "daily":
            records = [
                {"employeeId": eid, **punch, "workHours": 0, "overtimeHours": 0, "isWorkDay": False}
                for (day, eid), punch in self.punches.items()
                if day == params["date"]
            ]
            return self._ok({"records": records, "summary": {"reportDate": params["date"]}})
        if action == "adjustAttendance":
            payload = json.loads(params["payload"])
            self.adjustments.append(payload)
            if payload["employeeId"] in self.locked:
                return httpx.Response(200, json={"status": "error", "message": "locked"})
            self.punches[(payload["date"], payload["employeeId"])] = {
                "checkIn": payload["checkIn"],
                "checkOut": payload["checkOut"],
            }
            return self._ok({"message": "Attendance adjusted successfully."})
        if action == "deleteEmployee":
            return httpx.Response(500, text="Internal error")
        return httpx.Response(200, json={"status": "error", "message": f"Unknown action {action}"})

    @staticmethod
    def _ok(data) -> httpx.Response:
        return httpx.Response(200, json={"status": "success", "data": data})


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(monkeypatch, backend):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(
        endpoint_url="https://records.example.test/exec",
        transport=httpx.MockTransport(backend),
    )
    app = create_app(container=container)
    return app.test_client()


def test_health(client):
    assert client.get("/api/health").get_json()["status"] == "ok"


def test_board_load_edit_save_flow(client, backend):
    board = client.get("/api/attendance?date=2024-05-01").get_json()
    assert [r["employeeId"] for r in board["rows"]] == ["E1", "E2"]
    assert board["rows"][0]["checkIn"] is None

    edited = client.patch("/api/attendance/E1", json={"field": "checkIn", "time": "09:00"})
    assert edited.status_code == 200
    assert edited.get_json()["row"]["checkIn"] == "2024-05-01T09:00:00"

    saved = client.post("/api/attendance/E1/save")
    assert saved.status_code == 200
    assert backend.adjustments == [
        {"employeeId": "E1", "date": "2024-05-01", "checkIn": "2024-05-01T09:00:00", "checkOut": None}
    ]

    board = client.get("/api/attendance?date=2024-05-01").get_json()
    assert board["pendingCount"] == 0


def test_failed_save_reports_message_and_keeps_edit(client, backend):
    client.get("/api/attendance?date=2024-05-01")
    client.patch("/api/attendance/E1", json={"field": "checkIn", "time": "09:00"})
    backend.locked.add("E1")

    resp = client.post("/api/attendance/E1/save")

    assert resp.status_code == 502
    assert resp.get_json()["message"] == "locked"
    assert client.get("/api/attendance").get_json()["rows"][0]["dirty"] is True


def test_save_all_reports_failures_then_shows_server_truth(client, backend):
    client.get("/api/attendance?date=2024-05-01")
    client.patch("/api/attendance/E1", json={"field": "checkIn", "time": "09:00"})
    client.patch("/api/attendance/E2", json={"field": "checkOut", "time": "18:00"})
    backend.locked.add("E2")

    body = client.post("/api/attendance/save-all").get_json()

    assert body["failed"] == 1
    assert body["message"] == "All changes have been processed."
    rows = {r["employeeId"]: r for r in body["board"]["rows"]}
    assert rows["E1"]["checkIn"] == "2024-05-01T09:00:00"
    assert rows["E2"]["checkOut"] is None
    assert body["board"]["pendingCount"] == 0


def test_invalid_edit_is_a_bad_request(client):
    client.get("/api/attendance?date=2024-05-01")

    resp = client.patch("/api/attendance/E1", json={"field": "lunch", "time": "12:00"})

    assert resp.status_code == 400
    assert resp.get_json()["status"] == "error"


def test_non_string_time_is_a_bad_request(client):
    client.get("/api/attendance?date=2024-05-01")

    resp = client.patch("/api/attendance/E1", json={"field": "checkIn", "time": 900})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid time: 900 (expected HH:MM)"


def test_invalid_date_is_a_bad_request(client):
    assert client.get("/api/attendance?date=01/05/2024").status_code == 400


def test_employee_routes(client):
    assert [e["id"] for e in client.get("/api/employees").get_json()["employees"]] == ["E1", "E2"]

    resp = client.delete("/api/employees/E1")
    assert resp.status_code == 502
    assert resp.get_json()["message"] == "HTTP error! status: 500"

    resp = client.post("/api/employees", json={"id": "", "name": "Carol", "jobTitle": "Ops"})
    assert resp.status_code == 400


def test_connection_check(client):
    assert client.get("/api/connection").get_json() == {"connected": True}
