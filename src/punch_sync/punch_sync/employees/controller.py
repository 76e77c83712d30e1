from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    async def employees_list():
        employees = await service.list_employees()
        return jsonify({"employees": [e.to_wire() for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="employees_add")
    async def employees_add():
        data = request.get_json(silent=True) or {}
        message = await service.add_employee(
            employee_id=data.get("id", ""),
            name=data.get("name", ""),
            job_title=data.get("jobTitle", ""),
        )
        return jsonify({"message": message}), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    async def employees_update(employee_id: str):
        data = request.get_json(silent=True) or {}
        message = await service.update_employee(
            employee_id=employee_id,
            name=data.get("name", ""),
            job_title=data.get("jobTitle", ""),
        )
        return jsonify({"message": message})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    async def employees_delete(employee_id: str):
        message = await service.delete_employee(employee_id)
        return jsonify({"message": message})

    @app.route("/api/employees/refresh-cache", methods=["POST"], endpoint="employees_refresh_cache")
    async def employees_refresh_cache():
        message = await service.refresh_cache()
        return jsonify({"message": message})

    @app.route("/api/connection", methods=["GET"], endpoint="connection_check")
    async def connection_check():
        connected = await service.verify_connection()
        return jsonify({"connected": connected}), (200 if connected else 502)
