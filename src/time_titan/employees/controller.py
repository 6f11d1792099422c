from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.request_utils import SESSION_EMP_CODE
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError
from .model import EmployeeIdentity


def employee_json(employee: EmployeeIdentity) -> dict:
    return {
        "id": employee.employee_id,
        "name": employee.display_name,
        "department": employee.department,
        "cardNo": employee.card_number,
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        employee = service.authenticate(data.get("empCode") or request.form.get("empCode"))

        session.clear()
        session.permanent = bool(data.get("remember"))
        session[SESSION_EMP_CODE] = employee.employee_id
        return jsonify(employee_json(employee))

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Signed out"})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    def me():
        code = session.get(SESSION_EMP_CODE)
        if not code:
            raise AuthenticationError("Not signed in")
        return jsonify(employee_json(service.get(code)))
