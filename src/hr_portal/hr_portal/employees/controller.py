from __future__ import annotations

from flask import Flask

from ..common.http import fail, ok
from ..common.web import api_errors, date_field, json_body, login_required, text_field
from ..container import Container
from ..core.enums import Capability
from ..views.capabilities import CapabilityResolver
from ..views.employees import managers, visible_employees


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace
    signed_in = login_required(workspace)

    @app.route("/api/employees", endpoint="employees")
    @signed_in
    @api_errors
    def employees():
        actor = workspace.actor()
        rows = visible_employees(actor, workspace.store)
        return ok([r.to_dict() for r in rows])

    @app.route("/api/employees/managers", endpoint="employee_managers")
    @signed_in
    @api_errors
    def employee_managers():
        store = workspace.store
        CapabilityResolver(workspace.actor(), store.employees).require(Capability.ADD_EMPLOYEE)
        return ok([m.to_api() for m in managers(store.employees)])

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @signed_in
    @api_errors
    def add_employee():
        data = json_body()
        result = container.employee_service.add_employee(
            workspace.actor(),
            name=text_field(data, "name"),
            email=text_field(data, "email"),
            role=text_field(data, "role", "employee"),
            department=text_field(data, "department"),
            position=text_field(data, "position"),
            joining_date=date_field(data, "joiningDate"),
            manager_id=data.get("managerId") or None,
        )
        if not result:
            return fail(
                "Email already exists. Please use a different email address.",
                status=409,
                code="REGISTRATION_FAILED",
                detail=result.message,
            )
        return ok({"id": result.new_id}, status=201)
