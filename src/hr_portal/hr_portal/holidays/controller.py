from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import ok
from ..common.web import api_errors, date_field, json_body, login_required, text_field
from ..container import Container
from ..views.holidays import filter_holidays


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace
    signed_in = login_required(workspace)

    @app.route("/api/holidays", endpoint="holidays")
    @signed_in
    @api_errors
    def holidays():
        which = request.args.get("filter", "all")
        items = filter_holidays(workspace.store.holidays, now_local().date(), which)
        return ok([h.to_api() for h in items], filter=which)

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    @signed_in
    @api_errors
    def add_holiday():
        data = json_body()
        holiday = container.holiday_service.add(
            workspace.actor(),
            name=text_field(data, "name"),
            on=date_field(data, "date"),
            holiday_type=text_field(data, "type", "public"),
            description=data.get("description"),
        )
        return ok(holiday.to_api(), status=201)

    @app.route("/api/holidays/<holiday_id>", methods=["DELETE"], endpoint="remove_holiday")
    @signed_in
    @api_errors
    def remove_holiday(holiday_id: str):
        container.holiday_service.remove(workspace.actor(), holiday_id)
        return ok()
