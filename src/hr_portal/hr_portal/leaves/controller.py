from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import ok
from ..common.web import api_errors, date_field, json_body, login_required, text_field
from ..container import Container
from ..views.leaves import approval_queue, leave_day_preview, parse_status_filter, visible_leave_requests
from ..views.source import Snapshot


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace
    signed_in = login_required(workspace)

    @app.route("/api/leaves", endpoint="leaves")
    @signed_in
    @api_errors
    def leaves():
        items = visible_leave_requests(workspace.actor(), Snapshot.of(workspace.store))
        return ok([r.to_api() for r in items])

    @app.route("/api/leaves", methods=["POST"], endpoint="submit_leave")
    @signed_in
    @api_errors
    def submit_leave():
        data = json_body()
        created = container.leave_service.submit(
            workspace.actor(),
            leave_type=text_field(data, "type", "annual"),
            start_date=date_field(data, "startDate"),
            end_date=date_field(data, "endDate"),
            reason=text_field(data, "reason"),
            today=now_local().date(),
        )
        return ok(created.to_api(), status=201)

    @app.route("/api/leaves/preview", endpoint="leave_preview")
    @signed_in
    @api_errors
    def leave_preview():
        args = request.args.to_dict()
        days = leave_day_preview(date_field(args, "startDate", required=False), date_field(args, "endDate", required=False))
        return ok({"days": days})

    @app.route("/api/leaves/approvals", endpoint="leave_approvals")
    @signed_in
    @api_errors
    def leave_approvals():
        status = parse_status_filter(request.args.get("status", "pending"))
        items = approval_queue(workspace.actor(), Snapshot.of(workspace.store), status)
        return ok([r.to_api() for r in items], filter=status.value if status else "all")

    @app.route("/api/leaves/<request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @signed_in
    @api_errors
    def approve_leave(request_id: str):
        data = json_body()
        updated = container.leave_service.approve(
            workspace.actor(), request_id, comments=text_field(data, "comments"), today=now_local().date()
        )
        return ok(updated.to_api())

    @app.route("/api/leaves/<request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @signed_in
    @api_errors
    def reject_leave(request_id: str):
        data = json_body()
        updated = container.leave_service.reject(
            workspace.actor(), request_id, comments=text_field(data, "comments"), today=now_local().date()
        )
        return ok(updated.to_api())
