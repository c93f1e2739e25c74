from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import now_local
from ..common.http import ok
from ..common.web import api_errors, login_required
from ..container import Container
from ..views import attendance as attendance_views
from ..views.source import Snapshot


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace
    signed_in = login_required(workspace)

    def _clock_state(actor, today):
        snap = Snapshot.of(workspace.store)
        rec = attendance_views.today_record(actor, snap, today)
        return {
            "today": rec.to_api() if rec else None,
            "isWorking": attendance_views.is_working(actor, snap, today),
            "canClockIn": attendance_views.can_clock_in(actor, snap, today),
            "canClockOut": attendance_views.can_clock_out(actor, snap, today),
        }

    @app.route("/api/attendance", endpoint="attendance")
    @signed_in
    @api_errors
    def attendance():
        actor = workspace.actor()
        today = now_local().date()
        rows = attendance_views.visible_attendance(actor, Snapshot.of(workspace.store), today=today)
        data = _clock_state(actor, today)
        data["history"] = [r.to_dict() for r in rows]
        return ok(data)

    @app.route("/api/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @signed_in
    @api_errors
    def clock_in():
        actor = workspace.actor()
        now = now_local()
        container.attendance_service.clock_in(actor, now=now)
        return ok(_clock_state(actor, now.date()))

    @app.route("/api/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    @signed_in
    @api_errors
    def clock_out():
        actor = workspace.actor()
        now = now_local()
        container.attendance_service.clock_out(actor, now=now)
        return ok(_clock_state(actor, now.date()))
