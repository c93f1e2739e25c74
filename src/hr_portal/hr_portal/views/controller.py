from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import now_local
from ..common.http import ok
from ..common.web import api_errors, login_required
from ..container import Container
from .dashboard import build_dashboard
from .source import Snapshot


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace
    signed_in = login_required(workspace)

    @app.route("/api/dashboard", endpoint="dashboard")
    @signed_in
    @api_errors
    def dashboard():
        view = build_dashboard(workspace.actor(), Snapshot.of(workspace.store), today=now_local().date())
        return ok(view.to_dict())

    @app.route("/api/status", endpoint="store_status")
    @signed_in
    @api_errors
    def store_status():
        store = workspace.store
        return ok({"state": store.state.value, "error": str(store.load_error) if store.load_error else None})

    @app.route("/api/reload", methods=["POST"], endpoint="reload")
    @signed_in
    @api_errors
    def reload():
        store = workspace.reload()
        return ok({"state": store.state.value, "error": str(store.load_error) if store.load_error else None})
