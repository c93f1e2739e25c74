from __future__ import annotations

from flask import Flask, session

from ..common.http import fail, ok
from ..common.web import api_errors, is_signed_in, json_body, login_required, remember_signed_in, text_field
from ..container import Container
from ..views.navigation import menu_for


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace
    signed_in = login_required(workspace)

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    @api_errors
    def login():
        data = json_body()
        result = workspace.login(text_field(data, "email"), text_field(data, "password"))
        if not result:
            return fail("Invalid email or password", status=401, code="LOGIN_FAILED")
        remember_signed_in(result.user.id)
        return ok({"user": result.user.to_api(), "storeState": workspace.store.state.value})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        # Only the client holding the session may end it for everyone.
        if is_signed_in(workspace):
            workspace.logout()
        session.clear()
        return ok()

    @app.route("/api/auth/me", endpoint="me")
    @signed_in
    @api_errors
    def me():
        actor = workspace.actor()
        menu = [{"path": m.path, "label": m.label} for m in menu_for(actor)]
        return ok({"user": actor.to_api(), "menu": menu})
