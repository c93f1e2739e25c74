from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config.config import load_settings

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .employees.controller import register as register_employees
from .holidays.controller import register as register_holidays
from .leaves.controller import register as register_leaves
from .session.controller import register as register_session
from .views.controller import register as register_views

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(settings_module)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings.SECRET_KEY
    app.config["DEBUG"] = settings.DEBUG
    app.config["TESTING"] = settings.TESTING

    if container is None:
        container = build_container(
            api_base_url=settings.API_BASE_URL,
            session_file=settings.SESSION_FILE,
            default_password=settings.DEFAULT_EMPLOYEE_PASSWORD,
            load_workers=settings.LOAD_WORKERS,
        )
    app.extensions["hr_portal"] = container

    logger.info("[hr-portal] settings=%s api=%s", settings.MODULE, settings.API_BASE_URL)
    if container.session.is_authenticated:
        logger.info("[hr-portal] resumed session for %s", container.session.current_user.email)

    register_session(app, container)
    register_views(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_holidays(app, container)

    return app
