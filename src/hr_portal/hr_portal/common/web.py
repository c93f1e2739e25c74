from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import request, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    GatewayError,
    RequestFailed,
    ValidationError,
)
from .datetime_utils import parse_iso_date
from .http import fail

logger = logging.getLogger(__name__)


def json_body() -> dict:
    return (request.get_json(silent=True) or {}) if request.is_json else {}


def date_field(data: dict, key: str, *, required: bool = True) -> Optional[date]:
    value = data.get(key)
    if value in (None, ""):
        if required:
            raise ValidationError(f"{key} is required")
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{key} must be a date (YYYY-MM-DD)") from None


def text_field(data: dict, key: str, default: str = "") -> str:
    """String value of ``key``; a missing key or JSON null gives ``default``."""
    value = data.get(key)
    return default if value is None else str(value)


def api_errors(view):
    """Turn domain errors raised by a view into JSON failures."""

    @wraps(view)
    def wrapper(*args: Any, **kwargs: Any):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), status=400, code="VALIDATION_ERROR")
        except AuthenticationError as e:
            return fail(str(e), status=401, code="UNAUTHENTICATED")
        except AuthorizationError as e:
            return fail(str(e), status=403, code="ACCESS_DENIED")
        except RequestFailed as e:
            return fail("The HR service rejected the request", status=502, code="REMOTE_REJECTED", detail=e.body)
        except GatewayError as e:
            return fail("The HR service is unreachable", status=502, code="REMOTE_UNAVAILABLE", detail=str(e))
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return fail("Internal server error", status=500)

    return wrapper


SESSION_KEY = "employee_id"


def remember_signed_in(employee_id: str) -> None:
    session.clear()
    session[SESSION_KEY] = employee_id


def is_signed_in(workspace) -> bool:
    """True when this client's cookie names the workspace's current user."""
    user = workspace.session.current_user
    return user is not None and session.get(SESSION_KEY) == user.id


def login_required(workspace):
    """Decorator factory: reject the call unless this client is the signed-in user."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any):
            if not is_signed_in(workspace):
                return fail("Please sign in to continue", status=401, code="UNAUTHENTICATED")
            return view(*args, **kwargs)

        return wrapper

    return decorator
