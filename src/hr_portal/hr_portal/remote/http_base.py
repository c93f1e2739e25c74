from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from ..core.exceptions import RequestFailed, TransportFailure
from .connection import ApiConnection

logger = logging.getLogger(__name__)


def send_json(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    body: Optional[Mapping[str, Any]] = None,
    params: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Issue one API call and return the decoded JSON body.

    Non-2xx answers raise ``RequestFailed`` with the response text; errors
    raised by the transport itself become ``TransportFailure``.
    """

    url = conn.config.url(path)
    logger.debug("%s %s", method, url)
    try:
        resp = conn.session.request(method, url, json=body, params=params)
    except requests.RequestException as e:
        logger.warning("%s %s failed: %s", method, url, e)
        raise TransportFailure(str(e) or e.__class__.__name__, url=url) from e

    if not 200 <= resp.status_code < 300:
        logger.warning("%s %s -> %s", method, url, resp.status_code)
        raise RequestFailed(resp.text or "Request failed", status_code=resp.status_code, url=url)

    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError as e:
        raise RequestFailed(resp.text, status_code=resp.status_code, url=url) from e
