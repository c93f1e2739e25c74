"""Conversion between domain values and the remote API's JSON shape.

The API speaks camelCase keys, ISO dates and ``HH:mm:ss`` clock times.
Ids come back as numbers or strings depending on the endpoint; locally
they are always strings.
"""
from __future__ import annotations

from datetime import date, time
from enum import Enum
from typing import Any, Mapping, Optional

from .datetime_utils import format_clock_time, format_date


def camelize(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return format_date(value)
    if isinstance(value, time):
        return format_clock_time(value)
    return value


def wire_id(local_id: Any) -> Any:
    s = str(local_id)
    return int(s) if s.isdigit() else s


def local_id(raw: Any) -> Optional[str]:
    if raw in (None, ""):
        return None
    return str(raw)


def patch_to_wire(changes: Mapping[str, Any]) -> dict:
    """snake_case field changes -> camelCase JSON body, ``None`` kept as null."""
    return {camelize(k): to_wire(v) for k, v in changes.items()}


def drop_empty(payload: Mapping[str, Any]) -> dict:
    return {k: v for k, v in payload.items() if v is not None}
