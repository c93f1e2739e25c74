from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    email = require_non_empty(value, field_name)
    local, sep, domain = email.partition("@")
    if not sep or not local or "." not in domain:
        raise ValidationError(f"{field_name} is not a valid address")
    return email.lower()
