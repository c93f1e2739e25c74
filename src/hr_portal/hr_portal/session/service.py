from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import AuthenticationError, DomainError, GatewayError
from ..employees.model import Employee, NewEmployee
from ..remote.gateway import RemoteGateway
from .storage import SessionStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """Outcome of login/register.

    Truthy on success so callers that only care about pass/fail can keep
    doing ``if session.login(...)``; ``error`` keeps the typed cause.
    """

    ok: bool
    user: Optional[Employee] = None
    new_id: Optional[str] = None
    error: Optional[DomainError] = None

    def __bool__(self) -> bool:
        return self.ok

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""


class SessionState:
    """Anonymous -> Authenticated state machine for the current user.

    The identity is rehydrated from durable storage on construction and
    written back on every successful login.
    """

    def __init__(self, gateway: RemoteGateway, storage: SessionStorage):
        self._gateway = gateway
        self._storage = storage
        self._user: Optional[Employee] = self._rehydrate()

    def _rehydrate(self) -> Optional[Employee]:
        raw = self._storage.load()
        if not raw:
            return None
        try:
            return Employee.from_api(raw)
        except (KeyError, ValueError) as e:
            logger.warning("Stored session is not a valid profile, starting anonymous: %s", e)
            self._storage.clear()
            return None

    @property
    def current_user(self) -> Optional[Employee]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def require_user(self) -> Employee:
        if self._user is None:
            raise AuthenticationError("Please sign in to continue")
        return self._user

    def login(self, email: str, password: str) -> AuthResult:
        try:
            user = self._gateway.login(email.strip(), password)
        except GatewayError as e:
            logger.info("Login rejected for %s: %s", email, e)
            return AuthResult(ok=False, error=AuthenticationError(str(e) or "Invalid email or password"))

        self._user = user
        self._storage.save(user.to_api())
        logger.info("Signed in as %s (%s)", user.email, user.role.value)
        return AuthResult(ok=True, user=user)

    def logout(self) -> None:
        self._user = None
        self._storage.clear()

    def register(self, employee: NewEmployee, *, password: str) -> AuthResult:
        """Create a new employee account; the caller's own session is untouched."""

        try:
            new_id = self._gateway.register(employee, password=password)
        except GatewayError as e:
            logger.info("Registration rejected for %s: %s", employee.email, e)
            return AuthResult(ok=False, error=e)
        return AuthResult(ok=True, new_id=new_id)
