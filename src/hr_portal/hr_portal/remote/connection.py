from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests


@dataclass
class ApiConfig:
    base_url: str

    def url(self, path: str) -> str:
        return self.base_url.rstrip("/") + path


class ApiConnection:
    """Shared ``requests.Session`` factory for the remote API.

    Note: One session per process. No timeout and no retry, failures
    surface to the caller.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._session = session

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Content-Type": "application/json"})
        return self._session
