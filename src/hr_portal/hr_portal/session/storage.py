from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class SessionStorage(Protocol):
    """Durable slot for the current session identity (one record)."""

    def load(self) -> Optional[dict]:
        raise NotImplementedError

    def save(self, data: dict) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class FileSessionStorage(SessionStorage):
    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[dict]:
        if not self._path.exists():
            return None
        try:
            data: Any = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self._path, e)
            return None
        return data if isinstance(data, dict) else None

    def save(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data), encoding="utf-8")
        tmp.replace(self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


class MemorySessionStorage(SessionStorage):
    def __init__(self, data: Optional[dict] = None):
        self.data = dict(data) if data else None

    def load(self) -> Optional[dict]:
        return dict(self.data) if self.data else None

    def save(self, data: dict) -> None:
        self.data = dict(data)

    def clear(self) -> None:
        self.data = None
