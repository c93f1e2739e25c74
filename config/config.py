import importlib
from dataclasses import dataclass
from typing import Optional

from . import get_settings_module


@dataclass(frozen=True)
class Settings:
    SECRET_KEY: str
    API_BASE_URL: str
    SESSION_FILE: str
    DEFAULT_EMPLOYEE_PASSWORD: str = "123456"
    LOAD_WORKERS: int = 4
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    TESTING: bool = False
    MODULE: str = ""


def load_settings(module_name: Optional[str] = None) -> Settings:
    """Read the active settings module into a typed Settings object."""
    module_name = module_name or get_settings_module()
    module = importlib.import_module(module_name)
    return Settings(
        SECRET_KEY=getattr(module, "SECRET_KEY"),
        API_BASE_URL=getattr(module, "API_BASE_URL"),
        SESSION_FILE=getattr(module, "SESSION_FILE"),
        DEFAULT_EMPLOYEE_PASSWORD=getattr(module, "DEFAULT_EMPLOYEE_PASSWORD", "123456"),
        LOAD_WORKERS=int(getattr(module, "LOAD_WORKERS", 4)),
        LOG_LEVEL=str(getattr(module, "LOG_LEVEL", "INFO")),
        DEBUG=bool(getattr(module, "DEBUG", False)),
        TESTING=bool(getattr(module, "TESTING", False)),
        MODULE=module_name,
    )
