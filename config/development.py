import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Remote HR API (PHP endpoints live directly under this prefix)
API_BASE_URL = os.getenv("API_BASE_URL", "https://hr.kaphi.in/api")

# Where the signed-in identity survives restarts
SESSION_FILE = os.getenv("SESSION_FILE", str(Path.home() / ".hr_portal" / "session.json"))

# Password given to accounts created from the Add Employee screen
DEFAULT_EMPLOYEE_PASSWORD = os.getenv("DEFAULT_EMPLOYEE_PASSWORD", "123456")

LOAD_WORKERS = int(os.getenv("LOAD_WORKERS", "4"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
