import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "https://hr.kaphi.in/api")

SESSION_FILE = os.getenv("SESSION_FILE", str(Path.home() / ".hr_portal" / "session.json"))

DEFAULT_EMPLOYEE_PASSWORD = os.getenv("DEFAULT_EMPLOYEE_PASSWORD", "123456")

LOAD_WORKERS = int(os.getenv("LOAD_WORKERS", "4"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
