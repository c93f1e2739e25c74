import os
import tempfile
from pathlib import Path

SECRET_KEY = "test-secret"

API_BASE_URL = os.getenv("API_BASE_URL", "http://hr.test/api")

SESSION_FILE = os.getenv("SESSION_FILE", str(Path(tempfile.gettempdir()) / "hr_portal_test_session.json"))

DEFAULT_EMPLOYEE_PASSWORD = "123456"

LOAD_WORKERS = 1

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
