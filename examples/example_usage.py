"""Example: drive the service layer directly, without Flask.

Signs in, prints the dashboard numbers and the last week of attendance.
Credentials come from HR_EMAIL / HR_PASSWORD.
"""

import os

from dotenv import load_dotenv

from config.config import load_settings

from src.hr_portal.hr_portal.common.datetime_utils import today_local
from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.views.attendance import visible_attendance
from src.hr_portal.hr_portal.views.dashboard import build_dashboard


def main():
    load_dotenv()
    settings = load_settings()
    container = build_container(
        api_base_url=settings.API_BASE_URL,
        session_file=settings.SESSION_FILE,
        default_password=settings.DEFAULT_EMPLOYEE_PASSWORD,
        load_workers=settings.LOAD_WORKERS,
    )
    workspace = container.workspace

    if not workspace.session.is_authenticated:
        result = workspace.login(os.getenv("HR_EMAIL", ""), os.getenv("HR_PASSWORD", ""))
        if not result:
            print("Login failed:", result.message)
            return

    actor = workspace.actor()
    today = today_local()
    print(build_dashboard(actor, workspace.store, today=today).to_dict()["stats"])
    for row in visible_attendance(actor, workspace.store, today=today):
        print(row.to_dict())


if __name__ == "__main__":
    main()
