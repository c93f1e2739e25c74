import os

_ALIASES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # HR_PORTAL_SETTINGS names a module outright; otherwise APP_ENV picks one
    explicit = os.getenv("HR_PORTAL_SETTINGS")
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ALIASES.get(env, "config.development")
