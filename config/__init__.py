"""Settings modules, selected by the ``APP_ENV`` environment variable."""

import os

SETTINGS_BY_ENV = {
    "development": "config.development",
    "dev": "config.development",
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    return SETTINGS_BY_ENV.get(env, "config.development")
