import os

DEFAULT_ENV = "development"

# APP_ENV value -> settings module; unknown values fall back to development
SETTINGS_MODULES = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module(app_env: str | None = None) -> str:
    env = (app_env or os.getenv("APP_ENV") or DEFAULT_ENV).strip().lower()
    return SETTINGS_MODULES.get(env, SETTINGS_MODULES[DEFAULT_ENV])
