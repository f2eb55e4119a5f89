import os

# APP_ENV value -> settings module
SETTINGS_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def get_settings_module() -> str:
    # Unknown or missing APP_ENV falls back to development
    env = os.getenv("APP_ENV", "development").strip().lower()
    return SETTINGS_MODULES.get(env, "config.development")
