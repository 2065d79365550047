import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./civicgate.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "civicgate_session")
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", False))
    SESSION_TTL_HOURS = int(data.get("SESSION_TTL_HOURS", 24 * 7))
    INVITATION_TTL_HOURS = int(data.get("INVITATION_TTL_HOURS", 72))
    PASSWORD_RESET_TTL_MINUTES = int(data.get("PASSWORD_RESET_TTL_MINUTES", 60))
    FEATURES_FAIL_OPEN_ON_MISSING_PLAN = bool(
        data.get("FEATURES_FAIL_OPEN_ON_MISSING_PLAN", True)
    )
    PUBLIC_BASE_URL = data.get("PUBLIC_BASE_URL", "http://localhost:5000")
