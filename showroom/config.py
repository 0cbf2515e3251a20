# showroom/config.py
import os
from dotenv import load_dotenv

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(BASE_DIR, ".env"))


def _env(key: str, default=None):
    v = os.getenv(key)
    return v if v not in (None, "", "None") else default


def _env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v in (None, "", "None"):
        return default
    return str(v).strip().lower() in ("1", "true", "t", "yes", "y", "on")


def _env_int(key: str, default: int) -> int:
    try:
        return int(_env(key, default))
    except (TypeError, ValueError):
        return default


def _env_list(key: str, default: list[str]) -> list[str]:
    raw = _env(key)
    if not raw:
        return default
    return [part.strip() for part in raw.split(",") if part.strip()]


class Config:
    SECRET_KEY = _env("SECRET_KEY", "dev-please-change-me")

    # Remote content service (read-only)
    CONTENT_API_BASE = _env("CONTENT_API_BASE", "https://ishanib.demovoting.com/api")
    UPLOAD_BASE_URL = _env("UPLOAD_BASE_URL", "https://ishanib.demovoting.com/uploads")
    CONTENT_API_TIMEOUT = _env_int("CONTENT_API_TIMEOUT", 10)
    CONTENT_API_WORKERS = _env_int("CONTENT_API_WORKERS", 5)

    SITE_NAME = _env("SITE_NAME", "Ishani Enterprises")

    # Used when the contact record is missing a value
    FALLBACK_MOBILE = _env("FALLBACK_MOBILE", "905321121")
    FALLBACK_WHATSAPP = _env("FALLBACK_WHATSAPP", "https://wa.me/8208095812")
    FALLBACK_OUTLET_NAME = _env("FALLBACK_OUTLET_NAME", "Nashik Factory Outlet")
    FALLBACK_OPEN_HOURS = _env("FALLBACK_OPEN_HOURS", "All days 10:00 AM - 7:00 PM")

    CORS_ORIGINS = _env_list(
        "CORS_ORIGINS",
        ["http://localhost:3000", "http://localhost:5173"],
    )

    DEBUG_ROUTES = _env_bool("DEBUG_ROUTES", False)


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test"
    CONTENT_API_BASE = "http://content.test/api"
    UPLOAD_BASE_URL = "http://content.test/uploads"
    CONTENT_API_TIMEOUT = 1
    CONTENT_API_WORKERS = 2
