"""
appConfig.py
------------
Runtime settings for the API server, read once at import time from the
environment. A `.env` file next to this module is loaded first if present;
values already set in the real environment win.
"""

import os

from dotenv import load_dotenv


_dotenvPath = os.path.join(os.path.dirname(__file__), ".env")
load_dotenv(dotenv_path=_dotenvPath, override=False)


def _intFromEnv(name: str, default: int) -> int:
    rawValue = os.getenv(name)
    if rawValue is None or not rawValue.strip():
        return default
    try:
        return int(rawValue)
    except ValueError:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {rawValue!r}.") from None


def _listFromEnv(name: str, default: list[str]) -> list[str]:
    rawValue = os.getenv(name)
    if not rawValue:
        return default
    return [item.strip() for item in rawValue.split(",") if item.strip()]


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

ADMIN_USER        = os.getenv("ADMIN_USER", "cogz")
ADMIN_PASS        = os.getenv("ADMIN_PASS", "cogz")
AUTH_SECRET       = os.getenv("AUTH_SECRET", "dev-secret-change-me")
TOKEN_TTL_SECONDS = _intFromEnv("TOKEN_TTL_SECONDS", 60 * 60 * 24 * 7)

# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------

# Used when a request omits "language"
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "javascript")

# In production, restrict origins to your actual domain.
CORS_ORIGINS = _listFromEnv(
    "CORS_ORIGINS",
    ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:5173"],
)

HOST        = os.getenv("HOST", "0.0.0.0")
PORT        = _intFromEnv("PORT", 8000)
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes")
LOG_LEVEL   = os.getenv("LOG_LEVEL", "INFO").upper()
