import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
repo_root = Path(__file__).resolve().parents[1]
environment = os.getenv("ENVIRONMENT", "development")
env_file = repo_root / f".env.{environment}"
if env_file.exists():
    load_dotenv(env_file, override=True)
else:
    env_path = repo_root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=True)
load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("FLASK_SECRET_KEY") or "dev-secret-key-change-in-production"
    ENVIRONMENT = environment
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Persistence
    DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{repo_root / 'quickhire.db'}"

    # Sessions: "memory" (single process) or "redis" (shared, needs REDIS_URL)
    SESSION_BACKEND = os.getenv("SESSION_BACKEND", "memory").lower()
    REDIS_URL = os.getenv("REDIS_URL")
    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "sessionID")
    SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", "86400"))
    SESSION_IDLE_TIMEOUT = int(os.getenv("SESSION_IDLE_TIMEOUT", "7200"))
    SESSION_COOKIE_SECURE = _env_bool("SESSION_COOKIE_SECURE")

    # Upstream job search
    JSEARCH_API_KEY = os.getenv("JSEARCH_API_KEY")
    JSEARCH_BASE_URL = os.getenv("JSEARCH_BASE_URL", "https://jsearch.p.rapidapi.com")
    JSEARCH_TIMEOUT = float(os.getenv("JSEARCH_TIMEOUT", "15"))
    JSEARCH_NUM_PAGES = int(os.getenv("JSEARCH_NUM_PAGES", "1"))
    DEFAULT_SEARCH_QUERY = os.getenv("DEFAULT_SEARCH_QUERY", "Project Manager")

    # Password hashing cost (scrypt N)
    SCRYPT_N = int(os.getenv("SCRYPT_N", "16384"))

    # CORS configuration: allow frontend origin(s) via env (comma-separated)
    _cors_env = os.getenv("CORS_ORIGINS", "").strip()
    CORS_ORIGINS = (
        [o.strip() for o in _cors_env.split(",") if o.strip()]
        if _cors_env
        else ["http://localhost:5173", "http://localhost:3000"]
    )

    LOGIN_URL = "/login"
    DASHBOARD_URL = "/dashboard"
