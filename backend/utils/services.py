import logging

from flask import current_app

from services.auth import (
    AuthService,
    InMemorySessionStore,
    PasswordHasher,
    RedisSessionStore,
    SessionRegistry,
    SessionStore,
    UserService,
)
from services.jobs import JobSearchService, JSearchClient
from services.shared import Database, create_database

logger = logging.getLogger(__name__)

EXTENSION_KEY = "quickhire"


def build_database(config) -> Database:
    """
    Build the Database from ``DATABASE_URL``.

    Returns:
        Database instance (PostgreSQL or SQLite)
    """
    return create_database(config["DATABASE_URL"])


def build_session_store(config) -> SessionStore:
    """
    Build the session store selected by ``SESSION_BACKEND``.

    Raises:
        ValueError: If the backend is unknown or Redis is selected without REDIS_URL
    """
    backend = config.get("SESSION_BACKEND", "memory")
    if backend == "memory":
        return InMemorySessionStore()
    if backend == "redis":
        redis_url = config.get("REDIS_URL")
        if not redis_url:
            raise ValueError("REDIS_URL is required when SESSION_BACKEND is 'redis'")
        return RedisSessionStore.from_url(redis_url)
    raise ValueError(f"Unknown SESSION_BACKEND: {backend}")


def build_jsearch_client(config) -> JSearchClient | None:
    """
    Build the JSearch client if an API key is configured.

    Returns:
        JSearchClient instance or None if not configured
    """
    api_key = config.get("JSEARCH_API_KEY")
    if not api_key:
        logger.warning("JSEARCH_API_KEY is not set; job search will report misconfiguration")
        return None
    return JSearchClient(
        api_key=api_key,
        base_url=config.get("JSEARCH_BASE_URL") or "https://jsearch.p.rapidapi.com",
        timeout=config.get("JSEARCH_TIMEOUT", 15),
    )


def init_services(
    app,
    database: Database | None = None,
    session_store: SessionStore | None = None,
    jsearch_client: JSearchClient | None = None,
) -> None:
    """
    Wire the service graph onto the app.

    Explicit arguments win over configuration, which is how tests inject
    a temporary database, a fake clock or a stub upstream client.
    """
    config = app.config
    if database is None:
        database = build_database(config)
    if session_store is None:
        session_store = build_session_store(config)
    if jsearch_client is None:
        jsearch_client = build_jsearch_client(config)
    user_service = UserService(database=database)
    user_service.ensure_schema()

    session_registry = SessionRegistry(
        store=session_store,
        max_age=config["SESSION_MAX_AGE"],
        idle_timeout=config.get("SESSION_IDLE_TIMEOUT", 0),
    )
    auth_service = AuthService(
        user_service=user_service,
        session_registry=session_registry,
        password_hasher=PasswordHasher(n=config.get("SCRYPT_N", 16384)),
    )
    job_search_service = JobSearchService(
        jsearch_client=jsearch_client,
        default_query=config.get("DEFAULT_SEARCH_QUERY") or "Project Manager",
        num_pages=config.get("JSEARCH_NUM_PAGES", 1),
    )

    app.extensions[EXTENSION_KEY] = {
        "database": database,
        "user_service": user_service,
        "session_registry": session_registry,
        "auth_service": auth_service,
        "job_search_service": job_search_service,
    }


def _get(name: str):
    return current_app.extensions[EXTENSION_KEY][name]


def get_database() -> Database:
    return _get("database")


def get_auth_service() -> AuthService:
    """
    Get the AuthService bound to the current app.

    Returns:
        AuthService instance
    """
    return _get("auth_service")


def get_job_search_service() -> JobSearchService:
    """
    Get the JobSearchService bound to the current app.

    Returns:
        JobSearchService instance
    """
    return _get("job_search_service")
