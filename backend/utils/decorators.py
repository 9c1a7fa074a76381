import logging
from functools import wraps

from flask import current_app, g, redirect, request

from services.shared.exceptions import UnauthorizedError

from .errors import error_response
from .services import get_auth_service

logger = logging.getLogger(__name__)


def session_token() -> str | None:
    """Session token from the request cookie, if any."""
    return request.cookies.get(current_app.config["SESSION_COOKIE_NAME"])


def _resolve_session() -> str | None:
    email = get_auth_service().current_user(session_token())
    g.user_email = email
    return email


def api_session_required(f):
    """Require a live session; answer 401 JSON otherwise."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not _resolve_session():
            logger.info(f"Unauthenticated API request: {request.method} {request.path}")
            return error_response(UnauthorizedError())
        return f(*args, **kwargs)

    return decorated_function


def page_session_required(f):
    """Require a live session; redirect to the login page otherwise."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not _resolve_session():
            return redirect(current_app.config["LOGIN_URL"])
        return f(*args, **kwargs)

    return decorated_function
