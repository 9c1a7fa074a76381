import logging

from flask import Blueprint, current_app, jsonify, make_response, redirect, render_template, request

from services.shared.exceptions import QuickHireError, ValidationError

from ..utils.decorators import session_token
from ..utils.errors import error_response
from ..utils.services import get_auth_service

logger = logging.getLogger(__name__)
auth_bp = Blueprint("auth", __name__)


def _credentials() -> tuple[str, str]:
    """Email and password from a JSON or form-encoded body.

    Raises:
        ValidationError: If either field is present but not a string
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form
    email = data.get("email") or ""
    password = data.get("password") or ""
    if not isinstance(email, str) or not isinstance(password, str):
        raise ValidationError("Email and password must be strings.")
    return email, password


@auth_bp.route("/login", methods=["GET"])
def login_page():
    return render_template("login.html")


@auth_bp.route("/register", methods=["GET"])
def register_page():
    return render_template("register.html")


@auth_bp.route("/register", methods=["POST"])
def register():
    """Register a new user."""
    try:
        email, password = _credentials()
        get_auth_service().register_user(email, password)
        return (
            jsonify({"success": True, "redirectUrl": current_app.config["LOGIN_URL"]}),
            201,
        )
    except QuickHireError as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Registration error: {str(e)}", exc_info=True)
        return error_response(e)


@auth_bp.route("/login", methods=["POST"])
def login():
    """Log a user in and set the session cookie."""
    try:
        email, password = _credentials()
        token, _ = get_auth_service().login_user(email, password)
    except QuickHireError as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Login error: {str(e)}", exc_info=True)
        return error_response(e)

    config = current_app.config
    response = make_response(
        jsonify({"success": True, "redirectUrl": config["DASHBOARD_URL"]}), 200
    )
    response.set_cookie(
        config["SESSION_COOKIE_NAME"],
        token,
        max_age=config["SESSION_MAX_AGE"],
        path="/",
        httponly=True,
        secure=config.get("SESSION_COOKIE_SECURE", False),
        samesite="Lax",
    )
    return response


@auth_bp.route("/logout", methods=["GET", "POST"])
def logout():
    """End the session, clear the cookie and go back to the login page."""
    try:
        get_auth_service().logout_user(session_token())
    except Exception as e:
        # Logout must always succeed from the browser's point of view
        logger.error(f"Logout error: {str(e)}", exc_info=True)

    config = current_app.config
    response = redirect(config["LOGIN_URL"])
    response.delete_cookie(config["SESSION_COOKIE_NAME"], path="/")
    return response
