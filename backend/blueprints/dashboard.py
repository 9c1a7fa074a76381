import logging

from flask import Blueprint, g, jsonify, render_template

from ..utils.decorators import api_session_required, page_session_required

logger = logging.getLogger(__name__)
dashboard_bp = Blueprint("dashboard", __name__)


@dashboard_bp.route("/", methods=["GET"])
@dashboard_bp.route("/dashboard", methods=["GET"])
@page_session_required
def dashboard():
    """Serve the dashboard page."""
    return render_template("dashboard.html", email=g.user_email)


@dashboard_bp.route("/api/me", methods=["GET"])
@api_session_required
def api_me():
    """Return the logged-in user's email."""
    return jsonify({"success": True, "email": g.user_email}), 200
