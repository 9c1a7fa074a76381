import logging

from flask import Blueprint, current_app, jsonify

from ..utils.services import get_database

logger = logging.getLogger(__name__)
system_bp = Blueprint("system", __name__)


@system_bp.route("/api/health")
def api_health():
    """Health check endpoint."""
    try:
        with get_database().get_cursor() as cur:
            cur.execute("SELECT 1")
        db_status = "healthy"
    except Exception as e:
        logger.warning(f"Health check database error: {e}")
        db_status = "unhealthy"

    return jsonify(
        {
            "status": "healthy" if db_status == "healthy" else "degraded",
            "database": db_status,
            "environment": current_app.config.get("ENVIRONMENT", "development"),
        }
    )
