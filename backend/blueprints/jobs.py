import logging

from flask import Blueprint, g, jsonify, request

from services.shared.exceptions import QuickHireError

from ..utils.decorators import api_session_required
from ..utils.errors import error_response
from ..utils.services import get_job_search_service

logger = logging.getLogger(__name__)
jobs_bp = Blueprint("jobs", __name__, url_prefix="/api/jobs")


@jobs_bp.route("", methods=["GET"])
@api_session_required
def api_search_jobs():
    """Search jobs through the upstream API."""
    try:
        jobs = get_job_search_service().search(request.args.get("query", ""), g.user_email)
        return jsonify({"success": True, "data": [job.to_dict() for job in jobs]}), 200
    except QuickHireError as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Job search error: {str(e)}", exc_info=True)
        return error_response(e)
