"""Health check blueprint."""

from flask import Blueprint, Response, jsonify

health_bp = Blueprint("health", __name__)

SERVICE_NAME = "airgead-planner"


@health_bp.route("/healthz")
def health_check() -> Response:
    """Liveness probe; touches neither store nor the auth service.

    Returns:
        JSON response with status information
    """
    return jsonify({"status": "ok", "service": SERVICE_NAME})
