"""
Schedule blueprint.

Runs the calculator for one set of inputs under both deposit policies and
returns the two year-end tables.
"""

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from airgead.models.presentation import DEFAULT_INPUTS, build_comparison
from airgead.models.validation import InputValidationError, parse_inputs

schedule_bp = Blueprint("schedule", __name__, url_prefix="/api")


@schedule_bp.route("/schedule/defaults", methods=["GET"])
def schedule_defaults() -> Any:
    """Return the inputs the form resets to."""
    return jsonify(DEFAULT_INPUTS), 200


@schedule_bp.route("/schedule", methods=["POST"])
def compute_schedule() -> Any:
    """Validate inputs and compute both schedules.

    Returns:
        JSON response with the tables without and with the monthly deposit
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        try:
            inputs = parse_inputs(data)
        except InputValidationError as e:
            return jsonify({"error": e.message, "field": e.field}), 400

        return jsonify(build_comparison(inputs).to_dict()), 200

    except Exception as e:
        current_app.logger.error(f"Error computing schedule: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
