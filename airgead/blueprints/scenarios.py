"""
Scenarios blueprint.

Lists and saves calculator scenarios through whichever store the client's
session selected (remote database when logged in, local otherwise).
"""

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from airgead.blueprints.context import get_scenario_session
from airgead.models.presentation import build_comparison
from airgead.models.validation import InputValidationError, parse_inputs
from airgead.storage import StorageError

scenarios_bp = Blueprint("scenarios", __name__, url_prefix="/api")

SORT_ORDERS = ("date", "initial")
MSG_INVALID_SAVE = "Please enter valid values before saving."
MSG_SAVE_FAILED = "Save failed."


@scenarios_bp.route("/scenarios", methods=["GET"])
def list_scenarios() -> Any:
    """List saved scenarios.

    Query parameters:
        sort: "date" (newest first, default) or "initial" (largest first)

    Returns:
        JSON response with storage mode, status message and scenarios
    """
    try:
        order = request.args.get("sort", "date")
        if order not in SORT_ORDERS:
            return jsonify({"error": f"sort must be one of {list(SORT_ORDERS)}"}), 400

        try:
            scenario_session = get_scenario_session()
        except StorageError as e:
            current_app.logger.error(f"Error loading scenarios: {str(e)}")
            return jsonify({"error": "Could not load scenarios", "message": str(e)}), 502

        scenario_session.sort(order)
        return jsonify(scenario_session.to_dict()), 200

    except Exception as e:
        current_app.logger.error(f"Error listing scenarios: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@scenarios_bp.route("/scenarios", methods=["POST"])
def save_scenario() -> Any:
    """Validate and save a scenario's inputs.

    Returns:
        JSON response with the saved record and the refreshed list
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        try:
            inputs = parse_inputs(data)
        except InputValidationError as e:
            return jsonify({"error": MSG_INVALID_SAVE, "message": e.message}), 400

        try:
            scenario_session = get_scenario_session()
            record = scenario_session.save(inputs)
        except StorageError as e:
            current_app.logger.error(f"Error saving scenario: {str(e)}")
            return jsonify({"error": MSG_SAVE_FAILED, "message": str(e)}), 502

        return (
            jsonify(
                {"scenario": record.model_dump(mode="json"), **scenario_session.to_dict()}
            ),
            201,
        )

    except Exception as e:
        current_app.logger.error(f"Error saving scenario: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@scenarios_bp.route("/scenarios/<int:scenario_id>/schedule", methods=["GET"])
def saved_scenario_schedule(scenario_id: int) -> Any:
    """Recompute both schedules for a saved scenario.

    Args:
        scenario_id: ID of the saved scenario

    Returns:
        JSON response with both tables for the scenario's inputs
    """
    try:
        try:
            scenario_session = get_scenario_session()
        except StorageError as e:
            current_app.logger.error(f"Error loading scenarios: {str(e)}")
            return jsonify({"error": "Could not load scenarios", "message": str(e)}), 502

        scenario = scenario_session.find(scenario_id)
        if scenario is None:
            return jsonify({"error": "Scenario not found"}), 404

        comparison = build_comparison(scenario.to_inputs())
        return jsonify({"scenario_id": scenario_id, **comparison.to_dict()}), 200

    except Exception as e:
        current_app.logger.error(f"Error computing saved scenario: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
