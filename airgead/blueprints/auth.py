"""
Authentication blueprint.

Proxies register/login/logout to the external auth service and switches the
client's scenario session between the database and local stores.
"""

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from airgead.blueprints.context import (
    forget_auth_state,
    get_auth_client,
    get_auth_state,
    get_scenario_session,
    remember_auth_state,
)
from airgead.services.auth_service import AuthError, AuthUnavailableError
from airgead.services.scenario_session import ScenarioSession
from airgead.storage import StorageError

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _credentials() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _session_payload(scenario_session: ScenarioSession) -> Dict[str, Any]:
    state = get_auth_state()
    return {
        "logged_in": scenario_session.using_database,
        "email": state.email if state else None,
        **scenario_session.to_dict(),
    }


@auth_bp.route("/register", methods=["POST"])
def register() -> Any:
    """Register a new account with the auth service.

    Returns:
        JSON response with the status message
    """
    try:
        data = _credentials()
        try:
            message = get_auth_client().sign_up(data.get("email"), data.get("password"))
        except AuthError as e:
            return jsonify({"error": e.message, "status": e.message}), e.status_code

        return jsonify({"status": message}), 201

    except Exception as e:
        current_app.logger.error(f"Error registering account: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@auth_bp.route("/login", methods=["POST"])
def login() -> Any:
    """Sign in and switch the client to the database store.

    Returns:
        JSON response with login state and the user's scenarios
    """
    try:
        data = _credentials()
        try:
            state = get_auth_client().sign_in(data.get("email"), data.get("password"))
        except AuthUnavailableError as e:
            current_app.logger.warning(f"Auth unavailable during login: {e.message}")
            scenario_session = get_scenario_session(auth_error=e)
            return (
                jsonify({"error": e.message, **_session_payload(scenario_session)}),
                e.status_code,
            )
        except AuthError as e:
            return jsonify({"error": e.message, "status": e.message}), e.status_code

        remember_auth_state(state)
        return jsonify(_session_payload(get_scenario_session())), 200

    except StorageError as e:
        current_app.logger.error(f"Error loading scenarios after login: {str(e)}")
        return jsonify({"error": "Could not load scenarios", "message": str(e)}), 502
    except Exception as e:
        current_app.logger.error(f"Error logging in: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@auth_bp.route("/logout", methods=["POST"])
def logout() -> Any:
    """Sign out and switch the client back to the local store.

    Returns:
        JSON response with login state and the local scenarios
    """
    try:
        state = get_auth_state()
        if state is not None and state.access_token:
            try:
                get_auth_client().sign_out(state.access_token)
            except AuthError as e:
                current_app.logger.warning(f"Sign out failed: {e.message}")

        forget_auth_state()
        return jsonify(_session_payload(get_scenario_session())), 200

    except StorageError as e:
        current_app.logger.error(f"Error loading scenarios after logout: {str(e)}")
        return jsonify({"error": "Could not load scenarios", "message": str(e)}), 502
    except Exception as e:
        current_app.logger.error(f"Error logging out: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@auth_bp.route("/status", methods=["GET"])
def status() -> Any:
    """Resolve the current login state and report the active store.

    Returns:
        JSON response with login state, status message and scenarios
    """
    try:
        auth_error = None
        state = get_auth_state()
        if state is not None and state.access_token:
            try:
                remember_auth_state(get_auth_client().get_user(state.access_token))
            except AuthUnavailableError as e:
                current_app.logger.warning(f"Auth unavailable: {e.message}")
                auth_error = e
            except AuthError as e:
                current_app.logger.info(f"Dropping expired login: {e.message}")
                forget_auth_state()

        return jsonify(_session_payload(get_scenario_session(auth_error=auth_error))), 200

    except StorageError as e:
        current_app.logger.error(f"Error loading scenarios: {str(e)}")
        return jsonify({"error": "Could not load scenarios", "message": str(e)}), 502
    except Exception as e:
        current_app.logger.error(f"Error resolving auth status: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
