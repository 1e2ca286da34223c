"""Request-scoped access to settings, the auth client and the scenario session."""

import uuid
from typing import Optional

from flask import current_app, session

from airgead.config import Settings
from airgead.services.auth_service import AuthClient, AuthError, AuthState
from airgead.services.scenario_session import ScenarioSession, open_scenario_session

SETTINGS_EXTENSION = "airgead.settings"
AUTH_CLIENT_EXTENSION = "airgead.auth_client"
SESSION_FACTORY_EXTENSION = "airgead.session_factory"

# Keys kept in the signed session cookie
CLIENT_ID_KEY = "client_id"
USER_ID_KEY = "user_id"
EMAIL_KEY = "email"
ACCESS_TOKEN_KEY = "access_token"


def get_app_settings() -> Settings:
    return current_app.extensions[SETTINGS_EXTENSION]


def get_auth_client() -> AuthClient:
    return current_app.extensions[AUTH_CLIENT_EXTENSION]


def get_client_id() -> str:
    """Anonymous client id, created on first use and kept in the session."""
    client_id = session.get(CLIENT_ID_KEY)
    if not client_id:
        client_id = uuid.uuid4().hex
        session[CLIENT_ID_KEY] = client_id
    return client_id


def get_auth_state() -> Optional[AuthState]:
    """The signed-in user recorded in the session, if any."""
    user_id = session.get(USER_ID_KEY)
    if not user_id:
        return None
    return AuthState(
        user_id=user_id,
        email=session.get(EMAIL_KEY),
        access_token=session.get(ACCESS_TOKEN_KEY),
    )


def remember_auth_state(state: AuthState) -> None:
    session[USER_ID_KEY] = state.user_id
    session[EMAIL_KEY] = state.email
    session[ACCESS_TOKEN_KEY] = state.access_token


def forget_auth_state() -> None:
    for key in (USER_ID_KEY, EMAIL_KEY, ACCESS_TOKEN_KEY):
        session.pop(key, None)


def get_scenario_session(auth_error: Optional[AuthError] = None) -> ScenarioSession:
    """Open the scenario session for the current request."""
    return open_scenario_session(
        get_app_settings(),
        get_client_id(),
        auth_state=None if auth_error is not None else get_auth_state(),
        auth_error=auth_error,
        session_factory=current_app.extensions.get(SESSION_FACTORY_EXTENSION),
    )
