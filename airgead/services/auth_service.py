"""
Client for the external authentication service.

Authentication is provided by a GoTrue-compatible REST service. This module
wraps the handful of calls the application needs and turns transport and HTTP
failures into AuthError values whose messages can be shown to the user.
"""

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, Field
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from airgead.config import Settings

logger = logging.getLogger(__name__)

MSG_MISSING_CREDENTIALS = "Enter email and password."
MSG_REGISTERED = "Registered. (Check email if confirmation is enabled.)"


class AuthError(Exception):
    """Raised when the auth service rejects a request."""

    def __init__(self, message: str, status_code: int = 401):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthUnavailableError(AuthError):
    """Raised when the auth service cannot be reached or is not configured."""

    def __init__(self, message: str):
        super().__init__(message, status_code=503)


class AuthState(BaseModel):
    """The authenticated user as known to this application."""

    user_id: str = Field(..., min_length=1, description="Auth service user id")
    email: Optional[str] = Field(None, description="User email address")
    access_token: Optional[str] = Field(None, description="Bearer token")


class AuthClient:
    """Client for a GoTrue-compatible authentication API."""

    def __init__(
        self,
        base_url: Optional[str],
        api_key: Optional[str] = None,
        timeout: int = 10,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.api_key = api_key
        self.timeout = timeout
        self.session = self._create_session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthClient":
        return cls(
            base_url=settings.auth_url,
            api_key=settings.auth_api_key,
            timeout=settings.auth_timeout,
        )

    def _create_session(self) -> requests.Session:
        """Create a requests session with retry strategy."""
        session = requests.Session()

        retry_strategy = Retry(
            total=3,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    @property
    def configured(self) -> bool:
        return self.base_url is not None

    @staticmethod
    def _credentials(email: Optional[str], password: Optional[str]) -> Dict[str, str]:
        email = (email or "").strip()
        if not email or not password:
            raise AuthError(MSG_MISSING_CREDENTIALS, status_code=400)
        return {"email": email, "password": password}

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Pull the most specific message out of an error response."""
        try:
            body = response.json()
        except ValueError:
            body = {}
        if isinstance(body, dict):
            for key in ("error_description", "msg", "message", "error"):
                if body.get(key):
                    return str(body[key])
        return f"Auth request failed with status {response.status_code}"

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
        access_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        if not self.configured:
            raise AuthUnavailableError("Auth service is not configured")

        headers = {}
        if self.api_key:
            headers["apikey"] = self.api_key
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        url = f"{self.base_url}/auth/v1/{path}"
        try:
            response = self.session.request(
                method,
                url,
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Auth service unreachable at {url}: {e}")
            raise AuthUnavailableError(f"Auth service unreachable: {e}")

        if response.status_code >= 500:
            raise AuthUnavailableError(self._error_message(response))
        if response.status_code >= 400:
            raise AuthError(self._error_message(response), response.status_code)

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            raise AuthError("Auth service returned an invalid response", 502)
        return body if isinstance(body, dict) else {}

    @staticmethod
    def _state_from_user(
        user: Dict[str, Any], access_token: Optional[str]
    ) -> AuthState:
        if not user.get("id"):
            raise AuthError("Auth service response did not include a user", 502)
        return AuthState(
            user_id=str(user["id"]), email=user.get("email"), access_token=access_token
        )

    def sign_up(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Register a new account.

        Returns:
            Status message to show the user

        Raises:
            AuthError: If the credentials are blank or the service rejects them
        """
        self._request("POST", "signup", json=self._credentials(email, password))
        logger.info("Registered new account")
        return MSG_REGISTERED

    def sign_in(self, email: Optional[str], password: Optional[str]) -> AuthState:
        """
        Sign in with email and password.

        Returns:
            AuthState for the signed-in user

        Raises:
            AuthError: If the credentials are blank or rejected
            AuthUnavailableError: If the service cannot be reached
        """
        body = self._request(
            "POST",
            "token",
            json=self._credentials(email, password),
            params={"grant_type": "password"},
        )
        access_token = body.get("access_token")
        state = self._state_from_user(body.get("user") or {}, access_token)
        logger.info(f"User {state.user_id} signed in")
        return state

    def sign_out(self, access_token: str) -> None:
        """Revoke the given access token."""
        self._request("POST", "logout", access_token=access_token)

    def get_user(self, access_token: str) -> AuthState:
        """Resolve the user that owns an access token."""
        body = self._request("GET", "user", access_token=access_token)
        return self._state_from_user(body, access_token)
