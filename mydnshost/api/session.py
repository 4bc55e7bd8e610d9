"""
Session API - Session IDs, JWT tokens and 2FA push.
"""

from typing import Optional, Dict, Any

from ..auth import UserPassAuth
from ._http import HTTPClient, extract


class SessionAPI:
    """
    API for session operations.

    A session ID or JWT token obtained here can be handed to
    ``set_auth_session`` / ``set_auth_jwt`` to avoid resending credentials.
    """

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_jwt_token(self) -> Optional[str]:
        """Get a JWT token for the current auth, or None."""
        if not self._http.has_auth:
            return None

        return extract(self._http.api("/session/jwt"), "token")

    def get_session_id(self) -> Optional[str]:
        """Get a session ID for the current auth, or None."""
        if not self._http.has_auth:
            return None

        return extract(self._http.api("/session"), "session")

    def delete(self) -> Optional[str]:
        """Delete the current session."""
        if not self._http.has_auth:
            return None

        return extract(self._http.api("/session", "DELETE"), "session")

    def auth_2fa_push(self, user: str, password: str) -> Dict[str, Any]:
        """
        Request a 2FA push for the given credentials.

        This does not change the stored auth; it makes a single request with
        a one-off username/password descriptor that asks the server to push
        a 2FA prompt to the user's device.

        Args:
            user: Username
            password: Password

        Returns:
            Response envelope
        """
        auth = UserPassAuth(user=user, password=password, two_factor_push=True)
        return self._http.api("/session", "GET", None, auth)
