"""
System API - Unauthenticated and system-wide operations.
"""

from typing import Optional, Dict, Any, List, Union

from ._http import HTTPClient, extract


class SystemAPI:
    """
    API for system-level operations.

    Handles:
    - Ping and version
    - Account registration
    - Password reset
    - System data values and statistics
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize System API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def ping(self, time: Optional[Union[int, str]] = None) -> Any:
        """
        Ping the API.

        Args:
            time: Optional value echoed back by the server

        Returns:
            Ping response, or None
        """
        path = "/ping" if time is None else f"/ping/{time}"
        return extract(self._http.api(path, "GET"))

    def get_version(self) -> Optional[Dict[str, Any]]:
        """Get version information from the API."""
        return extract(self._http.api("/version"))

    def register(
        self,
        email: str,
        name: str,
        accept_terms: bool = False
    ) -> Dict[str, Any]:
        """
        Register a new account.

        Args:
            email: Email address
            name: Real name
            accept_terms: Whether the terms of registration are accepted
        """
        data = {"email": email, "realname": name, "acceptterms": accept_terms}
        return self._http.api("/register", "POST", data)

    def register_confirm(self, user: str, code: str, password: str) -> Dict[str, Any]:
        """Confirm an account registration and set its password."""
        return self._http.api(
            f"/register/confirm/{user}",
            "POST",
            {"code": code, "password": password}
        )

    def forgot_password(self, email: str) -> Dict[str, Any]:
        """Submit a password reset request."""
        return self._http.api("/forgotpassword", "POST", {"email": email})

    def forgot_password_confirm(self, user: str, code: str, password: str) -> Dict[str, Any]:
        """Confirm a password reset request."""
        return self._http.api(
            f"/forgotpassword/confirm/{user}",
            "POST",
            {"code": code, "password": password}
        )

    def get_data_value(self, key: str) -> Any:
        """
        Get a single system data value.

        Args:
            key: Data key to look up

        Returns:
            The value, or None if the key is empty or unknown
        """
        if not key:
            return None

        result = self._http.api(f"/system/datavalue/{key}")
        return extract(result, key)

    def get_stats(
        self,
        stats_type: str,
        options: Optional[Dict[str, Any]] = None
    ) -> Union[Dict[str, Any], List[Any]]:
        """
        Get system statistics.

        Args:
            stats_type: Statistics type
            options: Query options passed to the statistics endpoint
        """
        if not self._http.has_auth:
            return []

        result = self._http.api(f"/system/stats/{stats_type}", "GET", options)
        return extract(result, "stats", default=[])
