"""
Users API - User management operations.
"""

from typing import Optional, Dict, Any, List, Union

from ._http import HTTPClient, extract, extract_listing

SELF = "self"


class UsersAPI:
    """
    API for user management operations.

    Handles:
    - Current user data and per-user info
    - User CRUD (admin)
    - API keys
    - 2FA devices and 2FA keys
    - Per-user custom data

    Methods taking ``user_id`` default to ``"self"``, the authenticated user.
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Users API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    # ========== Users ==========

    def get_data(self) -> Optional[Dict[str, Any]]:
        """Get the authenticated user and current access level."""
        if not self._http.has_auth:
            return None

        return extract(self._http.api("/userdata"))

    def list(self) -> Optional[Dict[str, Any]]:
        """List all users visible to us. Returns the full envelope."""
        if not self._http.has_auth:
            return None

        return self._http.api("/users")

    def get_stats(
        self,
        stats_type: str,
        options: Optional[Dict[str, Any]] = None,
        user_id: str = SELF
    ) -> Union[Dict[str, Any], List[Any], None]:
        """
        Get user statistics.

        Args:
            stats_type: Statistics type
            options: Query options passed to the statistics endpoint
            user_id: User to get statistics for
        """
        if not self._http.has_auth:
            return None

        result = self._http.api(f"/users/{user_id}/stats/{stats_type}", "GET", options)
        return extract(result, "stats", default=[])

    def get_info(self, user_id: str = SELF) -> Optional[Dict[str, Any]]:
        """Get information about a user."""
        if not self._http.has_auth:
            return None

        return extract(self._http.api(f"/users/{user_id}"))

    def set_info(self, data: Dict[str, Any], user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """Update information about a user."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}", "POST", data)

    def create(self, data: Dict[str, Any]) -> Union[Dict[str, Any], List[Any]]:
        """Create a new user (admin only)."""
        if not self._http.has_auth:
            return []

        return self._http.api("/users/create", "POST", data)

    def delete(self, user_id: str) -> Union[Dict[str, Any], List[Any]]:
        """
        Delete a user.

        Deleting your own account returns a confirmation code that must be
        passed to ``delete_confirm``.
        """
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}", "DELETE")

    def delete_confirm(
        self,
        user_id: str,
        confirm_code: str,
        two_factor_code: Optional[str] = None
    ) -> Union[Dict[str, Any], List[Any]]:
        """
        Confirm deletion of a user.

        Args:
            user_id: User to delete
            confirm_code: Code returned by ``delete``
            two_factor_code: Optional 2FA code
        """
        if not self._http.has_auth:
            return []

        path = f"/users/{user_id}/confirm/{confirm_code}"
        if two_factor_code:
            path += f"/{two_factor_code}"
        return self._http.api(path, "DELETE")

    def resend_welcome(self, user_id: str) -> Dict[str, Any]:
        """Resend the welcome email to a user."""
        return self._http.api(f"/users/{user_id}/resendwelcome", "POST", {})

    def accept_terms(self, user_id: str = SELF) -> Dict[str, Any]:
        """Accept the terms of service."""
        return self._http.api(f"/users/{user_id}/acceptterms", "POST", {"acceptterms": "true"})

    # ========== API Keys ==========

    def get_api_keys(self, user_id: str = SELF) -> Optional[Any]:
        """Get API keys for a user."""
        if not self._http.has_auth:
            return None

        return extract_listing(self._http.api(f"/users/{user_id}/keys"))

    def create_api_key(self, data: Dict[str, Any], user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """Create a new API key."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/keys", "POST", data)

    def update_api_key(
        self,
        key: str,
        data: Dict[str, Any],
        user_id: str = SELF
    ) -> Union[Dict[str, Any], List[Any]]:
        """Update an API key."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/keys/{key}", "POST", data)

    def delete_api_key(self, key: str, user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """Delete an API key."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/keys/{key}", "DELETE")

    # ========== 2FA Devices ==========

    def get_2fa_devices(self, user_id: str = SELF) -> Optional[Any]:
        """Get remembered 2FA devices for a user."""
        if not self._http.has_auth:
            return None

        return extract_listing(self._http.api(f"/users/{user_id}/2fadevices"))

    def delete_2fa_device(self, device: str, user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """Forget a remembered 2FA device."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/2fadevices/{device}", "DELETE")

    # ========== 2FA Keys ==========

    def get_2fa_keys(self, user_id: str = SELF) -> Optional[Any]:
        """Get 2FA keys for a user."""
        if not self._http.has_auth:
            return None

        return extract_listing(self._http.api(f"/users/{user_id}/2fa"))

    def create_2fa_key(self, data: Dict[str, Any], user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """Create a new 2FA key."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/2fa", "POST", data)

    def update_2fa_key(
        self,
        key: str,
        data: Dict[str, Any],
        user_id: str = SELF
    ) -> Union[Dict[str, Any], List[Any]]:
        """Update a 2FA key."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/2fa/{key}", "POST", data)

    def verify_2fa_key(self, key: str, code: str, user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """
        Verify a 2FA key.

        Args:
            key: Key to verify
            code: Code generated by the key
            user_id: Owner of the key
        """
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/2fa/{key}/verify", "POST", {"code": code})

    def delete_2fa_key(self, key: str, user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """Delete a 2FA key."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/2fa/{key}", "DELETE")

    # ========== Custom Data ==========

    def get_custom_data_list(self, user_id: str = SELF) -> Optional[Any]:
        """Get all custom data values for a user."""
        if not self._http.has_auth:
            return None

        return extract_listing(self._http.api(f"/users/{user_id}/customdata"))

    def set_custom_data(self, key: str, value: Any, user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """Create or update a custom data value."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/customdata/{key}", "POST", {"value": value})

    def get_custom_data(self, key: str, user_id: str = SELF) -> Any:
        """
        Get a single custom data value.

        Returns:
            The stored value, or None if it is missing or no auth is
            configured. This no-auth default is None, not an empty list.
        """
        if not self._http.has_auth:
            return None

        return extract(self._http.api(f"/users/{user_id}/customdata/{key}", "GET"), "value")

    def delete_custom_data(self, key: str, user_id: str = SELF) -> Union[Dict[str, Any], List[Any]]:
        """Delete a custom data value."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/users/{user_id}/customdata/{key}", "DELETE")
