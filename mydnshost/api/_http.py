"""
Base HTTP client for the MyDNSHost API.

Handles session management, auth headers, URL building and response
envelope handling.
"""

import json
import logging
from typing import Optional, Dict, Any, Union, Mapping

import requests

from ..auth import Auth, coerce_auth
from ..config import MyDNSHostConfig
from ..exceptions import APIError, ConfigurationError, ValidationError
from ..utils import add_query, redact_url

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "There was an unknown error."

SUPPORTED_METHODS = ("GET", "POST", "DELETE")

IMPERSONATE_TYPES = ("email", "id")


def unknown_error() -> Dict[str, Any]:
    """Envelope used when the API could not be reached or understood."""
    return {"error": UNKNOWN_ERROR}


def extract(envelope: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """
    Pull a value out of the ``response`` field of an envelope.

    Args:
        envelope: Envelope returned by the API
        *keys: Optional keys to descend into below ``response``
        default: Value returned if any level is missing or null

    Returns:
        The extracted value, or ``default``
    """
    value = envelope.get("response")
    for key in keys:
        if not isinstance(value, Mapping):
            return default
        value = value.get(key)
    return default if value is None else value


def extract_listing(envelope: Mapping[str, Any]) -> Any:
    """
    Return ``response`` for listing endpoints.

    Falls back to None when the API reported an error, or an empty list when
    it reported nothing at all.
    """
    if envelope.get("response") is not None:
        return envelope["response"]
    return None if envelope.get("error") is not None else []


def raise_for_error(envelope: Mapping[str, Any]) -> Any:
    """
    Raise ``APIError`` if the envelope carries an error.

    Args:
        envelope: Envelope returned by ``HTTPClient.api``

    Returns:
        The envelope's ``response`` value when there is no error
    """
    error = envelope.get("error")
    if error is not None:
        raise APIError(str(error), response_data=dict(envelope))
    return envelope.get("response")


class HTTPClient:
    """
    Base HTTP client for the MyDNSHost API.

    Handles:
    - Session management
    - Auth state and auth headers
    - 2FA device and impersonation headers
    - Envelope decoding and the last response
    """

    def __init__(self, config: Optional[MyDNSHostConfig] = None):
        """
        Initialize the HTTP client.

        Args:
            config: Optional configuration. Uses defaults if not provided.
        """
        self.config = config or MyDNSHostConfig()
        self._session: Optional[requests.Session] = None

        self.auth: Optional[Auth] = None
        self.device_id: Optional[str] = None
        self.device_name: Optional[str] = None
        self.impersonate: Optional[str] = None
        self.impersonate_type: str = "email"
        self.domain_admin: bool = False
        self.last_response: Optional[Dict[str, Any]] = None

    @property
    def session(self) -> requests.Session:
        """Get or create HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "User-Agent": self.config.user_agent,
                "Accept": "application/json",
            })

        return self._session

    @property
    def base_url(self) -> str:
        """Get the versioned base URL for API requests."""
        return f"{self.config.base_url.rstrip('/')}/{self.config.api_version}"

    @property
    def has_auth(self) -> bool:
        """Whether any auth descriptor is configured."""
        return self.auth is not None

    def set_auth(self, auth: Union[Auth, Mapping[str, Any], None]) -> None:
        """Replace the active auth descriptor."""
        self.auth = coerce_auth(auth)

    def set_impersonate(self, user: Optional[str], impersonate_type: str = "email") -> None:
        """Impersonate a user by email address or user id. ``None`` stops."""
        if impersonate_type not in IMPERSONATE_TYPES:
            raise ConfigurationError(
                f"Invalid impersonation type: {impersonate_type!r}",
                details=f"expected one of {', '.join(IMPERSONATE_TYPES)}"
            )
        self.impersonate = user
        self.impersonate_type = impersonate_type

    def build_url(self, path: str) -> str:
        """Join an API method path onto the versioned base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get_headers(self, auth: Optional[Auth]):
        """Get request headers and basic-auth credentials for ``auth``."""
        headers: Dict[str, str] = {}
        basic_auth = None

        if auth is not None:
            basic_auth = auth.apply(headers)

        if self.device_id is not None:
            headers["X-2FA-DEVICE-ID"] = str(self.device_id)
        if self.device_name is not None:
            headers["X-2FA-SAVE-DEVICE"] = str(self.device_name)

        if self.impersonate is not None:
            if self.impersonate_type == "id":
                headers["X-IMPERSONATE-ID"] = str(self.impersonate)
            else:
                headers["X-IMPERSONATE"] = str(self.impersonate)

        return headers, basic_auth

    def _decode(self, response: requests.Response) -> Dict[str, Any]:
        """
        Decode a response body into an envelope.

        Bodies that are not JSON become the unknown-error envelope. So does
        JSON that is not a non-empty object (``null``, ``{}``, a list, a
        string or a number). The result is always a mapping.
        """
        try:
            data = response.json()
        except ValueError:
            logger.debug(f"Response body is not JSON (status {response.status_code})")
            return unknown_error()

        if not isinstance(data, dict) or not data:
            logger.debug(f"Response body is not an envelope: {type(data).__name__}")
            return unknown_error()

        return data

    def api(
        self,
        path: str,
        method: str = "GET",
        data: Optional[Any] = None,
        auth: Union[Auth, Mapping[str, Any], None] = None,
    ) -> Dict[str, Any]:
        """
        Make an API request.

        Args:
            path: API method path (relative to the versioned base URL)
            method: HTTP method (GET, POST or DELETE)
            data: Query parameters for GET, body payload for POST
            auth: Auth descriptor to use for this request only

        Returns:
            Response envelope
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValidationError(
                f"Unsupported HTTP method: {method}",
                details=f"expected one of {', '.join(SUPPORTED_METHODS)}"
            )

        effective_auth = coerce_auth(auth) if auth is not None else self.auth
        headers, basic_auth = self._get_headers(effective_auth)

        url = self.build_url(path)
        body: Optional[str] = None

        if method == "GET" and data:
            url = add_query(url, data)
        elif method == "POST":
            body = json.dumps({"data": {} if data is None else data}, separators=(",", ":"))
            headers["Content-Type"] = "application/json"

        safe_url = redact_url(url)
        logger.debug(f"Request: {method} {safe_url}")

        response: Optional[requests.Response] = None
        try:
            response = self.session.request(
                method=method,
                url=url,
                data=body,
                headers=headers,
                auth=basic_auth,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
            logger.debug(f"Response: {response.status_code}")
            envelope = self._decode(response)
        except requests.exceptions.RequestException as e:
            reason = str(e).replace(url, safe_url)
            logger.warning(f"Request failed [{method} {safe_url}]: {reason}")
            envelope = unknown_error()

        if self.config.debug:
            envelope["__DEBUG"] = {
                "request": body or "",
                "response": response.text if response is not None else "",
            }

        self.last_response = envelope
        return envelope

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
