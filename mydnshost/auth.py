"""
Authentication descriptors for the MyDNSHost API.

Each descriptor is a small frozen dataclass with a ``type`` discriminator.
Exactly one descriptor (or none) is active on a client at a time.

Supports:
- Username + password (HTTP basic auth), with optional 2FA code or 2FA push
- Username + API key
- Domain + domain key
- Session ID
- JWT bearer token
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple, Union, Mapping

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class UserPassAuth:
    """Username and password, sent as HTTP basic auth."""

    user: str
    password: str
    two_factor_code: Optional[str] = None
    two_factor_push: bool = False

    type = "userpass"

    def apply(self, headers: Dict[str, str]) -> Optional[Tuple[str, str]]:
        if self.two_factor_code is not None:
            headers["X-2FA-KEY"] = str(self.two_factor_code)
        if self.two_factor_push:
            headers["X-2FA-PUSH"] = "1"
        return (self.user, self.password)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type,
            "user": self.user,
            "pass": self.password,
            "2fa": self.two_factor_code,
        }
        if self.two_factor_push:
            data["2fa_push"] = True
        return data

    def __repr__(self) -> str:
        return f"UserPassAuth(user={self.user!r}, password='***')"


@dataclass(frozen=True)
class UserKeyAuth:
    """Username and API key."""

    user: str
    key: str

    type = "userkey"

    def apply(self, headers: Dict[str, str]) -> Optional[Tuple[str, str]]:
        headers["X-API-USER"] = self.user
        headers["X-API-KEY"] = self.key
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "user": self.user, "key": self.key}

    def __repr__(self) -> str:
        return f"UserKeyAuth(user={self.user!r}, key='***')"


@dataclass(frozen=True)
class DomainKeyAuth:
    """Domain name and domain key. Only grants access to that one domain."""

    domain: str
    key: str

    type = "domainkey"

    def apply(self, headers: Dict[str, str]) -> Optional[Tuple[str, str]]:
        headers["X-DOMAIN"] = self.domain
        headers["X-DOMAIN-KEY"] = self.key
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "domain": self.domain, "key": self.key}

    def __repr__(self) -> str:
        return f"DomainKeyAuth(domain={self.domain!r}, key='***')"


@dataclass(frozen=True)
class SessionAuth:
    """Session ID obtained from ``GET /session``."""

    session_id: str

    type = "session"

    def apply(self, headers: Dict[str, str]) -> Optional[Tuple[str, str]]:
        headers["X-SESSION-ID"] = self.session_id
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "sessionid": self.session_id}

    def __repr__(self) -> str:
        return "SessionAuth(session_id='***')"


@dataclass(frozen=True)
class JWTAuth:
    """JWT token obtained from ``GET /session/jwt``."""

    token: str

    type = "jwt"

    def apply(self, headers: Dict[str, str]) -> Optional[Tuple[str, str]]:
        headers["Authorization"] = f"Bearer {self.token}"
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "token": self.token}

    def __repr__(self) -> str:
        return "JWTAuth(token='***')"


Auth = Union[UserPassAuth, UserKeyAuth, DomainKeyAuth, SessionAuth, JWTAuth]

AUTH_TYPES = (UserPassAuth, UserKeyAuth, DomainKeyAuth, SessionAuth, JWTAuth)


def _require(data: Mapping[str, Any], *keys: str) -> None:
    missing = [k for k in keys if k not in data]
    if missing:
        raise ConfigurationError(
            f"Auth descriptor of type {data.get('type')!r} is missing fields",
            details=", ".join(missing)
        )


def auth_from_dict(data: Mapping[str, Any]) -> Auth:
    """
    Build an auth descriptor from a mapping using the API's field names.

    Args:
        data: Mapping with a ``type`` key, e.g.
            ``{"type": "userkey", "user": "...", "key": "..."}``

    Returns:
        The matching auth descriptor

    Raises:
        ConfigurationError: If the type is unknown or fields are missing
    """
    auth_type = data.get("type")

    if auth_type == "userpass":
        _require(data, "user", "pass")
        return UserPassAuth(
            user=data["user"],
            password=data["pass"],
            two_factor_code=data.get("2fa"),
            two_factor_push=bool(data.get("2fa_push", False)),
        )
    elif auth_type == "userkey":
        _require(data, "user", "key")
        return UserKeyAuth(user=data["user"], key=data["key"])
    elif auth_type == "domainkey":
        _require(data, "domain", "key")
        return DomainKeyAuth(domain=data["domain"], key=data["key"])
    elif auth_type == "session":
        _require(data, "sessionid")
        return SessionAuth(session_id=data["sessionid"])
    elif auth_type == "jwt":
        _require(data, "token")
        return JWTAuth(token=data["token"])

    raise ConfigurationError(f"Unknown auth type: {auth_type!r}")


def coerce_auth(value: Union[Auth, Mapping[str, Any], None]) -> Optional[Auth]:
    """Accept a descriptor, a descriptor mapping, or None."""
    if value is None or isinstance(value, AUTH_TYPES):
        return value
    if isinstance(value, Mapping):
        return auth_from_dict(value)
    raise ConfigurationError(f"Unsupported auth descriptor: {type(value).__name__}")
