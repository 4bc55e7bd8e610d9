"""
MyDNSHost API Client - Main facade for all API operations.

This module provides flat access to every API endpoint while organizing the
implementation into domain-specific modules.
"""

from dataclasses import replace
from typing import Optional, Dict, Any, List, Union, Mapping

from ..auth import (
    Auth,
    UserPassAuth,
    UserKeyAuth,
    DomainKeyAuth,
    SessionAuth,
    JWTAuth,
)
from ..config import MyDNSHostConfig
from ._http import HTTPClient
from .system import SystemAPI
from .session import SessionAPI
from .users import UsersAPI, SELF
from .domains import DomainsAPI
from .articles import ArticlesAPI

Result = Union[Dict[str, Any], List[Any]]


class MyDNSHostAPI:
    """
    Client for interacting with the MyDNSHost API.

    This is a facade that provides both:
    - Domain-specific sub-clients (client.domains, client.users, etc.)
    - Flat methods (client.get_domains(), etc.)

    Auth setters return the client so they can be chained:
        client = MyDNSHostAPI("https://api.mydnshost.co.uk/")
        client.set_auth_user_key("admin@example.com", "KEY").domain_admin()
        records = client.get_domain_records("example.com")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        config: Optional[MyDNSHostConfig] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: API server URL. Overrides ``config.base_url`` if given.
            config: Optional configuration. Uses defaults if not provided.
                The client keeps its own copy, so later setter calls do not
                affect other clients built from the same config.
        """
        if config is None:
            config = MyDNSHostConfig() if base_url is None else MyDNSHostConfig(base_url=base_url)
        elif base_url is not None:
            config = replace(config, base_url=base_url)
        else:
            config = replace(config)

        self._http = HTTPClient(config)

        # Domain-specific API modules
        self.system = SystemAPI(self._http)
        self.session = SessionAPI(self._http)
        self.users = UsersAPI(self._http)
        self.domains = DomainsAPI(self._http)
        self.articles = ArticlesAPI(self._http)

    @property
    def config(self) -> MyDNSHostConfig:
        """Get the configuration."""
        return self._http.config

    @property
    def base_url(self) -> str:
        """Get the versioned base URL for API requests."""
        return self._http.base_url

    @property
    def auth(self) -> Optional[Auth]:
        """Get the active auth descriptor."""
        return self._http.auth

    @property
    def has_auth(self) -> bool:
        """Whether any auth descriptor is configured."""
        return self._http.has_auth

    @property
    def last_response(self) -> Optional[Dict[str, Any]]:
        """Get the envelope returned by the most recent request."""
        return self._http.last_response

    # ========== Configuration ==========

    def set_debug(self, value: bool) -> "MyDNSHostAPI":
        """Enable or disable debug mode."""
        self.config.debug = value
        return self

    def is_debug(self) -> bool:
        """Whether debug mode is enabled."""
        return self.config.debug

    def domain_admin(self, value: bool = True) -> "MyDNSHostAPI":
        """Enable or disable domain admin-override."""
        self._http.domain_admin = value
        return self

    # ========== Auth ==========

    def set_auth_user_pass(
        self,
        user: str,
        password: str,
        key: Optional[str] = None
    ) -> "MyDNSHostAPI":
        """
        Auth using a username and password.

        Args:
            user: Username
            password: Password
            key: Optional 2FA code
        """
        self._http.set_auth(UserPassAuth(user=user, password=password, two_factor_code=key))
        return self

    def set_auth_user_key(self, user: str, key: str) -> "MyDNSHostAPI":
        """Auth using a username and API key."""
        self._http.set_auth(UserKeyAuth(user=user, key=key))
        return self

    def set_auth_domain_key(self, domain: str, key: str) -> "MyDNSHostAPI":
        """Auth using a domain and domain key."""
        self._http.set_auth(DomainKeyAuth(domain=domain, key=key))
        return self

    def set_auth_session(self, session_id: str) -> "MyDNSHostAPI":
        """Auth using a session ID."""
        self._http.set_auth(SessionAuth(session_id=session_id))
        return self

    def set_auth_jwt(self, token: str) -> "MyDNSHostAPI":
        """Auth using a JWT token."""
        self._http.set_auth(JWTAuth(token=token))
        return self

    def set_auth(self, auth: Union[Auth, Mapping[str, Any], None]) -> "MyDNSHostAPI":
        """
        Auth using a custom descriptor.

        Args:
            auth: An auth descriptor, a mapping such as
                ``{"type": "jwt", "token": "..."}``, or None to clear auth
        """
        self._http.set_auth(auth)
        return self

    def set_device_id(self, device_id: Optional[str]) -> "MyDNSHostAPI":
        """Set the remembered 2FA device ID sent with each request."""
        self._http.device_id = device_id
        return self

    def set_device_name(self, name: Optional[str]) -> "MyDNSHostAPI":
        """Set the device name to remember for 2FA on the next login."""
        self._http.device_name = name
        return self

    def impersonate(self, user: Optional[str], impersonate_type: str = "email") -> "MyDNSHostAPI":
        """
        Impersonate a user.

        Args:
            user: Email address or user ID to impersonate, or None to stop
            impersonate_type: ``"email"`` or ``"id"``
        """
        self._http.set_impersonate(user, impersonate_type)
        return self

    def do_auth_2fa_push(self, user: str, password: str) -> Dict[str, Any]:
        """Request a 2FA push for the given credentials."""
        return self.session.auth_2fa_push(user, password)

    def valid_auth(self) -> bool:
        """Check the configured auth against the server."""
        if not self.has_auth:
            return False

        return self.get_user_data() is not None

    def api(
        self,
        path: str,
        method: str = "GET",
        data: Optional[Any] = None,
        auth: Union[Auth, Mapping[str, Any], None] = None
    ) -> Dict[str, Any]:
        """Make a raw API request and return the response envelope."""
        return self._http.api(path, method, data, auth)

    # ========== System Methods ==========

    def ping(self, time: Optional[Union[int, str]] = None) -> Any:
        """Ping the API."""
        return self.system.ping(time)

    def get_version(self) -> Optional[Dict[str, Any]]:
        """Get version information from the API."""
        return self.system.get_version()

    def register(self, email: str, name: str, accept_terms: bool = False) -> Dict[str, Any]:
        """Register a new account."""
        return self.system.register(email, name, accept_terms)

    def register_confirm(self, user: str, code: str, password: str) -> Dict[str, Any]:
        """Confirm account registration."""
        return self.system.register_confirm(user, code, password)

    def forgot_password(self, email: str) -> Dict[str, Any]:
        """Submit a password reset request."""
        return self.system.forgot_password(email)

    def forgot_password_confirm(self, user: str, code: str, password: str) -> Dict[str, Any]:
        """Confirm a password reset request."""
        return self.system.forgot_password_confirm(user, code, password)

    def get_system_data_value(self, key: str) -> Any:
        """Get a system data value."""
        return self.system.get_data_value(key)

    def get_system_stats(self, stats_type: str, options: Optional[Dict[str, Any]] = None) -> Any:
        """Get system statistics."""
        return self.system.get_stats(stats_type, options)

    # ========== Session Methods ==========

    def get_jwt_token(self) -> Optional[str]:
        """Get a JWT token for the current auth."""
        return self.session.get_jwt_token()

    def get_session_id(self) -> Optional[str]:
        """Get a session ID for the current auth."""
        return self.session.get_session_id()

    def delete_session(self) -> Optional[str]:
        """Delete the current session."""
        return self.session.delete()

    # ========== User Methods ==========

    def get_user_data(self) -> Optional[Dict[str, Any]]:
        """Get the authenticated user and access level."""
        return self.users.get_data()

    def get_users(self) -> Optional[Dict[str, Any]]:
        """Get all users visible to us."""
        return self.users.list()

    def get_user_stats(
        self,
        stats_type: str,
        options: Optional[Dict[str, Any]] = None,
        user_id: str = SELF
    ) -> Any:
        """Get user statistics."""
        return self.users.get_stats(stats_type, options, user_id)

    def get_user_info(self, user_id: str = SELF) -> Optional[Dict[str, Any]]:
        """Get information about a user."""
        return self.users.get_info(user_id)

    def set_user_info(self, data: Dict[str, Any], user_id: str = SELF) -> Result:
        """Update information about a user."""
        return self.users.set_info(data, user_id)

    def create_user(self, data: Dict[str, Any]) -> Result:
        """Create a new user."""
        return self.users.create(data)

    def delete_user(self, user_id: str) -> Result:
        """Delete a user."""
        return self.users.delete(user_id)

    def delete_user_confirm(
        self,
        user_id: str,
        confirm_code: str,
        two_factor_code: Optional[str] = None
    ) -> Result:
        """Confirm deletion of a user."""
        return self.users.delete_confirm(user_id, confirm_code, two_factor_code)

    def resend_welcome(self, user_id: str) -> Dict[str, Any]:
        """Resend the welcome email."""
        return self.users.resend_welcome(user_id)

    def accept_terms(self, user_id: str = SELF) -> Dict[str, Any]:
        """Accept the terms of service."""
        return self.users.accept_terms(user_id)

    def get_api_keys(self, user_id: str = SELF) -> Any:
        """Get API keys for a user."""
        return self.users.get_api_keys(user_id)

    def create_api_key(self, data: Dict[str, Any], user_id: str = SELF) -> Result:
        """Create a new API key."""
        return self.users.create_api_key(data, user_id)

    def update_api_key(self, key: str, data: Dict[str, Any], user_id: str = SELF) -> Result:
        """Update an API key."""
        return self.users.update_api_key(key, data, user_id)

    def delete_api_key(self, key: str, user_id: str = SELF) -> Result:
        """Delete an API key."""
        return self.users.delete_api_key(key, user_id)

    def get_2fa_devices(self, user_id: str = SELF) -> Any:
        """Get remembered 2FA devices."""
        return self.users.get_2fa_devices(user_id)

    def delete_2fa_device(self, device: str, user_id: str = SELF) -> Result:
        """Forget a remembered 2FA device."""
        return self.users.delete_2fa_device(device, user_id)

    def get_2fa_keys(self, user_id: str = SELF) -> Any:
        """Get 2FA keys."""
        return self.users.get_2fa_keys(user_id)

    def create_2fa_key(self, data: Dict[str, Any], user_id: str = SELF) -> Result:
        """Create a new 2FA key."""
        return self.users.create_2fa_key(data, user_id)

    def update_2fa_key(self, key: str, data: Dict[str, Any], user_id: str = SELF) -> Result:
        """Update a 2FA key."""
        return self.users.update_2fa_key(key, data, user_id)

    def verify_2fa_key(self, key: str, code: str, user_id: str = SELF) -> Result:
        """Verify a 2FA key."""
        return self.users.verify_2fa_key(key, code, user_id)

    def delete_2fa_key(self, key: str, user_id: str = SELF) -> Result:
        """Delete a 2FA key."""
        return self.users.delete_2fa_key(key, user_id)

    def get_custom_data_list(self, user_id: str = SELF) -> Any:
        """Get all custom data values."""
        return self.users.get_custom_data_list(user_id)

    def set_custom_data(self, key: str, value: Any, user_id: str = SELF) -> Result:
        """Create or update a custom data value."""
        return self.users.set_custom_data(key, value, user_id)

    def get_custom_data(self, key: str, user_id: str = SELF) -> Any:
        """Get a custom data value."""
        return self.users.get_custom_data(key, user_id)

    def delete_custom_data(self, key: str, user_id: str = SELF) -> Result:
        """Delete a custom data value."""
        return self.users.delete_custom_data(key, user_id)

    # ========== Domain Methods ==========

    def get_domains(self, query_params: Optional[Dict[str, Any]] = None) -> Any:
        """Get our domains."""
        return self.domains.list(query_params)

    def create_domain(self, domain: str, owner: Optional[str] = None) -> Result:
        """Create a domain."""
        return self.domains.create(domain, owner)

    def delete_domain(self, domain: str) -> Result:
        """Delete a domain."""
        return self.domains.delete(domain)

    def get_domain_data(self, domain: str) -> Any:
        """Get domain data."""
        return self.domains.get(domain)

    def set_domain_data(self, domain: str, data: Dict[str, Any]) -> Result:
        """Update domain data."""
        return self.domains.update(domain, data)

    def get_domain_access(self, domain: str) -> Any:
        """Get the access list for a domain."""
        return self.domains.get_access(domain)

    def set_domain_access(self, domain: str, data: Dict[str, Any]) -> Result:
        """Update the access list for a domain."""
        return self.domains.set_access(domain, data)

    def get_domain_stats(self, domain: str, options: Optional[Dict[str, Any]] = None) -> Any:
        """Get domain statistics."""
        return self.domains.get_stats(domain, options)

    def get_domain_logs(self, domain: str, options: Optional[Dict[str, Any]] = None) -> Any:
        """Get domain logs."""
        return self.domains.get_logs(domain, options)

    def sync_domain(self, domain: str) -> Result:
        """Resync a domain to the DNS backends."""
        return self.domains.sync(domain)

    def export_zone(self, domain: str) -> Any:
        """Export a domain as a BIND zone file."""
        return self.domains.export_zone(domain)

    def import_zone(self, domain: str, zone: str) -> Result:
        """Import a domain from a BIND zone file."""
        return self.domains.import_zone(domain, zone)

    def get_domain_records(self, domain: str) -> Any:
        """Get all records for a domain."""
        return self.domains.get_records(domain)

    def get_domain_record(self, domain: str, record_id: Union[int, str]) -> Any:
        """Get a single record."""
        return self.domains.get_record(domain, record_id)

    def get_domain_records_by_name(
        self,
        domain: str,
        name: str,
        record_type: Optional[str] = None
    ) -> Any:
        """Get records matching a name."""
        return self.domains.get_records_by_name(domain, name, record_type)

    def set_domain_records(self, domain: str, data: Dict[str, Any]) -> Result:
        """Change records in bulk."""
        return self.domains.set_records(domain, data)

    def set_domain_record(self, domain: str, record_id: Union[int, str], data: Dict[str, Any]) -> Result:
        """Update a single record."""
        return self.domains.set_record(domain, record_id, data)

    def delete_domain_records(self, domain: str) -> Any:
        """Delete all records for a domain."""
        return self.domains.delete_records(domain)

    def delete_domain_record(self, domain: str, record_id: Union[int, str]) -> Any:
        """Delete a single record."""
        return self.domains.delete_record(domain, record_id)

    def delete_domain_records_by_name(
        self,
        domain: str,
        name: str,
        record_type: Optional[str] = None
    ) -> Any:
        """Delete records matching a name."""
        return self.domains.delete_records_by_name(domain, name, record_type)

    def get_domain_keys(self, domain: str) -> Any:
        """Get domain keys."""
        return self.domains.get_keys(domain)

    def create_domain_key(self, domain: str, data: Dict[str, Any]) -> Result:
        """Create a domain key."""
        return self.domains.create_key(domain, data)

    def update_domain_key(self, domain: str, key: str, data: Dict[str, Any]) -> Result:
        """Update a domain key."""
        return self.domains.update_key(domain, key, data)

    def delete_domain_key(self, domain: str, key: str) -> Result:
        """Delete a domain key."""
        return self.domains.delete_key(domain, key)

    def get_domain_hooks(self, domain: str) -> Any:
        """Get domain hooks."""
        return self.domains.get_hooks(domain)

    def create_domain_hook(self, domain: str, data: Dict[str, Any]) -> Result:
        """Create a domain hook."""
        return self.domains.create_hook(domain, data)

    def update_domain_hook(self, domain: str, hook_id: Union[int, str], data: Dict[str, Any]) -> Result:
        """Update a domain hook."""
        return self.domains.update_hook(domain, hook_id, data)

    def delete_domain_hook(self, domain: str, hook_id: Union[int, str]) -> Result:
        """Delete a domain hook."""
        return self.domains.delete_hook(domain, hook_id)

    # ========== Article Methods ==========

    def get_articles(self) -> Any:
        """Get published articles."""
        return self.articles.list()

    def get_all_articles(self) -> Any:
        """Get all articles (admin only)."""
        return self.articles.list_all()

    def create_article(self, data: Dict[str, Any]) -> Result:
        """Create an article."""
        return self.articles.create(data)

    def get_article(self, article_id: Union[int, str]) -> Any:
        """Get an article."""
        return self.articles.get(article_id)

    def update_article(self, article_id: Union[int, str], data: Dict[str, Any]) -> Result:
        """Update an article."""
        return self.articles.update(article_id, data)

    def delete_article(self, article_id: Union[int, str]) -> Result:
        """Delete an article."""
        return self.articles.delete(article_id)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "MyDNSHostAPI":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# Convenience function for quick API access
def get_client(
    base_url: Optional[str] = None,
    config: Optional[MyDNSHostConfig] = None
) -> MyDNSHostAPI:
    """
    Get an API client instance.

    Args:
        base_url: Optional API server URL
        config: Optional configuration

    Returns:
        MyDNSHostAPI instance
    """
    return MyDNSHostAPI(base_url, config)
