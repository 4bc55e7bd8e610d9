"""
MyDNSHost API Client Package.

Structure:
    - client.py: Main MyDNSHostAPI facade
    - _http.py: Base HTTP client with session, auth headers and envelope handling
    - system.py: Ping, version, registration, system data
    - session.py: Session IDs, JWT tokens and 2FA push
    - users.py: Users, API keys, 2FA and custom data
    - domains.py: Domains, records, keys and hooks
    - articles.py: Articles

Usage:
    from mydnshost.api import MyDNSHostAPI

    client = MyDNSHostAPI("https://api.mydnshost.co.uk/")
    client.set_auth_user_key("admin@example.com", "KEY")

    # Domain-specific style
    records = client.domains.get_records("example.com")

    # Flat style
    records = client.get_domain_records("example.com")
"""

from .client import MyDNSHostAPI, get_client
from ._http import HTTPClient, raise_for_error
from .system import SystemAPI
from .session import SessionAPI
from .users import UsersAPI
from .domains import DomainsAPI
from .articles import ArticlesAPI

__all__ = [
    # Main client
    "MyDNSHostAPI",
    "get_client",
    # HTTP layer
    "HTTPClient",
    "raise_for_error",
    # Domain APIs
    "SystemAPI",
    "SessionAPI",
    "UsersAPI",
    "DomainsAPI",
    "ArticlesAPI",
]
