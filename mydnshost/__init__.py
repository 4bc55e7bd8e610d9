"""
MyDNSHost - Python client for the MyDNSHost DNS hosting API.

Usage:
    from mydnshost import MyDNSHostAPI

    client = MyDNSHostAPI("https://api.mydnshost.co.uk/")
    client.set_auth_user_key("admin@example.com", "API-KEY")

    for domain in client.get_domains():
        print(domain)
"""

__version__ = "1.0.0"
__prog_name__ = "mydnshost-python"

from .config import MyDNSHostConfig, DEFAULT_BASE_URL, API_VERSION  # noqa: E402
from .exceptions import (  # noqa: E402
    MyDNSHostError,
    APIError,
    ConfigurationError,
    ValidationError,
)
from .auth import (  # noqa: E402
    UserPassAuth,
    UserKeyAuth,
    DomainKeyAuth,
    SessionAuth,
    JWTAuth,
    auth_from_dict,
)
from .api import MyDNSHostAPI, HTTPClient, get_client, raise_for_error  # noqa: E402

__all__ = [
    "__version__",
    "MyDNSHostAPI",
    "MyDNSHostConfig",
    "HTTPClient",
    "get_client",
    "raise_for_error",
    "DEFAULT_BASE_URL",
    "API_VERSION",
    # Auth descriptors
    "UserPassAuth",
    "UserKeyAuth",
    "DomainKeyAuth",
    "SessionAuth",
    "JWTAuth",
    "auth_from_dict",
    # Exceptions
    "MyDNSHostError",
    "APIError",
    "ConfigurationError",
    "ValidationError",
]
