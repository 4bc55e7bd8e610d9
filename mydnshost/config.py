"""
Configuration for the MyDNSHost API client.

Settings are held in a plain dataclass. Nothing is read from the environment
unless ``MyDNSHostConfig.from_env()`` is called explicitly.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pydantic import Field, ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mydnshost.co.uk/"
API_VERSION = "1.0"

ENV_PREFIX = "MYDNSHOST_"


def _default_user_agent() -> str:
    from . import __prog_name__, __version__
    return f"{__prog_name__}/{__version__}"


class EnvSettings(BaseSettings):
    """``MYDNSHOST_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    api_version: str = Field(default=API_VERSION, min_length=1)
    debug: bool = False
    timeout: Optional[float] = Field(default=None, gt=0)
    verify_ssl: bool = True


@dataclass
class MyDNSHostConfig:
    """
    Client configuration.

    Attributes:
        base_url: API server URL, without the version segment
        api_version: API version path segment
        debug: Attach request/response bodies to every envelope
        timeout: Request timeout in seconds (None uses the transport default)
        verify_ssl: Verify TLS certificates
        user_agent: User-Agent header sent with every request
    """

    base_url: str = DEFAULT_BASE_URL
    api_version: str = API_VERSION
    debug: bool = False
    timeout: Optional[float] = None
    verify_ssl: bool = True
    user_agent: str = field(default_factory=_default_user_agent)

    def __post_init__(self) -> None:
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError("Base URL must not be empty.")
        if not self.api_version:
            raise ConfigurationError("API version must not be empty.")

    @classmethod
    def from_env(cls, **overrides) -> "MyDNSHostConfig":
        """
        Build a configuration from ``MYDNSHOST_*`` environment variables.

        Reads ``MYDNSHOST_BASE_URL``, ``MYDNSHOST_API_VERSION``,
        ``MYDNSHOST_DEBUG``, ``MYDNSHOST_TIMEOUT`` and ``MYDNSHOST_VERIFY_SSL``.
        Empty variables are ignored.

        Args:
            **overrides: Explicit values that win over the environment

        Returns:
            MyDNSHostConfig instance

        Raises:
            ConfigurationError: If a variable has an invalid value
        """
        try:
            settings = EnvSettings()
        except PydanticValidationError as e:
            fields = ", ".join(
                f"{ENV_PREFIX}{str(error['loc'][0]).upper()}" for error in e.errors()
            )
            raise ConfigurationError("Invalid environment configuration", details=fields)

        values = settings.model_dump(exclude_unset=True)
        values.update(overrides)
        logger.debug(f"Loaded configuration from environment: {sorted(values)}")
        return cls(**values)
