"""Configuration for Handle minting.

Settings are collected into a ``HandleConfig`` that is passed explicitly to
every handler. ``parse_environment_variables`` builds one from ``HANDLE_*``
environment variables, for example:

- HANDLE_PREFIX=1234567
- HANDLE_ADMIN_USERNAME=300:0.NA/1234567
- HANDLE_ALTERNATE_HOST=https://repository.example.org/
- HANDLE_SERVICE_URL=https://handle.example.org:8000
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from .constants import HandleDefaults, HandleEnvVars
from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class HandleConfig:
    """Deployment settings shared by all handlers.

    Attributes:
        prefix: Default Handle namespace used when a handler gets no prefix
        admin_username: Handle administrator, e.g. "300:0.NA/1234567"
        admin_password: Secret for the administrator
        alternate_host: Host to build target URLs against instead of site_url
        use_alias: Rewrite object paths through path_aliases
        path_aliases: Repository-relative path to alias path
        site_url: Absolute base URL of the local repository site
        objects_path: Repository-relative path under which objects live
        service_url: Base URL of the Handle REST service
        backend: Name of the registered backend handler
        request_timeout: Timeout in seconds for Handle service calls
        verify_ssl: Verify the Handle service certificate
    """

    prefix: str = HandleDefaults.PREFIX
    admin_username: str = HandleDefaults.ADMIN_USERNAME
    admin_password: str = ""
    alternate_host: Optional[str] = None
    use_alias: bool = False
    path_aliases: Dict[str, str] = field(default_factory=dict)
    site_url: str = HandleDefaults.SITE_URL
    objects_path: str = HandleDefaults.OBJECTS_PATH
    service_url: str = HandleDefaults.SERVICE_URL
    backend: str = HandleDefaults.BACKEND
    request_timeout: int = HandleDefaults.REQUEST_TIMEOUT
    verify_ssl: bool = True


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ("true", "1", "yes", "on")


def _get_env_int(
    name: str, default: int, min_val: int = 1, max_val: int = 3600
) -> int:
    """Get integer from environment with validation."""
    value = os.getenv(name)
    if not value:
        return default

    try:
        parsed = int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{value}'")
    if not (min_val <= parsed <= max_val):
        raise ConfigurationError(
            f"{name} must be between {min_val} and {max_val}, got {parsed}"
        )
    return parsed


def _get_env_str(name: str, default: str, required: bool = False) -> str:
    """Get string from environment with validation."""
    value = os.getenv(name, default).strip()
    if required and not value:
        raise ConfigurationError(f"{name} cannot be empty")
    return value


def _get_env_optional(name: str) -> Optional[str]:
    """Get an optional string, treating blank values as unset."""
    value = os.getenv(name, "").strip()
    return value or None


def parse_environment_variables() -> HandleConfig:
    """Parse environment variables and return a HandleConfig instance."""
    try:
        config = HandleConfig(
            prefix=_get_env_str(HandleEnvVars.PREFIX, HandleDefaults.PREFIX, True),
            admin_username=_get_env_str(
                HandleEnvVars.ADMIN_USERNAME, HandleDefaults.ADMIN_USERNAME
            ),
            admin_password=os.getenv(HandleEnvVars.ADMIN_PASSWORD, ""),
            alternate_host=_get_env_optional(HandleEnvVars.ALTERNATE_HOST),
            use_alias=_parse_bool(os.getenv(HandleEnvVars.USE_ALIAS, "false")),
            site_url=_get_env_str(
                HandleEnvVars.SITE_URL, HandleDefaults.SITE_URL, True
            ),
            objects_path=_get_env_str(
                HandleEnvVars.OBJECTS_PATH, HandleDefaults.OBJECTS_PATH, True
            ),
            service_url=_get_env_str(
                HandleEnvVars.SERVICE_URL, HandleDefaults.SERVICE_URL, True
            ),
            backend=_get_env_str(
                HandleEnvVars.BACKEND, HandleDefaults.BACKEND, True
            ).lower(),
            request_timeout=_get_env_int(
                HandleEnvVars.REQUEST_TIMEOUT, HandleDefaults.REQUEST_TIMEOUT
            ),
            verify_ssl=_parse_bool(os.getenv(HandleEnvVars.VERIFY_SSL, "true")),
        )
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise

    if not config.admin_password:
        logger.warning(
            f"{HandleEnvVars.ADMIN_PASSWORD} is not set, Handle service calls will not authenticate"
        )
    logger.debug(f"Loaded Handle configuration for prefix {config.prefix}")
    return config
