"""Registry of Handle backends."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from .config import HandleConfig
from .exceptions import ConfigurationError
from .handler import HandleHandler
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class BackendInfo:
    """Container for a backend handler class and its description.

    Attributes:
        handler_cls: HandleHandler subclass implementing the backend
        description: Short human readable description
    """

    handler_cls: Type[HandleHandler]
    description: str = ""


class BackendRegistry:
    """Registry for managing Handle backends by name."""

    def __init__(self) -> None:
        self._backends: Dict[str, BackendInfo] = {}

    def set_backend(self, name: str, backend: BackendInfo) -> None:
        """Set a backend by name, replacing any previous registration."""
        if name in self._backends:
            logger.warning(f"Replacing registered Handle backend '{name}'")
        self._backends[name] = backend

    def get_backend(self, name: str) -> Optional[BackendInfo]:
        """Get backend info by name."""
        return self._backends.get(name)

    def has_backend(self, name: str) -> bool:
        """Check if a backend is registered by name."""
        return name in self._backends

    def remove_backend(self, name: str) -> None:
        """Remove a backend by name."""
        self._backends.pop(name, None)

    def list_backends(self) -> List[str]:
        """List all registered backend names."""
        return list(self._backends.keys())

    def clear(self) -> None:
        """Clear all registered backends."""
        self._backends.clear()


# Global registry instance
backend_registry = BackendRegistry()


def register_backend(
    name: str, description: str = "", registry: Optional[BackendRegistry] = None
) -> Callable[[Type[HandleHandler]], Type[HandleHandler]]:
    """Class decorator registering a HandleHandler subclass under ``name``."""

    def decorator(cls: Type[HandleHandler]) -> Type[HandleHandler]:
        if not issubclass(cls, HandleHandler):
            raise TypeError(f"{cls.__name__} must subclass HandleHandler")
        (registry or backend_registry).set_backend(
            name, BackendInfo(handler_cls=cls, description=description)
        )
        logger.debug(f"Registered Handle backend '{name}': {cls.__name__}")
        return cls

    return decorator


def create_handler(
    config: HandleConfig,
    obj: Optional[Any] = None,
    prefix: Optional[str] = None,
    registry: Optional[BackendRegistry] = None,
) -> HandleHandler:
    """Instantiate the backend named by ``config.backend``.

    Raises:
        ConfigurationError: If no backend is registered under that name
    """
    # Importing the bundled backends registers them
    from . import backends  # noqa: F401

    registry = registry or backend_registry
    backend = registry.get_backend(config.backend)
    if backend is None:
        raise ConfigurationError(
            f"Unknown Handle backend '{config.backend}', "
            f"expected one of {registry.list_backends()}"
        )
    return backend.handler_cls(config, obj=obj, prefix=prefix)
