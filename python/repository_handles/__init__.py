"""Persistent identifier (Handle) management for repository objects.

Handlers are created per operation from a ``HandleConfig``:

- Configuration: from .config import HandleConfig, parse_environment_variables
- Handlers: from .registry import create_handler
"""

from .config import HandleConfig, parse_environment_variables
from .handler import HandleHandler
from .models import (
    Datastream,
    InMemoryObject,
    MetadataOutcome,
    ObjectHandle,
    OutcomeMessage,
    RawHandle,
)
from .registry import create_handler, register_backend

__version__ = "0.1.0"

__all__ = [
    "Datastream",
    "HandleConfig",
    "HandleHandler",
    "InMemoryObject",
    "MetadataOutcome",
    "ObjectHandle",
    "OutcomeMessage",
    "RawHandle",
    "create_handler",
    "parse_environment_variables",
    "register_backend",
]
