"""Repository object, handle reference and outcome models."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field

from .constants import Severity


@runtime_checkable
class DatastreamLike(Protocol):
    """A named content stream whose ``content`` can be read and replaced."""

    content: str


@runtime_checkable
class RepositoryObject(Protocol):
    """Any object exposing an identifier and datastreams by name."""

    id: str

    def __getitem__(self, name: str) -> DatastreamLike: ...


@dataclass
class Datastream:
    id: str
    content: str = ""


@dataclass
class InMemoryObject:
    """Minimal repository object backed by a dict of datastreams."""

    id: str
    datastreams: Dict[str, Datastream] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Datastream:
        return self.datastreams[name]

    def __contains__(self, name: object) -> bool:
        return name in self.datastreams

    def add_datastream(self, name: str, content: str = "") -> Datastream:
        datastream = Datastream(id=name, content=content)
        self.datastreams[name] = datastream
        return datastream


@dataclass(frozen=True)
class RawHandle:
    """A handle given literally, e.g. "1234567/abc:123"."""

    value: str


@dataclass(frozen=True)
class ObjectHandle:
    """A handle derived from a repository object."""

    obj: Any


HandleRef = Union[RawHandle, ObjectHandle]


def to_handle_ref(value: Any) -> HandleRef:
    """Coerce a string, repository object or existing ref into a HandleRef.

    Raises:
        TypeError: If the value is neither a string nor carries an ``id``
    """
    if isinstance(value, (RawHandle, ObjectHandle)):
        return value
    if isinstance(value, str):
        return RawHandle(value)
    if hasattr(value, "id"):
        return ObjectHandle(value)
    raise TypeError(
        f"Expected a handle string or repository object, got {type(value).__name__}"
    )


class OutcomeMessage(BaseModel):
    """Templated message for the caller to log or display."""

    text: str
    substitutions: Dict[str, str] = Field(default_factory=dict)
    severity: Severity = Severity.INFO

    def render(self) -> str:
        return self.text.format(**self.substitutions)


class MetadataOutcome(BaseModel):
    """Result of stamping a handle into a datastream."""

    success: bool
    message: Optional[OutcomeMessage] = None
