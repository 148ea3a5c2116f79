"""Shared fixtures for repository handles tests."""

from typing import Any, Dict, Optional

import pytest

from repository_handles.config import HandleConfig
from repository_handles.handler import HandleHandler

MODS_NS = "http://www.loc.gov/mods/v3"

MODS_WITHOUT_HANDLE = (
    f'<mods xmlns="{MODS_NS}">'
    "<titleInfo><title>Sample</title></titleInfo>"
    "</mods>"
)

MODS_WITH_HANDLE = (
    f'<mods xmlns="{MODS_NS}">'
    "<titleInfo><title>Sample</title></titleInfo>"
    '<identifier type="hdl">http://hdl.handle.net/1234567/abc:123</identifier>'
    "</mods>"
)


class CountingDatastream:
    """Datastream recording every write to its content."""

    def __init__(self, content: str):
        self._content = content
        self.writes = 0

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        self.writes += 1
        self._content = value


class FakeObject:
    """Repository object holding counting datastreams."""

    def __init__(self, object_id: str, datastreams: Optional[Dict[str, Any]] = None):
        self.id = object_id
        self.datastreams = datastreams or {}

    def __getitem__(self, name: str):
        return self.datastreams[name]


class RecordingHandler(HandleHandler):
    """In-memory backend keeping handles in a dict."""

    def __init__(self, config, obj=None, prefix=None):
        super().__init__(config, obj=obj, prefix=prefix)
        self.handles: Dict[str, str] = {}

    def create_handle(self, obj):
        handle = self.get_full_handle(obj)
        if handle in self.handles:
            return False
        self.handles[handle] = self.construct_target_url(obj)
        return True

    def read_handle(self, handle_or_obj):
        return self.handles.get(self.get_full_handle(handle_or_obj))

    def update_handle(self, handle_or_obj, target):
        handle = self.get_full_handle(handle_or_obj)
        if handle not in self.handles:
            return False
        self.handles[handle] = target
        return True

    def delete_handle(self, handle_or_obj):
        return self.handles.pop(self.get_full_handle(handle_or_obj), None) is not None


@pytest.fixture
def config():
    """Configuration with deterministic values."""
    return HandleConfig(
        prefix="1234567",
        admin_username="300:0.NA/1234567",
        admin_password="secret",
        site_url="http://localhost/",
        service_url="https://handle.example.org:8000",
    )


@pytest.fixture
def mods_object():
    """Object abc:123 whose MODS datastream has no handle yet."""
    return FakeObject("abc:123", {"MODS": CountingDatastream(MODS_WITHOUT_HANDLE)})


@pytest.fixture
def stamped_object():
    """Object abc:123 whose MODS datastream already carries its handle."""
    return FakeObject("abc:123", {"MODS": CountingDatastream(MODS_WITH_HANDLE)})


@pytest.fixture
def write_stylesheet(tmp_path):
    """Write a stylesheet into a temporary file and return its path."""

    def _write(body: str, name: str = "stylesheet.xsl") -> str:
        path = tmp_path / name
        path.write_text(
            '<?xml version="1.0"?>\n'
            '<xsl:stylesheet version="1.0" '
            'xmlns:xsl="http://www.w3.org/1999/XSL/Transform">\n'
            f"{body}\n"
            "</xsl:stylesheet>\n",
            encoding="utf-8",
        )
        return str(path)

    return _write


@pytest.fixture
def handler_cls():
    """Concrete in-memory HandleHandler subclass."""
    return RecordingHandler


@pytest.fixture
def handler(config):
    """Unbound in-memory handler."""
    return RecordingHandler(config)
