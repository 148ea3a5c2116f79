"""Unit tests for the models module."""

import pytest

from repository_handles.constants import Severity
from repository_handles.models import (
    InMemoryObject,
    MetadataOutcome,
    ObjectHandle,
    OutcomeMessage,
    RawHandle,
    to_handle_ref,
)


class TestToHandleRef:
    """Test coercion into HandleRef values."""

    def test_string_becomes_raw_handle(self):
        assert to_handle_ref("1234567/abc:123") == RawHandle("1234567/abc:123")

    def test_object_becomes_object_handle(self):
        obj = InMemoryObject(id="abc:123")
        ref = to_handle_ref(obj)

        assert isinstance(ref, ObjectHandle)
        assert ref.obj is obj

    def test_existing_ref_passes_through(self):
        ref = RawHandle("1234567/abc:123")
        assert to_handle_ref(ref) is ref

    def test_unsupported_value(self):
        with pytest.raises(TypeError, match="int"):
            to_handle_ref(42)


class TestInMemoryObject:
    """Test the in-memory repository object."""

    def test_datastream_access(self):
        obj = InMemoryObject(id="abc:123")
        obj.add_datastream("MODS", "<mods/>")

        assert "MODS" in obj
        assert obj["MODS"].content == "<mods/>"

    def test_missing_datastream(self):
        with pytest.raises(KeyError):
            InMemoryObject(id="abc:123")["MODS"]


class TestOutcome:
    """Test outcome models."""

    def test_render_substitutes(self):
        message = OutcomeMessage(
            text="Added Handle to {pid} in the {dsid} datastream.",
            substitutions={"pid": "abc:123", "dsid": "MODS"},
        )

        assert message.render() == "Added Handle to abc:123 in the MODS datastream."
        assert message.severity == Severity.INFO

    def test_outcome_without_message(self):
        outcome = MetadataOutcome(success=True)

        assert outcome.success is True
        assert outcome.message is None
