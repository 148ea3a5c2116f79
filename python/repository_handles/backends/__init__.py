"""Bundled Handle backends."""

from .rest import RestHandleHandler

__all__ = ["RestHandleHandler"]
