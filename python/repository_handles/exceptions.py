"""Exceptions raised by repository handles."""


class ConfigurationError(Exception):
    """Exception raised for configuration validation errors."""

    pass


class HandleServiceError(Exception):
    """Raised when the Handle service cannot be reached or answers unexpectedly.

    Backends catch this at the CRUD boundary and report the failure as a
    return value.
    """

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
