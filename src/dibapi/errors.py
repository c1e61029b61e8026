"""Error types raised by the DropInBlog client.

Every error the client raises itself is a ``DibApiError`` carrying a
machine-readable ``code``. Transport failures (``httpx.HTTPError``) and
malformed JSON bodies (``ValueError``) are not wrapped and reach the caller
as raised by httpx.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"


class DibApiError(Exception):
    """Base error with a code and a recoverable hint."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable


class ConfigurationError(DibApiError):
    """Token or blog id missing. Raised before any network access."""

    def __init__(self, message: str = "Token and Blog ID are required") -> None:
        super().__init__(ErrorCode.CONFIGURATION_MISSING, message, recoverable=False)


class ApiError(DibApiError):
    """The API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        recoverable = status_code >= 500 or status_code == 429
        super().__init__(ErrorCode.API_REQUEST_FAILED, message, recoverable=recoverable)
        self.status_code = status_code
