"""Error types raised by the report registry.

Every failure the registry surfaces is a ``ReportRegistryError`` carrying a
machine-readable ``ErrorCode``. Callers that render errors (API handlers,
CLIs) use ``to_dict()`` to build a structured envelope.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NO_REPORTS_REGISTERED = "NO_REPORTS_REGISTERED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_LOGGED_IN = "NOT_LOGGED_IN"


class ReportRegistryError(Exception):
    """Registry failure with a stable error code."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }
