"""Statkit-specific exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from statkit.result import ErrorKind


class StatkitError(Exception):
    """Raised by ``Result.unwrap()`` when the result carries a failure.

    Operations themselves never raise for invalid input; they return a failed
    ``Result``.  This exception only exists for callers that opt into
    exception-style handling.
    """

    def __init__(self, kind: Optional[ErrorKind], message: str) -> None:
        super().__init__(message)
        self.kind = kind


class ConfigError(Exception):
    """Raised when a ``[tool.statkit]`` table fails schema validation."""
