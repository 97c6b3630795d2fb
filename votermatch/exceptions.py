"""
Exception hierarchy for votermatch.

Fatal errors (bad configuration, unreadable input, unwritable output) stop
the run and are reported by the CLI. FieldAccessError is recoverable: it is
raised for one field of one pair and the engine carries on.
"""

from __future__ import annotations

from typing import Any, Optional


def _context(**values: Any) -> dict[str, Any]:
    """Keep only the context values that were actually given."""
    return {key: value for key, value in values.items() if value is not None}


class VoterMatchError(Exception):
    """
    Root of all votermatch errors.

    Attributes:
        message: What went wrong, for the console
        details: Context such as the file or field involved
        recoverable: True when the run can continue past the error
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class ConfigurationError(VoterMatchError):
    """Unknown tier set, malformed --owners value and similar setup problems."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, details=_context(config_key=config_key))


class FieldAccessError(VoterMatchError):
    """
    A field needed by a matcher is missing or is not a string.

    Only the matcher that read the field is affected; the pair is still
    classified from the other matchers.
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None
    ):
        field_type = type(field_value).__name__ if field_value is not None else None
        super().__init__(
            message,
            details=_context(field_name=field_name, field_type=field_type),
            recoverable=True,
        )
        self.field_name = field_name


class DataPersistenceError(VoterMatchError):
    """
    Reading an input file or writing an output file failed.

    `operation` is "load" for owner/voter input and "save" for match output.
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        operation: Optional[str] = None
    ):
        super().__init__(message, details=_context(file_path=file_path, operation=operation))
