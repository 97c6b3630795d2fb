"""
Field normalization for comparison.

Every field a matcher reads goes through normalize(): surrounding
whitespace removed, then upper-cased. Missing or non-string values raise
FieldAccessError, which the engine recovers from pair by pair.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

from ..exceptions import FieldAccessError


def normalize(value: Any, field_name: str = "") -> str:
    """Canonical comparison form of a raw string field."""
    if value is None:
        raise FieldAccessError(f"Missing field '{field_name}'", field_name=field_name)
    if not isinstance(value, str):
        raise FieldAccessError(
            f"Field '{field_name}' is not a string",
            field_name=field_name,
            field_value=value,
        )
    return value.strip().upper()


class NormalizedFields:
    """
    Normalized values for one record, computed once.

    A field that failed to normalize keeps its error and raises it again
    each time it is read, so every pair that uses it sees the failure.
    """

    def __init__(self, record: Any, field_names: Iterable[str]):
        self._values: Dict[str, str] = {}
        self._errors: Dict[str, FieldAccessError] = {}
        for name in field_names:
            try:
                self._values[name] = normalize(getattr(record, name), name)
            except FieldAccessError as e:
                self._errors[name] = e

    def get(self, name: str) -> str:
        if name in self._errors:
            raise self._errors[name]
        return self._values[name]
