"""
Property owner data model.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping, Optional

from ..config import OwnerFieldMap


def _first_present(data: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class OwnerRecord:
    """
    A property record to be matched against the voter roll.

    Values are kept exactly as loaded; a missing column is None. Checking
    that a value is a usable string happens during normalization, one pair
    at a time.
    """

    name: Any = None
    address: Any = None
    zip: Any = None
    owner_type: Optional[str] = None

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        field_map: Optional[OwnerFieldMap] = None
    ) -> "OwnerRecord":
        """Create OwnerRecord from a raw JSON object."""
        field_map = field_map or OwnerFieldMap()
        return cls(
            name=_first_present(data, field_map.name),
            address=_first_present(data, field_map.address),
            zip=_first_present(data, field_map.zip),
            owner_type=_first_present(data, field_map.owner_type),
        )

    def with_owner_type(self, owner_type: str) -> "OwnerRecord":
        """Return a copy tagged with the source dataset's category."""
        return replace(self, owner_type=owner_type)
