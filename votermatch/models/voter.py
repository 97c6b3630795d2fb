"""
Voter data models.

Represents individual registrant records from the county voter file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

# Parts of the reconstructed display strings, in output order.
DISPLAY_NAME_PARTS = ("name_prefix", "name_first", "name_middle", "name_last", "name_suffix")
DISPLAY_ADDRESS_PARTS = (
    "house_number",
    "house_fraction",
    "pre_dir",
    "street",
    "type",
    "post_dir",
    "building_number",
    "apartment_number",
)
CONTACT_FIELDS = ("email", "phone_1", "phone_2")


def _display_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class VoterRecord:
    """
    Registered voter as exported from the voter roll.

    Every field is optional at load time: a missing key is None and
    values keep their JSON type.
    """

    # Name
    name_first: Any = None
    name_last: Any = None
    name_prefix: Any = None
    name_middle: Any = None
    name_suffix: Any = None

    # Residence address
    house_number: Any = None
    house_fraction: Any = None
    pre_dir: Any = None
    street: Any = None
    type: Any = None
    post_dir: Any = None
    building_number: Any = None
    apartment_number: Any = None
    zip: Any = None
    city: Any = None

    # Mailing address
    mail_street: Any = None
    mail_zip: Any = None
    mail_city: Any = None

    # Contact
    phone_1: Any = None
    phone_2: Any = None
    email: Any = None
    voter_id: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VoterRecord":
        """Create VoterRecord from dictionary, ignoring unknown keys."""
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })

    def _join_parts(self, parts: Sequence[str]) -> str:
        values = (_display_value(getattr(self, part)) for part in parts)
        return " ".join(value for value in values if value)

    @property
    def display_name(self) -> str:
        """Prefix, first, middle, last and suffix, skipping blanks."""
        return self._join_parts(DISPLAY_NAME_PARTS)

    @property
    def display_address(self) -> str:
        """Residence address assembled from its parts, skipping blanks."""
        return self._join_parts(DISPLAY_ADDRESS_PARTS)

    @property
    def has_contact_info(self) -> bool:
        """True if the voter has an email or at least one phone number."""
        return any(_display_value(getattr(self, f)) for f in CONTACT_FIELDS)
