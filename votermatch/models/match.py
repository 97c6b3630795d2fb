"""
Match records and confidence tiers.

A MatchRecord is produced for every owner/voter pair that the classifier
assigns a tier to. Field labels follow the column headers of the
spreadsheets the matches are delivered in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .owner import OwnerRecord
from .voter import VoterRecord


class ConfidenceTier(Enum):
    """Ordered confidence labels, strongest first."""

    FULL_NAME_AND_ADDRESS = "full name and address"
    LAST_NAME_AND_ADDRESS = "last name and address"
    FIRST_NAME_AND_ADDRESS = "first name and address"
    ADDRESS_ONLY = "address only"
    NAME_ONLY = "name only"

    @property
    def label(self) -> str:
        return self.value

    @property
    def priority(self) -> int:
        """Higher is stronger; used by the ranker."""
        return _PRIORITIES[self]

    @property
    def status_name(self) -> str:
        """Name used in the end-of-run count lines."""
        return _STATUS_NAMES[self]


_PRIORITIES = {
    ConfidenceTier.FULL_NAME_AND_ADDRESS: 5,
    ConfidenceTier.LAST_NAME_AND_ADDRESS: 4,
    ConfidenceTier.FIRST_NAME_AND_ADDRESS: 3,
    ConfidenceTier.ADDRESS_ONLY: 2,
    ConfidenceTier.NAME_ONLY: 1,
}

_STATUS_NAMES = {
    ConfidenceTier.FULL_NAME_AND_ADDRESS: "full name and address",
    ConfidenceTier.LAST_NAME_AND_ADDRESS: "only last name and address",
    ConfidenceTier.FIRST_NAME_AND_ADDRESS: "only first name and address",
    ConfidenceTier.ADDRESS_ONLY: "only address",
    ConfidenceTier.NAME_ONLY: "only name",
}


# Serialized column labels, in output order. "OWNER type" is only
# written for owners that carry a type tag.
MATCH_FIELD_LABELS = (
    ("confidence", "match confidence"),
    ("owner_name", "OWNER name"),
    ("owner_address", "OWNER address"),
    ("owner_zip", "OWNER zip"),
    ("owner_type", "OWNER type"),
    ("voter_name", "voter name"),
    ("voter_address", "voter address"),
    ("voter_zip", "voter zip"),
    ("voter_mail_street", 'voter "mail_street"'),
    ("voter_mail_zip", 'voter "mail_zip"'),
    ("voter_phone_1", "voter phone 1"),
    ("voter_phone_2", "voter phone 2"),
    ("voter_id", "voter id"),
    ("voter_email", "voter email"),
)


@dataclass(frozen=True)
class MatchRecord:
    """One owner/voter pair with its confidence tier."""

    confidence: ConfidenceTier

    owner_name: Any = None
    owner_address: Any = None
    owner_zip: Any = None
    owner_type: Optional[str] = None

    voter_name: str = ""
    voter_address: str = ""
    voter_zip: Any = None
    voter_mail_street: Any = None
    voter_mail_zip: Any = None
    voter_phone_1: Any = None
    voter_phone_2: Any = None
    voter_id: Any = None
    voter_email: Any = None

    @classmethod
    def from_pair(
        cls,
        confidence: ConfidenceTier,
        owner: OwnerRecord,
        voter: VoterRecord
    ) -> "MatchRecord":
        """Build the record from the source owner and voter."""
        return cls(
            confidence=confidence,
            owner_name=owner.name,
            owner_address=owner.address,
            owner_zip=owner.zip,
            owner_type=owner.owner_type,
            voter_name=voter.display_name,
            voter_address=voter.display_address,
            voter_zip=voter.zip,
            voter_mail_street=voter.mail_street,
            voter_mail_zip=voter.mail_zip,
            voter_phone_1=voter.phone_1,
            voter_phone_2=voter.phone_2,
            voter_id=voter.voter_id,
            voter_email=voter.email,
        )

    @property
    def priority(self) -> int:
        return self.confidence.priority

    def to_dict(self) -> dict[str, Any]:
        """Convert to a labelled dictionary for JSON/CSV output."""
        data = {}
        for attr, label in MATCH_FIELD_LABELS:
            value = getattr(self, attr)
            if attr == "confidence":
                value = value.label
            elif attr == "owner_type" and value is None:
                continue
            data[label] = value
        return data
