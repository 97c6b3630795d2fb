"""
Dataset preparation before matching.

Voters can be narrowed to one city or to those with contact details,
and owner records can be tagged with the dataset they came from.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from ..models import OwnerRecord, VoterRecord


def _upper_or_empty(value: Any) -> str:
    return value.upper() if isinstance(value, str) else ""


def voter_in_city(voter: VoterRecord, city: str) -> bool:
    """True if the residence or mailing city contains `city` (case-insensitive)."""
    needle = city.strip().upper()
    return needle in _upper_or_empty(voter.mail_city) or needle in _upper_or_empty(voter.city)


def filter_by_city(voters: Iterable[VoterRecord], city: str) -> List[VoterRecord]:
    """Keep voters registered or receiving mail in `city`. An empty city keeps everyone."""
    if not city or not city.strip():
        return list(voters)
    return [v for v in voters if voter_in_city(v, city)]


def has_contact_info(voter: VoterRecord) -> bool:
    return voter.has_contact_info


def filter_with_contact(voters: Iterable[VoterRecord]) -> List[VoterRecord]:
    """Keep voters with an email, phone_1 or phone_2."""
    return [v for v in voters if has_contact_info(v)]


def tag_owner_type(owners: Iterable[OwnerRecord], owner_type: str) -> List[OwnerRecord]:
    """Tag every owner with the category of the dataset it was loaded from."""
    return [owner.with_owner_type(owner_type) for owner in owners]
