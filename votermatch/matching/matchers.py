"""
Field matchers.

Pure predicates over already-normalized strings. Name checks are plain
substring containment against the whole owner name, so a first and last
name can both be found in the same owner string even when they overlap.
"""

from __future__ import annotations

ZIP_PREFIX_LENGTH = 5


def name_contains(owner_name: str, voter_name: str) -> bool:
    """True if both names are non-empty and the voter name occurs in the owner name."""
    return bool(owner_name) and bool(voter_name) and voter_name in owner_name


def last_name_matches(owner_name: str, voter_last_name: str) -> bool:
    return name_contains(owner_name, voter_last_name)


def first_name_matches(owner_name: str, voter_first_name: str) -> bool:
    return name_contains(owner_name, voter_first_name)


def full_name_matches(owner_name: str, voter_first_name: str, voter_last_name: str) -> bool:
    """Last and first name both found in the same owner name string."""
    return (
        last_name_matches(owner_name, voter_last_name)
        and first_name_matches(owner_name, voter_first_name)
    )


def zip_prefix_equal(owner_zip: str, voter_zip: str) -> bool:
    return owner_zip[:ZIP_PREFIX_LENGTH] == voter_zip[:ZIP_PREFIX_LENGTH]


def zip_matches(owner_zip: str, voter_zip: str, voter_mail_zip: str) -> bool:
    """Compare 5-digit prefixes against the residence or mailing zip."""
    return zip_prefix_equal(owner_zip, voter_zip) or zip_prefix_equal(owner_zip, voter_mail_zip)


def street_address_matches(owner_address: str, house_number: str, street: str) -> bool:
    """Owner address contains both the voter's house number and street."""
    return (
        bool(owner_address) and bool(house_number) and bool(street)
        and house_number in owner_address and street in owner_address
    )


def mail_street_matches(owner_address: str, mail_street: str) -> bool:
    """Either address contains the other."""
    return (
        bool(owner_address) and bool(mail_street)
        and (mail_street in owner_address or owner_address in mail_street)
    )


def address_matches(
    zip_match: bool,
    owner_address: str,
    house_number: str,
    street: str,
    mail_street: str,
) -> bool:
    """
    Zip must match, plus any one of:
    - owner address contains the voter's house number and street
    - owner address contains the voter's mailing street
    - voter's mailing street contains the owner address
    """
    return zip_match and (
        street_address_matches(owner_address, house_number, street)
        or mail_street_matches(owner_address, mail_street)
    )
