"""
Tests for voter/owner dataset preparation.
"""

from votermatch.matching import (
    filter_by_city,
    filter_with_contact,
    has_contact_info,
    tag_owner_type,
)
from votermatch.models import OwnerRecord, VoterRecord


class TestCityFilter:

    def test_matches_residence_city(self):
        voters = [VoterRecord(voter_id="1", city="Oakland"), VoterRecord(voter_id="2", city="BERKELEY")]
        assert [v.voter_id for v in filter_by_city(voters, "oakland")] == ["1"]

    def test_matches_mail_city(self):
        voters = [VoterRecord(voter_id="1", city="ALAMEDA", mail_city="OAKLAND CA")]
        assert filter_by_city(voters, "OAKLAND") == voters

    def test_non_string_cities_do_not_match(self):
        voters = [VoterRecord(voter_id="1", city=None, mail_city=94601)]
        assert filter_by_city(voters, "OAKLAND") == []

    def test_empty_city_keeps_everyone(self):
        voters = [VoterRecord(voter_id="1"), VoterRecord(voter_id="2")]
        assert filter_by_city(voters, "  ") == voters


class TestContactFilter:

    def test_any_contact_field_counts(self):
        voters = [
            VoterRecord(voter_id="email", email="a@example.com"),
            VoterRecord(voter_id="phone1", phone_1=5105550100),
            VoterRecord(voter_id="phone2", phone_2="510-555-0101"),
            VoterRecord(voter_id="none"),
            VoterRecord(voter_id="blank", email="", phone_1=""),
        ]
        kept = filter_with_contact(voters)
        assert [v.voter_id for v in kept] == ["email", "phone1", "phone2"]

    def test_has_contact_info(self):
        assert has_contact_info(VoterRecord(email="a@example.com"))
        assert not has_contact_info(VoterRecord())


class TestOwnerTags:

    def test_tags_every_owner(self):
        owners = [OwnerRecord(name="A"), OwnerRecord(name="B", owner_type="old")]
        tagged = tag_owner_type(owners, "owner_occupied")

        assert [o.owner_type for o in tagged] == ["owner_occupied", "owner_occupied"]
        assert [o.name for o in tagged] == ["A", "B"]
        assert owners[0].owner_type is None
