"""
Tests for the name, zip and address matchers.
"""

from votermatch.matching import (
    address_matches,
    first_name_matches,
    full_name_matches,
    last_name_matches,
    mail_street_matches,
    name_contains,
    street_address_matches,
    zip_matches,
)


class TestNameMatchers:

    def test_last_name_found_in_owner_name(self):
        assert last_name_matches("SMITH JOHN & MARY", "SMITH")

    def test_first_name_found_in_owner_name(self):
        assert first_name_matches("SMITH JOHN & MARY", "MARY")

    def test_empty_names_never_match(self):
        assert not name_contains("", "SMITH")
        assert not name_contains("JOHN SMITH", "")
        assert not name_contains("", "")

    def test_substring_containment_not_token_match(self):
        # "SMITH" is inside "SMITHSON"; containment is the contract
        assert last_name_matches("SMITHSON ROBERT", "SMITH")

    def test_full_name_requires_both(self):
        assert full_name_matches("JOHN SMITH", "JOHN", "SMITH")
        assert not full_name_matches("JOHN SMITH", "ROBERT", "SMITH")
        assert not full_name_matches("JOHN SMITH", "JOHN", "JONES")

    def test_full_name_scans_same_owner_string(self):
        # Both voter names are found inside one owner token
        assert full_name_matches("JOHNSON TRUST", "JOHN", "JOHNSON")


class TestZipMatcher:

    def test_compares_five_digit_prefix(self):
        assert zip_matches("94601-1234", "94601", "")

    def test_mailing_zip_is_enough(self):
        assert zip_matches("94601", "94612", "946019999")

    def test_different_zips(self):
        assert not zip_matches("94601", "94612", "94610")

    def test_empty_zips_compare_equal(self):
        assert zip_matches("", "", "94610")


class TestAddressMatcher:

    def test_house_number_and_street(self):
        assert street_address_matches("123 MAIN ST APT 4", "123", "MAIN ST")
        assert not street_address_matches("125 MAIN ST", "123", "MAIN ST")

    def test_owner_address_contains_mail_street(self):
        assert mail_street_matches("PO BOX 55 OAKLAND", "PO BOX 55")

    def test_mail_street_contains_owner_address(self):
        assert mail_street_matches("123 MAIN", "123 MAIN ST APT 4")

    def test_empty_owner_address_never_matches(self):
        assert not street_address_matches("", "123", "MAIN ST")
        assert not mail_street_matches("", "123 MAIN ST")

    def test_requires_zip_match(self):
        assert not address_matches(False, "123 MAIN ST", "123", "MAIN ST", "")
        assert address_matches(True, "123 MAIN ST", "123", "MAIN ST", "")

    def test_any_branch_is_enough(self):
        assert address_matches(True, "PO BOX 55", "9", "ELM ST", "PO BOX 55")
        assert not address_matches(True, "PO BOX 55", "9", "ELM ST", "PO BOX 77")
