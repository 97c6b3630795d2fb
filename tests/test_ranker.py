"""
Tests for result ranking.
"""

from votermatch.matching import rank_matches
from votermatch.models import ConfidenceTier, MatchRecord


def _match(tier, owner_name):
    return MatchRecord(confidence=tier, owner_name=owner_name)


def test_sorted_by_priority_descending():
    matches = [
        _match(ConfidenceTier.NAME_ONLY, "a"),
        _match(ConfidenceTier.FULL_NAME_AND_ADDRESS, "b"),
        _match(ConfidenceTier.ADDRESS_ONLY, "c"),
        _match(ConfidenceTier.LAST_NAME_AND_ADDRESS, "d"),
        _match(ConfidenceTier.FIRST_NAME_AND_ADDRESS, "e"),
    ]
    ranked = rank_matches(matches)
    assert [m.owner_name for m in ranked] == ["b", "d", "e", "c", "a"]


def test_equal_tiers_keep_emission_order():
    matches = [
        _match(ConfidenceTier.ADDRESS_ONLY, "first"),
        _match(ConfidenceTier.FULL_NAME_AND_ADDRESS, "x"),
        _match(ConfidenceTier.ADDRESS_ONLY, "second"),
        _match(ConfidenceTier.ADDRESS_ONLY, "third"),
    ]
    ranked = rank_matches(matches)
    assert [m.owner_name for m in ranked] == ["x", "first", "second", "third"]


def test_ranking_is_idempotent():
    matches = [
        _match(ConfidenceTier.NAME_ONLY, "a"),
        _match(ConfidenceTier.NAME_ONLY, "b"),
        _match(ConfidenceTier.ADDRESS_ONLY, "c"),
        _match(ConfidenceTier.NAME_ONLY, "d"),
    ]
    once = rank_matches(matches)
    assert rank_matches(once) == once


def test_empty():
    assert rank_matches([]) == []
