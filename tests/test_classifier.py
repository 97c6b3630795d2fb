"""
Tests for confidence classification.
"""

from itertools import product

import pytest

from votermatch.exceptions import ConfigurationError
from votermatch.matching import (
    ConfidenceClassifier,
    FIVE_TIER_RULES,
    MatchSignals,
    TWO_TIER_RULES,
)
from votermatch.models import ConfidenceTier


@pytest.fixture
def five_tier():
    return ConfidenceClassifier.from_tier_set("five-tier")


@pytest.fixture
def two_tier():
    return ConfidenceClassifier.from_tier_set("two-tier")


class TestFiveTier:

    def test_full_name_and_address_wins_over_everything(self, five_tier):
        signals = MatchSignals(full_name=True, last_name=True, first_name=True, address=True)
        assert five_tier.classify(signals) is ConfidenceTier.FULL_NAME_AND_ADDRESS

    def test_last_name_and_address(self, five_tier):
        signals = MatchSignals(last_name=True, first_name=False, address=True)
        assert five_tier.classify(signals) is ConfidenceTier.LAST_NAME_AND_ADDRESS

    def test_last_name_beats_first_name(self, five_tier):
        # Both names found but not flagged as a full-name match
        signals = MatchSignals(last_name=True, first_name=True, address=True)
        assert five_tier.classify(signals) is ConfidenceTier.LAST_NAME_AND_ADDRESS

    def test_first_name_and_address(self, five_tier):
        signals = MatchSignals(first_name=True, address=True)
        assert five_tier.classify(signals) is ConfidenceTier.FIRST_NAME_AND_ADDRESS

    def test_address_only(self, five_tier):
        assert five_tier.classify(MatchSignals(address=True)) is ConfidenceTier.ADDRESS_ONLY

    def test_name_only(self, five_tier):
        signals = MatchSignals(full_name=True, last_name=True, first_name=True)
        assert five_tier.classify(signals) is ConfidenceTier.NAME_ONLY

    def test_partial_name_without_address_is_no_match(self, five_tier):
        assert five_tier.classify(MatchSignals(last_name=True)) is None
        assert five_tier.classify(MatchSignals(first_name=True)) is None
        assert five_tier.classify(MatchSignals()) is None


class TestTwoTier:

    def test_keeps_strong_tiers(self, two_tier):
        full = MatchSignals(full_name=True, last_name=True, first_name=True, address=True)
        assert two_tier.classify(full) is ConfidenceTier.FULL_NAME_AND_ADDRESS
        assert two_tier.classify(
            MatchSignals(last_name=True, address=True)
        ) is ConfidenceTier.LAST_NAME_AND_ADDRESS

    def test_drops_weak_tiers(self, two_tier):
        assert two_tier.classify(MatchSignals(first_name=True, address=True)) is None
        assert two_tier.classify(MatchSignals(address=True)) is None
        assert two_tier.classify(
            MatchSignals(full_name=True, last_name=True, first_name=True)
        ) is None

    def test_tiers(self, two_tier):
        assert two_tier.tiers == [
            ConfidenceTier.FULL_NAME_AND_ADDRESS,
            ConfidenceTier.LAST_NAME_AND_ADDRESS,
        ]


def test_classification_is_deterministic_and_within_tier_set():
    for rules in (FIVE_TIER_RULES, TWO_TIER_RULES):
        classifier = ConfidenceClassifier(rules)
        for last, first, address in product([False, True], repeat=3):
            signals = MatchSignals(
                full_name=last and first, last_name=last, first_name=first, address=address
            )
            tier = classifier.classify(signals)
            assert tier is None or tier in classifier.tiers
            assert classifier.classify(signals) is tier


def test_unknown_tier_set():
    with pytest.raises(ConfigurationError):
        ConfidenceClassifier.from_tier_set("three-tier")


def test_empty_rules_rejected():
    with pytest.raises(ConfigurationError):
        ConfidenceClassifier([])
