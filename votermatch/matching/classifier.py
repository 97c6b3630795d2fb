"""
Confidence classification.

A tier set is an ordered list of (tier, predicate) rules evaluated
against the matcher outputs for one pair; the first rule that holds
decides the tier. Two tier sets are available:

- five-tier: every name/address combination plus address-only and
  name-only matches.
- two-tier: only full-name-and-address and last-name-and-address, used
  for the contact-list pass where weaker matches are not worth calling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..exceptions import ConfigurationError
from ..models import ConfidenceTier


@dataclass(frozen=True)
class MatchSignals:
    """Matcher outputs for one owner/voter pair."""
    full_name: bool = False
    last_name: bool = False
    first_name: bool = False
    address: bool = False


@dataclass(frozen=True)
class ClassificationRule:
    tier: ConfidenceTier
    predicate: Callable[[MatchSignals], bool]


FIVE_TIER_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(ConfidenceTier.FULL_NAME_AND_ADDRESS, lambda s: s.full_name and s.address),
    ClassificationRule(ConfidenceTier.LAST_NAME_AND_ADDRESS, lambda s: s.last_name and s.address),
    ClassificationRule(ConfidenceTier.FIRST_NAME_AND_ADDRESS, lambda s: s.first_name and s.address),
    ClassificationRule(ConfidenceTier.ADDRESS_ONLY, lambda s: s.address),
    ClassificationRule(ConfidenceTier.NAME_ONLY, lambda s: s.full_name),
)

TWO_TIER_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(ConfidenceTier.FULL_NAME_AND_ADDRESS, lambda s: s.full_name and s.address),
    ClassificationRule(ConfidenceTier.LAST_NAME_AND_ADDRESS, lambda s: s.last_name and s.address),
)

TIER_SETS: Dict[str, Tuple[ClassificationRule, ...]] = {
    "five-tier": FIVE_TIER_RULES,
    "two-tier": TWO_TIER_RULES,
}


class ConfidenceClassifier:
    """
    Assigns a confidence tier to a pair's matcher outputs.

    Args:
        rules: Ordered rules, strongest first. Defaults to the five-tier set.
    """

    def __init__(self, rules: Sequence[ClassificationRule] = FIVE_TIER_RULES):
        if not rules:
            raise ConfigurationError("A tier set needs at least one rule")
        self.rules = tuple(rules)

    @classmethod
    def from_tier_set(cls, name: str) -> "ConfidenceClassifier":
        """Build a classifier for a named tier set ("five-tier" or "two-tier")."""
        try:
            return cls(TIER_SETS[name])
        except KeyError:
            raise ConfigurationError(
                f"Unknown tier set '{name}' (expected one of: {', '.join(TIER_SETS)})",
                config_key="MATCH_TIER_SET",
            ) from None

    @property
    def tiers(self) -> List[ConfidenceTier]:
        """Tiers this classifier can produce, in rule order."""
        return [rule.tier for rule in self.rules]

    def classify(self, signals: MatchSignals) -> Optional[ConfidenceTier]:
        """Return the first tier whose rule holds, or None for no match."""
        for rule in self.rules:
            if rule.predicate(signals):
                return rule.tier
        return None
