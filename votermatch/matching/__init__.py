"""
Owner/voter matching engine.

Normalizes fields, runs the name/zip/address matchers on every
owner x voter pair, classifies each pair into a confidence tier and
ranks the resulting matches.
"""

from .normalizer import normalize, NormalizedFields
from .matchers import (
    name_contains,
    last_name_matches,
    first_name_matches,
    full_name_matches,
    zip_prefix_equal,
    zip_matches,
    street_address_matches,
    mail_street_matches,
    address_matches,
)
from .classifier import (
    ConfidenceClassifier,
    ClassificationRule,
    MatchSignals,
    FIVE_TIER_RULES,
    TWO_TIER_RULES,
    TIER_SETS,
)
from .ranker import rank_matches
from .filters import filter_by_city, filter_with_contact, has_contact_info, tag_owner_type
from .engine import MatchEngine

__all__ = [
    "normalize",
    "NormalizedFields",
    "name_contains",
    "last_name_matches",
    "first_name_matches",
    "full_name_matches",
    "zip_prefix_equal",
    "zip_matches",
    "street_address_matches",
    "mail_street_matches",
    "address_matches",
    "ConfidenceClassifier",
    "ClassificationRule",
    "MatchSignals",
    "FIVE_TIER_RULES",
    "TWO_TIER_RULES",
    "TIER_SETS",
    "rank_matches",
    "filter_by_city",
    "filter_with_contact",
    "has_contact_info",
    "tag_owner_type",
    "MatchEngine",
]
