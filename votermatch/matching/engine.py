"""
Owner/voter match engine.

Compares every owner against every voter (owners outer, voters inner,
both in load order), classifies each pair and collects a MatchRecord for
every pair that gets a tier. A missing or malformed field only affects
the matcher that reads it: that matcher counts as a non-match, the run's
error flag is set, and the loop carries on.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable, Optional

from ..exceptions import FieldAccessError
from ..logger import get_logger
from ..models import MatchRecord, MatchRunResult, OwnerRecord, VoterRecord
from .classifier import ConfidenceClassifier, MatchSignals
from .filters import filter_with_contact
from .matchers import (
    address_matches,
    first_name_matches,
    full_name_matches,
    last_name_matches,
    zip_matches,
)
from .normalizer import NormalizedFields
from .ranker import rank_matches

logger = get_logger(__name__)

OWNER_FIELDS = ("name", "address", "zip")
VOTER_FIELDS = ("name_first", "name_last", "zip", "mail_zip", "house_number", "street", "mail_street")


class MatchEngine:
    """
    Full cross-join matcher.

    Args:
        classifier: Tier rules to apply (five-tier by default)
        require_contact: Only compare voters with an email or phone number
    """

    def __init__(
        self,
        classifier: Optional[ConfidenceClassifier] = None,
        require_contact: bool = False
    ):
        self.classifier = classifier or ConfidenceClassifier()
        self.require_contact = require_contact

    def run(
        self,
        owners: Iterable[OwnerRecord],
        voters: Iterable[VoterRecord],
        progress=None
    ) -> MatchRunResult:
        """
        Match all owners against all voters.

        Args:
            owners: Owner records in load order
            voters: Voter records in load order
            progress: Optional rich Progress, advanced once per owner

        Returns:
            Run result with matches ranked by confidence
        """
        start = time.perf_counter()

        owners = list(owners)
        voters = list(voters)
        if self.require_contact:
            total_voters = len(voters)
            voters = filter_with_contact(voters)
            logger.info(f"Voters with contact info: {len(voters)}/{total_voters}")

        result = MatchRunResult.for_tiers(self.classifier.tiers)
        result.owners_count = len(owners)
        result.voters_count = len(voters)

        normalized_voters = [NormalizedFields(v, VOTER_FIELDS) for v in voters]

        task = None
        if progress:
            task = progress.add_task("Owners x Voters", total=len(owners))

        for owner_number, owner in enumerate(owners, start=1):
            owner_fields = NormalizedFields(owner, OWNER_FIELDS)
            match_number = 0

            for voter_number, (voter, voter_fields) in enumerate(
                zip(voters, normalized_voters), start=1
            ):
                result.pairs_compared += 1
                signals = self._evaluate_pair(
                    owner_fields, voter_fields, result, owner_number, voter_number
                )
                tier = self.classifier.classify(signals)
                if tier is None:
                    continue

                match_number += 1
                logger.debug(
                    f"owner {owner_number} found match number {match_number} "
                    f"with match confidence: {tier.label}"
                )
                result.record_match(MatchRecord.from_pair(tier, owner, voter))

            if progress and task is not None:
                progress.advance(task)

        result.matches = rank_matches(result.matches)
        result.elapsed_sec = time.perf_counter() - start
        return result

    def _evaluate_pair(
        self,
        owner: NormalizedFields,
        voter: NormalizedFields,
        result: MatchRunResult,
        owner_number: int,
        voter_number: int
    ) -> MatchSignals:
        """
        Run the matchers for one pair, each guarded on its own.

        Every field a matcher uses is read before it compares anything, so
        a missing field fails the whole matcher even when another branch
        of it would have matched.
        """

        def guarded(matcher: str, check: Callable[[], bool]) -> bool:
            try:
                return check()
            except FieldAccessError as e:
                result.record_error()
                logger.warning(
                    f"ERROR: {matcher} matching (owner {owner_number}, voter {voter_number}): {e}"
                )
                return False

        full_name = guarded("full name", lambda: full_name_matches(
            owner.get("name"), voter.get("name_first"), voter.get("name_last")
        ))
        last_name = guarded("last name", lambda: last_name_matches(
            owner.get("name"), voter.get("name_last")
        ))
        first_name = guarded("first name", lambda: first_name_matches(
            owner.get("name"), voter.get("name_first")
        ))
        zip_match = guarded("zip", lambda: zip_matches(
            owner.get("zip"), voter.get("zip"), voter.get("mail_zip")
        ))
        address = guarded("address", lambda: address_matches(
            zip_match,
            owner.get("address"),
            voter.get("house_number"),
            voter.get("street"),
            voter.get("mail_street"),
        ))

        return MatchSignals(
            full_name=full_name,
            last_name=last_name,
            first_name=first_name,
            address=address,
        )
