"""
Result of one matching run.

Holds everything the engine accumulates: the ranked matches, counts per
tier, and the error flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .match import ConfidenceTier, MatchRecord


@dataclass
class MatchRunResult:
    """
    Complete outcome of a matching run.

    `tier_counts` always has an entry for every tier of the tier set the
    run used, in tier order, so reports show zeros explicitly.
    """

    matches: List[MatchRecord] = field(default_factory=list)
    tier_counts: Dict[ConfidenceTier, int] = field(default_factory=dict)

    # Set when any pair hit a missing or malformed field
    had_error: bool = False
    error_count: int = 0

    owners_count: int = 0
    voters_count: int = 0
    pairs_compared: int = 0

    elapsed_sec: float = 0.0

    @classmethod
    def for_tiers(cls, tiers: Iterable[ConfidenceTier]) -> "MatchRunResult":
        """Create an empty result with zeroed counts for the given tiers."""
        return cls(tier_counts={tier: 0 for tier in tiers})

    def record_match(self, match: MatchRecord) -> None:
        self.matches.append(match)
        self.tier_counts[match.confidence] = self.tier_counts.get(match.confidence, 0) + 1

    def record_error(self) -> None:
        self.had_error = True
        self.error_count += 1

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (without the matches)."""
        return {
            "had_error": self.had_error,
            "error_count": self.error_count,
            "counts": {
                "owners": self.owners_count,
                "voters": self.voters_count,
                "pairs_compared": self.pairs_compared,
                "matches": self.total_matches,
            },
            "tier_counts": {tier.label: count for tier, count in self.tier_counts.items()},
            "elapsed_sec": round(self.elapsed_sec, 4),
        }

    def summary_lines(self) -> List[str]:
        """Status lines printed at the end of a run."""
        lines = [f"had error: {str(self.had_error).lower()}"]
        for tier, count in self.tier_counts.items():
            lines.append(f"{tier.status_name} matches: {count}")
        return lines
