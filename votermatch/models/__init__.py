"""
Data models for the owner/voter matching application.

These models represent the loaded source records and the match output,
and are easily serializable to JSON and CSV.
"""

from .owner import OwnerRecord
from .voter import VoterRecord
from .match import ConfidenceTier, MatchRecord, MATCH_FIELD_LABELS
from .run_result import MatchRunResult

__all__ = [
    # Source records
    "OwnerRecord",
    "VoterRecord",

    # Match output
    "ConfidenceTier",
    "MatchRecord",
    "MATCH_FIELD_LABELS",
    "MatchRunResult",
]
