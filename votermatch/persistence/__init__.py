"""
Data persistence layer.

Loads owner/voter JSON inputs and writes ranked matches to JSON and CSV.
"""

from .match_store import MatchStore, match_columns

__all__ = [
    "MatchStore",
    "match_columns",
]
