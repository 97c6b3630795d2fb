"""
Result ranking.
"""

from __future__ import annotations

from typing import Iterable, List

from ..models import MatchRecord


def rank_matches(matches: Iterable[MatchRecord]) -> List[MatchRecord]:
    """
    Sort matches by tier priority, strongest first.

    sorted() is stable, and stays stable with reverse=True, so matches
    of the same tier keep the order the engine emitted them in.
    """
    return sorted(matches, key=lambda m: m.priority, reverse=True)
