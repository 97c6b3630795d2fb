"""
Utility functions for the owner/voter matching application.
"""

from .timing import (
    timed_stage,
    format_duration,
    StageTiming,
)

__all__ = [
    "timed_stage",
    "format_duration",
    "StageTiming",
]
