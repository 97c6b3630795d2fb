"""
Stage timing for matching runs.

Each run has a few coarse stages (load, match, save). A stage records how
long it took and how many records it handled, and logs one line on exit.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class StageTiming:
    """Duration and record count of one run stage."""
    stage: str
    duration_sec: float = 0.0
    records: int = 0
    failed: bool = False

    @property
    def records_per_sec(self) -> float:
        if self.duration_sec <= 0:
            return 0.0
        return self.records / self.duration_sec

    def __str__(self) -> str:
        text = f"{self.stage}: {format_duration(self.duration_sec)}"
        if self.records:
            text += f" ({self.records} records)"
        if self.failed:
            text += " [failed]"
        return text


@contextmanager
def timed_stage(
    stage: str,
    logger: Optional[logging.Logger] = None,
    log_level: int = logging.INFO
) -> Iterator[StageTiming]:
    """
    Time a run stage.

    Usage:
        with timed_stage("Load inputs", logger) as timing:
            voters = store.load_voters(path)
            timing.records = len(voters)

    The timing is logged on exit, also when the stage raises.
    """
    timing = StageTiming(stage=stage)
    start = time.perf_counter()
    try:
        yield timing
    except Exception:
        timing.failed = True
        raise
    finally:
        timing.duration_sec = time.perf_counter() - start
        if logger:
            logger.log(log_level, str(timing))


def format_duration(seconds: float) -> str:
    """Format a duration as ms, s or m/s."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes)}m {secs:.1f}s"
