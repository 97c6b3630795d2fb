"""
Progress display for the owner x voter cross join.
"""

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)


def get_progress(disable: bool = False) -> Progress:
    """One task row per run; the engine advances it once per owner."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("owners"),
        TimeElapsedColumn(),
        TimeRemainingColumn(),
        disable=disable,
    )
