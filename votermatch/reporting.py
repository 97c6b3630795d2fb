"""
Console summary of a matching run.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from .models import MatchRunResult
from .utils import format_duration


def print_summary(result: MatchRunResult, console: Optional[Console] = None) -> None:
    """Print the error flag and per-tier counts."""
    console = console or Console()

    for line in result.summary_lines():
        console.print(line, highlight=False)

    table = Table(title="Match confidence", show_header=True, header_style="bold")
    table.add_column("Tier")
    table.add_column("Matches", justify="right")
    for tier, count in result.tier_counts.items():
        table.add_row(tier.label, str(count))
    table.add_row("[bold]total[/bold]", f"[bold]{result.total_matches}[/bold]")
    console.print(table)

    console.print(
        f"{result.owners_count} owners x {result.voters_count} voters "
        f"= {result.pairs_compared} pairs compared "
        f"in {format_duration(result.elapsed_sec)}",
        highlight=False,
    )
