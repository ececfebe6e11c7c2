"""src/staticdeploy/ui/cli/display/summary.py
What: Render the per-job outcome table and run totals.
Why: Keep console output formatting consistent across deploy runs.
"""

from __future__ import annotations

from typing import ClassVar, final

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from staticdeploy.features.deploy.domain.models import DeployOutcome, DeployResult, RunSummary


def format_bytes(size: int) -> str:
    """Render a byte count with a binary unit suffix."""

    if size < 1024:
        return f"{size} B"
    value = size / 1024
    for unit in ("KiB", "MiB"):
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GiB"


@final
class SummaryDisplay:
    """Handles run summary display in CLI."""

    _OUTCOME_STYLES: ClassVar[dict[DeployOutcome, str]] = {
        DeployOutcome.SUCCESS: "green",
        DeployOutcome.DELEGATED: "magenta",
        DeployOutcome.FAILED: "bold red",
        DeployOutcome.CANCELLED: "yellow",
    }

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_summary(self, summary: RunSummary, *, quiet: bool = False) -> None:
        """Display the job table followed by totals.

        In quiet mode only failed jobs are listed.
        """
        if quiet:
            for result in summary.results:
                if result.outcome is DeployOutcome.FAILED:
                    message = escape(f"{result.job.label}: {result.error_message}")
                    self.console.print(f"[red]{message}[/red]")
            return

        self.console.print(self.build_table(summary.results))

        counts = summary.outcome_counts
        self.console.print(f"\n[bold]Deployment Summary:[/bold] {summary.disposition.value}")
        self.console.print(f"Jobs: {summary.total_jobs}")
        self.console.print(f"[green]Succeeded: {counts[DeployOutcome.SUCCESS]}[/green]")
        if counts[DeployOutcome.DELEGATED]:
            self.console.print(f"[magenta]Delegated: {counts[DeployOutcome.DELEGATED]}[/magenta]")
        if counts[DeployOutcome.FAILED]:
            self.console.print(f"[red]Failed: {counts[DeployOutcome.FAILED]}[/red]")
        if counts[DeployOutcome.CANCELLED]:
            self.console.print(f"[yellow]Cancelled: {counts[DeployOutcome.CANCELLED]}[/yellow]")
        self.console.print(
            f"Files: {summary.stats.files_copied} ({format_bytes(summary.stats.bytes_copied)}) "
            f"in {summary.elapsed_seconds:.2f}s, {summary.files_per_second:.0f} files/s"
        )

    def build_table(self, results: tuple[DeployResult, ...]) -> Table:
        table = Table(
            title="Deployment Results",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Theme", style="bold")
        table.add_column("Area")
        table.add_column("Locale")
        table.add_column("Outcome")
        table.add_column("Files", justify="right")
        table.add_column("Size", justify="right")
        table.add_column("Time", justify="right", style="dim")

        for result in results:
            outcome = Text(result.outcome.value, style=self._OUTCOME_STYLES[result.outcome])
            if result.error_message:
                _ = outcome.append(f" ({result.error_message})", style="red")
            table.add_row(
                str(result.job.theme),
                result.job.area.value,
                result.job.locale.code,
                outcome,
                str(result.files_copied),
                format_bytes(result.bytes_copied),
                f"{result.elapsed_seconds:.2f}s",
            )
        return table


__all__ = ["SummaryDisplay", "format_bytes"]
