"""Text and JSON rendering of estimation results."""

from typing import Any, Dict

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from git_track_time.config import TrackingConfig
from git_track_time.models import CommitEstimate, EstimationReport, format_duration


def commit_to_dict(estimate: CommitEstimate) -> Dict[str, Any]:
    """JSON object for one commit."""
    return {
        "hash": estimate.hexsha,
        "short_hash": estimate.short_hash,
        "timestamp": estimate.timestamp,
        "datetime": estimate.datetime_str,
        "message": estimate.message,
        "estimated_seconds": estimate.estimated_seconds,
        "files_changed": estimate.stats.files_changed,
        "lines_added": estimate.stats.lines_added,
        "lines_removed": estimate.stats.lines_removed,
    }


def report_to_dict(
    report: EstimationReport, author: str, start_date: str, end_date: str
) -> Dict[str, Any]:
    """JSON document for a run.

    An empty report produces the short form with only the commit list,
    totals and author.
    """
    if report.is_empty:
        return {
            "commits": [],
            "total_time_seconds": 0,
            "total_commits": 0,
            "author": author,
        }

    return {
        "author": author,
        "start_date": start_date,
        "end_date": end_date,
        "total_commits": report.total_commits,
        "total_time_seconds": report.total_seconds,
        "total_time_formatted": report.total_formatted,
        "average_time_per_commit_seconds": report.average_seconds,
        "average_time_per_commit_formatted": report.average_formatted,
        "commits": [commit_to_dict(estimate) for estimate in report.estimates],
    }


class TextReporter:
    """Progressive human-readable output on a rich console."""

    def __init__(self, console: Console, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def no_commits(self, author: str, start_date: str, end_date: str) -> None:
        self.console.print(
            f"[yellow]No commits found for {escape(author)} between "
            f"{start_date} and {end_date}[/yellow]"
        )

    def header(self, author: str, start_date: str, end_date: str) -> None:
        self.console.print(
            f"🔍 Analyzing commits for [bold]{escape(author)}[/bold] "
            f"between {start_date} and {end_date}:"
        )
        self.console.print()

    def commit(self, estimate: CommitEstimate) -> None:
        """Print one commit as soon as it has been estimated."""
        self.console.print(
            f"[magenta]\\[{estimate.datetime_str}][/magenta] "
            f"[cyan]{estimate.short_hash}[/cyan]"
        )
        self.console.print(f"  Message: {escape(estimate.message)}")
        self.console.print(f"  Estimated Time: [green]{estimate.formatted_time}[/green]")

        if self.verbose:
            stats = estimate.stats
            self.console.print(f"  Files Changed: {stats.files_changed}")
            self.console.print(f"  Lines Added: {stats.lines_added}")
            self.console.print(f"  Lines Removed: {stats.lines_removed}")
            self.console.print(f"  Complexity Factor: {estimate.weight:.1f}")

        self.console.print()

    def summary(
        self,
        report: EstimationReport,
        author: str,
        start_date: str,
        end_date: str,
        config: TrackingConfig,
    ) -> None:
        self.console.print(Rule(style="dim"))
        self.console.print("📝 [bold]Summary:[/bold]")
        self.console.print(f"Author: {escape(author)}")
        self.console.print(f"Period: {start_date} to {end_date}")
        self.console.print(f"Total commits: {report.total_commits}")
        self.console.print(f"Total estimated time: {report.total_formatted}")
        self.console.print(f"Average time per commit: {report.average_formatted}")
        self.console.print(Rule(style="dim"))

        if self.verbose:
            self.console.print()
            self.method(config)

    def method(self, config: TrackingConfig) -> None:
        """Describe the estimation rules with the active thresholds."""
        gap = format_duration(config.max_session_gap)
        self.console.print("📊 [bold]Time Estimation Method:[/bold]")
        self.console.print(
            f"• Commits in same session (gap <= {gap}): Use actual time between commits"
        )
        self.console.print(
            "• First commit or new session: Use default "
            f"{format_duration(config.default_commit_time)}"
        )
        self.console.print("• Complexity multiplier based on files changed and lines modified")
        self.console.print(
            f"• Minimum time per commit: {format_duration(config.min_commit_time)}"
        )
        self.console.print(
            f"• Maximum time per commit: {format_duration(config.max_commit_time)}"
        )
