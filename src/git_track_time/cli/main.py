"""Main CLI interface for git-track-time."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from git_track_time import __version__
from git_track_time.cli.report import TextReporter, report_to_dict
from git_track_time.config import TrackingConfig, load_config
from git_track_time.core.processor import CommitStreamProcessor, PrefetchedStatsProvider
from git_track_time.core.repository import GitHistory
from git_track_time.exceptions import GitTrackTimeError
from git_track_time.logging_config import get_logger, setup_logging
from git_track_time.models import EstimationReport


logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def _echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="git-track-time")
@click.argument("start_date", type=click.DateTime(formats=[DATE_FORMAT]))
@click.argument("end_date", type=click.DateTime(formats=[DATE_FORMAT]))
@click.argument("author", required=False)
@click.option(
    "--verbose", "-v", is_flag=True, help="Show detailed analysis including file changes"
)
@click.option("--json", "as_json", is_flag=True, help="Output results in JSON format")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Use custom configuration file (JSON or NAME=value lines)",
)
@click.option(
    "--repo",
    "repo_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Path inside the git repository to analyze",
)
@click.option(
    "--jobs",
    "-j",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Parallel workers for reading commit statistics",
)
@click.option("--debug", is_flag=True, help="Log estimation details to stderr")
def main(
    start_date: datetime,
    end_date: datetime,
    author: Optional[str],
    verbose: bool,
    as_json: bool,
    config_path: Optional[Path],
    repo_path: Path,
    jobs: int,
    debug: bool,
):
    """Estimate time spent on commits between START_DATE and END_DATE.

    Dates use YYYY-MM-DD. AUTHOR defaults to git config user.email.
    """
    setup_logging(debug=debug)
    console = Console(soft_wrap=True, emoji=False)
    err_console = Console(stderr=True, soft_wrap=True)
    since = start_date.strftime(DATE_FORMAT)
    until = end_date.strftime(DATE_FORMAT)

    try:
        config = load_config(config_path) if config_path else TrackingConfig()
        history = GitHistory(repo_path)
        author = author or history.default_author()
        commits = history.commits(author, since, until)

        if not commits:
            if as_json:
                _echo_json(report_to_dict(EstimationReport(), author, since, until))
            else:
                TextReporter(console).no_commits(author, since, until)
            return

        provider = history
        if jobs > 1:
            provider = PrefetchedStatsProvider(history, commits, jobs)
        processor = CommitStreamProcessor(provider, config)

        if as_json:
            report = processor.process(commits)
            _echo_json(report_to_dict(report, author, since, until))
        else:
            reporter = TextReporter(console, verbose=verbose)
            reporter.header(author, since, until)
            report = processor.process(commits, on_estimate=reporter.commit)
            reporter.summary(report, author, since, until, config)
    except GitTrackTimeError as e:
        logger.debug("Run failed", exc_info=True)
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise click.Abort() from e


if __name__ == "__main__":
    main()
