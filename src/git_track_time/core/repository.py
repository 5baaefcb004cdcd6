"""Read commit history and change statistics from a git repository."""

import re
from pathlib import Path
from typing import Iterator, List, Optional, Union

import git
from git import Repo

from git_track_time.exceptions import (
    AuthorNotFoundError,
    CommitLookupError,
    RepositoryNotFoundError,
    StatsLookupError,
)
from git_track_time.logging_config import get_logger
from git_track_time.models import ChangeStats, Commit

logger = get_logger(__name__)

_FILES_CHANGED = re.compile(r"(\d+) files? changed")
_INSERTIONS = re.compile(r"(\d+) insertions?")
_DELETIONS = re.compile(r"(\d+) deletions?")


def parse_stat_summary(summary: str) -> ChangeStats:
    """Parse the summary line printed at the end of ``git show --stat``.

    ``" 3 files changed, 10 insertions(+), 2 deletions(-)"`` yields
    ``ChangeStats(files_changed=3, lines_added=10, lines_removed=2)``.
    Any count missing from the line falls back to its default.
    """
    values = {}
    for field, pattern in (
        ("files_changed", _FILES_CHANGED),
        ("lines_added", _INSERTIONS),
        ("lines_removed", _DELETIONS),
    ):
        match = pattern.search(summary)
        if match:
            values[field] = int(match.group(1))
    return ChangeStats(**values)


def subject_line(message: Union[str, bytes]) -> str:
    """Return the subject of a commit message the way ``git log %s`` shows it.

    The subject is the first paragraph, with its lines joined by spaces.
    """
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    paragraph = message.strip().split("\n\n", 1)[0]
    return " ".join(line.strip() for line in paragraph.splitlines())


class GitHistory:
    """Commit source and change-stats provider backed by GitPython."""

    def __init__(self, path: Union[str, Path] = "."):
        self.path = Path(path)
        try:
            self.repo = Repo(self.path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RepositoryNotFoundError(str(self.path)) from e

    @property
    def working_dir(self) -> Optional[str]:
        return self.repo.working_tree_dir

    def default_author(self) -> str:
        """Return ``user.email`` from git config, as ``git config`` sees it."""
        with self.repo.config_reader() as reader:
            email = reader.get_value("user", "email", default="")
        if not email:
            raise AuthorNotFoundError()
        return str(email)

    def iter_commits(
        self, author: str, since: str, until: str
    ) -> Iterator[Commit]:
        """Yield commits by ``author`` between ``since`` and ``until``, oldest first."""
        if not self.repo.head.is_valid():
            logger.debug("Repository at %s has no commits yet", self.working_dir)
            return

        try:
            for commit in self.repo.iter_commits(
                author=author, since=since, until=until, reverse=True
            ):
                yield Commit(
                    hexsha=commit.hexsha,
                    timestamp=commit.committed_date,
                    message=subject_line(commit.message),
                )
        except git.exc.GitCommandError as e:
            raise CommitLookupError(author, since, until, str(e.stderr or e).strip()) from e

    def commits(self, author: str, since: str, until: str) -> List[Commit]:
        """List commits by ``author`` between ``since`` and ``until``, oldest first."""
        commits = list(self.iter_commits(author, since, until))
        logger.debug(
            "Found %d commits for %s between %s and %s", len(commits), author, since, until
        )
        return commits

    def get_stats(self, hexsha: str) -> ChangeStats:
        """Return file and line counts for one commit."""
        try:
            output = self.repo.git.show("--stat", "--format=", hexsha)
        except git.exc.GitCommandError as e:
            raise StatsLookupError(hexsha, str(e).strip()) from e

        lines = output.splitlines()
        return parse_stat_summary(lines[-1] if lines else "")
