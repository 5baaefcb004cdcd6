"""Exception hierarchy for git-track-time."""

from typing import Any, Dict, Optional


class GitTrackTimeError(Exception):
    """Base class for all git-track-time errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GitTrackTimeError):
    """Raised when a configuration file or value is invalid."""


class RepositoryError(GitTrackTimeError):
    """Base class for errors talking to the git repository."""


class RepositoryNotFoundError(RepositoryError):
    """Raised when the given path is not inside a git repository."""

    def __init__(self, path: str):
        super().__init__(f"Not in a git repository: {path}", details={"path": path})
        self.path = path


class AuthorNotFoundError(RepositoryError):
    """Raised when no author was given and git config has no user.email."""

    def __init__(self):
        super().__init__(
            "Author email not provided and not found in git config. "
            "Provide it as the third argument or set git config user.email"
        )


class StatsLookupError(RepositoryError):
    """Raised when change statistics cannot be read for a commit."""

    def __init__(self, hexsha: str, reason: str):
        super().__init__(
            f"Cannot read change statistics for commit {hexsha[:8]}: {reason}",
            details={"hexsha": hexsha, "reason": reason},
        )
        self.hexsha = hexsha
        self.reason = reason


class CommitLookupError(RepositoryError):
    """Raised when git rejects the commit history query."""

    def __init__(self, author: str, since: str, until: str, reason: str):
        super().__init__(
            f"Cannot list commits for author '{author}' between {since} and {until}: "
            f"{reason}. Check that the author is a valid email or pattern",
            details={"author": author, "since": since, "until": until, "reason": reason},
        )
        self.author = author
        self.reason = reason
