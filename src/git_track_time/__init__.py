"""git-track-time - estimate time spent from git commit history."""

__version__ = "0.1.0"
