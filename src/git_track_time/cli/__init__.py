"""Command line interface for git-track-time."""
