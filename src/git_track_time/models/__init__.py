"""Data models for git-track-time."""

from .change import ChangeStats
from .commit import Commit
from .estimate import CommitEstimate, EstimationReport, format_duration
from .session import EstimationContext

__all__ = [
    "ChangeStats",
    "Commit",
    "CommitEstimate",
    "EstimationContext",
    "EstimationReport",
    "format_duration",
]
