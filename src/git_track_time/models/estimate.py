"""Per-commit estimates and the aggregate report."""

from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel

from .change import ChangeStats
from .commit import Commit


def format_duration(seconds: int, padded: bool = False) -> str:
    """Render seconds as hours and minutes, e.g. ``2h 5m`` or ``02h 05m``."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if padded:
        return f"{hours:02d}h {minutes:02d}m"
    return f"{hours}h {minutes}m"


class CommitEstimate(BaseModel):
    """Estimated time spent on one commit."""

    commit: Commit
    stats: ChangeStats
    weight: Decimal
    estimated_seconds: int

    model_config = {"frozen": True}

    @property
    def hexsha(self) -> str:
        return self.commit.hexsha

    @property
    def short_hash(self) -> str:
        return self.commit.short_hash

    @property
    def timestamp(self) -> int:
        return self.commit.timestamp

    @property
    def message(self) -> str:
        return self.commit.message

    @property
    def datetime_str(self) -> str:
        """Commit time in local time as ``YYYY-MM-DD HH:MM:SS``."""
        return datetime.fromtimestamp(self.commit.timestamp).strftime(
            "%Y-%m-%d %H:%M:%S"
        )

    @property
    def formatted_time(self) -> str:
        return format_duration(self.estimated_seconds, padded=True)


class EstimationReport(BaseModel):
    """Ordered estimates for a commit stream plus its totals."""

    estimates: List[CommitEstimate] = []
    total_seconds: int = 0
    total_commits: int = 0

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return self.total_commits == 0

    @property
    def average_seconds(self) -> int:
        """Average seconds per commit, truncated. Zero for an empty report."""
        if self.total_commits == 0:
            return 0
        return self.total_seconds // self.total_commits

    @property
    def total_formatted(self) -> str:
        return format_duration(self.total_seconds)

    @property
    def average_formatted(self) -> str:
        return format_duration(self.average_seconds)
