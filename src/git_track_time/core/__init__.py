"""Time estimation core for git-track-time."""

from .complexity import ComplexityScorer
from .estimator import SessionTimeEstimator
from .processor import ChangeStatsProvider, CommitStreamProcessor, PrefetchedStatsProvider
from .repository import GitHistory, parse_stat_summary

__all__ = [
    "ChangeStatsProvider",
    "CommitStreamProcessor",
    "ComplexityScorer",
    "GitHistory",
    "PrefetchedStatsProvider",
    "SessionTimeEstimator",
    "parse_stat_summary",
]
