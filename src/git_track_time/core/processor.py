"""Drives the time estimate across an ordered commit stream."""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from git_track_time.config import TrackingConfig
from git_track_time.core.complexity import ComplexityScorer
from git_track_time.core.estimator import SessionTimeEstimator
from git_track_time.logging_config import get_logger
from git_track_time.models import (
    ChangeStats,
    Commit,
    CommitEstimate,
    EstimationContext,
    EstimationReport,
)

logger = get_logger(__name__)


class ChangeStatsProvider(Protocol):
    """Anything that can report change statistics for a commit hash."""

    def get_stats(self, hexsha: str) -> ChangeStats: ...


class PrefetchedStatsProvider:
    """Fetches stats for a known list of commits up front, in parallel.

    Results are keyed by hash and served back in any order. The first lookup
    failure, in commit order, is re-raised from the constructor so nothing is
    estimated from an incomplete set.
    """

    def __init__(
        self, provider: ChangeStatsProvider, commits: Sequence[Commit], jobs: int
    ):
        hashes = [commit.hexsha for commit in commits]
        with ThreadPoolExecutor(max_workers=max(1, jobs)) as executor:
            results = list(executor.map(provider.get_stats, hashes))
        self._stats: Dict[str, ChangeStats] = dict(zip(hashes, results))
        logger.debug("Prefetched stats for %d commits with %d jobs", len(hashes), jobs)

    def get_stats(self, hexsha: str) -> ChangeStats:
        return self._stats[hexsha]


class CommitStreamProcessor:
    """Single ordered pass over commits producing an EstimationReport.

    Each commit is priced against the timestamp of the commit processed
    immediately before it, so the stream must already be ordered oldest
    first. The cursor follows real commit timestamps, never estimated
    durations.
    """

    def __init__(
        self,
        stats_provider: ChangeStatsProvider,
        config: Optional[TrackingConfig] = None,
        scorer: Optional[ComplexityScorer] = None,
        estimator: Optional[SessionTimeEstimator] = None,
    ):
        self.stats_provider = stats_provider
        self.config = config or TrackingConfig()
        self.scorer = scorer or ComplexityScorer()
        self.estimator = estimator or SessionTimeEstimator()

    def step(
        self, context: EstimationContext, commit: Commit
    ) -> Tuple[EstimationContext, CommitEstimate]:
        """Price ``commit`` and return the advanced context with its estimate."""
        stats = self.stats_provider.get_stats(commit.hexsha)
        weight = self.scorer.score(stats)
        gap = context.gap_to(commit.timestamp)

        duration = self.estimator.estimate(gap, weight, context.is_first, self.config)
        logger.debug(
            "%s gap=%s weight=%s new_session=%s -> %ds",
            commit.short_hash,
            gap,
            weight,
            self.estimator.opens_session(gap, context.is_first, self.config),
            duration,
        )

        estimate = CommitEstimate(
            commit=commit, stats=stats, weight=weight, estimated_seconds=duration
        )
        return context.advance(commit.timestamp, duration), estimate

    def process(
        self,
        commits: Iterable[Commit],
        on_estimate: Optional[Callable[[CommitEstimate], None]] = None,
    ) -> EstimationReport:
        """Estimate every commit in order and return the totals.

        Any exception from the stats provider aborts the whole pass.
        """
        context = EstimationContext()
        estimates: List[CommitEstimate] = []

        for commit in commits:
            context, estimate = self.step(context, commit)
            estimates.append(estimate)
            if on_estimate is not None:
                on_estimate(estimate)

        return EstimationReport(
            estimates=estimates,
            total_seconds=context.total_seconds,
            total_commits=context.commit_count,
        )
