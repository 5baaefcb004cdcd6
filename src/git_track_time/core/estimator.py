"""Session-gap based duration estimate for a single commit."""

from decimal import Decimal
from typing import Optional, Union

from git_track_time.config import TrackingConfig

Weight = Union[Decimal, float, int]


class SessionTimeEstimator:
    """Prices one commit from the gap to its predecessor.

    A commit that continues a session is assumed to represent the work done
    since the previous commit. The first commit, or one arriving after a gap
    longer than ``max_session_gap``, opens a new session and is priced at
    ``default_commit_time`` instead.
    """

    def opens_session(
        self, gap_seconds: Optional[int], is_first: bool, config: TrackingConfig
    ) -> bool:
        """Whether the commit starts a new session."""
        return is_first or gap_seconds is None or gap_seconds > config.max_session_gap

    def estimate(
        self,
        gap_seconds: Optional[int],
        weight: Weight,
        is_first: bool,
        config: TrackingConfig,
    ) -> int:
        """Return the bounded duration in seconds for one commit."""
        if self.opens_session(gap_seconds, is_first, config):
            base_time = config.default_commit_time
        else:
            base_time = gap_seconds

        if not isinstance(weight, Decimal):
            weight = Decimal(str(weight))
        # int() on a Decimal truncates toward zero
        raw_time = int(Decimal(base_time) * weight)

        return max(config.min_commit_time, min(raw_time, config.max_commit_time))
