"""Rolling estimation state carried across a commit stream."""

from typing import Optional

from pydantic import BaseModel


class EstimationContext(BaseModel):
    """State of a pass over the commit stream after N commits.

    The context is immutable: ``advance`` returns the state for the next
    commit instead of mutating this one.
    """

    previous_timestamp: Optional[int] = None
    total_seconds: int = 0
    commit_count: int = 0

    model_config = {"frozen": True}

    @property
    def is_first(self) -> bool:
        """True until the first commit has been processed."""
        return self.previous_timestamp is None

    def gap_to(self, timestamp: int) -> Optional[int]:
        """Seconds between the previous commit and ``timestamp``."""
        if self.previous_timestamp is None:
            return None
        return timestamp - self.previous_timestamp

    def advance(self, timestamp: int, duration: int) -> "EstimationContext":
        """Return the context after a commit at ``timestamp`` was priced."""
        return EstimationContext(
            previous_timestamp=timestamp,
            total_seconds=self.total_seconds + duration,
            commit_count=self.commit_count + 1,
        )
