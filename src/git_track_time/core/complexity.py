"""Change complexity scoring."""

from decimal import Decimal
from typing import Sequence, Tuple

from git_track_time.models.change import ChangeStats

# (exclusive lower bound, multiplier), highest bound first
LINE_THRESHOLDS: Sequence[Tuple[int, Decimal]] = (
    (200, Decimal("2.0")),
    (100, Decimal("1.5")),
    (50, Decimal("1.2")),
)
FILE_THRESHOLDS: Sequence[Tuple[int, Decimal]] = (
    (10, Decimal("1.3")),
    (5, Decimal("1.1")),
)
NEUTRAL = Decimal("1.0")


def _first_above(value: int, thresholds: Sequence[Tuple[int, Decimal]]) -> Decimal:
    for bound, multiplier in thresholds:
        if value > bound:
            return multiplier
    return NEUTRAL


class ComplexityScorer:
    """Turns change statistics into a multiplicative time weight.

    The weight is the product of a line-volume multiplier and a file-spread
    multiplier. It is deliberately left uncapped; bounding happens on the
    final duration.
    """

    def score(self, stats: ChangeStats) -> Decimal:
        """Return the complexity weight (>= 1.0) for ``stats``."""
        base = _first_above(stats.total_lines, LINE_THRESHOLDS)
        spread = _first_above(stats.files_changed, FILE_THRESHOLDS)
        return base * spread
