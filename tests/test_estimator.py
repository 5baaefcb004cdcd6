"""Tests for SessionTimeEstimator."""

from decimal import Decimal

import pytest

from git_track_time.config import TrackingConfig
from git_track_time.core.estimator import SessionTimeEstimator


@pytest.fixture
def estimator():
    return SessionTimeEstimator()


@pytest.fixture
def config():
    return TrackingConfig()


def test_first_commit_uses_default_time(estimator, config):
    assert estimator.estimate(0, 1.0, True, config) == 1800


def test_first_commit_ignores_gap(estimator, config):
    assert estimator.estimate(3000, 1.0, True, config) == 1800


def test_gap_beyond_session_uses_default_time(estimator, config):
    """20000s > 14400s opens a new session priced at 1800s, not at the gap."""
    assert estimator.estimate(20000, 1.0, False, config) == 1800


def test_gap_at_session_limit_continues_session(estimator, config):
    assert estimator.estimate(14400, 1.0, False, config) == 14400


def test_continuation_is_gap_times_weight(estimator, config):
    assert estimator.estimate(3000, 2.0, False, config) == 6000


def test_short_gap_is_raised_to_minimum(estimator, config):
    assert estimator.estimate(100, 1.0, False, config) == 900


def test_long_weighted_gap_is_lowered_to_maximum(estimator, config):
    assert estimator.estimate(14000, Decimal("2.6"), False, config) == 28800


def test_product_is_truncated_not_rounded(estimator, config):
    """1001 x 1.32 = 1321.32 and 1499 x 1.5 = 2248.5 both truncate."""
    assert estimator.estimate(1001, Decimal("1.32"), False, config) == 1321
    assert estimator.estimate(1499, Decimal("1.5"), False, config) == 2248


def test_decimal_weight_avoids_float_drift(estimator, config):
    """1000 x 1.1 x 1.5 is exactly 1650, not 1649."""
    weight = Decimal("1.5") * Decimal("1.1")
    assert estimator.estimate(1000, weight, False, config) == 1650


def test_new_session_weight_applies_to_default(estimator, config):
    assert estimator.estimate(None, Decimal("2.6"), True, config) == 4680


def test_negative_gap_clamps_to_minimum(estimator, config):
    """Out-of-order timestamps are priced as a tiny continuation."""
    assert estimator.estimate(-500, 1.0, False, config) == 900


@pytest.mark.parametrize("is_first", [True, False])
@pytest.mark.parametrize("weight", ["1.0", "1.1", "1.32", "2.0", "2.6"])
@pytest.mark.parametrize("gap", [-100, 0, 1, 899, 900, 3600, 14400, 14401, 10**7])
def test_estimate_always_within_bounds(estimator, config, gap, weight, is_first):
    result = estimator.estimate(gap, Decimal(weight), is_first, config)
    assert config.min_commit_time <= result <= config.max_commit_time


def test_custom_thresholds(estimator):
    config = TrackingConfig(
        max_session_gap=600,
        min_commit_time=60,
        default_commit_time=300,
        max_commit_time=1200,
    )
    assert estimator.estimate(500, 1.0, False, config) == 500
    assert estimator.estimate(601, 1.0, False, config) == 300
    assert estimator.estimate(30, 1.0, False, config) == 60
    assert estimator.estimate(550, 2.6, False, config) == 1200


def test_opens_session(estimator, config):
    assert estimator.opens_session(None, True, config)
    assert estimator.opens_session(10, True, config)
    assert estimator.opens_session(14401, False, config)
    assert not estimator.opens_session(14400, False, config)
