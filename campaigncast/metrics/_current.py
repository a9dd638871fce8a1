"""
campaigncast.metrics._current
=============================
Elapsed-time, pace and velocity metrics for a campaign snapshot.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import pandas as pd

from ..campaign import Campaign
from ..utils._validation import to_naive_timestamp

_ONE_DAY = pd.Timedelta(days=1)

# Donor-growth heuristic: donors above a flat baseline, per elapsed day,
# once the campaign is more than a week old.
DONOR_BASELINE = 50
DONOR_GROWTH_WARMUP_DAYS = 7
DONOR_GROWTH_FALLBACK = 2.0


@dataclass(frozen=True)
class CurrentMetrics:
    """Derived state of a campaign at one evaluation instant.

    Attributes
    ----------
    progress_percentage : float
        ``raised / goal * 100``; 0 when the goal is 0. Not capped.
    days_elapsed : int
        Whole days since the start, rounded up, clamped to
        ``[0, total_days]``.
    days_remaining : int
        ``total_days - days_elapsed``.
    total_days : int
        Campaign length in whole days, rounded up, at least 1.
    daily_velocity : float
        Average amount raised per elapsed day.
    expected_progress : float
        Percentage of the window already elapsed.
    efficiency : float
        ``progress_percentage / expected_progress``; above 1 means ahead of
        pace. 1 before the campaign starts.
    donor_growth_rate : float
        New donors per day above the baseline.
    """

    progress_percentage: float
    days_elapsed: int
    days_remaining: int
    total_days: int
    daily_velocity: float
    expected_progress: float
    efficiency: float
    donor_growth_rate: float


def _ceil_days(delta: pd.Timedelta) -> int:
    return math.ceil(delta / _ONE_DAY)


def compute_current_metrics(campaign: Campaign, now) -> CurrentMetrics:
    """
    Derive :class:`CurrentMetrics` from a campaign at evaluation time ``now``.

    Parameters
    ----------
    campaign : Campaign
        The campaign snapshot.
    now : date-like
        Evaluation instant.

    Returns
    -------
    CurrentMetrics

    Notes
    -----
    Total over any campaign: a reversed or empty window is clamped to one
    day here, and rejected one level up by the predictor.
    """
    now = to_naive_timestamp(now)

    total_days = max(1, _ceil_days(campaign.end_date - campaign.start_date))
    days_elapsed = min(max(0, _ceil_days(now - campaign.start_date)), total_days)
    days_remaining = total_days - days_elapsed

    progress_percentage = (
        campaign.raised / campaign.goal * 100 if campaign.goal > 0 else 0.0
    )
    daily_velocity = campaign.raised / days_elapsed if days_elapsed > 0 else 0.0

    expected_progress = days_elapsed / total_days * 100
    efficiency = (
        progress_percentage / expected_progress if expected_progress > 0 else 1.0
    )

    if days_elapsed > DONOR_GROWTH_WARMUP_DAYS:
        donor_growth_rate = max(0.0, (campaign.donors - DONOR_BASELINE) / days_elapsed)
    else:
        donor_growth_rate = DONOR_GROWTH_FALLBACK

    return CurrentMetrics(
        progress_percentage=progress_percentage,
        days_elapsed=days_elapsed,
        days_remaining=days_remaining,
        total_days=total_days,
        daily_velocity=daily_velocity,
        expected_progress=expected_progress,
        efficiency=efficiency,
        donor_growth_rate=donor_growth_rate,
    )
