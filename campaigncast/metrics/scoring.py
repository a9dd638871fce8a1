"""
campaigncast.metrics.scoring
============================
"""

from __future__ import annotations

from typing import Optional

from ..campaign import Campaign
from ._current import CurrentMetrics

PROBABILITY_FLOOR = 5.0
PROBABILITY_CEILING = 95.0


def success_probability(
    metrics: CurrentMetrics,
    campaign: Campaign,
    total_days: Optional[int] = None,
    days_remaining: Optional[int] = None,
) -> float:
    """
    Weighted heuristic chance (in percent) that the campaign reaches its goal.

    Five capped terms: progress (30 %), velocity against the required daily
    pace (25 %), efficiency (20 %), time left relative to the final 30 % of
    the window (15 %) and donor count against 100 donors (10 %). The sum is
    clamped to ``[5, 95]``.
    """
    if total_days is None:
        total_days = metrics.total_days
    if days_remaining is None:
        days_remaining = metrics.days_remaining

    progress_score = min(metrics.progress_percentage / 100, 1) * 0.3

    required_pace = campaign.goal / total_days if total_days > 0 else 0.0
    if required_pace > 0:
        velocity_score = min(metrics.daily_velocity / required_pace, 2) * 0.25
    else:
        velocity_score = 0.0

    efficiency_score = min(metrics.efficiency, 2) * 0.2

    if days_remaining > 0:
        time_score = min(1, days_remaining / (total_days * 0.3)) * 0.15
    else:
        time_score = 0.0

    donor_score = min(campaign.donors / 100, 1) * 0.1

    raw = (progress_score + velocity_score + efficiency_score + time_score + donor_score) * 100
    return min(PROBABILITY_CEILING, max(PROBABILITY_FLOOR, raw))


def success_band(probability: float) -> str:
    if probability >= 80:
        return "high"
    if probability >= 60:
        return "medium"
    return "low"
