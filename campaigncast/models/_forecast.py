"""
campaigncast.models._forecast
=============================
Day-by-day projections of a campaign's cumulative total under the three
named scenarios.

Each scenario scales the observed daily velocity twice: once by its
velocity multiplier and once more by its volatility factor. The daily
increment then oscillates by ±10 % along ``sin(0.1 * i)``, a deterministic
wave rather than noise, so identical inputs always give identical
timelines. ``confidence_level`` is a fixed label per scenario, unrelated to
the per-day confidence curve.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..campaign import Campaign
from ..metrics import CurrentMetrics
from ..utils._validation import round_half_up, to_naive_timestamp

DEFAULT_HORIZON_DAYS = 90
DEFAULT_GROWTH_CAP = 1.5

TIMELINE_COLUMNS = ["date", "day", "projected", "cumulative", "confidence"]


@dataclass(frozen=True)
class ScenarioProfile:
    name: str
    velocity_multiplier: float
    volatility_factor: float
    confidence_level: int


SCENARIOS = {
    "conservative": ScenarioProfile("conservative", velocity_multiplier=0.8, volatility_factor=0.8, confidence_level=85),
    "realistic":    ScenarioProfile("realistic",    velocity_multiplier=1.0, volatility_factor=1.0, confidence_level=75),
    "optimistic":   ScenarioProfile("optimistic",   velocity_multiplier=1.3, volatility_factor=1.2, confidence_level=65),
}


@dataclass(frozen=True)
class TimelineDataPoint:
    """One projected day. ``projected`` is that day's increment."""

    date: date
    day: int
    projected: int
    cumulative: int
    confidence: int


@dataclass(frozen=True)
class ForecastResult:
    """A projected campaign outcome and the timeline behind it.

    Attributes
    ----------
    projected_total : int
        Projected final total, capped at ``goal * growth_cap`` and rounded
        half-up.
    projected_completion_date : datetime.date or None
        First timeline date on which the cumulative total reaches the goal,
        else the last timeline date. With no timeline, the campaign end
        date for named scenarios and ``None`` for what-if scenarios.
    confidence_level : int
        Scenario-level confidence label (0–100).
    scenario_label : str
        Scenario name.
    timeline : tuple of TimelineDataPoint
        At most ``horizon_days`` points, one per remaining day.
    """

    projected_total: int
    projected_completion_date: Optional[date]
    confidence_level: int
    scenario_label: str
    timeline: tuple

    def to_frame(self) -> pd.DataFrame:
        """Return the timeline as a DataFrame with one row per day."""
        return pd.DataFrame(
            [asdict(point) for point in self.timeline], columns=TIMELINE_COLUMNS
        )


def _round_half_up_array(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5).astype(np.int64)


def build_timeline(
    now: pd.Timestamp,
    days_elapsed: int,
    raised: float,
    daily_growth: np.ndarray,
    confidence: np.ndarray,
) -> tuple:
    """
    Accumulate daily increments on top of ``raised`` into timeline points.

    Point ``i`` is dated ``now + (i + 1)`` days and numbered
    ``days_elapsed + i + 1``. The running total is summed left to right
    starting from ``raised``, so repeated calls reproduce it bit for bit.
    """
    n = len(daily_growth)
    if n == 0:
        return ()
    cumulative = np.cumsum(np.concatenate([[raised], daily_growth]))[1:]
    offsets = np.arange(1, n + 1)
    dates = (now.normalize() + pd.to_timedelta(offsets, unit="D")).date

    projected = _round_half_up_array(daily_growth)
    cumulative = _round_half_up_array(cumulative)
    confidence = _round_half_up_array(np.asarray(confidence, dtype=float))

    return tuple(
        TimelineDataPoint(
            date=dates[i],
            day=int(days_elapsed + offsets[i]),
            projected=int(projected[i]),
            cumulative=int(cumulative[i]),
            confidence=int(confidence[i]),
        )
        for i in range(n)
    )


def capped_total(raw: float, ceiling: float) -> int:
    """Round ``raw`` half-up, never exceeding ``ceiling`` and never below 0."""
    total = round_half_up(min(ceiling, raw))
    return max(0, min(total, math.floor(ceiling)))


def completion_date(timeline: Sequence[TimelineDataPoint], goal: float, default=None):
    """Date the goal is first reached, else the last projected date, else ``default``."""
    for point in timeline:
        if point.cumulative >= goal:
            return point.date
    if timeline:
        return timeline[-1].date
    return default


def generate_forecast(
    campaign: Campaign,
    metrics: CurrentMetrics,
    scenario: Union[str, ScenarioProfile],
    now,
    *,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    growth_cap: float = DEFAULT_GROWTH_CAP,
) -> ForecastResult:
    """
    Project the campaign forward under one named scenario.

    Parameters
    ----------
    campaign : Campaign
        The campaign snapshot.
    metrics : CurrentMetrics
        Metrics computed for ``campaign`` at ``now``.
    scenario : {"conservative", "realistic", "optimistic"} or ScenarioProfile
        Scenario to project.
    now : date-like
        Evaluation instant; the first timeline point is the day after.
    horizon_days : int, default=90
        Maximum number of timeline points.
    growth_cap : float, default=1.5
        ``projected_total`` never exceeds ``goal * growth_cap``.

    Returns
    -------
    ForecastResult

    Raises
    ------
    ValueError
        If ``scenario`` is not a known scenario name.

    Examples
    --------
    >>> from campaigncast.metrics import compute_current_metrics
    >>> from campaigncast.models import generate_forecast
    >>> from campaigncast.utils.testing import make_campaign
    >>> c = make_campaign()
    >>> m = compute_current_metrics(c, "2024-12-05")
    >>> generate_forecast(c, m, "realistic", "2024-12-05").projected_total
    57353
    """
    if isinstance(scenario, str):
        try:
            profile = SCENARIOS[scenario]
        except KeyError:
            raise ValueError(
                f"Unknown scenario {scenario!r}; expected one of {list(SCENARIOS)}."
            ) from None
    else:
        profile = scenario

    now = to_naive_timestamp(now)
    adjusted_velocity = metrics.daily_velocity * profile.velocity_multiplier
    scaled_velocity = adjusted_velocity * profile.volatility_factor

    projected_total = capped_total(
        campaign.raised + adjusted_velocity * metrics.days_remaining * profile.volatility_factor,
        campaign.goal * growth_cap,
    )

    i = np.arange(min(metrics.days_remaining, horizon_days))
    daily_growth = scaled_velocity * (1 + np.sin(i * 0.1) * 0.1)
    confidence = np.maximum(60, 95 - i * 0.5)

    timeline = build_timeline(
        now, metrics.days_elapsed, campaign.raised, daily_growth, confidence
    )

    return ForecastResult(
        projected_total=projected_total,
        projected_completion_date=completion_date(
            timeline, campaign.goal, default=campaign.end_date.date()
        ),
        confidence_level=profile.confidence_level,
        scenario_label=profile.name,
        timeline=timeline,
    )
