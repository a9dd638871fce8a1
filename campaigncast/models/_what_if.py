"""
campaigncast.models._what_if
============================
Ad-hoc "what if" projections from user-chosen adjustments.

A what-if projection is deliberately simpler than the named scenarios: the
(optionally scaled) daily velocity is added flat every day, with no
oscillation, and every point carries the same confidence of 70.

Only ``daily_velocity_multiplier`` and ``campaign_extension_days`` feed the
projection today. ``donor_growth_multiplier`` and ``average_gift_multiplier``
are accepted and validated so saved scenarios keep round-tripping, but they
do not change the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterable, Mapping, Optional

import numpy as np
import pandas as pd

from ..campaign import Campaign
from ..metrics import CurrentMetrics
from ..utils._validation import to_naive_timestamp, validate_non_negative
from ._forecast import (
    DEFAULT_GROWTH_CAP,
    DEFAULT_HORIZON_DAYS,
    ForecastResult,
    build_timeline,
    capped_total,
    completion_date,
)

WHAT_IF_CONFIDENCE = 70

# Dashboard payloads use camelCase keys.
_CAMEL_CASE_KEYS = {
    "dailyVelocityMultiplier": "daily_velocity_multiplier",
    "donorGrowthMultiplier": "donor_growth_multiplier",
    "averageGiftMultiplier": "average_gift_multiplier",
    "campaignExtension": "campaign_extension_days",
    "campaignExtensionDays": "campaign_extension_days",
}


@dataclass(frozen=True)
class WhatIfAdjustments:
    """Multipliers and extensions applied in a what-if scenario.

    Parameters
    ----------
    daily_velocity_multiplier : float or None
        Scales the observed daily velocity. ``None`` means 1.
    donor_growth_multiplier : float or None
        Accepted but not used by the projection.
    average_gift_multiplier : float or None
        Accepted but not used by the projection.
    campaign_extension_days : int or None
        Whole days added to the remaining time. ``None`` means 0.

    Raises
    ------
    ValueError
        If any value is negative or not finite, or the extension is not a
        whole number of days.
    """

    daily_velocity_multiplier: Optional[float] = None
    donor_growth_multiplier: Optional[float] = None
    average_gift_multiplier: Optional[float] = None
    campaign_extension_days: Optional[int] = None

    def __post_init__(self):
        for f in fields(self):
            value = validate_non_negative(f.name, getattr(self, f.name), allow_none=True)
            object.__setattr__(self, f.name, value)
        ext = self.campaign_extension_days
        if ext is not None:
            if ext != int(ext):
                raise ValueError(
                    f"`campaign_extension_days` must be a whole number of days, got {ext!r}."
                )
            object.__setattr__(self, "campaign_extension_days", int(ext))

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "WhatIfAdjustments":
        """Build adjustments from a dict with snake_case or camelCase keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise ValueError(
                    f"Unknown what-if adjustment {key!r}; expected one of {sorted(known)}."
                )
            kwargs[name] = value
        return cls(**kwargs)

    @property
    def velocity_multiplier(self) -> float:
        if self.daily_velocity_multiplier is None:
            return 1.0
        return self.daily_velocity_multiplier

    @property
    def extension_days(self) -> int:
        return self.campaign_extension_days or 0


@dataclass(frozen=True)
class WhatIfScenario:
    """A named, user-defined set of adjustments.

    ``adjustments`` may be given as a plain mapping; it is converted with
    :meth:`WhatIfAdjustments.from_mapping`.
    """

    name: str
    adjustments: WhatIfAdjustments = field(default_factory=WhatIfAdjustments)

    def __post_init__(self):
        if isinstance(self.adjustments, Mapping):
            object.__setattr__(
                self, "adjustments", WhatIfAdjustments.from_mapping(self.adjustments)
            )


DEFAULT_WHAT_IF_SCENARIOS = (
    WhatIfScenario("Baseline"),
    WhatIfScenario(
        "Increased Marketing (+20%)",
        WhatIfAdjustments(daily_velocity_multiplier=1.2),
    ),
    WhatIfScenario(
        "Major Donor Push (+50% avg gift)",
        WhatIfAdjustments(average_gift_multiplier=1.5),
    ),
    WhatIfScenario(
        "Campaign Extension (+14 days)",
        WhatIfAdjustments(campaign_extension_days=14),
    ),
)


def project_what_if(
    metrics: CurrentMetrics,
    campaign: Campaign,
    scenario: WhatIfScenario,
    now=None,
    *,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    growth_cap: float = DEFAULT_GROWTH_CAP,
) -> ForecastResult:
    """
    Project the campaign under a what-if scenario.

    Parameters
    ----------
    metrics : CurrentMetrics
        Metrics computed for ``campaign``.
    campaign : Campaign
        The campaign snapshot.
    scenario : WhatIfScenario
        Adjustments to apply.
    now : date-like or None, default=None
        Date the timeline starts after. Defaults to today.
    horizon_days : int, default=90
        Maximum number of timeline points.
    growth_cap : float, default=1.5
        ``projected_total`` never exceeds ``goal * growth_cap``.

    Returns
    -------
    ForecastResult
        ``projected_completion_date`` is ``None`` when there is no timeline.
    """
    now = (
        to_naive_timestamp(now)
        if now is not None
        else pd.Timestamp.today().normalize()
    )
    adjustments = scenario.adjustments

    adjusted_velocity = metrics.daily_velocity * adjustments.velocity_multiplier
    adjusted_days_remaining = metrics.days_remaining + adjustments.extension_days

    projected_total = capped_total(
        campaign.raised + adjusted_velocity * adjusted_days_remaining,
        campaign.goal * growth_cap,
    )

    n = min(adjusted_days_remaining, horizon_days)
    timeline = build_timeline(
        now,
        metrics.days_elapsed,
        campaign.raised,
        np.full(n, adjusted_velocity, dtype=float),
        np.full(n, WHAT_IF_CONFIDENCE, dtype=float),
    )

    return ForecastResult(
        projected_total=projected_total,
        projected_completion_date=completion_date(timeline, campaign.goal),
        confidence_level=WHAT_IF_CONFIDENCE,
        scenario_label=scenario.name,
        timeline=timeline,
    )


def compare_what_if_scenarios(
    metrics: CurrentMetrics,
    campaign: Campaign,
    scenarios: Optional[Iterable[WhatIfScenario]] = None,
    now=None,
    **kwargs,
) -> list:
    """Project each scenario in turn; returns ``(scenario, result)`` pairs.

    ``scenarios`` defaults to :data:`DEFAULT_WHAT_IF_SCENARIOS`. Extra
    keyword arguments are passed on to :func:`project_what_if`.
    """
    if scenarios is None:
        scenarios = DEFAULT_WHAT_IF_SCENARIOS
    if now is None:
        now = pd.Timestamp.today().normalize()
    return [
        (scenario, project_what_if(metrics, campaign, scenario, now, **kwargs))
        for scenario in scenarios
    ]
