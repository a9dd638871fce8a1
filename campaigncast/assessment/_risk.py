"""
campaigncast.assessment._risk
=============================
Threshold rules that flag campaign risk conditions.

Each rule is evaluated independently, so a campaign that is behind pace,
out of time and short of new donors carries all three factors, always in
the order below.

===================  ======  ===========  =====================================
Factor               Impact  Probability  Fires when
===================  ======  ===========  =====================================
Below Target Pace    high    0.8          efficiency < 0.8
Time Pressure        high    0.9          < 14 days left and progress < 90 %
Donor Acquisition    medium  0.7          donor growth < 1 donor/day
===================  ======  ===========  =====================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..campaign import Campaign
from ..metrics import CurrentMetrics

PACE_EFFICIENCY_THRESHOLD = 0.8
TIME_PRESSURE_DAYS = 14
TIME_PRESSURE_PROGRESS = 90
DONOR_GROWTH_THRESHOLD = 1


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class RiskFactor:
    """A named risk condition with its impact and suggested mitigation."""

    factor: str
    impact: Impact
    probability: float
    description: str
    mitigation: str


BELOW_TARGET_PACE = RiskFactor(
    factor="Below Target Pace",
    impact=Impact.HIGH,
    probability=0.8,
    description="Campaign is significantly behind schedule",
    mitigation="Increase marketing spend or extend timeline",
)

TIME_PRESSURE = RiskFactor(
    factor="Time Pressure",
    impact=Impact.HIGH,
    probability=0.9,
    description="Limited time remaining to reach goal",
    mitigation="Focus on major donors and urgent appeals",
)

DONOR_ACQUISITION = RiskFactor(
    factor="Donor Acquisition",
    impact=Impact.MEDIUM,
    probability=0.7,
    description="Slow donor growth may limit total reach",
    mitigation="Expand outreach channels and referral programs",
)


def assess_risks(metrics: CurrentMetrics, campaign: Campaign) -> list[RiskFactor]:
    """
    Return the risk factors that apply to ``metrics``, in rule order.

    Parameters
    ----------
    metrics : CurrentMetrics
        Metrics computed for ``campaign``.
    campaign : Campaign
        The campaign being assessed. None of the current rules read it
        directly; it is part of the signature so campaign-level rules can be
        added without changing callers.

    Returns
    -------
    list of RiskFactor
        Possibly empty.
    """
    risks = []
    if metrics.efficiency < PACE_EFFICIENCY_THRESHOLD:
        risks.append(BELOW_TARGET_PACE)
    if (
        metrics.days_remaining < TIME_PRESSURE_DAYS
        and metrics.progress_percentage < TIME_PRESSURE_PROGRESS
    ):
        risks.append(TIME_PRESSURE)
    if metrics.donor_growth_rate < DONOR_GROWTH_THRESHOLD:
        risks.append(DONOR_ACQUISITION)
    return risks
