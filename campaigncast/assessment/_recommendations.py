"""
campaigncast.assessment._recommendations
========================================
"""

from __future__ import annotations

from ..campaign import Campaign
from ..metrics import CurrentMetrics

RAISE_GOAL = "Consider increasing goal by 20–30% to maximize impact"
BOOST_OUTREACH = "Boost daily outreach efforts by 50% to get back on track"
GROW_AVERAGE_GIFT = "Focus on increasing average gift size through targeted asks"
ADJUST_STRATEGY = "Consider strategic campaign adjustments or timeline extension"


def recommend_actions(
    metrics: CurrentMetrics,
    campaign: Campaign,
    success_probability: float,
) -> list[str]:
    """
    Rule-based recommendations, in a fixed order.

    1. Well ahead of pace (efficiency > 1.2): raise the goal; otherwise, if
       behind pace (efficiency < 0.8): boost outreach.
    2. Average gift below half of the gift each current donor would need to
       give to reach the goal: grow the average gift. Skipped when either
       average gift or donor count is missing or zero.
    3. Success probability under 60: adjust strategy or extend the timeline.
    """
    recommendations = []

    if metrics.efficiency > 1.2:
        recommendations.append(RAISE_GOAL)
    elif metrics.efficiency < 0.8:
        recommendations.append(BOOST_OUTREACH)

    if campaign.gift and campaign.donors:
        if campaign.gift < campaign.goal / campaign.donors / 2:
            recommendations.append(GROW_AVERAGE_GIFT)

    if success_probability < 60:
        recommendations.append(ADJUST_STRATEGY)

    return recommendations
