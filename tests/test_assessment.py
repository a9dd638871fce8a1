"""
tests/test_assessment.py
"""

import pytest

from campaigncast.assessment import Impact, assess_risks, recommend_actions
from campaigncast.assessment._recommendations import (
    ADJUST_STRATEGY,
    BOOST_OUTREACH,
    GROW_AVERAGE_GIFT,
    RAISE_GOAL,
)
from campaigncast.metrics import CurrentMetrics, compute_current_metrics
from campaigncast.utils.testing import make_campaign


def _metrics(**overrides):
    values = dict(
        progress_percentage=65.0,
        days_elapsed=34,
        days_remaining=26,
        total_days=60,
        daily_velocity=955.88,
        expected_progress=56.67,
        efficiency=1.0,
        donor_growth_rate=2.0,
    )
    values.update(overrides)
    return CurrentMetrics(**values)


# ---------------------------------------------------------------------------
# Risk factors
# ---------------------------------------------------------------------------

def test_healthy_campaign_has_no_risks(campaign, metrics):
    assert assess_risks(metrics, campaign) == []


def test_all_rules_fire_in_order():
    c = make_campaign(raised=5_000, donor_count=10)
    m = compute_current_metrics(c, "2024-12-20")
    risks = assess_risks(m, c)
    assert [r.factor for r in risks] == ["Below Target Pace", "Time Pressure", "Donor Acquisition"]
    assert [r.impact for r in risks] == [Impact.HIGH, Impact.HIGH, Impact.MEDIUM]
    assert [r.probability for r in risks] == [0.8, 0.9, 0.7]


def test_below_target_pace_details():
    (risk,) = assess_risks(_metrics(efficiency=0.79), make_campaign())
    assert risk.factor == "Below Target Pace"
    assert risk.description == "Campaign is significantly behind schedule"
    assert risk.mitigation == "Increase marketing spend or extend timeline"


def test_efficiency_at_threshold_is_not_a_risk():
    assert assess_risks(_metrics(efficiency=0.8), make_campaign()) == []


def test_time_pressure_boundary():
    c = make_campaign()
    at_14 = compute_current_metrics(c, "2024-12-17")
    at_13 = compute_current_metrics(c, "2024-12-18")
    assert at_14.days_remaining == 14
    assert at_13.days_remaining == 13
    assert "Time Pressure" not in [r.factor for r in assess_risks(at_14, c)]
    assert "Time Pressure" in [r.factor for r in assess_risks(at_13, c)]


def test_time_pressure_needs_low_progress():
    risks = assess_risks(_metrics(days_remaining=5, progress_percentage=90.0), make_campaign())
    assert risks == []


def test_donor_acquisition_risk():
    (risk,) = assess_risks(_metrics(donor_growth_rate=0.5), make_campaign())
    assert risk.factor == "Donor Acquisition"
    assert risk.impact == "medium"


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

def test_no_recommendations_for_healthy_campaign(campaign, metrics):
    assert recommend_actions(metrics, campaign, 95.0) == []


def test_well_ahead_suggests_raising_goal():
    assert recommend_actions(_metrics(efficiency=1.21), make_campaign(), 90) == [RAISE_GOAL]


def test_behind_suggests_boosting_outreach():
    assert recommend_actions(_metrics(efficiency=0.5), make_campaign(), 90) == [BOOST_OUTREACH]


@pytest.mark.parametrize("efficiency", [0.8, 1.2])
def test_pace_boundaries_are_silent(efficiency):
    assert recommend_actions(_metrics(efficiency=efficiency), make_campaign(), 90) == []


def test_small_average_gift():
    # 50_000 / 127 / 2 ~= 196.85
    c = make_campaign(average_gift=100)
    assert recommend_actions(_metrics(), c, 90) == [GROW_AVERAGE_GIFT]


@pytest.mark.parametrize(
    "overrides",
    [{"average_gift": None}, {"average_gift": 100, "donor_count": 0}],
)
def test_average_gift_rule_needs_both_fields(overrides):
    assert recommend_actions(_metrics(), make_campaign(**overrides), 90) == []


def test_low_probability_suggests_adjustments():
    assert recommend_actions(_metrics(), make_campaign(), 59.9) == [ADJUST_STRATEGY]


def test_recommendation_order():
    c = make_campaign(average_gift=100)
    assert recommend_actions(_metrics(efficiency=0.3), c, 20) == [
        BOOST_OUTREACH,
        GROW_AVERAGE_GIFT,
        ADJUST_STRATEGY,
    ]
