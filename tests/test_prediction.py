"""
tests/test_prediction.py
========================
End-to-end tests for CampaignPredictor and the module-level entry points.
"""

import math
import warnings

import numpy as np
import pandas as pd
import pytest
from sklearn.base import clone

from campaigncast import (
    CampaignDataWarning,
    InvalidCampaignWindow,
    compute_prediction,
    compute_what_if,
)
from campaigncast.datasets import InMemoryCampaignSource, load_sample_campaigns
from campaigncast.models import CampaignPredictor, WhatIfScenario, scenario_comparison_frame
from campaigncast.utils.testing import make_campaign


# ---------------------------------------------------------------------------
# compute_prediction
# ---------------------------------------------------------------------------

def test_prediction_components(prediction, campaign):
    assert prediction.campaign is campaign
    assert list(prediction.forecasts) == ["conservative", "realistic", "optimistic"]
    assert prediction.realistic is prediction.forecasts["realistic"]
    assert prediction.metrics.days_remaining == 26
    assert prediction.success_probability > 50
    assert prediction.risk_factors == ()
    assert prediction.recommendations == ()


def test_scenario_ordering(prediction):
    assert (
        prediction.optimistic.projected_total
        >= prediction.realistic.projected_total
        >= prediction.conservative.projected_total
    )


def test_idempotent(campaign, now):
    assert compute_prediction(campaign, now) == compute_prediction(campaign, now)


def test_struggling_campaign():
    c = make_campaign(raised=5_000, donor_count=10, average_gift=40)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        p = compute_prediction(c, "2024-12-20")
    assert [r.factor for r in p.risk_factors] == [
        "Below Target Pace",
        "Time Pressure",
        "Donor Acquisition",
    ]
    assert p.success_probability < 60
    assert p.recommendations[0] == "Boost daily outreach efforts by 50% to get back on track"
    assert p.recommendations[-1] == "Consider strategic campaign adjustments or timeline extension"


@pytest.mark.parametrize(
    "start, end",
    [("2024-12-31", "2024-11-01"), ("2024-11-01", "2024-11-01")],
)
def test_invalid_window_rejected(start, end):
    with pytest.raises(InvalidCampaignWindow, match="must be after"):
        compute_prediction(make_campaign(start_date=start, end_date=end), "2024-12-05")


def test_invalid_window_is_a_value_error():
    with pytest.raises(ValueError):
        compute_prediction(make_campaign(end_date="2024-10-01"), "2024-12-05")


def test_zero_goal_is_finite():
    p = compute_prediction(make_campaign(goal=0), "2024-12-05")
    values = [
        p.metrics.progress_percentage,
        p.metrics.efficiency,
        p.success_probability,
        *(f.projected_total for f in p.forecasts.values()),
    ]
    assert np.isfinite(values).all()
    assert all(f.projected_total == 0 for f in p.forecasts.values())


def test_one_day_campaign_is_finite():
    c = make_campaign(start_date="2024-11-01", end_date="2024-11-02", raised=100)
    p = compute_prediction(c, "2024-11-01 12:00")
    assert p.metrics.total_days == 1
    assert math.isfinite(p.success_probability)


def test_warns_for_inactive_campaign():
    with pytest.warns(CampaignDataWarning, match="Completed"):
        compute_prediction(make_campaign(status="Completed"), "2024-12-05")


def test_warns_before_start():
    with pytest.warns(CampaignDataWarning, match="starts on"):
        p = compute_prediction(make_campaign(), "2024-10-15")
    assert p.metrics.days_elapsed == 0


def test_active_campaign_in_window_does_not_warn(campaign, now):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compute_prediction(campaign, now)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def test_default_params():
    assert CampaignPredictor().get_params() == {"growth_cap": 1.5, "horizon_days": 90}


def test_clone_keeps_params(campaign, now):
    predictor = CampaignPredictor(horizon_days=10, growth_cap=1.2)
    cloned = clone(predictor)
    assert cloned.get_params() == predictor.get_params()
    p = cloned.predict(campaign, now)
    assert all(len(f.timeline) == 10 for f in p.forecasts.values())
    assert p.optimistic.projected_total == 60_000


def test_set_params(campaign, now):
    predictor = CampaignPredictor().set_params(horizon_days=5)
    assert len(predictor.predict(campaign, now).realistic.timeline) == 5


@pytest.mark.parametrize(
    "params, match",
    [
        ({"horizon_days": 0}, "horizon_days"),
        ({"horizon_days": 2.5}, "horizon_days"),
        ({"growth_cap": 0.5}, "growth_cap"),
        ({"growth_cap": float("nan")}, "growth_cap"),
    ],
)
def test_invalid_params(params, match, campaign, now):
    with pytest.raises(ValueError, match=match):
        CampaignPredictor(**params).predict(campaign, now)


def test_what_if_uses_predictor_config(metrics, campaign, now):
    predictor = CampaignPredictor(horizon_days=7)
    result = predictor.what_if(metrics, campaign, WhatIfScenario("Baseline"), now)
    assert len(result.timeline) == 7


def test_compute_what_if_matches_predictor(metrics, campaign, now):
    scenario = WhatIfScenario("Boost", {"dailyVelocityMultiplier": 1.5})
    assert compute_what_if(metrics, campaign, scenario, now) == CampaignPredictor().what_if(
        metrics, campaign, scenario, now
    )


def test_compare_what_if(metrics, campaign, now):
    results = CampaignPredictor(growth_cap=1.2).compare_what_if(metrics, campaign, now=now)
    assert len(results) == 4
    assert all(r.projected_total <= 60_000 for _, r in results)


# ---------------------------------------------------------------------------
# Client selection
# ---------------------------------------------------------------------------

@pytest.fixture
def source():
    return InMemoryCampaignSource(load_sample_campaigns())


def test_predict_for_client_picks_first_active(source):
    p = CampaignPredictor().predict_for_client(source, "acme", "2024-12-05")
    assert p.campaign.id == "campaign_1"


def test_predict_for_client_by_id(source):
    p = CampaignPredictor().predict_for_client(
        source, "acme", "2024-05-01", campaign_id="campaign_2"
    )
    assert p.campaign.name == "Spring Education Fund"


def test_predict_for_client_unknown_id_falls_back(source):
    p = CampaignPredictor().predict_for_client(
        source, "acme", "2024-12-05", campaign_id="missing"
    )
    assert p.campaign.id == "campaign_1"


def test_predict_for_client_completed_campaign_warns(source):
    with pytest.warns(CampaignDataWarning):
        p = CampaignPredictor().predict_for_client(
            source, "acme", "2024-11-20", campaign_id="campaign_3"
        )
    assert p.metrics.days_remaining == 0


def test_predict_for_client_without_campaigns(source):
    assert CampaignPredictor().predict_for_client(source, "globex", "2024-12-05") is None


# ---------------------------------------------------------------------------
# scenario_comparison_frame
# ---------------------------------------------------------------------------

def test_scenario_comparison_frame(prediction):
    df = scenario_comparison_frame(prediction)
    assert list(df.columns) == ["date", "conservative", "realistic", "optimistic"]
    assert df.index.name == "day"
    assert len(df) == 26
    assert df.loc[35, "realistic"] == 33_456
    assert (df["optimistic"] >= df["realistic"]).all()
    assert (df["realistic"] >= df["conservative"]).all()


def test_scenario_comparison_frame_head(prediction):
    df = scenario_comparison_frame(prediction, n_days=5)
    assert list(df.index) == [35, 36, 37, 38, 39]
    pd.testing.assert_series_equal(
        df["realistic"],
        prediction.realistic.to_frame().set_index("day")["cumulative"].head(5),
        check_names=False,
    )


def test_scenario_comparison_frame_negative_days(prediction):
    with pytest.raises(ValueError, match="n_days"):
        scenario_comparison_frame(prediction, n_days=-1)
