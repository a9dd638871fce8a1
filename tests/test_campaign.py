"""
tests/test_campaign.py
"""

import dataclasses

import numpy as np
import pandas as pd
import pytest

from campaigncast import Campaign, CampaignStatus
from campaigncast.utils.testing import make_campaign


def test_dates_normalised_to_timestamps():
    c = make_campaign()
    assert c.start_date == pd.Timestamp("2024-11-01")
    assert c.end_date == pd.Timestamp("2024-12-31")


def test_timezone_aware_dates_become_naive_utc():
    c = make_campaign(start_date="2024-11-01T05:00:00-05:00")
    assert c.start_date.tzinfo is None
    assert c.start_date == pd.Timestamp("2024-11-01T10:00:00")


def test_status_coerced_from_string():
    assert make_campaign(status="Paused").status is CampaignStatus.PAUSED
    assert make_campaign(status=CampaignStatus.DRAFT).status is CampaignStatus.DRAFT


def test_unknown_status_rejected():
    with pytest.raises(ValueError, match="status"):
        make_campaign(status="Planned")


@pytest.mark.parametrize("field", ["goal", "raised", "donor_count", "average_gift", "marketing_cost"])
def test_negative_numbers_rejected(field):
    with pytest.raises(ValueError, match="cannot be negative"):
        make_campaign(**{field: -1})


def test_non_finite_goal_rejected():
    with pytest.raises(ValueError, match="finite"):
        make_campaign(goal=np.nan)


def test_missing_optionals_read_as_zero():
    c = Campaign(
        id="x", goal=1_000, raised=10,
        start_date="2024-01-01", end_date="2024-02-01",
        donor_count=None,
    )
    assert c.donors == 0
    assert c.gift == 0.0
    assert c.cost == 0.0
    assert c.is_active


def test_campaign_is_immutable():
    c = make_campaign()
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.raised = 0


def test_reversed_window_is_accepted_at_construction():
    # rejected later, by the predictor
    c = make_campaign(start_date="2024-12-31", end_date="2024-11-01")
    assert c.end_date < c.start_date
