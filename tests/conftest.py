"""
Shared pytest fixtures.
"""

import pandas as pd
import pytest

from campaigncast.metrics import compute_current_metrics
from campaigncast.models import compute_prediction
from campaigncast.utils.testing import make_campaign


@pytest.fixture(scope="session")
def now():
    return pd.Timestamp("2024-12-05")


@pytest.fixture(scope="session")
def campaign():
    return make_campaign()


@pytest.fixture(scope="session")
def metrics(campaign, now):
    return compute_current_metrics(campaign, now)


@pytest.fixture(scope="session")
def prediction(campaign, now):
    return compute_prediction(campaign, now)
