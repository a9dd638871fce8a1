"""
campaigncast.datasets._generator
================================
Demo campaigns and a reproducible generator of synthetic campaign snapshots
for developing and testing CampaignCast.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from ..campaign import Campaign, CampaignStatus

CAMPAIGN_COLUMNS = [
    "id",
    "name",
    "client_id",
    "goal",
    "raised",
    "start_date",
    "end_date",
    "donor_count",
    "average_gift",
    "marketing_cost",
    "status",
]


def load_sample_campaigns() -> list:
    """Return the three demo campaigns of the ``acme`` client.

    Examples
    --------
    >>> from campaigncast.datasets import load_sample_campaigns
    >>> [c.name for c in load_sample_campaigns()][0]
    'End of Year Giving Campaign'
    """
    return [
        Campaign(
            id="campaign_1",
            name="End of Year Giving Campaign",
            goal=50_000,
            raised=32_500,
            start_date="2024-11-01",
            end_date="2024-12-31",
            status=CampaignStatus.ACTIVE,
            donor_count=127,
            average_gift=255,
            marketing_cost=2_600,
            client_id="acme",
        ),
        Campaign(
            id="campaign_2",
            name="Spring Education Fund",
            goal=25_000,
            raised=8_500,
            start_date="2024-03-01",
            end_date="2024-05-31",
            status=CampaignStatus.ACTIVE,
            donor_count=45,
            average_gift=189,
            marketing_cost=1_275,
            client_id="acme",
        ),
        Campaign(
            id="campaign_3",
            name="Emergency Relief Fund",
            goal=75_000,
            raised=65_000,
            start_date="2024-10-01",
            end_date="2024-11-15",
            status=CampaignStatus.COMPLETED,
            donor_count=245,
            average_gift=265,
            marketing_cost=1_800,
            client_id="acme",
        ),
    ]


def generate_synthetic_campaigns(
    n_samples: int = 100,
    random_state: Optional[int] = None,
    n_clients: int = 3,
) -> pd.DataFrame:
    """Generate a synthetic campaign DataFrame for modelling and testing.

    Campaigns start during 2024 and run for 14–120 days. Amounts raised are
    drawn as a Beta(2, 2) share of up to 120 % of the goal, so some
    campaigns are ahead of their goal and some far behind. Donor counts
    scale loosely with the amount raised.

    Parameters
    ----------
    n_samples : int, default=100
        Number of campaigns.
    random_state : int or None, default=None
        Seed for the NumPy random-number generator.
    n_clients : int, default=3
        Campaigns are spread over clients ``client_0`` … ``client_{n-1}``.

    Returns
    -------
    df : pd.DataFrame of shape (n_samples, 11)
        Columns ``id, name, client_id, goal, raised, start_date, end_date,
        donor_count, average_gift, marketing_cost, status``.
        ``average_gift`` is NaN for campaigns with no donors. Convert to
        Campaign objects with
        :func:`~campaigncast.datasets.campaigns_from_frame`.

    Examples
    --------
    >>> from campaigncast.datasets import generate_synthetic_campaigns
    >>> generate_synthetic_campaigns(n_samples=20, random_state=0).shape
    (20, 11)
    """
    if n_samples < 0:
        raise ValueError(f"`n_samples` cannot be negative, got {n_samples!r}.")
    if n_clients < 1:
        raise ValueError(f"`n_clients` must be at least 1, got {n_clients!r}.")

    rng = np.random.default_rng(random_state)

    goal = np.round(rng.lognormal(mean=10.5, sigma=0.8, size=n_samples), -2)
    goal = np.maximum(goal, 1_000.0)
    raised = np.round(goal * 1.2 * rng.beta(2.0, 2.0, size=n_samples), 2)

    start_offset = rng.integers(0, 366, size=n_samples)
    duration = rng.integers(14, 121, size=n_samples)
    start_date = pd.Timestamp("2024-01-01") + pd.to_timedelta(start_offset, unit="D")
    end_date = start_date + pd.to_timedelta(duration, unit="D")

    # Roughly one donor per $250 raised, with spread.
    donor_count = rng.poisson(raised / 250.0).astype(np.int64)
    average_gift = np.where(
        donor_count > 0, np.round(raised / np.maximum(donor_count, 1), 2), np.nan
    )
    marketing_cost = np.round(raised * rng.uniform(0.02, 0.12, size=n_samples), 2)

    status = rng.choice(
        [s.value for s in CampaignStatus],
        size=n_samples,
        p=[0.7, 0.15, 0.1, 0.05],
    )
    client = rng.integers(0, n_clients, size=n_samples)

    return pd.DataFrame(
        {
            "id": [f"C{str(i).zfill(5)}" for i in range(1, n_samples + 1)],
            "name": [f"Synthetic Campaign {i}" for i in range(1, n_samples + 1)],
            "client_id": [f"client_{k}" for k in client],
            "goal": goal,
            "raised": raised,
            "start_date": start_date,
            "end_date": end_date,
            "donor_count": donor_count,
            "average_gift": average_gift,
            "marketing_cost": marketing_cost,
            "status": status,
        },
        columns=CAMPAIGN_COLUMNS,
    )
