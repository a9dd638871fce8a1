"""
campaigncast.datasets._source
=============================
Where campaigns come from. The forecasting core never fetches data; callers
list campaigns through a :class:`CampaignSource` first and pass them in.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Iterable, Optional, Protocol, Sequence, runtime_checkable

import pandas as pd

from ..campaign import Campaign

_CAMEL_CASE_COLUMNS = {
    "startDate": "start_date",
    "endDate": "end_date",
    "donorCount": "donor_count",
    "averageGift": "average_gift",
    "marketingCost": "marketing_cost",
    "clientId": "client_id",
}

_REQUIRED_COLUMNS = {"id", "goal", "raised", "start_date", "end_date"}


@runtime_checkable
class CampaignSource(Protocol):
    """Anything that can list a client's campaigns."""

    def list_campaigns(self, client_id: str) -> Sequence[Campaign]:
        ...


class InMemoryCampaignSource:
    """Serve campaigns from a fixed collection, filtered by ``client_id``.

    Parameters
    ----------
    campaigns : iterable of Campaign
    """

    def __init__(self, campaigns: Iterable[Campaign]):
        self.campaigns = tuple(campaigns)

    def list_campaigns(self, client_id: str) -> list:
        return [c for c in self.campaigns if c.client_id == client_id]

    def __repr__(self):
        return f"InMemoryCampaignSource(n_campaigns={len(self.campaigns)})"


def select_active_campaigns(
    campaigns: Iterable[Campaign], client_id: Optional[str] = None
) -> list:
    """Active campaigns, in input order, optionally restricted to one client."""
    return [
        c for c in campaigns
        if c.is_active and (client_id is None or c.client_id == client_id)
    ]


def campaigns_from_frame(df: pd.DataFrame) -> list:
    """
    Build :class:`~campaigncast.campaign.Campaign` objects from a DataFrame.

    Column names may be snake_case (``start_date``) or the camelCase used by
    the dashboard API (``startDate``). Columns that are not Campaign fields
    are ignored and missing values in optional columns become ``None``.

    Parameters
    ----------
    df : pd.DataFrame
        One row per campaign. Must contain ``id``, ``goal``, ``raised``,
        ``start_date`` and ``end_date``.

    Returns
    -------
    list of Campaign

    Raises
    ------
    ValueError
        If a required column is missing, or a row fails Campaign validation.
    """
    frame = df.rename(columns=_CAMEL_CASE_COLUMNS)
    missing = _REQUIRED_COLUMNS - set(frame.columns)
    if missing:
        raise ValueError(f"df is missing required columns: {sorted(missing)}")

    names = [f.name for f in fields(Campaign) if f.name in frame.columns]
    campaigns = []
    for record in frame[names].to_dict("records"):
        kwargs = {}
        for key, value in record.items():
            if not isinstance(value, str) and pd.isna(value):
                if key in ("status", "name"):
                    continue  # fall back to the Campaign default
                value = None
            kwargs[key] = value
        kwargs["id"] = str(kwargs["id"])
        campaigns.append(Campaign(**kwargs))
    return campaigns
