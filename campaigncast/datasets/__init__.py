"""
campaigncast.datasets
=====================
Sample and synthetic campaigns, and the sources campaigns are listed from.
"""

from ._generator import generate_synthetic_campaigns, load_sample_campaigns
from ._source import (
    CampaignSource,
    InMemoryCampaignSource,
    campaigns_from_frame,
    select_active_campaigns,
)

__all__ = [
    "CampaignSource",
    "InMemoryCampaignSource",
    "campaigns_from_frame",
    "generate_synthetic_campaigns",
    "load_sample_campaigns",
    "select_active_campaigns",
]
