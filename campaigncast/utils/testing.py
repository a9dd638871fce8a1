"""
campaigncast.utils.testing
==========================
"""

from ..campaign import Campaign


def make_campaign(**overrides) -> Campaign:
    """End-of-year campaign (goal 50k, 32.5k raised, Nov 1 – Dec 31 2024)
    with any field replaced through keyword arguments."""
    params = dict(
        id="campaign_1",
        name="End of Year Giving Campaign",
        goal=50_000,
        raised=32_500,
        start_date="2024-11-01",
        end_date="2024-12-31",
        donor_count=127,
        average_gift=255,
        marketing_cost=2_600,
        status="Active",
        client_id="acme",
    )
    params.update(overrides)
    return Campaign(**params)
