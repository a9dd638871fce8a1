"""
campaigncast.utils
==================
Validation and rounding helpers shared across CampaignCast.
"""

from ._validation import (
    check_finite_metrics,
    round_half_up,
    to_naive_timestamp,
    validate_campaign_window,
    validate_non_negative,
)

__all__ = [
    "check_finite_metrics",
    "round_half_up",
    "to_naive_timestamp",
    "validate_campaign_window",
    "validate_non_negative",
]
