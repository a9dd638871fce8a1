"""
campaigncast.campaign
=====================
The read-only campaign snapshot every forecast starts from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pandas as pd

from .utils._validation import to_naive_timestamp, validate_non_negative


class CampaignStatus(str, Enum):
    """Lifecycle status of a fundraising campaign."""

    ACTIVE = "Active"
    COMPLETED = "Completed"
    PAUSED = "Paused"
    DRAFT = "Draft"


@dataclass(frozen=True)
class Campaign:
    """A time-bound fundraising campaign as seen at one point in time.

    Parameters
    ----------
    id : str
        Campaign identifier.
    goal : float
        Fundraising goal. Zero is tolerated (progress then reads as 0 %).
    raised : float
        Amount raised so far.
    start_date, end_date : date-like
        Campaign window. Anything ``pd.Timestamp`` accepts; stored as a
        timezone-naive ``pd.Timestamp``.
    donor_count : int, default=0
        Donors so far. ``None`` is read as 0.
    average_gift : float or None, default=None
        Average gift size, if tracked.
    marketing_cost : float or None, default=None
        Marketing spend, if tracked.
    status : CampaignStatus or str, default=CampaignStatus.ACTIVE
        Lifecycle status; strings such as ``"Active"`` are coerced.
    name : str, default=""
        Display name.
    client_id : str or None, default=None
        Owning client, used when listing a client's campaigns.

    Raises
    ------
    ValueError
        If a monetary or count field is negative or not finite, or the
        status is unknown.

    Notes
    -----
    The window is *not* validated here; a reversed window is rejected by
    :class:`~campaigncast.models.CampaignPredictor` with
    :class:`~campaigncast.exceptions.InvalidCampaignWindow`.
    """

    id: str
    goal: float
    raised: float
    start_date: pd.Timestamp
    end_date: pd.Timestamp
    donor_count: int | None = 0
    average_gift: float | None = None
    marketing_cost: float | None = None
    status: CampaignStatus = CampaignStatus.ACTIVE
    name: str = ""
    client_id: str | None = None

    def __post_init__(self):
        set_ = object.__setattr__
        set_(self, "goal", validate_non_negative("goal", self.goal))
        set_(self, "raised", validate_non_negative("raised", self.raised))
        set_(self, "start_date", to_naive_timestamp(self.start_date))
        set_(self, "end_date", to_naive_timestamp(self.end_date))
        donors = validate_non_negative("donor_count", self.donor_count, allow_none=True)
        set_(self, "donor_count", None if donors is None else int(donors))
        for field_name in ("average_gift", "marketing_cost"):
            set_(
                self,
                field_name,
                validate_non_negative(field_name, getattr(self, field_name), allow_none=True),
            )
        try:
            set_(self, "status", CampaignStatus(self.status))
        except ValueError:
            valid = [s.value for s in CampaignStatus]
            raise ValueError(
                f"`status` must be one of {valid}, got {self.status!r}."
            ) from None

    @property
    def donors(self) -> int:
        return self.donor_count or 0

    @property
    def gift(self) -> float:
        return self.average_gift or 0.0

    @property
    def cost(self) -> float:
        return self.marketing_cost or 0.0

    @property
    def is_active(self) -> bool:
        return self.status is CampaignStatus.ACTIVE
