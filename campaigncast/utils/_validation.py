"""
campaigncast.utils._validation
==============================
Shared validation logic for CampaignCast.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from ..exceptions import InvalidCampaignWindow


def validate_non_negative(name: str, value, allow_none: bool = False):
    """
    Validate that a numeric campaign field is finite and non-negative.

    Parameters
    ----------
    name : str
        Field name, used in the error message.
    value : float or None
        Value to check.
    allow_none : bool, default=False
        Whether ``None`` is an acceptable (missing) value.

    Returns
    -------
    value : float or None
        The validated value as a float, or ``None`` if missing and allowed.

    Raises
    ------
    ValueError
        If value is missing when not allowed, not finite, or negative.
    """
    if value is None:
        if allow_none:
            return None
        raise ValueError(f"`{name}` is required.")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"`{name}` must be finite, got {value!r}.")
    if value < 0:
        raise ValueError(f"`{name}` cannot be negative, got {value!r}.")
    return value


def to_naive_timestamp(value) -> pd.Timestamp:
    """Coerce a date-like value to a timezone-naive ``pd.Timestamp``.

    Timezone-aware input is converted to UTC before the zone is dropped so
    that campaign dates and evaluation instants compare on one clock.
    """
    ts = pd.Timestamp(value)
    if ts is pd.NaT:
        raise ValueError(f"Expected a date, got {value!r}.")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def validate_campaign_window(start_date, end_date) -> None:
    """
    Raise :class:`~campaigncast.exceptions.InvalidCampaignWindow` unless
    ``end_date`` is strictly after ``start_date``.
    """
    start = to_naive_timestamp(start_date)
    end = to_naive_timestamp(end_date)
    if end <= start:
        raise InvalidCampaignWindow(
            f"Campaign end date ({end.isoformat()}) must be after its "
            f"start date ({start.isoformat()})."
        )


def check_finite_metrics(values: dict) -> None:
    """Raise ``ValueError`` naming every entry of ``values`` that is NaN or infinite."""
    bad = [
        name for name, v in values.items()
        if not np.isfinite(np.asarray(v, dtype=float)).all()
    ]
    if bad:
        raise ValueError(f"Non-finite values computed for {bad!r}.")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards +inf.

    Dashboard figures have always been rounded this way (94.5 -> 95,
    -0.5 -> 0), which differs from Python's banker's rounding.
    """
    return int(math.floor(value + 0.5))
