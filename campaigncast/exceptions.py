"""
campaigncast.exceptions
=======================
Exceptions and warnings raised by CampaignCast.
"""


class InvalidCampaignWindow(ValueError):
    """Raised when a campaign's end date is not strictly after its start date.

    Subclasses ``ValueError`` so callers that already guard campaign input
    with ``except ValueError`` keep working.

    Examples
    --------
    >>> from campaigncast import compute_prediction
    >>> from campaigncast.utils.testing import make_campaign
    >>> c = make_campaign(start_date="2024-12-31", end_date="2024-11-01")
    >>> try:
    ...     compute_prediction(c, "2024-12-05")
    ... except InvalidCampaignWindow:
    ...     print("rejected")
    rejected
    """


class CampaignDataWarning(UserWarning):
    """Warning used to flag campaign data that is valid but suspicious,
    such as forecasting a campaign that is no longer active."""
