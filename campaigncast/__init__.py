"""
CampaignCast
============
Deterministic forecasting, risk flags and what-if scenarios for
time-bound fundraising campaigns.
"""

__version__ = "0.1.0"

from . import assessment, datasets, metrics, models, utils
from .campaign import Campaign, CampaignStatus
from .exceptions import CampaignDataWarning, InvalidCampaignWindow
from .models import compute_prediction, compute_what_if
