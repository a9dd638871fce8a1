"""
campaigncast.base
=================
Core abstract base class for CampaignCast estimators.
"""

from abc import ABCMeta, abstractmethod
from numbers import Integral, Real

from sklearn.base import BaseEstimator


class BaseCampaignEstimator(BaseEstimator, metaclass=ABCMeta):
    """
    Base class for all CampaignCast estimators.

    Estimators hold configuration only. Nothing is learned from data, so
    there is no ``fit``; every call to :meth:`predict` is independent.
    """

    def __init__(self, horizon_days: int = 90, growth_cap: float = 1.5):
        """
        Parameters
        ----------
        horizon_days : int, default=90
            Maximum number of daily points in any projected timeline.
        growth_cap : float, default=1.5
            Projected totals are capped at ``goal * growth_cap``.
        """
        self.horizon_days = horizon_days
        self.growth_cap = growth_cap

    def _validate_params(self):
        if (
            not isinstance(self.horizon_days, Integral)
            or isinstance(self.horizon_days, bool)
            or self.horizon_days < 1
        ):
            raise ValueError(
                f"`horizon_days` must be a positive integer, "
                f"got {self.horizon_days!r}."
            )
        if not isinstance(self.growth_cap, Real) or not self.growth_cap >= 1:
            raise ValueError(
                f"`growth_cap` must be a number >= 1, got {self.growth_cap!r}."
            )

    @abstractmethod
    def predict(self, campaign, now):
        """Evaluate ``campaign`` at instant ``now``."""
