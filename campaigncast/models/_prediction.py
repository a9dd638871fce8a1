"""
campaigncast.models._prediction
===============================
One-call evaluation of a campaign: metrics, the three scenario forecasts,
success probability, risks and recommendations.

The pipeline is single-pass and side-effect free. Every call builds a new
:class:`PredictionModel` from its arguments alone, so results can be cached
by ``(campaign.id, now.normalize())`` if a caller wants to, but nothing
here caches.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterable, Optional

import pandas as pd

from ..assessment import assess_risks, recommend_actions
from ..base import BaseCampaignEstimator
from ..campaign import Campaign
from ..datasets import CampaignSource, select_active_campaigns
from ..exceptions import CampaignDataWarning
from ..metrics import CurrentMetrics, compute_current_metrics, success_probability
from ..utils._validation import (
    check_finite_metrics,
    to_naive_timestamp,
    validate_campaign_window,
)
from ._forecast import SCENARIOS, ForecastResult, generate_forecast
from ._what_if import WhatIfScenario, compare_what_if_scenarios, project_what_if


@dataclass(frozen=True)
class PredictionModel:
    """Everything the dashboard shows for one campaign at one instant.

    Attributes
    ----------
    campaign : Campaign
    metrics : CurrentMetrics
    forecasts : dict of str -> ForecastResult
        Keyed ``conservative``, ``realistic``, ``optimistic``, in that order.
    success_probability : float
        In ``[5, 95]``.
    risk_factors : tuple of RiskFactor
    recommendations : tuple of str
    """

    campaign: Campaign
    metrics: CurrentMetrics
    forecasts: dict
    success_probability: float
    risk_factors: tuple
    recommendations: tuple

    @property
    def conservative(self) -> ForecastResult:
        return self.forecasts["conservative"]

    @property
    def realistic(self) -> ForecastResult:
        return self.forecasts["realistic"]

    @property
    def optimistic(self) -> ForecastResult:
        return self.forecasts["optimistic"]


class CampaignPredictor(BaseCampaignEstimator):
    """Forecast a fundraising campaign under named and what-if scenarios.

    Parameters
    ----------
    horizon_days : int, default=90
        Maximum number of daily points in any projected timeline.
    growth_cap : float, default=1.5
        Projected totals are capped at ``goal * growth_cap``.

    Examples
    --------
    >>> from campaigncast.models import CampaignPredictor
    >>> from campaigncast.utils.testing import make_campaign
    >>> model = CampaignPredictor().predict(make_campaign(), "2024-12-05")
    >>> model.metrics.days_remaining
    26
    >>> [r.factor for r in model.risk_factors]
    []
    """

    def predict(self, campaign: Campaign, now) -> PredictionModel:
        """
        Evaluate ``campaign`` at ``now``.

        Parameters
        ----------
        campaign : Campaign
            The campaign snapshot.
        now : date-like
            Evaluation instant.

        Returns
        -------
        PredictionModel

        Raises
        ------
        InvalidCampaignWindow
            If the campaign's end date is not after its start date.
        ValueError
            If the estimator parameters are invalid.

        Warns
        -----
        CampaignDataWarning
            If the campaign is not active, or ``now`` is before its start.
        """
        self._validate_params()
        validate_campaign_window(campaign.start_date, campaign.end_date)
        now = to_naive_timestamp(now)

        if not campaign.is_active:
            warnings.warn(
                f"Forecasting campaign {campaign.id!r} with status "
                f"{campaign.status.value!r}; projections assume it is still raising.",
                CampaignDataWarning,
                stacklevel=2,
            )
        if now < campaign.start_date:
            warnings.warn(
                f"Campaign {campaign.id!r} starts on {campaign.start_date.date()}, "
                f"after the evaluation date {now.date()}; velocity is zero.",
                CampaignDataWarning,
                stacklevel=2,
            )

        metrics = compute_current_metrics(campaign, now)
        forecasts = {
            name: generate_forecast(
                campaign,
                metrics,
                name,
                now,
                horizon_days=self.horizon_days,
                growth_cap=self.growth_cap,
            )
            for name in SCENARIOS
        }
        probability = success_probability(
            metrics, campaign, metrics.total_days, metrics.days_remaining
        )
        risk_factors = assess_risks(metrics, campaign)
        recommendations = recommend_actions(metrics, campaign, probability)

        check_finite_metrics(
            {
                "progress_percentage": metrics.progress_percentage,
                "daily_velocity": metrics.daily_velocity,
                "efficiency": metrics.efficiency,
                "donor_growth_rate": metrics.donor_growth_rate,
                "success_probability": probability,
                **{
                    f"{name}.projected_total": f.projected_total
                    for name, f in forecasts.items()
                },
            }
        )

        return PredictionModel(
            campaign=campaign,
            metrics=metrics,
            forecasts=forecasts,
            success_probability=probability,
            risk_factors=tuple(risk_factors),
            recommendations=tuple(recommendations),
        )

    def what_if(
        self,
        metrics: CurrentMetrics,
        campaign: Campaign,
        scenario: WhatIfScenario,
        now=None,
    ) -> ForecastResult:
        """Project ``campaign`` under a user-defined what-if scenario."""
        self._validate_params()
        return project_what_if(
            metrics,
            campaign,
            scenario,
            now,
            horizon_days=self.horizon_days,
            growth_cap=self.growth_cap,
        )

    def compare_what_if(
        self,
        metrics: CurrentMetrics,
        campaign: Campaign,
        scenarios: Optional[Iterable[WhatIfScenario]] = None,
        now=None,
    ) -> list:
        """Project several what-if scenarios; defaults to the preset ones."""
        self._validate_params()
        return compare_what_if_scenarios(
            metrics,
            campaign,
            scenarios,
            now,
            horizon_days=self.horizon_days,
            growth_cap=self.growth_cap,
        )

    def predict_for_client(
        self,
        source: CampaignSource,
        client_id: str,
        now,
        campaign_id: Optional[str] = None,
    ) -> Optional[PredictionModel]:
        """
        Evaluate the selected campaign of a client.

        Campaigns are listed through ``source``. ``campaign_id`` is used if it
        names one of the client's campaigns; otherwise the client's first
        active campaign is evaluated. Returns ``None`` when there is nothing
        to evaluate.
        """
        campaigns = list(source.list_campaigns(client_id))
        selected = None
        if campaign_id is not None:
            selected = next((c for c in campaigns if c.id == campaign_id), None)
        if selected is None:
            active = select_active_campaigns(campaigns)
            selected = active[0] if active else None
        if selected is None:
            return None
        return self.predict(selected, now)


def compute_prediction(campaign: Campaign, now) -> PredictionModel:
    """Evaluate ``campaign`` at ``now`` with the default configuration.

    See :meth:`CampaignPredictor.predict`.
    """
    return CampaignPredictor().predict(campaign, now)


def compute_what_if(
    metrics: CurrentMetrics,
    campaign: Campaign,
    scenario: WhatIfScenario,
    now=None,
) -> ForecastResult:
    """Project a what-if scenario with the default configuration.

    See :func:`~campaigncast.models.project_what_if`.
    """
    return CampaignPredictor().what_if(metrics, campaign, scenario, now)


def scenario_comparison_frame(prediction: PredictionModel, n_days: int = 30) -> pd.DataFrame:
    """
    Side-by-side cumulative totals of the three scenarios.

    Parameters
    ----------
    prediction : PredictionModel
    n_days : int, default=30
        Number of leading days of the realistic timeline to include.

    Returns
    -------
    pd.DataFrame
        Indexed by campaign ``day``, with a ``date`` column and one int64
        cumulative-total column per scenario. A scenario with no point on a
        given day contributes 0.
    """
    if n_days < 0:
        raise ValueError(f"`n_days` cannot be negative, got {n_days!r}.")
    base = prediction.realistic.to_frame().head(n_days).set_index("day")
    out = base[["date"]].copy()
    for name, forecast in prediction.forecasts.items():
        cumulative = forecast.to_frame().set_index("day")["cumulative"]
        out[name] = cumulative.reindex(out.index).fillna(0).astype("int64")
    return out
