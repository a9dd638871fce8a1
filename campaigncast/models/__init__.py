"""
campaigncast.models
===================
Scenario forecasts, what-if projections and the campaign predictor.
"""

from ._forecast import (
    SCENARIOS,
    ForecastResult,
    ScenarioProfile,
    TimelineDataPoint,
    generate_forecast,
)
from ._what_if import (
    DEFAULT_WHAT_IF_SCENARIOS,
    WhatIfAdjustments,
    WhatIfScenario,
    compare_what_if_scenarios,
    project_what_if,
)
from ._prediction import (
    CampaignPredictor,
    PredictionModel,
    compute_prediction,
    compute_what_if,
    scenario_comparison_frame,
)

__all__ = [
    "SCENARIOS",
    "DEFAULT_WHAT_IF_SCENARIOS",
    "CampaignPredictor",
    "ForecastResult",
    "PredictionModel",
    "ScenarioProfile",
    "TimelineDataPoint",
    "WhatIfAdjustments",
    "WhatIfScenario",
    "compare_what_if_scenarios",
    "compute_prediction",
    "compute_what_if",
    "generate_forecast",
    "project_what_if",
    "scenario_comparison_frame",
]
