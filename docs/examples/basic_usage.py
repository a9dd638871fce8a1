"""
=============================
Campaign Forecast Walkthrough
=============================

This example evaluates the demo end-of-year campaign, prints the three
scenario forecasts side by side and compares the preset what-if scenarios.
"""

import pandas as pd

from campaigncast.datasets import InMemoryCampaignSource, load_sample_campaigns
from campaigncast.metrics import success_band
from campaigncast.models import CampaignPredictor, scenario_comparison_frame

now = pd.Timestamp("2024-12-05")
source = InMemoryCampaignSource(load_sample_campaigns())

predictor = CampaignPredictor()
prediction = predictor.predict_for_client(source, "acme", now)

print(f"Campaign: {prediction.campaign.name}")
print(f"Progress: {prediction.metrics.progress_percentage:.1f}%")
print(
    f"Success probability: {prediction.success_probability:.0f}% "
    f"({success_band(prediction.success_probability)})"
)

print("\nFirst week of projections:")
print(scenario_comparison_frame(prediction, n_days=7))

print("\nWhat-if scenarios:")
for scenario, result in predictor.compare_what_if(
    prediction.metrics, prediction.campaign, now=now
):
    print(f"  {scenario.name:<35} {result.projected_total:>10,}  by {result.projected_completion_date}")

for risk in prediction.risk_factors:
    print(f"Risk: {risk.factor} ({risk.impact.value}) - {risk.mitigation}")
for recommendation in prediction.recommendations:
    print(f"Recommendation: {recommendation}")
