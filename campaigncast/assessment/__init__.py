"""
campaigncast.assessment
=======================
Rule-based risk flags and recommendations.
"""

from ._risk import Impact, RiskFactor, assess_risks
from ._recommendations import recommend_actions

__all__ = ["Impact", "RiskFactor", "assess_risks", "recommend_actions"]
