"""
campaigncast.metrics
====================
Campaign pace metrics and success scoring.
"""

from ._current import CurrentMetrics, compute_current_metrics
from .scoring import success_band, success_probability

__all__ = [
    "CurrentMetrics",
    "compute_current_metrics",
    "success_band",
    "success_probability",
]
