"""
Domain models and value objects.

Contains the batch forecast models: MetricBaseline, TechnologyForecast.
"""

from mooreslaw.core.domain.forecast import (
    MetricBaseline,
    TechnologyForecast,
    forecast_batch,
    forecast_technology,
)

__all__ = [
    "MetricBaseline",
    "TechnologyForecast",
    "forecast_batch",
    "forecast_technology",
]
