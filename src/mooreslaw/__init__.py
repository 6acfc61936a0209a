"""
mooreslaw — Moore's Law growth projections.

Public API:
- project / years_to_reach / effective_period: exponential projection and inverses
- project_count / project_trajectory: integer-count and multi-year variants
- forecast_batch / forecast_technology: independent projection of many metrics
- adjusted_power: bandwidth/multiplier-adjusted inverse logarithmic power
"""

from mooreslaw.core.domain import (
    MetricBaseline,
    TechnologyForecast,
    forecast_batch,
    forecast_technology,
)
from mooreslaw.core.math import (
    DEFAULT_DOUBLING_PERIOD,
    DEFAULT_TIME_CONSTANT,
    DEFAULT_WAVELENGTH,
    DomainError,
    InvalidBandwidth,
    InvalidPeriod,
    InvalidRatio,
    PowerAdjustment,
    ProjectionConfig,
    ProjectionOverflow,
    UndefinedPeriod,
    adjusted_power,
    effective_period,
    project,
    project_count,
    project_trajectory,
    years_to_reach,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DOUBLING_PERIOD",
    "DEFAULT_TIME_CONSTANT",
    "DEFAULT_WAVELENGTH",
    "DomainError",
    "InvalidBandwidth",
    "InvalidPeriod",
    "InvalidRatio",
    "MetricBaseline",
    "PowerAdjustment",
    "ProjectionConfig",
    "ProjectionOverflow",
    "TechnologyForecast",
    "UndefinedPeriod",
    "adjusted_power",
    "effective_period",
    "forecast_batch",
    "forecast_technology",
    "project",
    "project_count",
    "project_trajectory",
    "years_to_reach",
]
