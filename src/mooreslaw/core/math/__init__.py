"""
Core math modules для mooreslaw

Формулы экспоненциального роста с явной обработкой нарушений domain.
"""

# Domain errors
from mooreslaw.core.math.errors import (
    DomainError,
    InvalidBandwidth,
    InvalidPeriod,
    InvalidRatio,
    ProjectionOverflow,
    UndefinedPeriod,
)

# Numerical Safeguards
from mooreslaw.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ensure_finite_result,
    is_close,
    is_valid_float,
    log2_ratio,
    scaled_exp2,
    validate_finite,
)

# Projection
from mooreslaw.core.math.projection import (
    DEFAULT_DOUBLING_PERIOD,
    ProjectionConfig,
    effective_period,
    project,
    project_count,
    project_trajectory,
    validate_doubling_period,
    years_to_reach,
)

# Adjusted Power
from mooreslaw.core.math.power import (
    DEFAULT_TIME_CONSTANT,
    DEFAULT_WAVELENGTH,
    PowerAdjustment,
    adjusted_power,
)

__all__ = [
    # Errors
    "DomainError",
    "InvalidBandwidth",
    "InvalidPeriod",
    "InvalidRatio",
    "ProjectionOverflow",
    "UndefinedPeriod",
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ensure_finite_result",
    "is_close",
    "is_valid_float",
    "log2_ratio",
    "scaled_exp2",
    "validate_finite",
    # Projection — Constants
    "DEFAULT_DOUBLING_PERIOD",
    # Projection — Types
    "ProjectionConfig",
    # Projection — Functions
    "effective_period",
    "project",
    "project_count",
    "project_trajectory",
    "validate_doubling_period",
    "years_to_reach",
    # Adjusted Power — Constants
    "DEFAULT_TIME_CONSTANT",
    "DEFAULT_WAVELENGTH",
    # Adjusted Power — Types
    "PowerAdjustment",
    # Adjusted Power — Functions
    "adjusted_power",
]
