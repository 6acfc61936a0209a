"""
Technology Forecast — пакетная проекция нескольких метрик

Каждая метрика проецируется независимо через project(); метрики не
взаимодействуют. Порядок ключей результата не несёт смысла; для
детерминированного вывода используется TechnologyForecast.sorted_items().

Immutable Pydantic модели:
- MetricBaseline: (base_value, doubling_period) одной метрики
- TechnologyForecast: результат пакетной проекции
"""

from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from mooreslaw.core.math.projection import (
    DEFAULT_DOUBLING_PERIOD,
    ProjectionConfig,
    project,
    validate_doubling_period,
)


# =============================================================================
# MODELS
# =============================================================================


class MetricBaseline(BaseModel):
    """
    Базовое значение метрики и её собственный период удвоения.

    doubling_period=None → используется период по умолчанию пакета.
    """

    base_value: float = Field(..., allow_inf_nan=False, description="Значение метрики в момент 0")
    doubling_period: Optional[float] = Field(
        None, allow_inf_nan=False, description="Лет на удвоение (None → default)"
    )

    model_config = {"frozen": True}

    @field_validator("doubling_period")
    @classmethod
    def validate_doubling_period_nonzero(cls, v: Optional[float]) -> Optional[float]:
        """Проверка, что явно заданный период не равен нулю"""
        if v is not None and v == 0.0:
            raise ValueError("invalid doubling period: must be non-zero, got 0")
        return v


class TechnologyForecast(BaseModel):
    """
    Результат пакетной проекции метрик.

    Immutable модель (frozen=True). projections содержит ровно те же ключи,
    что и входные базовые метрики.
    """

    elapsed_years: float = Field(..., description="Горизонт проекции (лет)")
    default_period: float = Field(..., description="Период удвоения по умолчанию")
    projections: Dict[str, float] = Field(..., description="Метрика → спроецированное значение")

    model_config = {"frozen": True}

    def sorted_items(self) -> List[Tuple[str, float]]:
        """Пары (метрика, значение), отсортированные по имени метрики."""
        return sorted(self.projections.items())


# =============================================================================
# FORECAST
# =============================================================================


def forecast_batch(
    base_metrics: Mapping[str, float],
    elapsed_years: float,
    per_metric_periods: Optional[Mapping[str, float]] = None,
    default_period: float = DEFAULT_DOUBLING_PERIOD,
) -> Dict[str, float]:
    """
    Независимая проекция каждой метрики.

    Args:
        base_metrics: Метрика → базовое значение
        elapsed_years: Горизонт проекции (лет)
        per_metric_periods: Метрика → собственный период удвоения.
            Ключи, отсутствующие в base_metrics, игнорируются.
        default_period: Период для метрик без собственного периода

    Returns:
        Метрика → спроецированное значение (те же ключи, что base_metrics)

    Raises:
        InvalidPeriod: если default_period или применяемый к метрике период
            равен 0 (default_period проверяется всегда, даже для пустого пакета)

    Examples:
        >>> forecast_batch({"a": 1.0, "b": 10.0}, 2.0, {"b": 1.0})
        {'a': 2.0, 'b': 40.0}
    """
    default_period = validate_doubling_period(default_period)
    overrides = per_metric_periods or {}
    return {
        name: project(base_value, elapsed_years, overrides.get(name, default_period))
        for name, base_value in base_metrics.items()
    }


def forecast_technology(
    baselines: Mapping[str, MetricBaseline],
    elapsed_years: float,
    config: Optional[ProjectionConfig] = None,
) -> TechnologyForecast:
    """
    Пакетная проекция по типизированным базовым метрикам.

    Args:
        baselines: Метрика → MetricBaseline
        elapsed_years: Горизонт проекции (лет)
        config: Конфигурация с периодом по умолчанию (default: ProjectionConfig())

    Returns:
        TechnologyForecast с проекциями всех метрик
    """
    config = config or ProjectionConfig()
    default_period = config.doubling_period

    base_metrics = {name: baseline.base_value for name, baseline in baselines.items()}
    periods = {
        name: baseline.doubling_period
        for name, baseline in baselines.items()
        if baseline.doubling_period is not None
    }

    projections = forecast_batch(base_metrics, elapsed_years, periods, default_period)
    return TechnologyForecast(
        elapsed_years=elapsed_years,
        default_period=default_period,
        projections=projections,
    )
