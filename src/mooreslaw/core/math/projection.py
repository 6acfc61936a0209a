"""
Projection — экспоненциальный рост по закону Мура

Модуль связывает три величины: базовое значение метрики, прошедшее время
и период удвоения. Прямая задача: проекция значения. Обратные задачи:
время достижения цели и эффективный период удвоения по двум наблюдениям.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. doubling_period == 0 → InvalidPeriod (никогда не Inf/NaN)
2. Неположительные значения под log2 → InvalidRatio
3. current ≈ base при калибровке периода → UndefinedPeriod
4. Переполнение результата → ProjectionOverflow (промежуточные 2^x и
   target / base не переполняются: ldexp и разность логарифмов)
5. Все функции чистые и детерминированные

ФОРМУЛЫ:
    value(t)  = base × 2^(t / T)
    t(target) = log2(target / base) × T
    T(obs)    = t / log2(current / base)
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from mooreslaw.core.math.errors import (
    InvalidPeriod,
    InvalidRatio,
    UndefinedPeriod,
)
from mooreslaw.core.math.numerical_safeguards import (
    ensure_finite_result,
    is_close,
    log2_ratio,
    scaled_exp2,
    validate_finite,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Классический период закона Мура (лет на удвоение)
DEFAULT_DOUBLING_PERIOD: Final[float] = 2.0


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ProjectionConfig:
    """Конфигурация проекции.

    Явная замена значения по умолчанию для doubling_period.
    Отрицательный период означает экспоненциальный спад (halving).
    """

    # Лет на одно удвоение метрики
    doubling_period: float = DEFAULT_DOUBLING_PERIOD

    def __post_init__(self) -> None:
        validate_doubling_period(self.doubling_period)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_doubling_period(doubling_period: float) -> float:
    """
    Проверка периода удвоения до вычисления.

    Raises:
        InvalidPeriod: если doubling_period == 0
        ValueError: если doubling_period NaN/Inf
    """
    doubling_period = validate_finite(doubling_period, "doubling_period")
    if doubling_period == 0.0:
        raise InvalidPeriod("invalid doubling period: must be non-zero, got 0")
    return doubling_period


def _validate_ratio_operand(value: float, name: str) -> float:
    value = validate_finite(value, name)
    if value <= 0.0:
        raise InvalidRatio(f"{name} must be positive for log2 ratio, got {value}")
    return value


# =============================================================================
# ПРЯМАЯ ЗАДАЧА
# =============================================================================


def project(base_value: float, elapsed_years: float, doubling_period: float) -> float:
    """
    Проекция значения метрики через elapsed_years лет.

    value = base × 2^(elapsed_years / doubling_period)

    Args:
        base_value: Значение метрики в момент 0 (любое вещественное)
        elapsed_years: Прошедшее время (отрицательное → проекция назад)
        doubling_period: Лет на удвоение (≠ 0)

    Returns:
        Спроецированное значение

    Raises:
        InvalidPeriod: если doubling_period == 0
        ProjectionOverflow: если результат не помещается во float
        ValueError: если входы содержат NaN/Inf

    Examples:
        >>> project(100.0, 4.0, 2.0)
        400.0
        >>> project(100.0, 0.0, 2.0)
        100.0
        >>> project(100.0, -2.0, 2.0)
        50.0
    """
    base_value = validate_finite(base_value, "base_value")
    elapsed_years = validate_finite(elapsed_years, "elapsed_years")
    doubling_period = validate_doubling_period(doubling_period)

    return scaled_exp2(base_value, elapsed_years / doubling_period, "projected value")


def project_count(
    initial_count: int,
    elapsed_years: float,
    doubling_period: float = DEFAULT_DOUBLING_PERIOD,
) -> int:
    """
    Проекция целочисленного счётчика (например, числа транзисторов).

    Вычисление выполняется во float, затем результат усекается к нулю.
    Для больших проекций результат приближённый (точность float).

    Examples:
        >>> project_count(2300, 54)
        308700774400
        >>> project_count(3, 1, 2)
        4
    """
    return int(project(initial_count, elapsed_years, doubling_period))


def project_trajectory(
    base_value: float,
    years: Iterable[float],
    doubling_period: float,
) -> list[float]:
    """
    Траектория метрики: по одной проекции на каждый запрошенный год.

    Args:
        base_value: Значение метрики в момент 0
        years: Моменты времени (порядок сохраняется)
        doubling_period: Лет на удвоение

    Returns:
        Список значений той же длины, что years

    Examples:
        >>> project_trajectory(1.0, [0, 2, 4], 2.0)
        [1.0, 2.0, 4.0]
    """
    doubling_period = validate_doubling_period(doubling_period)
    return [project(base_value, t, doubling_period) for t in years]


# =============================================================================
# ОБРАТНЫЕ ЗАДАЧИ
# =============================================================================


def years_to_reach(base_value: float, target_value: float, doubling_period: float) -> float:
    """
    Время, необходимое для роста от base_value до target_value.

    t = log2(target / base) × doubling_period

    Отрицательный результат означает, что цель достигнута в прошлом.
    Отношение считается через log2_ratio, поэтому экстремальные
    по порядку величины пары (1e-300 → 1e300) дают конечный результат.

    Raises:
        InvalidRatio: если base_value <= 0 или target_value <= 0
        InvalidPeriod: если doubling_period == 0
        ProjectionOverflow: если результат не помещается во float

    Examples:
        >>> years_to_reach(100.0, 400.0, 2.0)
        4.0
        >>> years_to_reach(100.0, 50.0, 2.0)
        -2.0
    """
    base_value = _validate_ratio_operand(base_value, "base_value")
    target_value = _validate_ratio_operand(target_value, "target_value")
    doubling_period = validate_doubling_period(doubling_period)

    years = log2_ratio(target_value, base_value) * doubling_period
    return ensure_finite_result(years, "years to reach")


def effective_period(base_value: float, current_value: float, elapsed_years: float) -> float:
    """
    Эффективный период удвоения по двум наблюдениям.

    T = elapsed_years / log2(current / base)

    Используется для калибровки модели по историческим данным:
    project(base, elapsed_years, T) == current.

    current ≈ base (относительная разница в пределах EPS_FLOAT_COMPARE_REL)
    считается отсутствием изменения: log2 отношения неотличим от шума.

    Raises:
        InvalidRatio: если base_value <= 0 или current_value <= 0
        UndefinedPeriod: если current_value ≈ base_value (нет изменения),
            elapsed_years == 0 или период не представим (0.0)
        ProjectionOverflow: если период не помещается во float

    Examples:
        >>> effective_period(100.0, 400.0, 4.0)
        2.0
        >>> effective_period(100.0, 50.0, 3.0)
        -3.0
    """
    base_value = _validate_ratio_operand(base_value, "base_value")
    current_value = _validate_ratio_operand(current_value, "current_value")
    elapsed_years = validate_finite(elapsed_years, "elapsed_years")

    # abs_tol=0: крошечные, но различные значения (1e-15 → 2e-15) остаются изменением
    if is_close(current_value, base_value, abs_tol=0.0):
        raise UndefinedPeriod(
            f"no observed change, period undefined "
            f"(base_value={base_value}, current_value={current_value})"
        )
    if elapsed_years == 0.0:
        raise UndefinedPeriod("no elapsed time, period undefined (elapsed_years=0)")

    period = ensure_finite_result(
        elapsed_years / log2_ratio(current_value, base_value), "effective period"
    )
    if period == 0.0:
        raise UndefinedPeriod(
            f"period underflows to zero (elapsed_years={elapsed_years}, "
            f"base_value={base_value}, current_value={current_value})"
        )
    return period
