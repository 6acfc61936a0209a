"""
Adjusted Power — обратная логарифмическая зависимость с поправками

Вторичное семейство формул на той же базе 2^(-log2(ratio) / T):
- Опорная длина волны (wavelength) может быть задана явно или выведена
- Bandwidth сжимает опорную длину волны и растягивает time constant
- Результат масштабируется произвольным числом множителей

ФОРМУЛА:
    w  = wavelength                 (явно)
       | bandwidth × π / 2          (без wavelength, с bandwidth)
       | π                          (без wavelength и bandwidth)
    d' = w / b,  g = b              (с bandwidth b)
    d' = w,      g = 1              (без bandwidth)
    power = 2^(-log2(frequency / d') / (time_constant × g)) × Π scale_factors

    log2(frequency / d') = log2(frequency) - log2(w) + log2(b)
"""

import math
from dataclasses import dataclass
from typing import Final, Optional

from mooreslaw.core.math.errors import InvalidBandwidth, InvalidPeriod, InvalidRatio
from mooreslaw.core.math.numerical_safeguards import (
    ensure_finite_result,
    scaled_exp2,
    validate_finite,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Time constant по умолчанию (лет на удвоение/уполовинивание)
DEFAULT_TIME_CONSTANT: Final[float] = 2.0

# Опорная длина волны, если не задана и bandwidth отсутствует
DEFAULT_WAVELENGTH: Final[float] = math.pi


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PowerAdjustment:
    """Набор поправок для adjusted_power.

    Каждое поле по умолчанию означает "без поправки".
    """

    # Опорная длина волны; None → выводится из bandwidth или π
    wavelength: Optional[float] = None

    # Bandwidth; None → без bandwidth-поправки
    bandwidth: Optional[int] = None

    # Time constant (лет)
    time_constant: float = DEFAULT_TIME_CONSTANT

    # Множители результата, применяются по порядку
    scale_factors: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if self.wavelength is not None:
            wavelength = validate_finite(self.wavelength, "wavelength")
            if wavelength <= 0.0:
                raise InvalidRatio(f"wavelength must be positive, got {wavelength}")

        if self.bandwidth is not None:
            if isinstance(self.bandwidth, bool) or not isinstance(self.bandwidth, int):
                raise InvalidBandwidth(
                    f"bandwidth must be an integer, got {self.bandwidth!r}"
                )
            if self.bandwidth <= 0:
                raise InvalidBandwidth(f"bandwidth must be positive, got {self.bandwidth}")

        time_constant = validate_finite(self.time_constant, "time_constant")
        if time_constant == 0.0:
            raise InvalidPeriod("invalid time constant: must be non-zero, got 0")

        # list → tuple, чтобы сохранить hashable/frozen семантику
        factors = tuple(
            validate_finite(factor, f"scale_factors[{i}]")
            for i, factor in enumerate(self.scale_factors)
        )
        object.__setattr__(self, "scale_factors", factors)

    def reference_wavelength(self) -> float:
        """Опорная длина волны до bandwidth-поправки."""
        if self.wavelength is not None:
            return float(self.wavelength)
        if self.bandwidth is not None:
            return self.bandwidth * math.pi / 2.0
        return DEFAULT_WAVELENGTH


# =============================================================================
# ADJUSTED POWER
# =============================================================================


def adjusted_power(frequency: float, adjustment: Optional[PowerAdjustment] = None) -> float:
    """
    Мощность по обратной логарифмической зависимости с поправками.

    Args:
        frequency: Входная частота (> 0)
        adjustment: Поправки (default: PowerAdjustment(), т.е. w = π, T = 2)

    Returns:
        Значение мощности

    Raises:
        InvalidRatio: если frequency <= 0
        ProjectionOverflow: если результат не помещается во float
        ValueError: если frequency NaN/Inf

    Examples:
        >>> adjusted_power(1.0, PowerAdjustment(wavelength=1.0))
        1.0
        >>> adjusted_power(4.0, PowerAdjustment(wavelength=1.0))
        0.5
        >>> adjusted_power(4.0, PowerAdjustment(wavelength=1.0, scale_factors=(3.0,)))
        1.5
    """
    adjustment = adjustment or PowerAdjustment()

    frequency = validate_finite(frequency, "frequency")
    if frequency <= 0.0:
        raise InvalidRatio(f"frequency must be positive for log2 ratio, got {frequency}")

    # Отношение frequency / d' считается в log-пространстве: d' может быть
    # субнормальным, а отношение выходить за пределы float
    reference_log = math.log2(adjustment.reference_wavelength())
    time_scale = 1.0
    if adjustment.bandwidth is not None:
        reference_log -= math.log2(adjustment.bandwidth)
        time_scale = float(adjustment.bandwidth)

    exponent = -(math.log2(frequency) - reference_log) / (adjustment.time_constant * time_scale)
    power = scaled_exp2(1.0, exponent, "adjusted power")

    for factor in adjustment.scale_factors:
        power *= factor

    return ensure_finite_result(power, "adjusted power")
