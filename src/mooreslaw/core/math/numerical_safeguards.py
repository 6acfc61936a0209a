"""
Numerical Safeguards — проверки входов и результатов

Модуль обеспечивает численную устойчивость формул роста:
- Проверка NaN/Inf на входе (ValueError)
- Epsilon-сравнения float с учётом машинной точности
- Проверка результата на переполнение (ProjectionOverflow)
- Безопасные scale × 2^x и log2(a / b) без промежуточного переполнения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют к вызывающему коду
2. Float сравнения учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Final

from mooreslaw.core.math.errors import ProjectionOverflow

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение является конечным числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к float

    Raises:
        ValueError: Если value NaN/Inf или не является числом
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a real number, got {value!r}")

    value = float(value)
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    return value


def ensure_finite_result(value: float, name: str) -> float:
    """
    Проверка результата вычисления на переполнение.

    Args:
        value: Вычисленное значение
        name: Имя результата (для сообщения об ошибке)

    Returns:
        value если конечное

    Raises:
        ProjectionOverflow: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ProjectionOverflow(f"{name} is not representable as a finite float: {value}")
    return value


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# СТЕПЕНИ И ЛОГАРИФМЫ ДВОЙКИ
# =============================================================================


def scaled_exp2(scale: float, exponent: float, name: str = "scale * 2**exponent") -> float:
    """
    Вычисление scale × 2^exponent без промежуточного переполнения.

    Показатель раскладывается на целую и дробную части:
        scale × 2^exponent = ldexp(scale × 2^frac, whole),  frac ∈ [0, 1)
    ldexp поднимает OverflowError только если переполняется итоговый
    результат; ошибка переводится в ProjectionOverflow. Underflow к 0.0 допустим.

    Examples:
        >>> scaled_exp2(1.0, 10.0)
        1024.0
        >>> scaled_exp2(3.0, -1.0)
        1.5
        >>> scaled_exp2(1e-300, 1000.0) > 1e0
        True
    """
    if math.isinf(exponent):
        if exponent < 0 or scale == 0.0:
            return scale * 0.0
        raise ProjectionOverflow(f"{name} overflows float (exponent={exponent})")

    whole = math.floor(exponent)
    frac = exponent - whole
    try:
        result = math.ldexp(scale * math.pow(2.0, frac), int(whole))
    except OverflowError:
        raise ProjectionOverflow(
            f"{name} overflows float (scale={scale}, exponent={exponent})"
        ) from None
    return ensure_finite_result(result, name)


def log2_ratio(numerator: float, denominator: float) -> float:
    """
    log2(numerator / denominator) для положительных конечных операндов.

    Если отношение переполняется или уходит в subnormal/0.0, используется
    разность логарифмов log2(numerator) - log2(denominator).

    Examples:
        >>> log2_ratio(400.0, 100.0)
        2.0
        >>> log2_ratio(1e300, 1e-300) > 1993.0
        True
    """
    ratio = numerator / denominator
    if is_valid_float(ratio) and ratio >= sys.float_info.min:
        return math.log2(ratio)
    return math.log2(numerator) - math.log2(denominator)
