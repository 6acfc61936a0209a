"""
Тесты для Projection — экспоненциальный рост по закону Мура

Проверяемые инварианты:
1. Round-trip: years_to_reach(b, project(b, y, p), p) ≈ y
2. Обратная согласованность: project(b, y, effective_period(b, c, y)) ≈ c
3. Монотонность project по времени при p > 0
4. Тождество в нуле: project(b, 0, p) == b
5. InvalidPeriod / InvalidRatio / UndefinedPeriod вместо Inf/NaN
6. Устойчивость к переполнениям: конечный результат не зависит от
   переполнения промежуточных 2^x и target / base
"""

import dataclasses
import math

import pytest

from mooreslaw.core.math.errors import (
    DomainError,
    InvalidPeriod,
    InvalidRatio,
    ProjectionOverflow,
    UndefinedPeriod,
)
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


ROUND_TRIP_CASES = [
    (2300.0, 54.0, 2.0),
    (1.5, -7.3, 3.1),
    (1e-3, 12.0, -1.5),
    (100.0, 0.0, 2.0),
    (8.0, 0.25, 0.5),
]


# =============================================================================
# ТЕСТЫ: project
# =============================================================================


class TestProject:
    """Тесты project: прямая проекция."""

    def test_intel_4004_reference(self):
        """2300 транзисторов через 54 года при T=2 → 2300 × 2^27."""
        result = project(2300, 54, 2)
        assert result == 2300 * 2**27
        assert result == pytest.approx(3.09e11, rel=1e-2)

    def test_doubling_and_halving(self):
        """Одно удвоение и одно уполовинивание."""
        assert project(100.0, 2.0, 2.0) == 200.0
        assert project(100.0, -2.0, 2.0) == 50.0

    def test_negative_period_decays(self):
        """Отрицательный период означает спад."""
        assert project(100.0, 2.0, -2.0) == 50.0

    @pytest.mark.parametrize("base", [2300.0, 1e-6, -5.0, 0.0])
    @pytest.mark.parametrize("period", [2.0, -1.5, 0.25])
    def test_identity_at_zero(self, base, period):
        """project(b, 0, p) == b."""
        assert project(base, 0.0, period) == base

    def test_monotonic_in_years(self):
        """При b > 0 и p > 0 проекция строго возрастает по времени."""
        years = [-10.0, -1.0, -0.01, 0.0, 0.01, 1.0, 10.0, 54.0]
        values = [project(2300.0, t, 2.0) for t in years]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_zero_period_rejected(self):
        """project(100, 5, 0) → InvalidPeriod, а не Infinity."""
        with pytest.raises(InvalidPeriod, match="invalid doubling period"):
            project(100, 5, 0)

    def test_zero_period_is_domain_error(self):
        """InvalidPeriod является DomainError и ValueError."""
        with pytest.raises(DomainError):
            project(100.0, 5.0, 0.0)
        with pytest.raises(ValueError):
            project(100.0, 5.0, 0.0)

    def test_nan_inf_rejected(self):
        """NaN/Inf на входе отвергаются."""
        with pytest.raises(ValueError, match="NaN/Inf"):
            project(float('nan'), 1.0, 2.0)
        with pytest.raises(ValueError, match="NaN/Inf"):
            project(1.0, float('inf'), 2.0)
        with pytest.raises(ValueError, match="NaN/Inf"):
            project(1.0, 1.0, float('-inf'))

    def test_non_numeric_rejected(self):
        """Строки и bool не принимаются как числа."""
        with pytest.raises(ValueError, match="real number"):
            project("100", 1.0, 2.0)
        with pytest.raises(ValueError, match="real number"):
            project(100.0, True, 2.0)

    def test_exponent_overflow(self):
        """Переполнение 2^x → ProjectionOverflow."""
        with pytest.raises(ProjectionOverflow):
            project(1.0, 5000.0, 1.0)

    def test_product_overflow(self):
        """Переполнение base × 2^x → ProjectionOverflow."""
        with pytest.raises(ProjectionOverflow):
            project(1e300, 100.0, 1.0)

    def test_tiny_base_large_exponent(self):
        """2^2000 переполняется, но 1e-300 × 2^2000 ≈ 1.15e302 конечно."""
        result = project(1e-300, 2000.0, 1.0)
        assert result == math.ldexp(1e-300, 2000)
        assert result == pytest.approx(1.148e302, rel=1e-3)

    def test_huge_base_large_decay(self):
        """2^-2000 уходит в 0.0, но 1e300 × 2^-2000 представимо."""
        result = project(1e300, -1000.0, 0.5)
        assert result == math.ldexp(1e300, -2000)
        assert result > 0.0

    def test_underflow_to_zero_allowed(self):
        """Underflow к 0.0 не является ошибкой."""
        assert project(1.0, -5000.0, 1.0) == 0.0

    def test_deterministic(self):
        """Повторный вызов даёт идентичный результат."""
        assert project(2300.0, 51.3, 1.97) == project(2300.0, 51.3, 1.97)


class TestProjectCount:
    """Тесты project_count: целочисленный счётчик."""

    def test_transistor_count_2025(self):
        """Intel 4004 → 2025 при классическом периоде."""
        assert project_count(2300, 54) == 308_700_774_400

    def test_truncates_toward_zero(self):
        """Дробная часть отбрасывается к нулю."""
        # 3 × √2 ≈ 4.243
        assert project_count(3, 1, 2) == 4
        # -3 × √2 ≈ -4.243
        assert project_count(-3, 1, 2) == -4

    def test_default_period(self):
        """Период по умолчанию — DEFAULT_DOUBLING_PERIOD."""
        assert project_count(10, DEFAULT_DOUBLING_PERIOD) == 20

    def test_returns_int(self):
        assert isinstance(project_count(2300, 10, 2), int)

    def test_zero_period_rejected(self):
        with pytest.raises(InvalidPeriod):
            project_count(2300, 10, 0)


class TestProjectTrajectory:
    """Тесты project_trajectory: траектория по годам."""

    def test_basic(self):
        assert project_trajectory(1.0, [0, 2, 4], 2.0) == [1.0, 2.0, 4.0]

    def test_order_preserved(self):
        """Порядок результата совпадает с порядком входа."""
        years = [4.0, 0.0, -2.0]
        assert project_trajectory(8.0, years, 2.0) == [32.0, 8.0, 4.0]

    def test_accepts_generator(self):
        result = project_trajectory(1.0, (float(t) for t in range(3)), 1.0)
        assert result == [1.0, 2.0, 4.0]

    def test_empty(self):
        assert project_trajectory(1.0, [], 2.0) == []

    def test_zero_period_rejected_even_when_empty(self):
        """Период проверяется до итерации."""
        with pytest.raises(InvalidPeriod):
            project_trajectory(1.0, [], 0.0)


# =============================================================================
# ТЕСТЫ: Обратные задачи
# =============================================================================


class TestYearsToReach:
    """Тесты years_to_reach: время достижения цели."""

    def test_m1_ultra_scale(self):
        """2300 → 114 млрд транзисторов при T=2."""
        result = years_to_reach(2300, 114_000_000_000, 2.0)
        assert result == pytest.approx(2 * math.log2(114e9 / 2300))
        assert abs(result - 51.17) < 0.1

    def test_exact_doublings(self):
        assert years_to_reach(100.0, 400.0, 2.0) == 4.0

    def test_target_in_past_is_negative(self):
        """target < base → отрицательный результат, не ошибка."""
        assert years_to_reach(100.0, 50.0, 2.0) == -2.0

    def test_target_equals_base(self):
        assert years_to_reach(100.0, 100.0, 2.0) == 0.0

    @pytest.mark.parametrize("base, target", [
        (0.0, 100.0),
        (-1.0, 100.0),
        (100.0, 0.0),
        (100.0, -5.0),
    ])
    def test_non_positive_values_rejected(self, base, target):
        """Неположительное значение под log2 → InvalidRatio."""
        with pytest.raises(InvalidRatio, match="must be positive"):
            years_to_reach(base, target, 2.0)

    def test_zero_period_rejected(self):
        with pytest.raises(InvalidPeriod):
            years_to_reach(100.0, 400.0, 0.0)

    def test_extreme_magnitude_ratio(self):
        """1e300 / 1e-300 переполняется, но время достижения конечно."""
        expected = 2.0 * (math.log2(1e300) - math.log2(1e-300))
        assert years_to_reach(1e-300, 1e300, 2.0) == pytest.approx(expected)
        assert years_to_reach(1e-300, 1e300, 2.0) == pytest.approx(3986.3, rel=1e-4)
        assert years_to_reach(1e300, 1e-300, 2.0) == pytest.approx(-expected)

    def test_extreme_round_trip(self):
        target = project(1e-300, 3000.0, 1.5)
        assert years_to_reach(1e-300, target, 1.5) == pytest.approx(3000.0, rel=1e-9)

    def test_result_overflow(self):
        with pytest.raises(ProjectionOverflow, match="years to reach"):
            years_to_reach(1.0, 4.0, 1e308)

    @pytest.mark.parametrize("base, years, period", ROUND_TRIP_CASES)
    def test_round_trip(self, base, years, period):
        """years_to_reach(b, project(b, y, p), p) ≈ y."""
        target = project(base, years, period)
        assert years_to_reach(base, target, period) == pytest.approx(years, rel=1e-9, abs=1e-9)


class TestEffectivePeriod:
    """Тесты effective_period: калибровка по наблюдениям."""

    def test_exact_period(self):
        assert effective_period(100.0, 400.0, 4.0) == 2.0

    def test_decay_gives_negative_period(self):
        assert effective_period(100.0, 50.0, 3.0) == -3.0

    def test_historical_m1_ultra(self):
        """1971 → 2022: эффективный период близок к двум годам."""
        result = effective_period(2300, 114_000_000_000, 51)
        assert result == pytest.approx(51 / math.log2(114e9 / 2300))
        assert 1.9 < result < 2.1

    def test_no_change_rejected(self):
        """current == base → UndefinedPeriod."""
        with pytest.raises(UndefinedPeriod, match="no observed change"):
            effective_period(100.0, 100.0, 5.0)

    def test_zero_elapsed_rejected(self):
        """elapsed_years == 0 даёт нулевой (недопустимый) период."""
        with pytest.raises(UndefinedPeriod, match="no elapsed time"):
            effective_period(100.0, 200.0, 0.0)

    def test_non_positive_values_rejected(self):
        with pytest.raises(InvalidRatio):
            effective_period(0.0, 100.0, 5.0)
        with pytest.raises(InvalidRatio):
            effective_period(100.0, -1.0, 5.0)

    def test_near_equal_values_rejected(self):
        """Отличие в пределах EPS_FLOAT_COMPARE_REL — тоже отсутствие изменения."""
        with pytest.raises(UndefinedPeriod, match="no observed change"):
            effective_period(100.0, 100.0 * (1.0 + 1e-12), 5.0)

    def test_tiny_distinct_values_accepted(self):
        """Малые по модулю, но различные значения — изменение."""
        assert effective_period(1e-15, 2e-15, 3.0) == pytest.approx(3.0)

    def test_extreme_magnitude_ratio(self):
        """1e300 / 1e-300 переполняется, но период конечен и ненулевой."""
        result = effective_period(1e-300, 1e300, 5.0)
        assert result != 0.0
        assert result == pytest.approx(5.0 / (math.log2(1e300) - math.log2(1e-300)))
        assert effective_period(1e300, 1e-300, 5.0) == pytest.approx(-result)

    def test_extreme_inverse_consistency(self):
        period = effective_period(1e-300, 1e300, 5.0)
        assert project(1e-300, 5.0, period) == pytest.approx(1e300, rel=1e-9)

    def test_period_underflow_rejected(self):
        """Период, не представимый ненулевым float, не определён."""
        with pytest.raises(UndefinedPeriod, match="underflows to zero"):
            effective_period(1.0, 4.0, 5e-324)

    def test_period_overflow(self):
        with pytest.raises(ProjectionOverflow, match="effective period"):
            effective_period(1.0, 1.0 + 1e-8, 1e308)

    @pytest.mark.parametrize("base, current, years", [
        (2300.0, 114e9, 51.0),
        (10.0, 3.0, 4.0),
        (1.0, 1.0001, -2.5),
        (5e-4, 7.0, 0.3),
    ])
    def test_inverse_consistency(self, base, current, years):
        """project(b, y, effective_period(b, c, y)) ≈ c."""
        period = effective_period(base, current, years)
        assert project(base, years, period) == pytest.approx(current, rel=1e-9)


# =============================================================================
# ТЕСТЫ: Config
# =============================================================================


class TestProjectionConfig:
    """Тесты ProjectionConfig."""

    def test_default_period(self):
        assert ProjectionConfig().doubling_period == DEFAULT_DOUBLING_PERIOD == 2.0

    def test_custom_period(self):
        assert ProjectionConfig(doubling_period=1.5).doubling_period == 1.5

    def test_zero_period_rejected(self):
        with pytest.raises(InvalidPeriod):
            ProjectionConfig(doubling_period=0.0)

    def test_nan_period_rejected(self):
        with pytest.raises(ValueError, match="NaN/Inf"):
            ProjectionConfig(doubling_period=float('nan'))

    def test_frozen(self):
        config = ProjectionConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.doubling_period = 3.0


class TestValidateDoublingPeriod:
    """Тесты validate_doubling_period."""

    def test_returns_float(self):
        result = validate_doubling_period(2)
        assert result == 2.0
        assert isinstance(result, float)

    def test_negative_allowed(self):
        assert validate_doubling_period(-2.0) == -2.0

    def test_zero_rejected(self):
        with pytest.raises(InvalidPeriod):
            validate_doubling_period(0)
