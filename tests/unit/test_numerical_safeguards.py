"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Валидацию float (NaN/Inf, неотрицательность)
2. Равенство с точностью до машинного epsilon
3. Толерантные сравнения (is_close, compare_with_tolerance)
4. Конфигурацию толерантности (ComparisonTolerance)
"""

import dataclasses
import sys

import pytest

from geomath.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MACHINE_EPSILON,
    ComparisonTolerance,
    compare_with_tolerance,
    is_close,
    is_valid_float,
    validate_non_negative,
    within_machine_epsilon,
)

# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(1.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e10)
        assert is_valid_float(-1e-10)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_float(float("nan"))

    def test_inf_invalid(self) -> None:
        """Inf невалиден"""
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    def test_positive_value_passes(self) -> None:
        """Положительное значение проходит"""
        validate_non_negative(1.0, "test")

    def test_zero_passes(self) -> None:
        """Ноль проходит"""
        validate_non_negative(0.0, "test")

    def test_negative_fails(self) -> None:
        """Отрицательное значение не проходит"""
        with pytest.raises(ValueError, match="test must be non-negative"):
            validate_non_negative(-1.0, "test")

    def test_nan_fails(self) -> None:
        """NaN не проходит"""
        with pytest.raises(ValueError, match="test must be a valid float"):
            validate_non_negative(float("nan"), "test")


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestWithinMachineEpsilon:
    """Тесты для within_machine_epsilon"""

    def test_machine_epsilon_is_float_epsilon(self) -> None:
        """MACHINE_EPSILON совпадает с sys.float_info.epsilon (2**-52)"""
        assert MACHINE_EPSILON == sys.float_info.epsilon
        assert MACHINE_EPSILON == 2.0**-52

    def test_exact_match(self) -> None:
        """Точное совпадение"""
        assert within_machine_epsilon(1.0, 1.0)
        assert within_machine_epsilon(0.0, -0.0)

    def test_difference_of_exactly_epsilon_is_equal(self) -> None:
        """Разница ровно в epsilon считается равенством (граница включительно)"""
        assert within_machine_epsilon(1.0, 1.0 + MACHINE_EPSILON)
        assert within_machine_epsilon(0.0, MACHINE_EPSILON)

    def test_accumulated_rounding_is_equal(self) -> None:
        """Типичная ошибка округления в пределах epsilon"""
        assert within_machine_epsilon(0.1 + 0.2, 0.3)

    def test_larger_difference_not_equal(self) -> None:
        """Разница больше epsilon — не равны"""
        assert not within_machine_epsilon(1.0, 1.0 + 1e-15)
        assert not within_machine_epsilon(0.0, 3 * MACHINE_EPSILON)

    def test_threshold_is_absolute(self) -> None:
        """Порог абсолютный: у больших чисел соседние float уже не равны"""
        assert not within_machine_epsilon(1e6, 1e6 + 1.0)


class TestIsClose:
    """Тесты для is_close"""

    def test_exact_match(self) -> None:
        """Точное совпадение"""
        assert is_close(1.0, 1.0)
        assert is_close(0.0, 0.0)

    def test_close_values_within_tolerance(self) -> None:
        """Близкие значения в пределах толерантности"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1.0, 1.0 - 1e-10)

    def test_far_values_not_close(self) -> None:
        """Далёкие значения не близки"""
        assert not is_close(1.0, 2.0)
        assert not is_close(1.0, 1.1)

    def test_small_absolute_difference(self) -> None:
        """Малая абсолютная разница (вблизи нуля)"""
        assert is_close(0.0, 1e-13, abs_tol=1e-12)
        assert not is_close(0.0, 1e-10, abs_tol=1e-12)

    def test_relative_tolerance_for_large_values(self) -> None:
        """Относительная толерантность для больших значений"""
        assert is_close(1e10, 1e10 + 1.0, rel_tol=1e-9)
        assert not is_close(1e10, 1e10 + 100.0, rel_tol=1e-9)

    def test_custom_tolerances(self) -> None:
        """Пользовательские толерантности работают"""
        assert not is_close(1.0, 1.01, rel_tol=1e-6, abs_tol=1e-6)
        assert is_close(1.0, 1.01, rel_tol=1e-1, abs_tol=1e-1)


class TestCompareWithTolerance:
    """Тесты для compare_with_tolerance"""

    def test_a_less_than_b(self) -> None:
        """a < b"""
        assert compare_with_tolerance(1.0, 2.0) == -1
        assert compare_with_tolerance(-10.0, -5.0) == -1

    def test_a_greater_than_b(self) -> None:
        """a > b"""
        assert compare_with_tolerance(2.0, 1.0) == 1
        assert compare_with_tolerance(-5.0, -10.0) == 1

    def test_a_approximately_equal_to_b(self) -> None:
        """a ≈ b"""
        assert compare_with_tolerance(1.0, 1.0) == 0
        assert compare_with_tolerance(0.0, 1e-13) == 0

    def test_tolerance_threshold(self) -> None:
        """Граница толерантности"""
        tolerance = ComparisonTolerance(rel_tol=0.0, abs_tol=1e-12)

        # В пределах толерантности: равны
        assert compare_with_tolerance(1.0, 1.0 + 0.5e-12, tolerance) == 0

        # Вне толерантности: не равны
        assert compare_with_tolerance(1.0, 1.0 + 2e-12, tolerance) == -1
        assert compare_with_tolerance(1.0 + 2e-12, 1.0, tolerance) == 1


# =============================================================================
# ТЕСТЫ КОНФИГУРАЦИИ ТОЛЕРАНТНОСТИ
# =============================================================================


class TestComparisonTolerance:
    """Тесты для ComparisonTolerance"""

    def test_defaults_match_constants(self) -> None:
        """Значения по умолчанию совпадают с EPS-константами"""
        assert DEFAULT_TOLERANCE.rel_tol == EPS_FLOAT_COMPARE_REL
        assert DEFAULT_TOLERANCE.abs_tol == EPS_FLOAT_COMPARE_ABS

    def test_negative_tolerance_rejected(self) -> None:
        """Отрицательная толерантность отклоняется"""
        with pytest.raises(ValueError, match="rel_tol must be non-negative"):
            ComparisonTolerance(rel_tol=-1e-9)

        with pytest.raises(ValueError, match="abs_tol must be non-negative"):
            ComparisonTolerance(abs_tol=-1e-12)

    def test_nan_tolerance_rejected(self) -> None:
        """NaN толерантность отклоняется"""
        with pytest.raises(ValueError, match="abs_tol must be a valid float"):
            ComparisonTolerance(abs_tol=float("nan"))

    def test_frozen(self) -> None:
        """Конфигурация неизменяема"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_TOLERANCE.rel_tol = 0.1  # type: ignore[misc]
