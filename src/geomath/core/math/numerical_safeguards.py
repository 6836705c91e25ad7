"""
Numerical Safeguards — сравнение float с учётом машинной точности

Модуль задаёт epsilon-семантику всех value-типов пакета:
- Машинный epsilon для покомпонентного равенства векторов
- Толерантные сравнения (relative + absolute) для геометрических предикатов
- Конфигурация толерантности (ComparisonTolerance)
- Проверка валидности float (NaN/Inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равенство векторов: |a - b| <= MACHINE_EPSILON для каждой компоненты (не строже, не мягче)
2. Предикаты плоскости используют одну и ту же толерантность для on/over/under
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from dataclasses import dataclass
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon для float (IEEE-754 double): 2**-52
# Используется в покомпонентном равенстве векторов
MACHINE_EPSILON: Final[float] = sys.float_info.epsilon

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для геометрических предикатов
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Защищает сравнения около нуля, где относительная толерантность вырождается
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# КОНФИГУРАЦИЯ ТОЛЕРАНТНОСТИ
# =============================================================================


@dataclass(frozen=True)
class ComparisonTolerance:
    """Толерантность для сравнений float в геометрических предикатах.

    Алгоритм сравнения совпадает с math.isclose:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_non_negative(self.rel_tol, "rel_tol")
        validate_non_negative(self.abs_tol, "abs_tol")


DEFAULT_TOLERANCE: Final[ComparisonTolerance] = ComparisonTolerance()


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def within_machine_epsilon(a: float, b: float) -> bool:
    """
    Равенство двух скаляров с точностью до машинного epsilon.

    Абсолютный порог, без относительной составляющей: именно так
    сравниваются компоненты векторов.

    Examples:
        >>> within_machine_epsilon(1.0, 1.0 + 2.0 ** -52)
        True
        >>> within_machine_epsilon(0.1 + 0.2, 0.3)
        True
        >>> within_machine_epsilon(1.0, 1.0 + 1e-15)
        False
    """
    return abs(a - b) <= MACHINE_EPSILON


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_with_tolerance(
    a: float,
    b: float,
    tolerance: ComparisonTolerance = DEFAULT_TOLERANCE,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tolerance: Толерантность сравнения (default: DEFAULT_TOLERANCE)

    Returns:
        -1 если a < b (с учётом толерантности)
         0 если a ≈ b (is_close)
        +1 если a > b (с учётом толерантности)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    if is_close(a, b, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol):
        return 0
    elif a < b:
        return -1
    else:
        return 1
