"""
Interpolation — интерполяция между контрольными точками

Формулы Paul Bourke ("Interpolation methods"). Функции обобщены по типу
значения: подходит всё, что поддерживает +, - и умножение на float
(float и любые Vector).

- linear_interpolate:       p1 → p2 по прямой
- cosine_interpolate:       p1 → p2 со сглаживанием на концах
- cubic_interpolate:        p1 → p2 с учётом соседей p0 и p3
- catmull_rom_interpolate:  сплайн Catmull-Rom (проходит через p1 и p2)

Параметр mu: 0 → p1, 1 → p2. Значения вне [0, 1] дают экстраполяцию.
"""

import math
from typing import Any, TypeVar

from geomath.core.math.numerical_safeguards import is_valid_float

T = TypeVar("T")


def _validate_mu(mu: float) -> None:
    if not is_valid_float(mu):
        raise ValueError(f"mu must be a valid float (not NaN/Inf), got {mu}")


def linear_interpolate(p1: T, p2: T, mu: float) -> T:
    """
    Линейная интерполяция.

    Формула: p1 × (1 - mu) + p2 × mu

    Examples:
        >>> linear_interpolate(0.0, 10.0, 0.25)
        2.5
    """
    _validate_mu(mu)
    return p1 * (1.0 - mu) + p2 * mu  # type: ignore[operator]


def cosine_interpolate(p1: T, p2: T, mu: float) -> T:
    """
    Косинусная интерполяция: mu2 = (1 - cos(mu π)) / 2, затем линейная по mu2.

    Производная равна нулю на концах отрезка.
    """
    _validate_mu(mu)
    mu2 = (1.0 - math.cos(mu * math.pi)) / 2.0
    return p1 * (1.0 - mu2) + p2 * mu2  # type: ignore[operator]


def cubic_interpolate(p0: T, p1: T, p2: T, p3: T, mu: float) -> T:
    """
    Кубическая интерполяция между p1 и p2.

    Коэффициенты:
        a0 = p3 - p2 - p0 + p1
        a1 = p0 - p1 - a0
        a2 = p2 - p0
        a3 = p1

    Returns:
        a0 mu³ + a1 mu² + a2 mu + a3
    """
    _validate_mu(mu)
    mu2 = mu * mu
    a0: Any = p3 - p2 - p0 + p1  # type: ignore[operator]
    a1 = p0 - p1 - a0  # type: ignore[operator]
    a2 = p2 - p0  # type: ignore[operator]
    a3 = p1
    return a0 * mu * mu2 + a1 * mu2 + a2 * mu + a3


def catmull_rom_interpolate(p0: T, p1: T, p2: T, p3: T, mu: float) -> T:
    """
    Сплайн Catmull-Rom между p1 и p2 (касательные из соседних точек).

    Коэффициенты:
        a0 = -0.5 p0 + 1.5 p1 - 1.5 p2 + 0.5 p3
        a1 = p0 - 2.5 p1 + 2 p2 - 0.5 p3
        a2 = -0.5 p0 + 0.5 p2
        a3 = p1
    """
    _validate_mu(mu)
    mu2 = mu * mu
    a0: Any = -0.5 * p0 + 1.5 * p1 + -1.5 * p2 + 0.5 * p3  # type: ignore[operator]
    a1 = p0 + -2.5 * p1 + 2.0 * p2 + -0.5 * p3  # type: ignore[operator]
    a2 = -0.5 * p0 + 0.5 * p2  # type: ignore[operator]
    a3 = p1
    return a0 * mu * mu2 + a1 * mu2 + a2 * mu + a3
