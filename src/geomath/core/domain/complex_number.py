"""
Complex — комплексное число a + b i

Сложение и вычитание покомпонентные. Умножение и деление выполняются в
полярной форме (модули перемножаются/делятся, аргументы складываются/
вычитаются) через get_radial_coord / get_angular_coord, поэтому округление
отличается от декартовой формулы (a1 a2 − b1 b2, a1 b2 + b1 a2).

Равенство точное по обеим частям.
"""

import logging
import math
from typing import Any

from pydantic import Field

from geomath.core.domain.base import ValueModel
from geomath.core.domain.exceptions import DivisionByZero
from geomath.core.domain.rendering import format_scalar

logger = logging.getLogger(__name__)


class Complex(ValueModel):
    """Комплексное число: real + imaginary × i. По умолчанию 0."""

    real: float = Field(default=0.0, description="Действительная часть (a)")
    imaginary: float = Field(default=0.0, description="Мнимая часть (b)")

    def __init__(self, real: float = 0.0, imaginary: float = 0.0, **data: Any) -> None:
        super().__init__(real=real, imaginary=imaginary, **data)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Complex":
        """Комплексное число по модулю и аргументу (радианы)."""
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    # -------------------------------------------------------------------------
    # Getters / setters
    # -------------------------------------------------------------------------

    def get_real_part(self) -> float:
        return self.real

    def get_imaginary_part(self) -> float:
        return self.imaginary

    def get_radial_coord(self) -> float:
        """Модуль: sqrt(a² + b²) (через math.hypot, без переполнения a²)."""
        return math.hypot(self.real, self.imaginary)

    def get_angular_coord(self) -> float:
        """Аргумент: atan2(b, a), диапазон (-π, π]."""
        return math.atan2(self.imaginary, self.real)

    def set(self, real: float, imaginary: float) -> None:
        self._set_fields(real=float(real), imaginary=float(imaginary))

    def set_real_part(self, real: float) -> None:
        self.real = float(real)

    def set_imaginary_part(self, imaginary: float) -> None:
        self.imaginary = float(imaginary)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def __sub__(self, other: object) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def __mul__(self, other: object) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        angle = self.get_angular_coord() + other.get_angular_coord()
        radius = self.get_radial_coord() * other.get_radial_coord()
        return Complex.from_polar(radius, angle)

    def __truediv__(self, other: object) -> "Complex":
        """
        Деление в полярной форме.

        Raises:
            DivisionByZero: Если модуль делителя равен 0
        """
        if not isinstance(other, Complex):
            return NotImplemented
        divisor = other.get_radial_coord()
        if divisor == 0:
            logger.debug("division of %s by zero-magnitude %s rejected", self, other)
            raise DivisionByZero(f"division of {self} by {other}")
        angle = self.get_angular_coord() - other.get_angular_coord()
        return Complex.from_polar(self.get_radial_coord() / divisor, angle)

    def __iadd__(self, other: object) -> "Complex":
        return self._assign(self.__add__(other))

    def __isub__(self, other: object) -> "Complex":
        return self._assign(self.__sub__(other))

    def __imul__(self, other: object) -> "Complex":
        return self._assign(self.__mul__(other))

    def __itruediv__(self, other: object) -> "Complex":
        return self._assign(self.__truediv__(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        # Нулевые слагаемые опускаются: Complex[a], Complex[b i], Complex[0]
        if self.real:
            text = format_scalar(self.real)
            if self.imaginary:
                text += f" + {format_scalar(self.imaginary)} i"
        elif self.imaginary:
            text = f"{format_scalar(self.imaginary)} i"
        else:
            text = format_scalar(self.real)
        return f"Complex[{text}]"

    def _assign(self, result: Any) -> Any:
        if result is NotImplemented:
            return result
        self._set_fields(real=result.real, imaginary=result.imaginary)
        return self
