"""
Rational — точная дробь numerator / denominator

Дробь всегда хранится в каноническом виде:
    gcd(|numerator|, denominator) == 1 и denominator > 0

Любая мутирующая операция (создание, set*, +=, -=, *=, /=, запись поля) восстанавливает
канонический вид до возврата. Поэтому равенство — точное сравнение полей.

АЛГОРИТМЫ (промежуточные числа остаются малыми):
    a/b ± c/d:  g = gcd(b, d); при g == 1 — (a d ± b c) / (b d),
                иначе числитель сокращается только против g
    a/b × c/d:  перекрёстное сокращение gcd(a, d) и gcd(c, b) до умножения
    a/b ÷ c/d:  перекрёстное сокращение gcd(a, c) и gcd(d, b), затем знак
                переносится в числитель
"""

import logging
import math
from typing import Any

from pydantic import Field, model_validator

from geomath.core.domain.base import ValueModel
from geomath.core.domain.exceptions import DivisionByZero, InvalidDenominator

logger = logging.getLogger(__name__)


def _reduce(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Канонический вид дроби.

    Raises:
        InvalidDenominator: Если denominator == 0
    """
    if denominator == 0:
        logger.debug("zero denominator rejected for numerator %s", numerator)
        raise InvalidDenominator(f"denominator of {numerator}/0 must not be zero")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    # gcd(0, d) == d → 0/d становится 0/1
    g = math.gcd(numerator, denominator)
    return numerator // g, denominator // g


class Rational(ValueModel):
    """
    Точная дробь с целыми числителем и знаменателем. По умолчанию 0/1.

    Операции принимают int с любой стороны (int приводится к n/1).
    """

    numerator: int = Field(default=0, description="Числитель")
    denominator: int = Field(default=1, description="Знаменатель (> 0 после нормализации)")

    def __init__(self, numerator: int = 0, denominator: int = 1, **data: Any) -> None:
        super().__init__(numerator=numerator, denominator=denominator, **data)

    @model_validator(mode="after")
    def normalize_fraction(self) -> "Rational":
        """Приведение к каноническому виду (знак в числителе, сокращение)."""
        numerator, denominator = _reduce(self.numerator, self.denominator)
        self._set_fields(numerator=numerator, denominator=denominator)
        return self

    # -------------------------------------------------------------------------
    # Getters / setters
    # -------------------------------------------------------------------------

    def get_numerator(self) -> int:
        return self.numerator

    def get_denominator(self) -> int:
        return self.denominator

    def set(self, numerator: int, denominator: int = 1) -> None:
        """
        Установить дробь и привести к каноническому виду.

        Raises:
            InvalidDenominator: Если denominator == 0 (дробь не меняется)
        """
        self._assign(Rational(numerator, denominator))

    def set_numerator(self, numerator: int) -> None:
        self.set(numerator, self.denominator)

    def set_denominator(self, denominator: int) -> None:
        self.set(self.numerator, denominator)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(*self._add_terms(other, 1))

    def __sub__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(*self._add_terms(other, -1))

    def __mul__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented

        gcd1 = math.gcd(self.numerator, other.denominator)
        gcd2 = math.gcd(other.numerator, self.denominator)
        # gcd1/gcd2 == 0 только для 0/0, что исключено каноническим видом
        numerator = (self.numerator // gcd1) * (other.numerator // gcd2)
        denominator = (self.denominator // gcd2) * (other.denominator // gcd1)
        return Rational(numerator, denominator)

    def __truediv__(self, other: object) -> "Rational":
        """
        Деление дробей.

        Raises:
            DivisionByZero: Если числитель делителя равен 0
        """
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if other.numerator == 0:
            logger.debug("division of %s by zero rational rejected", self)
            raise DivisionByZero(f"division of {self} by {other}")

        gcd1 = math.gcd(self.numerator, other.numerator)
        gcd2 = math.gcd(other.denominator, self.denominator)
        numerator = (self.numerator // gcd1) * (other.denominator // gcd2)
        denominator = (self.denominator // gcd2) * (other.numerator // gcd1)

        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return Rational(numerator, denominator)

    def __radd__(self, other: object) -> "Rational":
        return self.__add__(other)

    def __rsub__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __rmul__(self, other: object) -> "Rational":
        return self.__mul__(other)

    def __rtruediv__(self, other: object) -> "Rational":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __iadd__(self, other: object) -> "Rational":
        return self._assign(self.__add__(other))

    def __isub__(self, other: object) -> "Rational":
        return self._assign(self.__sub__(other))

    def __imul__(self, other: object) -> "Rational":
        return self._assign(self.__mul__(other))

    def __itruediv__(self, other: object) -> "Rational":
        return self._assign(self.__truediv__(other))

    def __neg__(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Comparison / conversion
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return (
            self.numerator == other.numerator
            and self.denominator == other.denominator
        )

    def __lt__(self, other: object) -> bool:
        cross = self._cross_compare(other)
        return cross if cross is NotImplemented else cross < 0

    def __le__(self, other: object) -> bool:
        cross = self._cross_compare(other)
        return cross if cross is NotImplemented else cross <= 0

    def __gt__(self, other: object) -> bool:
        cross = self._cross_compare(other)
        return cross if cross is NotImplemented else cross > 0

    def __ge__(self, other: object) -> bool:
        cross = self._cross_compare(other)
        return cross if cross is NotImplemented else cross >= 0

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"Rational[{self.numerator}/{self.denominator}]"

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _add_terms(self, other: "Rational", sign: int) -> tuple[int, int]:
        n1, d1 = self.numerator, self.denominator
        n2, d2 = other.numerator * sign, other.denominator

        g = math.gcd(d1, d2)
        if g == 1:
            return n1 * d2 + d1 * n2, d1 * d2

        d1_reduced = d1 // g
        numerator = n1 * (d2 // g) + n2 * d1_reduced
        g2 = math.gcd(numerator, g)
        return numerator // g2, d1_reduced * (d2 // g2)

    def _cross_compare(self, other: object) -> Any:
        # Знаменатели положительны: знак n1 d2 - n2 d1 совпадает со знаком a - b
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.numerator * other.denominator - other.numerator * self.denominator

    def _assign(self, result: Any) -> Any:
        if result is NotImplemented:
            return result
        self._set_fields(numerator=result.numerator, denominator=result.denominator)
        return self


def _coerce(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return None
