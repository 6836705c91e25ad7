"""
Тесты для Rational

Проверяет:
1. Канонический вид (сокращение, знак в числителе)
2. Setters с повторной нормализацией
3. Арифметику с сокращением промежуточных значений и приведение int
4. Точное равенство и упорядочивание
5. Ошибки: нулевой знаменатель, деление на ноль
"""

import logging

import pytest
from pydantic import ValidationError

from geomath.core.domain.exceptions import DivisionByZero, InvalidDenominator
from geomath.core.domain.rational import Rational

# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    """Тесты создания и канонического вида"""

    def test_default_is_zero(self) -> None:
        """Rational() == 0/1"""
        a = Rational()
        assert a.get_numerator() == 0
        assert a.get_denominator() == 1
        assert float(a) == 0.0

    @pytest.mark.parametrize(
        ("numerator", "denominator", "expected"),
        [
            (4, 8, (1, 2)),
            (4, -3, (-4, 3)),
            (-8, -2, (4, 1)),
            (5, 1, (5, 1)),
            (0, -7, (0, 1)),
            (10**30, 2 * 10**30, (1, 2)),
        ],
    )
    def test_reduced_form(
        self, numerator: int, denominator: int, expected: tuple[int, int]
    ) -> None:
        """Сокращение по gcd, знаменатель положительный"""
        value = Rational(numerator, denominator)
        assert (value.get_numerator(), value.get_denominator()) == expected

    def test_float_conversion(self) -> None:
        """float(r) = numerator / denominator"""
        assert float(Rational(4, -3)) == -4.0 / 3.0
        assert float(Rational(-8, -2)) == 4.0
        assert float(Rational(5)) == 5.0

    def test_zero_denominator_rejected(self) -> None:
        """Нулевой знаменатель → InvalidDenominator"""
        with pytest.raises(InvalidDenominator, match="must not be zero"):
            Rational(1, 0)

        with pytest.raises(ZeroDivisionError):
            Rational(0, 0)

    def test_integral_float_accepted(self) -> None:
        """Целочисленный float допускается, дробный — нет"""
        assert Rational(2.0, 4) == Rational(1, 2)  # type: ignore[arg-type]

        with pytest.raises(ValidationError):
            Rational(2.5)  # type: ignore[arg-type]


# =============================================================================
# SETTERS
# =============================================================================


class TestSetters:
    """Тесты setters"""

    def test_setters_renormalize(self) -> None:
        """set / set_numerator / set_denominator сокращают дробь"""
        a = Rational()

        a.set(4, 8)
        assert (a.get_numerator(), a.get_denominator()) == (1, 2)
        assert float(a) == 0.5

        a.set_numerator(4)
        assert (a.get_numerator(), a.get_denominator()) == (2, 1)
        assert float(a) == 2.0

        a.set_denominator(2)
        assert (a.get_numerator(), a.get_denominator()) == (1, 1)
        assert float(a) == 1.0

    def test_negative_denominator_setter(self) -> None:
        """Знак переносится в числитель"""
        a = Rational(3, 5)
        a.set_denominator(-6)
        assert (a.get_numerator(), a.get_denominator()) == (-1, 2)

    def test_failed_setter_leaves_value_unchanged(self) -> None:
        """Нулевой знаменатель в setter не меняет дробь"""
        a = Rational(3, 4)
        with pytest.raises(InvalidDenominator):
            a.set_denominator(0)
        with pytest.raises(InvalidDenominator):
            a.set(1, 0)
        assert a == Rational(3, 4)

    def test_direct_field_write_renormalizes(self) -> None:
        """Запись numerator / denominator напрямую приводит дробь к каноническому виду"""
        a = Rational(1, 2)
        a.numerator = 4
        assert (a.get_numerator(), a.get_denominator()) == (2, 1)
        assert a == Rational(2, 1)

        a.denominator = -6
        assert (a.get_numerator(), a.get_denominator()) == (-1, 3)

    def test_direct_zero_denominator_write_rejected(self) -> None:
        """Нулевой знаменатель отклоняется и при прямой записи поля"""
        a = Rational(1, 2)
        with pytest.raises(InvalidDenominator):
            a.denominator = 0
        assert (a.get_numerator(), a.get_denominator()) == (1, 2)
        assert str(a) == "Rational[1/2]"


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestArithmetic:
    """Тесты арифметики"""

    @pytest.fixture
    def a(self) -> Rational:
        return Rational(4, 3)

    @pytest.fixture
    def b(self) -> Rational:
        return Rational(3, 4)

    def test_operations(self, a: Rational, b: Rational) -> None:
        """4/3 и 3/4"""
        assert a + b == Rational(25, 12)
        assert a - b == Rational(7, 12)
        assert a * b == Rational(1)
        assert a / b == Rational(16, 9)
        assert a * Rational(1, 2) == Rational(2, 3)
        assert a - a == Rational()
        assert a * Rational() == Rational()
        assert a * Rational(1) == a

    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [
            (Rational(1, 6), Rational(1, 4), Rational(5, 12)),
            (Rational(1, 6), Rational(1, 3), Rational(1, 2)),
            (Rational(1, 2), Rational(1, 2), Rational(1)),
            (Rational(-1, 6), Rational(1, 6), Rational(0)),
        ],
    )
    def test_addition_with_common_factor(
        self, left: Rational, right: Rational, expected: Rational
    ) -> None:
        """Знаменатели с общим делителем: результат сокращён"""
        result = left + right
        assert result == expected
        assert result.get_denominator() == expected.get_denominator()

    def test_subtraction_with_common_factor(self) -> None:
        """5/6 - 1/3 = 1/2"""
        assert Rational(5, 6) - Rational(1, 3) == Rational(1, 2)

    def test_division_sign_normalized(self) -> None:
        """Деление на отрицательную дробь: знаменатель остаётся положительным"""
        result = Rational(1, 2) / Rational(-3, 4)
        assert (result.get_numerator(), result.get_denominator()) == (-2, 3)

    def test_unary_minus(self) -> None:
        """-r"""
        assert -Rational(1, 2) == Rational(-1, 2)

    def test_int_operands(self) -> None:
        """int приводится к n/1 с любой стороны"""
        assert Rational(1, 2) + 1 == Rational(3, 2)
        assert 1 + Rational(1, 2) == Rational(3, 2)
        assert 1 - Rational(1, 3) == Rational(2, 3)
        assert Rational(1, 2) * 4 == Rational(2)
        assert 2 / Rational(4, 3) == Rational(3, 2)

    def test_float_operand_unsupported(self) -> None:
        """float не смешивается с точной дробью"""
        with pytest.raises(TypeError):
            Rational(1, 2) + 0.5  # type: ignore[operator]

    def test_division_by_zero(self, a: Rational) -> None:
        """Деление на 0 → DivisionByZero"""
        with pytest.raises(DivisionByZero):
            a / Rational(0)

        with pytest.raises(DivisionByZero):
            a / 0

    def test_in_place_operations(self, a: Rational, b: Rational) -> None:
        """In-place операции меняют сам объект"""
        ref = a

        a += b
        assert a is ref
        assert a == Rational(25, 12)

        a -= b
        assert a == Rational(4, 3)

        a *= b
        assert a == Rational(1)

        a /= Rational(2, 5)
        assert a is ref
        assert a == Rational(5, 2)

    def test_failed_in_place_division_leaves_value_unchanged(self, a: Rational) -> None:
        """Ошибка /= не меняет дробь"""
        with pytest.raises(DivisionByZero):
            a /= Rational(0, 5)
        assert a == Rational(4, 3)


# =============================================================================
# COMPARISON / TEXT FORM
# =============================================================================


class TestComparison:
    """Тесты сравнения"""

    def test_equality_is_exact(self) -> None:
        """Равенство полей канонического вида"""
        assert Rational(4, 3) != Rational(3, 4)
        assert Rational(4, 3) == Rational(8, 6)
        assert Rational(4, 2) == 2

    def test_ordering(self) -> None:
        """<, <=, >, >= через перекрёстное умножение"""
        a = Rational(4, 3)
        b = Rational(3, 4)

        assert b < a
        assert b <= a
        assert not (a < b)
        assert a <= a
        assert b >= b
        assert a > b
        assert Rational(-1, 2) < Rational(1, 3)

    def test_ordering_with_int(self) -> None:
        """Сравнение с int с любой стороны"""
        assert Rational(1, 2) < 1
        assert 1 > Rational(1, 2)
        assert Rational(7, 2) >= 3

    def test_unhashable(self) -> None:
        """Mutable value-тип не хешируется"""
        with pytest.raises(TypeError):
            hash(Rational())


class TestRendering:
    """Тесты текстового представления"""

    def test_text_form(self) -> None:
        """Rational[n/d]"""
        assert str(Rational(4, -3)) == "Rational[-4/3]"
        assert str(Rational()) == "Rational[0/1]"


class TestLogging:
    """Тесты DEBUG-логирования перед ошибкой"""

    def test_zero_denominator_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Нулевой знаменатель пишет DEBUG запись"""
        caplog.set_level(logging.DEBUG, logger="geomath")

        with pytest.raises(InvalidDenominator):
            Rational(3, 0)

        assert any(
            r.name == "geomath.core.domain.rational" and "zero denominator" in r.getMessage()
            for r in caplog.records
        )
