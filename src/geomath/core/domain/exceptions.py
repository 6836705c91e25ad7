"""
Domain Errors — таксономия ошибок value-типов

Все ошибки синхронные: возбуждаются в точке вызова, внутри не
перехватываются и не повторяются. Мутирующая операция, завершившаяся
ошибкой, оставляет получатель без изменений.

Встроенные базовые классы выбраны так, чтобы:
1. Вызывающий код с `except ZeroDivisionError` / `except IndexError` продолжал работать
2. pydantic не оборачивал ошибку в ValidationError при валидации модели
"""


class GeometryError(Exception):
    """Базовый класс ошибок value-типов geomath."""

    pass


class DivisionByZero(GeometryError, ZeroDivisionError):
    """
    Деление на ноль.

    Возникает при делении вектора на скаляр 0, делении на Rational с
    нулевым числителем и делении на Complex нулевого модуля.
    """

    pass


class NullVectorNormalization(GeometryError, ArithmeticError):
    """
    Нормализация нулевого вектора.

    Направление нулевого вектора не определено: normalize,
    get_normalization, проекция на нулевой вектор и плоскость с нулевой
    нормалью невозможны. Проверяйте is_null() до вызова.
    """

    pass


class IndexOutOfRange(GeometryError, IndexError):
    """Индекс компоненты вектора вне диапазона [0, N)."""

    pass


class InvalidDenominator(GeometryError, ZeroDivisionError):
    """Rational с нулевым знаменателем (конструктор или setter)."""

    pass


class DimensionMismatch(GeometryError, TypeError):
    """
    Операнды разной размерности.

    Размерность фиксируется при создании значения и не меняется; смешивать
    Vector2 с Vector3 (или Bounds2 с точкой Vector3) нельзя.
    """

    pass
