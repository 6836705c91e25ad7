"""
Vector — вектор фиксированной размерности

Value-тип для всех геометрических вычислений пакета: упорядоченный набор
из N float-компонент. N задаётся при создании и больше не меняется.

- Vector: обобщённый вектор (N >= 1), доступ к компонентам по индексу
- Vector2 / Vector3 / Vector4: фиксированная размерность, именованные оси X/Y/Z/W
- Vector2: повороты и перпендикуляры (left/right hand normal)
- Vector3: векторное произведение (только для N = 3)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равенство покомпонентное: |a_i - b_i| <= MACHINE_EPSILON для всех i
2. Размерность неизменна; операнды разной размерности → DimensionMismatch
3. Направление нулевого вектора не определено → NullVectorNormalization
4. Мутирующая операция, завершившаяся ошибкой, не меняет получатель

ФОРМУЛЫ:
    length = sqrt(Σ c_i²)
    projection(a на v) = v × (dot(a, v) / dot(v, v))
    scalar_projection(a на v) = dot(a, v / |v|)
    cross(a, b) = (y1 z2 − z1 y2, z1 x2 − x1 z2, x1 y2 − y1 x2)
"""

import logging
import math
from typing import Any, ClassVar, Iterable

from pydantic import Field, model_validator

from geomath.core.domain.base import ValueModel
from geomath.core.domain.exceptions import (
    DimensionMismatch,
    DivisionByZero,
    IndexOutOfRange,
    NullVectorNormalization,
)
from geomath.core.domain.rendering import format_scalar
from geomath.core.math.numerical_safeguards import within_machine_epsilon

logger = logging.getLogger(__name__)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# GENERIC VECTOR
# =============================================================================


class Vector(ValueModel):
    """
    Обобщённый вектор размерности N.

    Значение по умолчанию для типов фиксированной размерности — нулевой
    ("null") вектор. Обобщённый Vector требует компоненты явно либо
    Vector.null(dimension).

    Mutable value-тип: in-place операции (set, normalize, project, +=, ...)
    сначала вычисляют новое состояние и только затем присваивают его.
    """

    # Размерность для типов Vector2/3/4; None — размерность берётся из компонент
    DIMENSION: ClassVar[int | None] = None

    # Префикс текстового представления; None — "Vector<N>"
    LABEL: ClassVar[str | None] = None

    components: tuple[float, ...] = Field(..., description="Компоненты вектора (N >= 1)")

    def __init__(self, *components: float, **data: Any) -> None:
        if components:
            data["components"] = components
        elif "components" not in data and type(self).DIMENSION is not None:
            data["components"] = (0.0,) * type(self).DIMENSION
        super().__init__(**data)

    @model_validator(mode="after")
    def check_dimension(self) -> "Vector":
        """Размерность >= 1 и совпадает с DIMENSION для фиксированных типов."""
        expected = type(self).DIMENSION
        if not self.components:
            raise ValueError("vector must have at least one component")
        if expected is not None and len(self.components) != expected:
            raise ValueError(
                f"{type(self).__name__} expects {expected} components, "
                f"got {len(self.components)}"
            )
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        # Размерность фиксируется при создании, в том числе для обобщённого Vector
        if (
            name == "components"
            and isinstance(value, (tuple, list))
            and len(value) != len(self.components)
        ):
            logger.debug("components of dimension %d rejected for %s", len(value), self)
            raise DimensionMismatch(
                f"expected {len(self.components)} components, got {len(value)}"
            )
        super().__setattr__(name, value)

    @classmethod
    def null(cls, dimension: int | None = None) -> "Vector":
        """
        Нулевой вектор.

        Args:
            dimension: Размерность (обязательна для обобщённого Vector)

        Returns:
            Вектор из нулей
        """
        if dimension is None:
            dimension = cls.DIMENSION
        if dimension is None or dimension < 1:
            raise ValueError(f"dimension must be a positive integer, got {dimension}")
        if cls.DIMENSION is not None and dimension != cls.DIMENSION:
            raise DimensionMismatch(
                f"{cls.__name__} has dimension {cls.DIMENSION}, got {dimension}"
            )
        return cls(*([0.0] * dimension))

    # -------------------------------------------------------------------------
    # Getters / setters
    # -------------------------------------------------------------------------

    def get_dimension(self) -> int:
        return len(self.components)

    def is_null(self) -> bool:
        """Нулевой вектор: все компоненты точно равны 0."""
        return all(c == 0.0 for c in self.components)

    def get(self, index: int) -> float:
        """
        Компонента по индексу.

        Raises:
            IndexOutOfRange: Если index вне [0, N)
        """
        self._check_index(index)
        return self.components[index]

    def set(self, index: int, value: float) -> None:
        """
        Установить компоненту по индексу.

        Raises:
            IndexOutOfRange: Если index вне [0, N)
        """
        self._check_index(index)
        values = list(self.components)
        values[index] = float(value)
        self.components = tuple(values)

    def set_components(self, *values: float) -> None:
        """
        Установить все компоненты сразу.

        Raises:
            DimensionMismatch: Если количество значений != N
        """
        self.components = tuple(float(v) for v in values)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def dot(self, vector: "Vector") -> float:
        """Скалярное произведение: Σ a_i × b_i."""
        self._require_same_dimension(vector)
        return sum(a * b for a, b in zip(self.components, vector.components))

    def get_length(self) -> float:
        """Евклидова норма: sqrt(Σ c_i²)."""
        return math.hypot(*self.components)

    def get_normalization(self) -> "Vector":
        """
        Нормализованная копия вектора (длина 1).

        Returns:
            Новый вектор того же типа

        Raises:
            NullVectorNormalization: Если вектор нулевой
        """
        if self.is_null():
            logger.debug("normalization requested for null vector %s", self)
            raise NullVectorNormalization(
                f"normalization is not defined for null vector {self}"
            )

        length = self.get_length()
        return self._spawn(c / length for c in self.components)

    def normalize(self) -> None:
        """
        Нормализовать вектор на месте.

        Raises:
            NullVectorNormalization: Если вектор нулевой (вектор не меняется)
        """
        self.components = self.get_normalization().components

    def get_projection(self, vector: "Vector") -> "Vector":
        """
        Проекция этого вектора на vector.

        Формула: vector × (dot(self, vector) / dot(vector, vector))

        Args:
            vector: Вектор, на который проецируем

        Returns:
            Новый вектор, коллинеарный vector

        Raises:
            NullVectorNormalization: Если vector нулевой
            DimensionMismatch: Если размерности различаются
        """
        self._require_same_dimension(vector)
        if vector.is_null():
            logger.debug("projection of %s onto null vector requested", self)
            raise NullVectorNormalization(
                f"projection onto null vector {vector} is not defined"
            )

        factor = self.dot(vector) / vector.dot(vector)
        return self._spawn(c * factor for c in vector.components)

    def project(self, vector: "Vector") -> None:
        """Спроецировать этот вектор на vector на месте."""
        self.components = self.get_projection(vector).components

    def get_scalar_projection(self, vector: "Vector") -> float:
        """
        Знаковая длина проекции на vector: dot(self, vector / |vector|).

        Raises:
            NullVectorNormalization: Если vector нулевой
        """
        self._require_same_dimension(vector)
        return self.dot(vector.get_normalization())

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_dimension(other)
        return self._spawn(a + b for a, b in zip(self.components, other.components))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_dimension(other)
        return self._spawn(a - b for a, b in zip(self.components, other.components))

    def __iadd__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self.components = (self + other).components
        return self

    def __isub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self.components = (self - other).components
        return self

    def __neg__(self) -> "Vector":
        return self._spawn(-c for c in self.components)

    def __mul__(self, scalar: object) -> "Vector":
        if not _is_scalar(scalar):
            return NotImplemented
        return self._spawn(c * scalar for c in self.components)

    __rmul__ = __mul__

    def __imul__(self, scalar: object) -> "Vector":
        if not _is_scalar(scalar):
            return NotImplemented
        self.components = (self * scalar).components
        return self

    def __truediv__(self, scalar: object) -> "Vector":
        if not _is_scalar(scalar):
            return NotImplemented
        if scalar == 0:
            logger.debug("division of %s by zero rejected", self)
            raise DivisionByZero(f"division of {self} by zero")
        return self._spawn(c / scalar for c in self.components)

    def __itruediv__(self, scalar: object) -> "Vector":
        if not _is_scalar(scalar):
            return NotImplemented
        self.components = (self / scalar).components
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self.components) != len(other.components):
            return False
        return all(
            within_machine_epsilon(a, b)
            for a, b in zip(self.components, other.components)
        )

    def __str__(self) -> str:
        label = type(self).LABEL or f"Vector<{len(self.components)}>"
        return f"{label}[{', '.join(format_scalar(c) for c in self.components)}]"

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _spawn(self, values: Iterable[float]) -> "Vector":
        return type(self)(*tuple(values))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.components):
            logger.debug("component index %s out of range for %s", index, self)
            raise IndexOutOfRange(
                f"component index {index} out of range for dimension "
                f"{len(self.components)}"
            )

    def _require_same_dimension(self, other: object) -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"expected a vector, got {type(other).__name__}")
        if len(other.components) != len(self.components):
            logger.debug("dimension mismatch between %s and %s", self, other)
            raise DimensionMismatch(
                f"dimension mismatch: {len(self.components)} "
                f"vs {len(other.components)}"
            )


# =============================================================================
# NAMED AXES
# =============================================================================


class _XYAxes(Vector):
    """Именованные оси X/Y (размерности 2, 3 и 4)."""

    @property
    def x(self) -> float:
        return self.components[0]

    @property
    def y(self) -> float:
        return self.components[1]

    def set_x(self, x: float) -> None:
        self.set(0, x)

    def set_y(self, y: float) -> None:
        self.set(1, y)


class _XYZAxes(_XYAxes):
    """Ось Z (размерности 3 и 4)."""

    @property
    def z(self) -> float:
        return self.components[2]

    def set_z(self, z: float) -> None:
        self.set(2, z)


# =============================================================================
# FIXED DIMENSIONS
# =============================================================================


class Vector2(_XYAxes):
    """
    Двумерный вектор.

    Дополнительно: поворот на угол (радианы) и перпендикуляры.
    """

    DIMENSION: ClassVar[int | None] = 2
    LABEL: ClassVar[str | None] = "Vector2"

    def __init__(self, x: float = 0.0, y: float = 0.0, **data: Any) -> None:
        if "components" not in data:
            data["components"] = (x, y)
        super().__init__(**data)

    def get_rotation(self, angle: float) -> "Vector2":
        """
        Копия вектора, повёрнутая на angle радиан (против часовой стрелки).

        Матрица поворота:
            | cos  -sin |
            | sin   cos |
        """
        if not angle:
            return self.model_copy()

        cos = math.cos(angle)
        sin = math.sin(angle)
        return type(self)(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def rotate(self, angle: float) -> None:
        """Повернуть вектор на месте на angle радиан."""
        self.components = self.get_rotation(angle).components

    def get_left_hand_normal(self) -> "Vector2":
        """Левый перпендикуляр: (y, -x)."""
        return type(self)(self.y, -self.x)

    def get_right_hand_normal(self) -> "Vector2":
        """Правый перпендикуляр: (-y, x)."""
        return type(self)(-self.y, self.x)


class Vector3(_XYZAxes):
    """
    Трёхмерный вектор.

    Единственный тип с векторным произведением.
    """

    DIMENSION: ClassVar[int | None] = 3
    LABEL: ClassVar[str | None] = "Vector3"

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, **data: Any
    ) -> None:
        if "components" not in data:
            data["components"] = (x, y, z)
        super().__init__(**data)

    def cross(self, vector: Vector) -> "Vector3":
        """
        Векторное произведение self × vector (правая тройка).

        Свойство: a × b == -(b × a)

        Raises:
            DimensionMismatch: Если vector не трёхмерный
        """
        self._require_same_dimension(vector)
        x1, y1, z1 = self.components
        x2, y2, z2 = vector.components
        return type(self)(
            y1 * z2 - z1 * y2,
            z1 * x2 - x1 * z2,
            x1 * y2 - y1 * x2,
        )


class Vector4(_XYZAxes):
    """Четырёхмерный вектор (X/Y/Z/W)."""

    DIMENSION: ClassVar[int | None] = 4
    LABEL: ClassVar[str | None] = "Vector4"

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        w: float = 0.0,
        **data: Any,
    ) -> None:
        if "components" not in data:
            data["components"] = (x, y, z, w)
        super().__init__(**data)

    @property
    def w(self) -> float:
        return self.components[3]

    def set_w(self, w: float) -> None:
        self.set(3, w)


# =============================================================================
# FREE FUNCTIONS
# =============================================================================


def project(first: Vector, second: Vector) -> Vector:
    """Проекция first на second (новый вектор)."""
    return first.get_projection(second)


def scalar_project(first: Vector, second: Vector) -> float:
    """Скалярная проекция first на second."""
    return first.get_scalar_projection(second)


def normalize(vector: Vector) -> Vector:
    """Нормализованная копия vector."""
    return vector.get_normalization()
