"""
Bounds — axis-aligned bounding box

Бокс задаётся двумя углами: upper_limit и lower_limit (векторы одной
размерности). Границы замкнутые с обеих сторон: точка на границе — внутри.

- Bounds: обобщённый бокс размерности N
- Bounds2 / Bounds3: углы типа Vector2 / Vector3

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустота — производное свойство: upper[i] <= lower[i] хотя бы по одной оси
2. set(first, second) упорядочивает углы по каждой оси независимо
3. set_upper_limit / set_lower_limit могут сделать бокс пустым (это не ошибка)
4. Пересечение непересекающихся боксов — пустой бокс (это не ошибка)
5. Бокс владеет копиями своих углов (нет aliasing с векторами вызывающего)
"""

import logging
from typing import Any, ClassVar

from pydantic import Field, field_validator, model_validator

from geomath.core.domain.base import ValueModel
from geomath.core.domain.exceptions import DimensionMismatch
from geomath.core.domain.vector import Vector, Vector2, Vector3

logger = logging.getLogger(__name__)


# =============================================================================
# GENERIC BOUNDS
# =============================================================================


class Bounds(ValueModel):
    """
    Обобщённый axis-aligned бокс размерности N.

    Создание:
        Bounds(first, second)           # углы упорядочиваются по осям
        Bounds.empty(dimension)         # пустой бокс в начале координат
        Bounds2() / Bounds3()           # то же для фиксированных размерностей
    """

    DIMENSION: ClassVar[int | None] = None
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector
    LABEL: ClassVar[str | None] = None

    upper_limit: Vector = Field(..., description="Верхний угол (max по каждой оси)")
    lower_limit: Vector = Field(..., description="Нижний угол (min по каждой оси)")

    def __init__(
        self,
        first: Vector | None = None,
        second: Vector | None = None,
        **data: Any,
    ) -> None:
        if first is not None or second is not None:
            if first is None or second is None:
                raise TypeError("bounds requires both corners or none")
            data["upper_limit"], data["lower_limit"] = self._order_corners(first, second)
        elif "upper_limit" not in data and "lower_limit" not in data:
            if type(self).DIMENSION is not None:
                data["upper_limit"] = type(self).VECTOR_TYPE.null()
                data["lower_limit"] = type(self).VECTOR_TYPE.null()
        super().__init__(**data)

    @field_validator("upper_limit", "lower_limit")
    @classmethod
    def copy_limit(cls, v: Vector) -> Vector:
        """Бокс хранит собственную копию угла."""
        return v.model_copy()

    @model_validator(mode="after")
    def check_dimension(self) -> "Bounds":
        """Углы одной размерности, совпадающей с DIMENSION."""
        upper_dim = self.upper_limit.get_dimension()
        lower_dim = self.lower_limit.get_dimension()
        if upper_dim != lower_dim:
            raise ValueError(
                f"limits must share a dimension, got {upper_dim} and {lower_dim}"
            )
        expected = type(self).DIMENSION
        if expected is not None and upper_dim != expected:
            raise ValueError(
                f"{type(self).__name__} expects dimension {expected}, got {upper_dim}"
            )
        return self

    @classmethod
    def empty(cls, dimension: int | None = None) -> "Bounds":
        """Пустой бокс: оба угла в начале координат."""
        return cls(
            upper_limit=cls.VECTOR_TYPE.null(dimension),
            lower_limit=cls.VECTOR_TYPE.null(dimension),
        )

    # -------------------------------------------------------------------------
    # Getters / setters
    # -------------------------------------------------------------------------

    def get_dimension(self) -> int:
        return self.upper_limit.get_dimension()

    def get_upper_limit(self) -> Vector:
        """Копия верхнего угла."""
        return self.upper_limit.model_copy()

    def get_lower_limit(self) -> Vector:
        """Копия нижнего угла."""
        return self.lower_limit.model_copy()

    def is_empty(self) -> bool:
        """
        Пустой бокс: upper[i] <= lower[i] хотя бы по одной оси.

        Вырожденный бокс (нулевая ширина по оси) тоже пустой.
        """
        return any(
            u <= l
            for u, l in zip(self.upper_limit.components, self.lower_limit.components)
        )

    def set(self, first: Vector, second: Vector) -> None:
        """
        Переопределить бокс двумя произвольными углами.

        По каждой оси больший из двух компонент уходит в upper_limit,
        меньший — в lower_limit. Равные компоненты дают пустой бокс.
        """
        upper, lower = self._order_corners(first, second)
        self._set_fields(upper_limit=upper, lower_limit=lower)

    def set_upper_limit(self, upper_limit: Vector) -> None:
        """Заменить верхний угол как есть (без упорядочивания)."""
        self._require_same_dimension(upper_limit)
        self.upper_limit = self._corner(upper_limit.components, self.upper_limit)

    def set_lower_limit(self, lower_limit: Vector) -> None:
        """Заменить нижний угол как есть (без упорядочивания)."""
        self._require_same_dimension(lower_limit)
        self.lower_limit = self._corner(lower_limit.components, self.lower_limit)

    # -------------------------------------------------------------------------
    # Union / intersection
    # -------------------------------------------------------------------------

    def include(self, value: "Vector | Bounds") -> None:
        """
        Расширить бокс, чтобы он покрывал точку или другой бокс.

        Бокс никогда не сжимается. Включение бокса эквивалентно включению
        обоих его углов.

        Args:
            value: Точка (Vector) или бокс (Bounds)

        Raises:
            DimensionMismatch: Если размерности различаются
        """
        if isinstance(value, Bounds):
            points = [value.upper_limit, value.lower_limit]
        else:
            points = [value]

        upper = list(self.upper_limit.components)
        lower = list(self.lower_limit.components)
        for point in points:
            self._require_same_dimension(point)
            for i, c in enumerate(point.components):
                if c > upper[i]:
                    upper[i] = c
                if c < lower[i]:
                    lower[i] = c

        self._set_fields(
            upper_limit=self._corner(upper, self.upper_limit),
            lower_limit=self._corner(lower, self.lower_limit),
        )

    def intersect(self, bounds: "Bounds") -> None:
        """
        Сжать бокс до пересечения с bounds.

        По каждой оси: upper = min(upper, other.upper), lower = max(lower, other.lower).
        Если боксы не пересекаются, результат пустой.
        """
        self._require_same_bounds(bounds)
        upper = self._corner(
            (
                min(a, b)
                for a, b in zip(self.upper_limit.components, bounds.upper_limit.components)
            ),
            like=self.upper_limit,
        )
        lower = self._corner(
            (
                max(a, b)
                for a, b in zip(self.lower_limit.components, bounds.lower_limit.components)
            ),
            like=self.lower_limit,
        )
        self._set_fields(upper_limit=upper, lower_limit=lower)

    def get_intersection(self, bounds: "Bounds") -> "Bounds":
        """Пересечение как новый бокс; операнды не меняются."""
        copy = self.model_copy(deep=True)
        copy.intersect(bounds)
        return copy

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def has_point_inside(self, point: Vector) -> bool:
        """Точка внутри бокса (границы включительно)."""
        self._require_same_dimension(point)
        return all(
            l <= c <= u
            for c, u, l in zip(
                point.components,
                self.upper_limit.components,
                self.lower_limit.components,
            )
        )

    def has_bounds_inside(self, bounds: "Bounds") -> bool:
        """
        Бокс bounds целиком внутри этого бокса.

        По каждой оси: other.upper <= upper и other.lower >= lower.
        """
        self._require_same_bounds(bounds)
        return all(
            ou <= u and ol >= l
            for ou, ol, u, l in zip(
                bounds.upper_limit.components,
                bounds.lower_limit.components,
                self.upper_limit.components,
                self.lower_limit.components,
            )
        )

    def is_inside(self, value: "Vector | Bounds") -> bool:
        """Точка или бокс внутри этого бокса."""
        if isinstance(value, Bounds):
            return self.has_bounds_inside(value)
        return self.has_point_inside(value)

    def is_intersecting(self, bounds: "Bounds") -> bool:
        """Пересечение с bounds непустое."""
        return not self.get_intersection(bounds).is_empty()

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, (Vector, Bounds)):
            return False
        return self.is_inside(point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return (
            self.upper_limit == other.upper_limit
            and self.lower_limit == other.lower_limit
        )

    def __str__(self) -> str:
        label = type(self).LABEL or f"Bounds<{self.get_dimension()}>"
        return f"{label}[{self.lower_limit}, {self.upper_limit}]"

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @classmethod
    def _corner(cls, values: Any, like: Vector) -> Vector:
        # Обобщённый бокс сохраняет тип углов (Bounds(Vector2, Vector2) хранит Vector2)
        vector_type = cls.VECTOR_TYPE if cls.DIMENSION is not None else type(like)
        return vector_type(*tuple(values))

    @classmethod
    def _order_corners(cls, first: Vector, second: Vector) -> tuple[Vector, Vector]:
        if not isinstance(first, Vector) or not isinstance(second, Vector):
            raise TypeError("bounds corners must be vectors")
        expected = cls.DIMENSION or first.get_dimension()
        for corner in (first, second):
            if corner.get_dimension() != expected:
                logger.debug("corner %s rejected for %s", corner, cls.__name__)
                raise DimensionMismatch(
                    f"{cls.__name__} corner must have dimension {expected}, "
                    f"got {corner.get_dimension()}"
                )

        upper = []
        lower = []
        for a, b in zip(first.components, second.components):
            if a > b:
                upper.append(a)
                lower.append(b)
            else:
                upper.append(b)
                lower.append(a)
        return cls._corner(upper, first), cls._corner(lower, first)

    def _require_same_dimension(self, point: Vector) -> None:
        if not isinstance(point, Vector):
            raise TypeError(f"expected a vector, got {type(point).__name__}")
        if point.get_dimension() != self.get_dimension():
            logger.debug("dimension mismatch between %s and %s", self, point)
            raise DimensionMismatch(
                f"dimension mismatch: bounds {self.get_dimension()} "
                f"vs vector {point.get_dimension()}"
            )

    def _require_same_bounds(self, bounds: "Bounds") -> None:
        if not isinstance(bounds, Bounds):
            raise TypeError(f"expected bounds, got {type(bounds).__name__}")
        self._require_same_dimension(bounds.upper_limit)


# =============================================================================
# FIXED DIMENSIONS
# =============================================================================


class Bounds2(Bounds):
    """Прямоугольник на плоскости (углы Vector2)."""

    DIMENSION: ClassVar[int | None] = 2
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector2
    LABEL: ClassVar[str | None] = "Bounds2"

    upper_limit: Vector2 = Field(..., description="Верхний угол")
    lower_limit: Vector2 = Field(..., description="Нижний угол")


class Bounds3(Bounds):
    """Параллелепипед в пространстве (углы Vector3)."""

    DIMENSION: ClassVar[int | None] = 3
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector3
    LABEL: ClassVar[str | None] = "Bounds3"

    upper_limit: Vector3 = Field(..., description="Верхний угол")
    lower_limit: Vector3 = Field(..., description="Нижний угол")
