"""
Plane — ориентированная гиперплоскость

Плоскость хранит единичную нормаль и знаковое расстояние от начала
координат (скалярная проекция опорной точки на нормаль).

- Plane: обобщённая плоскость (нормаль — Vector любой размерности)
- Plane2: прямая на плоскости (нормаль Vector2)
- Plane3: плоскость в пространстве (нормаль Vector3)

Классификация точки (on / over / under) сравнивает её смещение вдоль
нормали с distance через compare_with_tolerance: ровно один из трёх
предикатов истинен для любой точки, опорная точка всегда лежит на плоскости.
"""

import logging
from typing import Any, ClassVar

from pydantic import Field, field_validator, model_validator

from geomath.core.domain.base import ValueModel
from geomath.core.domain.exceptions import DimensionMismatch
from geomath.core.domain.rendering import format_scalar
from geomath.core.domain.vector import Vector, Vector2, Vector3
from geomath.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    ComparisonTolerance,
    compare_with_tolerance,
)

logger = logging.getLogger(__name__)


class Plane(ValueModel):
    """
    Плоскость, заданная нормалью и точкой.

    Plane(normal, point):
        normal   → нормализуется (нулевая нормаль → NullVectorNormalization)
        distance → scalar_projection(point на normal)
    """

    DIMENSION: ClassVar[int | None] = None
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector
    LABEL: ClassVar[str | None] = None

    normal: Vector = Field(..., description="Единичная нормаль")
    distance: float = Field(..., description="Знаковое расстояние от начала координат")

    def __init__(
        self,
        normal: Vector | None = None,
        point: Vector | None = None,
        **data: Any,
    ) -> None:
        if point is not None:
            if normal is None:
                raise TypeError("plane requires a normal together with a point")
            data["normal"], data["distance"] = self._derive(normal, point)
        elif normal is not None:
            data["normal"] = normal
        super().__init__(**data)

        if point is not None:
            # distance считается от сохранённой нормали: опорная точка строго on
            self._set_fields(distance=self._offset(point))

    @field_validator("normal")
    @classmethod
    def normalize_normal(cls, v: Vector) -> Vector:
        """Нормаль всегда хранится единичной."""
        return v.get_normalization()

    @model_validator(mode="after")
    def check_dimension(self) -> "Plane":
        expected = type(self).DIMENSION
        if expected is not None and self.normal.get_dimension() != expected:
            raise ValueError(
                f"{type(self).__name__} expects dimension {expected}, "
                f"got {self.normal.get_dimension()}"
            )
        return self

    # -------------------------------------------------------------------------
    # Getters / setters
    # -------------------------------------------------------------------------

    def get_normal(self) -> Vector:
        """Копия единичной нормали."""
        return self.normal.model_copy()

    def get_distance_from_origin(self) -> float:
        return self.distance

    def set(self, normal: Vector, point: Vector) -> None:
        """
        Переопределить плоскость нормалью и точкой.

        Raises:
            NullVectorNormalization: Если normal нулевой (плоскость не меняется)
            DimensionMismatch: Если размерности normal и point различаются
        """
        normal, distance = self._derive(normal, point)
        self._set_fields(normal=normal, distance=distance)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def is_on(
        self, point: Vector, tolerance: ComparisonTolerance = DEFAULT_TOLERANCE
    ) -> bool:
        """Точка лежит на плоскости (с учётом tolerance)."""
        return compare_with_tolerance(self._offset(point), self.distance, tolerance) == 0

    def is_over(
        self, point: Vector, tolerance: ComparisonTolerance = DEFAULT_TOLERANCE
    ) -> bool:
        """Точка по направлению нормали (за пределами tolerance)."""
        return compare_with_tolerance(self._offset(point), self.distance, tolerance) > 0

    def is_under(
        self, point: Vector, tolerance: ComparisonTolerance = DEFAULT_TOLERANCE
    ) -> bool:
        """Точка против направления нормали (за пределами tolerance)."""
        return compare_with_tolerance(self._offset(point), self.distance, tolerance) < 0

    # -------------------------------------------------------------------------
    # Computations
    # -------------------------------------------------------------------------

    def get_distance(self, point: Vector) -> float:
        """Беззнаковое расстояние от точки до плоскости: |offset - distance|."""
        return abs(self._offset(point) - self.distance)

    def get_projection(self, point: Vector) -> Vector:
        """
        Ортогональная проекция точки на плоскость.

        Формула: point - normal × (offset - distance)

        Returns:
            Новая точка того же типа, что point
        """
        return point - self.normal * (self._offset(point) - self.distance)

    def __str__(self) -> str:
        label = type(self).LABEL or f"Plane<{self.normal.get_dimension()}>"
        return f"{label}[{self.normal}, {format_scalar(self.distance)}]"

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _offset(self, point: Vector) -> float:
        # Нормаль единичная: скалярная проекция = dot
        return point.dot(self.normal)

    @classmethod
    def _derive(cls, normal: Vector, point: Vector) -> tuple[Vector, float]:
        if not isinstance(normal, Vector) or not isinstance(point, Vector):
            raise TypeError("plane normal and point must be vectors")
        expected = cls.DIMENSION or normal.get_dimension()
        for v in (normal, point):
            if v.get_dimension() != expected:
                logger.debug("vector %s rejected for %s", v, cls.__name__)
                raise DimensionMismatch(
                    f"{cls.__name__} requires dimension {expected}, "
                    f"got {v.get_dimension()}"
                )

        unit = cls.VECTOR_TYPE(*normal.get_normalization().components)
        return unit, point.dot(unit)


class Plane2(Plane):
    """Прямая на плоскости: нормаль Vector2."""

    DIMENSION: ClassVar[int | None] = 2
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector2
    LABEL: ClassVar[str | None] = "Plane2"

    normal: Vector2 = Field(..., description="Единичная нормаль")


class Plane3(Plane):
    """Плоскость в пространстве: нормаль Vector3."""

    DIMENSION: ClassVar[int | None] = 3
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector3
    LABEL: ClassVar[str | None] = "Plane3"

    normal: Vector3 = Field(..., description="Единичная нормаль")
