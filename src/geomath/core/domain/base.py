"""
ValueModel — общая база mutable value-типов

Запись публичного поля (v.components = ..., r.numerator = ...) проходит
полную валидацию модели на копии состояния: валидаторы восстанавливают
инварианты (канонический вид дроби, единичная нормаль, размерность), и
только затем новое состояние присваивается получателю. Если валидация
падает, получатель не меняется.

Внутренние записи уже проверенного состояния идут через _set_fields и
валидацию не повторяют.
"""

from typing import Any

from pydantic import BaseModel


class ValueModel(BaseModel):
    """Mutable pydantic-модель, запись полей которой не обходит валидаторы."""

    def __setattr__(self, name: str, value: Any) -> None:
        fields = type(self).model_fields
        if name not in fields:
            super().__setattr__(name, value)
            return

        state = {field: getattr(self, field) for field in fields}
        state[name] = value
        validated = type(self).model_validate(state)
        self._set_fields(**{field: getattr(validated, field) for field in fields})

    def _set_fields(self, **values: Any) -> None:
        # Без повторной валидации: значения уже согласованы вызывающим
        for name, value in values.items():
            super().__setattr__(name, value)
