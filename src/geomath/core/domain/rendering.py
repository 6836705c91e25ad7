"""Текстовое представление скаляров для диагностики и логов (не для парсинга)."""


def format_scalar(value: float) -> str:
    """
    Скаляр в коротком виде (%g): 1.0 → '1', 0.5 → '0.5', 1e-20 → '1e-20'.
    """
    return f"{value:g}"
