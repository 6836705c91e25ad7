"""
Logging — вывод диагностики geomath через structlog

Модули geomath пишут только в stdlib-логгеры (logging.getLogger(__name__))
и только на уровне DEBUG, непосредственно перед возбуждением доменной
ошибки: какой вектор не удалось нормализовать, какой знаменатель отклонён,
какие размерности не совпали. На импорт пакет логирование не настраивает.

configure_logging() подключает к корневому логгеру один stderr-обработчик
со structlog ProcessorFormatter. Обработчики, поставленные приложением,
остаются на месте; повторный вызов заменяет только обработчик geomath.

Форматы:
- консоль (по умолчанию): ConsoleRenderer, цвет только для TTY
- JSON lines (log_json=True): одна запись на строку, ключи отсортированы
"""

import logging
import sys

import structlog

# Все модульные логгеры (geomath.core.domain.vector, ...) — потомки этого
PACKAGE_LOGGER_NAME = "geomath"

# Обогащение stdlib-записей до рендеринга
_RECORD_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
]


def _build_renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _is_package_handler(handler: logging.Handler) -> bool:
    return isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """
    Направить записи geomath в stderr.

    Уровни:
        geomath → DEBUG при verbose, иначе WARNING (DEBUG-записи об
                  ошибках value-типов отбрасываются)
        root    → WARNING

    Args:
        verbose: Показывать DEBUG-записи модулей geomath
        log_json: JSON lines вместо консольного формата
    """
    # structlog-логгеры приложения идут через тот же обработчик
    structlog.configure(
        processors=[
            *_RECORD_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_RECORD_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _build_renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if _is_package_handler(h)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
