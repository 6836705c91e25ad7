"""Logging configuration for applications embedding geomath."""

from geomath.config.logging import PACKAGE_LOGGER_NAME, configure_logging

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
]
