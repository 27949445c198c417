"""Logging utilities for ideaspec commands and the service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

_LOGGER_NAME = "ideaspec"

# Components that call get_logger(); per-component levels may only target these.
COMPONENTS = ("classifier", "engine", "service", "stores", "cli")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the ideaspec hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    levels: Mapping[str, str] | None = None,
) -> logging.Logger:
    """Configure the ideaspec logger hierarchy.

    ``verbose`` sets the root ideaspec level. ``levels`` overrides single
    components, e.g. ``{"service": "WARNING"}`` keeps request noise out of a
    verbose classifier trace. Handlers sit on the root logger so component
    records reach them regardless of which level let them through.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("[ideaspec] %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    overrides = dict(levels or {})
    for component in COMPONENTS:
        component_level = overrides.get(component)
        # NOTSET defers to the root ideaspec level set above.
        get_logger(component).setLevel(component_level or logging.NOTSET)

    return logger


def parse_levels(data: Mapping[str, object]) -> dict[str, str]:
    """Keep only known components mapped to known level names."""
    parsed: dict[str, str] = {}
    for component, value in data.items():
        if component not in COMPONENTS or not isinstance(value, str):
            continue
        name = value.strip().upper()
        if name in LEVELS:
            parsed[component] = name
    return parsed


__all__ = ["COMPONENTS", "LEVELS", "configure_logging", "get_logger", "parse_levels"]
