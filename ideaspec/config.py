"""Configuration loading for ideaspec (.ideaspec.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .logging import parse_levels
from .utils import as_bool

CONFIG_FILENAME = ".ideaspec.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ServiceConfig:
    """HTTP service limits."""

    cache_ttl_seconds: float = 60.0
    rate_limit: int = 60
    rate_window_seconds: float = 60.0
    max_idea_chars: int = 4000


@dataclass
class LoggingConfig:
    """Log verbosity, per-component levels and optional file sink."""

    verbose: bool = False
    log_file: Optional[Path] = None
    levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class IdeaSpecConfig:
    """Represents the settings defined in .ideaspec.yml."""

    root: Path
    service: ServiceConfig = field(default_factory=ServiceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    templates_dir: Optional[Path] = None


def load_config(config_path: Path | None = None) -> IdeaSpecConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path or Path.cwd())
    root = config_file.parent.resolve()

    if not config_file.exists():
        return IdeaSpecConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    defaults = ServiceConfig()
    service_data = _as_dict(data.get("service"))
    service = ServiceConfig(
        cache_ttl_seconds=_as_non_negative_float(
            service_data.get("cache_ttl_seconds"), defaults.cache_ttl_seconds
        ),
        rate_limit=_as_positive_int(service_data.get("rate_limit"), defaults.rate_limit),
        rate_window_seconds=_as_positive_float(
            service_data.get("rate_window_seconds"), defaults.rate_window_seconds
        ),
        max_idea_chars=_as_positive_int(service_data.get("max_idea_chars"), defaults.max_idea_chars),
    )

    logging_data = _as_dict(data.get("logging"))
    log_file = _as_str(logging_data.get("log_file"))
    logging_config = LoggingConfig(
        verbose=bool(as_bool(logging_data.get("verbose"))),
        log_file=root / log_file if log_file else None,
        levels=parse_levels(_as_dict(logging_data.get("levels"))),
    )

    prompting_data = _as_dict(data.get("prompting"))
    templates_dir = _as_str(prompting_data.get("templates_dir"))

    return IdeaSpecConfig(
        root=root,
        service=service,
        logging=logging_config,
        templates_dir=root / templates_dir if templates_dir else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_non_negative_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value) if value >= 0 else default
    if isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError:
            return default
        return parsed if parsed >= 0 else default
    return default


def _as_positive_float(value: Any, default: float) -> float:
    parsed = _as_non_negative_float(value, default)
    return parsed if parsed > 0 else default


def _as_positive_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return default
        return parsed if parsed > 0 else default
    return default


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "IdeaSpecConfig",
    "LoggingConfig",
    "ServiceConfig",
    "load_config",
]
