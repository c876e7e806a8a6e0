"""structlog on top of the standard logging module.

Library modules only call ``structlog.get_logger(__name__)``; nothing is
configured until an application (the CLI, or the embedding program) calls
:func:`setup_logging` or :func:`configure_from_settings`.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import structlog
from pydantic import BaseModel, Field, field_validator

from ..configuration.hub import ConfigurationHub
from ..configuration.loaders import get_hub

_STDLIB_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    renderer: Literal["console", "json"] = "console"
    log_file: Optional[str] = None
    max_bytes: int = Field(5 * 1024 * 1024, ge=1024)
    backup_count: int = Field(3, ge=0)
    capture_warnings: bool = True

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


_is_configured = False


def _handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        path = Path(config.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                path,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        )
    formatter = logging.Formatter(fmt=_STDLIB_FORMAT, datefmt=_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _processors(config: LoggingConfig) -> List[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if config.renderer == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def setup_logging(config: Union[LoggingConfig, Dict[str, Any], None] = None) -> LoggingConfig:
    """(Re)configure the root logger and structlog; return the resolved config."""

    global _is_configured
    if config is None:
        resolved = LoggingConfig()
    elif isinstance(config, LoggingConfig):
        resolved = config
    else:
        resolved = LoggingConfig.model_validate(config)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in _handlers(resolved):
        root.addHandler(handler)
    root.setLevel(resolved.level)
    logging.captureWarnings(resolved.capture_warnings)

    structlog.configure(
        processors=_processors(resolved),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _is_configured = True
    return resolved


def configure_from_settings(hub: Optional[ConfigurationHub] = None) -> LoggingConfig:
    """Configure logging from the ``logging`` section of ``hub``."""

    hub = hub or get_hub()
    return setup_logging(hub.section("logging", LoggingConfig))


def is_configured() -> bool:
    return _is_configured


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    if not _is_configured:
        configure_from_settings()
    return structlog.get_logger(name)
