from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from sqlite_shim.core.config import ShimConfig
from sqlite_shim.core.defaults import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL
from sqlite_shim.core.env import (
    SQLITE_SHIM_DIALECT_LOG_LEVEL,
    SQLITE_SHIM_LOG_JSON,
    SQLITE_SHIM_LOG_LEVEL,
    get_env,
    get_env_bool,
)

SHIM_LOGGER_NAME = "sqlite_shim"
DIALECT_LOGGER_NAME = "sqlite_shim.dialect"
PERF_LOGGER_NAME = "sqlite_shim.perf"

_LOGGING_CONFIGURED = False
_STANDARD_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _level_from_env(name: str, fallback: str) -> tuple[str, int]:
    level_name = get_env(name, fallback).upper() or fallback
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        return fallback, logging.getLevelName(fallback)
    return level_name, level


class JsonFormatter(logging.Formatter):
    """One JSON object per record; sql_trace fields ride along as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_FIELDS or key.startswith("_") or value is None:
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=True)


def logger_levels(config: ShimConfig, base_level: int, dialect_level: int) -> dict[str, int]:
    """Per-logger levels for the shim.

    SQL traces are emitted at INFO, so the perf logger opens up to INFO only
    while tracing is enabled; otherwise it passes slow and failed statements.
    """
    return {
        SHIM_LOGGER_NAME: base_level,
        DIALECT_LOGGER_NAME: dialect_level,
        PERF_LOGGER_NAME: logging.INFO if config.sql_trace_enabled else logging.WARNING,
    }


def setup_app_logging(config: ShimConfig | None = None, *, force: bool = False) -> None:
    global _LOGGING_CONFIGURED  # pylint: disable=global-statement
    if _LOGGING_CONFIGURED and not force:
        return

    config = config or ShimConfig.from_env()
    base_name, base_level = _level_from_env(SQLITE_SHIM_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    dialect_name, dialect_level = _level_from_env(SQLITE_SHIM_DIALECT_LOG_LEVEL, base_name)
    use_json = get_env_bool(SQLITE_SHIM_LOG_JSON, default=False)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter() if use_json else logging.Formatter(DEFAULT_LOG_FORMAT))

    shim_logger = logging.getLogger(SHIM_LOGGER_NAME)
    shim_logger.handlers.clear()
    shim_logger.addHandler(handler)
    shim_logger.propagate = False
    for name, level in logger_levels(config, base_level, dialect_level).items():
        logging.getLogger(name).setLevel(level)

    shim_logger.info(
        "Shim logging configured. level=%s dialect_level=%s sql_trace=%s json=%s",
        base_name,
        dialect_name,
        str(config.sql_trace_enabled).lower(),
        str(use_json).lower(),
    )
    _LOGGING_CONFIGURED = True
