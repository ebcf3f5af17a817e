from __future__ import annotations

import os

# Runtime mode
SQLITE_SHIM_ENV = "SQLITE_SHIM_ENV"
SQLITE_SHIM_LOCAL_DB_PATH = "SQLITE_SHIM_LOCAL_DB_PATH"
SQLITE_SHIM_SCHEMA_PREFIX = "SQLITE_SHIM_SCHEMA_PREFIX"

# Translation cache
SQLITE_SHIM_TRANSLATION_CACHE_ENABLED = "SQLITE_SHIM_TRANSLATION_CACHE_ENABLED"
SQLITE_SHIM_TRANSLATION_CACHE_MAX_ENTRIES = "SQLITE_SHIM_TRANSLATION_CACHE_MAX_ENTRIES"

# SQL tracing
SQLITE_SHIM_SQL_TRACE_ENABLED = "SQLITE_SHIM_SQL_TRACE_ENABLED"
SQLITE_SHIM_SQL_TRACE_MAX_LEN = "SQLITE_SHIM_SQL_TRACE_MAX_LEN"
SQLITE_SHIM_SLOW_QUERY_MS = "SQLITE_SHIM_SLOW_QUERY_MS"

# Logging
SQLITE_SHIM_LOG_LEVEL = "SQLITE_SHIM_LOG_LEVEL"
SQLITE_SHIM_LOG_JSON = "SQLITE_SHIM_LOG_JSON"
SQLITE_SHIM_DIALECT_LOG_LEVEL = "SQLITE_SHIM_DIALECT_LOG_LEVEL"

TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def get_env(name: str, default: str = "") -> str:
    return str(os.getenv(name, default)).strip()


def get_env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUE_VALUES


def get_env_int(name: str, default: int, min_value: int | None = None) -> int:
    raw = get_env(name)
    try:
        value = int(raw) if raw else int(default)
    except ValueError:
        value = int(default)
    if min_value is not None:
        value = max(int(min_value), value)
    return value


def get_env_float(name: str, default: float, min_value: float | None = None) -> float:
    raw = get_env(name)
    try:
        value = float(raw) if raw else float(default)
    except ValueError:
        value = float(default)
    if min_value is not None:
        value = max(float(min_value), value)
    return value
