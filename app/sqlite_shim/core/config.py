from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sqlite_shim.core.defaults import (
    DEFAULT_ENV_NAME,
    DEFAULT_LOCAL_DB_PATH,
    DEFAULT_SLOW_QUERY_MS,
    DEFAULT_SQL_TRACE_MAX_LEN,
    DEFAULT_SQL_TRACE_MIN_LEN,
    DEFAULT_TRANSLATION_CACHE_MAX_ENTRIES,
)
from sqlite_shim.core.env import (
    SQLITE_SHIM_ENV,
    SQLITE_SHIM_LOCAL_DB_PATH,
    SQLITE_SHIM_SCHEMA_PREFIX,
    SQLITE_SHIM_SLOW_QUERY_MS,
    SQLITE_SHIM_SQL_TRACE_ENABLED,
    SQLITE_SHIM_SQL_TRACE_MAX_LEN,
    SQLITE_SHIM_TRANSLATION_CACHE_ENABLED,
    SQLITE_SHIM_TRANSLATION_CACHE_MAX_ENTRIES,
    get_env,
    get_env_bool,
    get_env_float,
    get_env_int,
)


def _repo_root() -> Path:
    # app/sqlite_shim/core/config.py -> repo root
    # parents[0]=core, [1]=sqlite_shim, [2]=app, [3]=repo root
    return Path(__file__).resolve().parents[3]


def _resolve_repo_relative_path(raw_path: str) -> str:
    value = str(raw_path or "").strip()
    if not value:
        return value
    path = Path(value)
    if path.is_absolute():
        return str(path)
    return str((_repo_root() / path).resolve())


def _resolve_schema_prefix() -> str:
    raw = get_env(SQLITE_SHIM_SCHEMA_PREFIX)
    if not raw:
        return ""
    parts = [item.strip() for item in raw.split(".")]
    if len(parts) > 2 or not all(parts):
        raise RuntimeError(
            "SQLITE_SHIM_SCHEMA_PREFIX must be in '<schema>' or '<catalog>.<schema>' format."
        )
    return ".".join(parts)


@dataclass(frozen=True)
class ShimConfig:
    env: str = DEFAULT_ENV_NAME
    local_db_path: str = DEFAULT_LOCAL_DB_PATH
    schema_prefix: str = ""
    translation_cache_enabled: bool = True
    translation_cache_max_entries: int = DEFAULT_TRANSLATION_CACHE_MAX_ENTRIES
    sql_trace_enabled: bool = False
    sql_trace_max_len: int = DEFAULT_SQL_TRACE_MAX_LEN
    slow_query_ms: float = DEFAULT_SLOW_QUERY_MS

    @property
    def qualified_prefix(self) -> str:
        """Prefix (with trailing dot) removed from statements before translation."""
        if not self.schema_prefix:
            return ""
        return f"{self.schema_prefix}."

    @staticmethod
    def from_env() -> "ShimConfig":
        env_name = get_env(SQLITE_SHIM_ENV, DEFAULT_ENV_NAME).lower() or DEFAULT_ENV_NAME
        return ShimConfig(
            env=env_name,
            local_db_path=_resolve_repo_relative_path(
                get_env(SQLITE_SHIM_LOCAL_DB_PATH, DEFAULT_LOCAL_DB_PATH)
            ),
            schema_prefix=_resolve_schema_prefix(),
            translation_cache_enabled=get_env_bool(SQLITE_SHIM_TRANSLATION_CACHE_ENABLED, default=True),
            translation_cache_max_entries=get_env_int(
                SQLITE_SHIM_TRANSLATION_CACHE_MAX_ENTRIES,
                default=DEFAULT_TRANSLATION_CACHE_MAX_ENTRIES,
                min_value=1,
            ),
            sql_trace_enabled=get_env_bool(SQLITE_SHIM_SQL_TRACE_ENABLED, default=False),
            sql_trace_max_len=get_env_int(
                SQLITE_SHIM_SQL_TRACE_MAX_LEN,
                default=DEFAULT_SQL_TRACE_MAX_LEN,
                min_value=DEFAULT_SQL_TRACE_MIN_LEN,
            ),
            slow_query_ms=get_env_float(
                SQLITE_SHIM_SLOW_QUERY_MS,
                default=DEFAULT_SLOW_QUERY_MS,
                min_value=1.0,
            ),
        )
