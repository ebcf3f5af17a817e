from __future__ import annotations

from pathlib import Path

import pytest

_SHIM_ENV_KEYS = (
    "SQLITE_SHIM_ENV",
    "SQLITE_SHIM_LOCAL_DB_PATH",
    "SQLITE_SHIM_SCHEMA_PREFIX",
    "SQLITE_SHIM_TRANSLATION_CACHE_ENABLED",
    "SQLITE_SHIM_TRANSLATION_CACHE_MAX_ENTRIES",
    "SQLITE_SHIM_SQL_TRACE_ENABLED",
    "SQLITE_SHIM_SQL_TRACE_MAX_LEN",
    "SQLITE_SHIM_SLOW_QUERY_MS",
    "SQLITE_SHIM_LOG_LEVEL",
    "SQLITE_SHIM_LOG_JSON",
    "SQLITE_SHIM_DIALECT_LOG_LEVEL",
)


@pytest.fixture()
def isolated_shim_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    for key in _SHIM_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    db_path = tmp_path / "sqlite_shim_test.db"
    monkeypatch.setenv("SQLITE_SHIM_ENV", "dev")
    monkeypatch.setenv("SQLITE_SHIM_LOCAL_DB_PATH", str(db_path))
    return db_path
