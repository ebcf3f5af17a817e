from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
import hashlib
import logging
from pathlib import Path
import re
import sqlite3
import time
from typing import Any, Iterable

import pandas as pd

from sqlite_shim.core.config import ShimConfig
from sqlite_shim.dialect import is_suppressed, statement_category, translate
from sqlite_shim.dialect.translator import sql_preview
from sqlite_shim.infrastructure.cache import TranslationCache

PERF_LOGGER = logging.getLogger("sqlite_shim.perf")


class DataConnectionError(RuntimeError):
    """Raised when the local SQLite database cannot be opened."""


class DataQueryError(RuntimeError):
    """Raised when a translated query fails."""


class DataExecutionError(RuntimeError):
    """Raised when a translated non-query statement fails."""


class LocalSqliteClient:
    """Runs MySQL-flavoured statements against a local SQLite file.

    Every statement is translated before it reaches SQLite. Statements that
    translate to nothing (the ``sqlite3-skip`` marker) are never sent.
    """

    def __init__(self, config: ShimConfig) -> None:
        self.config = config
        self._translation_cache = TranslationCache(
            enabled=config.translation_cache_enabled,
            max_entries=config.translation_cache_max_entries,
        )

    @property
    def db_path(self) -> Path:
        return Path(self.config.local_db_path).resolve()

    @contextmanager
    def _connection(self):
        db_path = self.db_path
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(db_path))
        except Exception as exc:
            raise DataConnectionError(f"Failed to connect to local SQLite DB at {db_path}.") from exc
        try:
            yield conn
        finally:
            conn.close()

    def prepare(self, statement: str) -> str:
        normalized = str(statement or "")
        if normalized.startswith("\ufeff"):
            normalized = normalized.lstrip("\ufeff")
        # Host code may use format-style placeholders; SQLite only takes qmark.
        normalized = normalized.replace("%s", "?")
        prefix = self.config.qualified_prefix
        if prefix:
            # Whole qualifiers only.
            normalized = re.sub(rf"(?<![\w.]){re.escape(prefix)}", "", normalized)
        return self._translation_cache.get_or_translate(normalized, translate)

    @staticmethod
    def _prepare_params(params: Iterable[Any] | None) -> tuple[Any, ...]:
        if not params:
            return ()
        cleaned: list[Any] = []
        for value in params:
            if isinstance(value, datetime):
                cleaned.append(value.isoformat(sep=" "))
            elif isinstance(value, date):
                cleaned.append(value.isoformat())
            else:
                cleaned.append(value)
        return tuple(cleaned)

    def cache_stats(self) -> dict[str, int]:
        return self._translation_cache.stats()

    def _record_sql_trace(
        self,
        *,
        operation: str,
        statement: str,
        elapsed_ms: float,
        row_count: int | None = None,
        suppressed: bool = False,
        error: bool = False,
    ) -> None:
        slow = elapsed_ms >= self.config.slow_query_ms
        if not (self.config.sql_trace_enabled or slow or error):
            return

        statement_text = str(statement or "")
        sql_hash = hashlib.sha1(statement_text.encode("utf-8", errors="ignore")).hexdigest()[:12]
        preview = sql_preview(statement_text, max_len=self.config.sql_trace_max_len)
        log_fn = PERF_LOGGER.warning if (slow or error) else PERF_LOGGER.info
        log_fn(
            "sql_trace op=%s ms=%.2f rows=%s suppressed=%s error=%s hash=%s sql=%s",
            operation,
            float(elapsed_ms),
            "-" if row_count is None else int(row_count),
            str(bool(suppressed)).lower(),
            str(bool(error)).lower(),
            sql_hash,
            preview,
            extra={
                "event": "sql_trace",
                "operation": operation,
                "category": statement_category(statement_text),
                "elapsed_ms": round(float(elapsed_ms), 2),
                "rows": None if row_count is None else int(row_count),
                "suppressed": bool(suppressed),
                "error": bool(error),
                "sql_hash": sql_hash,
                "sql_preview": preview,
            },
        )

    def query(self, statement: str, params: Iterable[Any] | None = None) -> pd.DataFrame:
        prepared_statement = ""
        try:
            prepared_statement = self.prepare(statement)
            prepared_params = self._prepare_params(params)
            if is_suppressed(prepared_statement):
                self._record_sql_trace(
                    operation="query",
                    statement=statement,
                    elapsed_ms=0.0,
                    row_count=0,
                    suppressed=True,
                )
                return pd.DataFrame()

            started = time.perf_counter()
            with self._connection() as conn:
                cursor = conn.cursor()
                try:
                    cursor.execute(prepared_statement, prepared_params)
                    rows = cursor.fetchall()
                    cols = [desc[0] for desc in cursor.description] if cursor.description else []
                finally:
                    cursor.close()
            frame = pd.DataFrame(rows, columns=cols)
            self._record_sql_trace(
                operation="query",
                statement=prepared_statement,
                elapsed_ms=(time.perf_counter() - started) * 1000.0,
                row_count=len(frame.index),
            )
            return frame
        except DataConnectionError:
            self._record_sql_trace(
                operation="query",
                statement=prepared_statement or statement,
                elapsed_ms=0.0,
                error=True,
            )
            raise
        except Exception as exc:
            self._record_sql_trace(
                operation="query",
                statement=prepared_statement or statement,
                elapsed_ms=0.0,
                error=True,
            )
            raise DataQueryError("Query execution failed.") from exc

    def execute(self, statement: str, params: Iterable[Any] | None = None) -> int:
        prepared_statement = ""
        try:
            prepared_statement = self.prepare(statement)
            prepared_params = self._prepare_params(params)
            if is_suppressed(prepared_statement):
                self._record_sql_trace(
                    operation="execute",
                    statement=statement,
                    elapsed_ms=0.0,
                    suppressed=True,
                )
                return 0

            started = time.perf_counter()
            with self._connection() as conn:
                cursor = conn.cursor()
                try:
                    cursor.execute(prepared_statement, prepared_params)
                    affected = max(0, int(cursor.rowcount))
                finally:
                    cursor.close()
                conn.commit()
            self._record_sql_trace(
                operation="execute",
                statement=prepared_statement,
                elapsed_ms=(time.perf_counter() - started) * 1000.0,
                row_count=affected,
            )
            return affected
        except DataConnectionError:
            self._record_sql_trace(
                operation="execute",
                statement=prepared_statement or statement,
                elapsed_ms=0.0,
                error=True,
            )
            raise
        except Exception as exc:
            self._record_sql_trace(
                operation="execute",
                statement=prepared_statement or statement,
                elapsed_ms=0.0,
                error=True,
            )
            raise DataExecutionError("Statement execution failed.") from exc

    def execute_many(self, statements: Iterable[str]) -> int:
        """Run statements in order on one connection; returns how many ran."""
        executed = 0
        position = 0
        current = ""
        started = time.perf_counter()
        try:
            with self._connection() as conn:
                for position, raw_statement in enumerate(statements, start=1):
                    current = str(raw_statement or "")
                    prepared_statement = self.prepare(current)
                    if is_suppressed(prepared_statement):
                        self._record_sql_trace(
                            operation="execute_many",
                            statement=current,
                            elapsed_ms=0.0,
                            suppressed=True,
                        )
                        continue
                    conn.execute(prepared_statement)
                    executed += 1
                conn.commit()
        except DataConnectionError:
            raise
        except Exception as exc:
            self._record_sql_trace(
                operation="execute_many",
                statement=current,
                elapsed_ms=(time.perf_counter() - started) * 1000.0,
                error=True,
            )
            raise DataExecutionError(f"Statement {position} of batch failed.") from exc
        self._record_sql_trace(
            operation="execute_many",
            statement=f"{executed} statements",
            elapsed_ms=(time.perf_counter() - started) * 1000.0,
            row_count=executed,
        )
        return executed
