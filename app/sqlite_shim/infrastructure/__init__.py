"""Infrastructure adapters for local execution, caching, and logging."""

from sqlite_shim.infrastructure.db import (
    DataConnectionError,
    DataExecutionError,
    DataQueryError,
    LocalSqliteClient,
)

__all__ = [
    "DataConnectionError",
    "DataExecutionError",
    "DataQueryError",
    "LocalSqliteClient",
]
