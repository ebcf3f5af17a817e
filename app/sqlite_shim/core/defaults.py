from __future__ import annotations

# Environment and config defaults
DEFAULT_ENV_NAME = "dev"
DEFAULT_LOCAL_DB_PATH = ".local/sqlite_shim.db"

# Translation cache defaults
DEFAULT_TRANSLATION_CACHE_MAX_ENTRIES = 512

# SQL trace defaults
DEFAULT_SQL_TRACE_MAX_LEN = 180
DEFAULT_SQL_TRACE_MIN_LEN = 80
DEFAULT_SLOW_QUERY_MS = 750.0

# Logging defaults
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
