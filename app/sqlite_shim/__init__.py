"""Run statements written for MySQL against SQLite."""

from sqlite_shim.dialect import (
    is_alter_table,
    is_create_index,
    is_create_table,
    is_drop_index,
    is_insert,
    is_suppressed,
    translate,
)

__all__ = [
    "is_alter_table",
    "is_create_index",
    "is_create_table",
    "is_drop_index",
    "is_insert",
    "is_suppressed",
    "translate",
]
