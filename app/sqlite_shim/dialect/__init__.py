"""MySQL to SQLite statement translation."""

from sqlite_shim.dialect.classifier import (
    is_alter_table,
    is_create_index,
    is_create_table,
    is_drop_index,
    is_insert,
    statement_category,
)
from sqlite_shim.dialect.patterns import CREATE_TABLE_RULES, GENERAL_RULES, INSERT_RULES
from sqlite_shim.dialect.rules import Rule, apply_rules, expand_spaces, rule
from sqlite_shim.dialect.translator import (
    is_suppressed,
    to_sqlite3_create_table,
    to_sqlite3_insert,
    translate,
)

__all__ = [
    "CREATE_TABLE_RULES",
    "GENERAL_RULES",
    "INSERT_RULES",
    "Rule",
    "apply_rules",
    "expand_spaces",
    "is_alter_table",
    "is_create_index",
    "is_create_table",
    "is_drop_index",
    "is_insert",
    "is_suppressed",
    "rule",
    "statement_category",
    "to_sqlite3_create_table",
    "to_sqlite3_insert",
    "translate",
]
