from __future__ import annotations

import logging
import re

from sqlite_shim.dialect.classifier import is_alter_table, is_create_table, is_insert, statement_category
from sqlite_shim.dialect.patterns import CREATE_TABLE_RULES, GENERAL_RULES, INSERT_RULES
from sqlite_shim.dialect.rules import apply_rules

LOGGER = logging.getLogger("sqlite_shim.dialect")


def sql_preview(statement: str, max_len: int = 180) -> str:
    compact = re.sub(r"\s+", " ", str(statement or "")).strip()
    if len(compact) <= max_len:
        return compact
    return f"{compact[: max_len - 3]}..."


def is_suppressed(translated: str | None) -> bool:
    """True when a translated statement must not be sent to SQLite."""
    return not str(translated or "").strip()


def to_sqlite3_create_table(statement: str) -> str:
    return apply_rules(statement, CREATE_TABLE_RULES)


def to_sqlite3_insert(statement: str) -> str:
    return apply_rules(statement, INSERT_RULES)


def _translate_schema_change(statement: str, category: str) -> str:
    translated = to_sqlite3_create_table(statement)
    if is_suppressed(translated) and not is_suppressed(statement):
        LOGGER.info(
            "Statement suppressed by sqlite3-skip marker. category=%s sql=%s",
            category,
            sql_preview(statement),
        )
    else:
        LOGGER.debug("Translated statement. category=%s sql=%s", category, sql_preview(translated))
    return translated


def translate(statement: str | None) -> str:
    """Rewrite a MySQL-flavoured statement into one SQLite accepts.

    CREATE TABLE and ALTER TABLE go through the schema rules only. Every
    other statement goes through the general rules, and anything that still
    reads as INSERT/REPLACE afterwards also gets the insert rules. An empty
    result means the statement carried the skip marker and must not run.
    """
    text = str(statement or "")
    if is_create_table(text):
        return _translate_schema_change(text, "create_table")
    if is_alter_table(text):
        return _translate_schema_change(text, "alter_table")

    category = statement_category(text)
    text = apply_rules(text, GENERAL_RULES)
    if is_insert(text):
        text = to_sqlite3_insert(text)
    LOGGER.debug("Translated statement. category=%s sql=%s", category, sql_preview(text))
    return text
