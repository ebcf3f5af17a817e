"""Prefix classification of statements by their leading keywords."""

from __future__ import annotations

from sqlite_shim.dialect.rules import prefix_matcher

_INSERT_STATEMENT = prefix_matcher(r"(insert|replace)")
_CREATE_TABLE_STATEMENT = prefix_matcher(r"create table")
_CREATE_INDEX_STATEMENT = prefix_matcher(r"create( unique|) index")
_DROP_INDEX_STATEMENT = prefix_matcher(r"drop index")
_ALTER_TABLE_STATEMENT = prefix_matcher(r"alter table")


def is_insert(statement: str | None) -> bool:
    return _INSERT_STATEMENT.match(str(statement or "")) is not None


def is_create_table(statement: str | None) -> bool:
    return _CREATE_TABLE_STATEMENT.match(str(statement or "")) is not None


def is_create_index(statement: str | None) -> bool:
    return _CREATE_INDEX_STATEMENT.match(str(statement or "")) is not None


def is_drop_index(statement: str | None) -> bool:
    return _DROP_INDEX_STATEMENT.match(str(statement or "")) is not None


def is_alter_table(statement: str | None) -> bool:
    return _ALTER_TABLE_STATEMENT.match(str(statement or "")) is not None


def statement_category(statement: str | None) -> str:
    """Name of the first matching category, or ``"other"``."""
    checks = (
        ("create_table", is_create_table),
        ("alter_table", is_alter_table),
        ("create_index", is_create_index),
        ("drop_index", is_drop_index),
        ("insert", is_insert),
    )
    for name, check in checks:
        if check(statement):
            return name
    return "other"
