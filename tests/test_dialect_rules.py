from __future__ import annotations

import dataclasses
import sys
import time
from pathlib import Path

import pytest

APP_ROOT = Path(__file__).resolve().parents[1] / "app"
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from sqlite_shim.dialect import (  # noqa: E402
    CREATE_TABLE_RULES,
    GENERAL_RULES,
    INSERT_RULES,
    Rule,
    apply_rules,
    expand_spaces,
    rule,
    to_sqlite3_create_table,
    to_sqlite3_insert,
)


def test_expand_spaces_turns_each_space_into_whitespace_run() -> None:
    assert expand_spaces("alter table") == r"alter[\s]+table"
    assert expand_spaces(r"now[(][)]") == r"now[(][)]"


def test_rule_matches_any_whitespace_and_case() -> None:
    item = rule("insert ignore", "INSERT OR IGNORE")
    assert item.process("insert\n\t IGNORE into t") == "INSERT OR IGNORE into t"


def test_rule_replaces_every_match() -> None:
    item = rule(r"now[(][)]", "datetime('now')")
    assert item.process("SELECT NOW(), now()") == "SELECT datetime('now'), datetime('now')"


def test_rule_without_match_is_noop() -> None:
    item = rule(r"rlike", "LIKE")
    assert item.process("SELECT 1") == "SELECT 1"


def test_rule_is_immutable() -> None:
    item = rule("a", "b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.replacement = "c"  # type: ignore[misc]


def test_rule_lists_are_constant_tuples_of_rules() -> None:
    for rules in (CREATE_TABLE_RULES, INSERT_RULES, GENERAL_RULES):
        assert isinstance(rules, tuple)
        assert rules
        assert all(isinstance(item, Rule) for item in rules)


def test_apply_rules_feeds_each_output_into_the_next_rule() -> None:
    rules = (rule("alpha", "beta"), rule("beta", "gamma"))
    assert apply_rules("alpha", rules) == "gamma"


def test_apply_rules_makes_exactly_one_pass() -> None:
    rules = (rule("x", "xx"),)
    assert apply_rules("x", rules) == "xx"
    assert apply_rules("beta", (rule("beta", "alpha"), rule("gamma", "beta"))) == "alpha"


def test_charset_clause_is_stripped_without_eating_parenthesis() -> None:
    statement = "CREATE TABLE t (name VARCHAR(10) CHARACTER SET utf8mb4 NOT NULL)"
    assert to_sqlite3_create_table(statement) == "CREATE TABLE t (name VARCHAR(10) NOT NULL)"


def test_sized_unsigned_int_becomes_int() -> None:
    statement = "CREATE TABLE t (n INT(11) UNSIGNED NOT NULL)"
    assert to_sqlite3_create_table(statement) == "CREATE TABLE t (n INT NOT NULL)"


def test_not_null_auto_increment_becomes_integer() -> None:
    statement = "CREATE TABLE t (id int not null auto_increment primary key)"
    assert to_sqlite3_create_table(statement) == "CREATE TABLE t (id INTEGER primary key)"


def test_engine_and_default_charset_are_stripped() -> None:
    statement = "CREATE TABLE t (id INT) ENGINE=InnoDB DEFAULT CHARSET=utf8"
    assert to_sqlite3_create_table(statement).strip() == "CREATE TABLE t (id INT)"


def test_column_comment_is_stripped() -> None:
    statement = "CREATE TABLE t (id INT COMMENT 'row id', name TEXT)"
    assert to_sqlite3_create_table(statement) == "CREATE TABLE t (id INT , name TEXT)"


def test_after_clause_is_stripped_but_not_inside_identifiers() -> None:
    assert to_sqlite3_create_table("ALTER TABLE t ADD COLUMN c TEXT AFTER b").rstrip() == (
        "ALTER TABLE t ADD COLUMN c TEXT"
    )
    statement = "CREATE TABLE t (created_after DATETIME)"
    assert to_sqlite3_create_table(statement) == statement


def test_alter_add_unique_key_becomes_create_unique_index() -> None:
    statement = "ALTER TABLE users ADD UNIQUE KEY email_uq (email)"
    assert to_sqlite3_create_table(statement) == "CREATE UNIQUE INDEX email_uq_users ON users (email)"


def test_enum_column_becomes_checked_text() -> None:
    statement = "CREATE TABLE t (\n  status ENUM('new','done') NOT NULL\n)"
    assert to_sqlite3_create_table(statement) == (
        "CREATE TABLE t (\n  status TEXT CHECK(status IN ('new','done')) NOT NULL\n)"
    )


@pytest.mark.parametrize(
    "statement",
    [
        "CREATE TABLE t (id INT) /* sqlite3-skip */",
        "CREATE TABLE t (\n  body TEXT,\n  /* sqlite3-skip */\n  FULLTEXT KEY ft (body)\n)",
        "ALTER TABLE t ADD FULLTEXT INDEX ft (body) /*  SQLITE3-SKIP  */ ;",
    ],
)
def test_skip_marker_suppresses_statement(statement: str) -> None:
    assert to_sqlite3_create_table(statement) == ""


def _wide_create_table(column_count: int) -> str:
    columns = ",\n".join(f"  col_{index} VARCHAR(64) NOT NULL" for index in range(column_count))
    return f"CREATE TABLE wide (\n{columns}\n)"


@pytest.mark.parametrize("marker", ["", " /* sqlite3-skip */"])
def test_wide_create_table_translates_in_linear_time(marker: str) -> None:
    statement = _wide_create_table(2000) + marker

    started = time.perf_counter()
    translated = to_sqlite3_create_table(statement)
    elapsed = time.perf_counter() - started

    assert elapsed < 1.0
    assert translated == ("" if marker else statement)


def test_timestamp_default_current_timestamp_becomes_empty_string() -> None:
    assert to_sqlite3_create_table("CREATE TABLE t (ts TIMESTAMP DEFAULT CURRENT_TIMESTAMP)") == (
        "CREATE TABLE t (ts TIMESTAMP DEFAULT (''))"
    )
    assert to_sqlite3_create_table("CREATE TABLE t (ts TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP)") == (
        "CREATE TABLE t (ts TIMESTAMP NOT NULL DEFAULT (''))"
    )


@pytest.mark.parametrize(
    ("statement", "expected"),
    [
        ("ALTER TABLE t ADD COLUMN hits INT NOT NULL", "ALTER TABLE t ADD COLUMN hits INT NOT NULL DEFAULT 0"),
        ("ALTER TABLE t ADD COLUMN notes TEXT NOT NULL", "ALTER TABLE t ADD COLUMN notes TEXT NOT NULL DEFAULT ''"),
        (
            "ALTER TABLE t ADD COLUMN name VARCHAR(64) NOT NULL",
            "ALTER TABLE t ADD COLUMN name VARCHAR(64) NOT NULL DEFAULT ''",
        ),
        ("ALTER TABLE t ADD COLUMN hits INT NOT NULL DEFAULT 1", "ALTER TABLE t ADD COLUMN hits INT NOT NULL DEFAULT 1"),
    ],
)
def test_add_column_not_null_gets_explicit_default(statement: str, expected: str) -> None:
    assert to_sqlite3_create_table(statement) == expected


def test_insert_ignore_becomes_insert_or_ignore() -> None:
    assert to_sqlite3_insert("insert ignore into t (a) values (1)") == "INSERT OR IGNORE into t (a) values (1)"


def test_on_duplicate_key_update_becomes_replace() -> None:
    statement = "INSERT INTO t (id, n) VALUES (?, ?) ON DUPLICATE KEY UPDATE n = VALUES(n)"
    assert to_sqlite3_insert(statement) == "REPLACE INTO t (id, n) VALUES (?, ?)"


def test_insert_rules_rewrite_now() -> None:
    assert to_sqlite3_insert("INSERT INTO t (ts) VALUES (now())") == "INSERT INTO t (ts) VALUES (datetime('now'))"
