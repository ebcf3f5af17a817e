from __future__ import annotations

from sqlite_shim.dialect.rules import Rule, rule

# Applied to CREATE TABLE and ALTER TABLE statements, in this order.
CREATE_TABLE_RULES: tuple[Rule, ...] = (
    rule(r" (character set|charset) [^\s,)]+", ""),
    rule(r"int unsigned", "INT"),
    rule(r"int[\s]*[(][\s]*([0-9]+)[\s]*[)] unsigned", "INT"),
    rule(r"engine[\s]*=[\s]*(innodb|myisam|ndb|memory|tokudb)", ""),
    rule(r"default charset[\s]*=[\s]*[\S]+", ""),
    rule(r"int( not null|) auto_increment", "INTEGER"),
    rule(r"comment '[^']*'", ""),
    rule(r"\bafter [\S]+", ""),
    rule(
        r"alter table ([\S]+) add (index|key) ([\S]+) (.+)",
        r"CREATE INDEX \g<3>_\g<1> ON \g<1> \g<4>",
    ),
    rule(
        r"alter table ([\S]+) add unique (index|key) ([\S]+) (.+)",
        r"CREATE UNIQUE INDEX \g<3>_\g<1> ON \g<1> \g<4>",
    ),
    rule(r"([^\s(,]+) enum[\s]*([(].*?[)])", r"\g<1> TEXT CHECK(\g<1> IN \g<2>)"),
    # Anything carrying the marker is not meant for the embedded engine.
    rule(r"\A[\s\S]*[/][*] sqlite3-skip [*][/][\s\S]*", ""),
    rule(r"timestamp default current_timestamp", "TIMESTAMP DEFAULT ('')"),
    rule(r"timestamp not null default current_timestamp", "TIMESTAMP NOT NULL DEFAULT ('')"),
    # SQLite refuses NOT NULL columns without a default on ADD COLUMN.
    rule(r"add column (.*int) not null[\s]*$", r"ADD COLUMN \g<1> NOT NULL DEFAULT 0"),
    rule(r"add column (.* text) not null[\s]*$", r"ADD COLUMN \g<1> NOT NULL DEFAULT ''"),
    rule(r"add column (.* varchar.*) not null[\s]*$", r"ADD COLUMN \g<1> NOT NULL DEFAULT ''"),
)

# Applied to INSERT/REPLACE statements after GENERAL_RULES.
INSERT_RULES: tuple[Rule, ...] = (
    rule(r"insert ignore", "INSERT OR IGNORE"),
    rule(r"now[(][)]", "datetime('now')"),
    rule(r"insert into ([\s\S]+) on duplicate key update [\s\S]+", r"REPLACE INTO \g<1>"),
)

# Applied to everything that is not CREATE TABLE / ALTER TABLE.
GENERAL_RULES: tuple[Rule, ...] = (
    rule(r"now[(][)][\s]*[-][\s]*interval [?] ([\w]+)", r"datetime('now', printf('-%d \g<1>', ?))"),
    rule(r"now[(][)][\s]*[+][\s]*interval [?] ([\w]+)", r"datetime('now', printf('+%d \g<1>', ?))"),
    rule(r"now[(][)][\s]*[-][\s]*interval ([0-9.]+) ([\w]+)", r"datetime('now', '-\g<1> \g<2>')"),
    rule(r"now[(][)][\s]*[+][\s]*interval ([0-9.]+) ([\w]+)", r"datetime('now', '+\g<1> \g<2>')"),
    rule(
        r"(?<=[=<>\s])([\S]+[.][\S]+)[\s]*[-][\s]*interval [?] ([\w]+)",
        r"datetime(\g<1>, printf('-%d \g<2>', ?))",
    ),
    rule(
        r"(?<=[=<>\s])([\S]+[.][\S]+)[\s]*[+][\s]*interval [?] ([\w]+)",
        r"datetime(\g<1>, printf('+%d \g<2>', ?))",
    ),
    rule(r"unix_timestamp[(][)]", "strftime('%s', 'now')"),
    rule(r"unix_timestamp[(]([^)]+)[)]", r"strftime('%s', \g<1>)"),
    rule(r"now[(][)]", "datetime('now')"),
    rule(r"cast[(][\s]*([\S]+) as signed[\s]*[)]", r"CAST(\g<1> AS INTEGER)"),
    # Two and three arguments only.
    rule(r"\bconcat[(][\s]*([^,)]+)[\s]*,[\s]*([^,)]+)[\s]*[)]", r"(\g<1> || \g<2>)"),
    rule(
        r"\bconcat[(][\s]*([^,)]+)[\s]*,[\s]*([^,)]+)[\s]*,[\s]*([^,)]+)[\s]*[)]",
        r"(\g<1> || \g<2> || \g<3>)",
    ),
    rule(r" rlike ", " LIKE "),
    rule(r"create (unique )?index([\s\S]+)[(][\s]*[0-9]+[\s]*[)]([\s\S]+)", r"CREATE \g<1>INDEX\g<2>\g<3>"),
)
