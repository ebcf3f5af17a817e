from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

WHITESPACE_RUN = r"[\s]+"


def expand_spaces(pattern: str) -> str:
    """Expand every literal space in an authored pattern to one-or-more whitespace.

    Rule authors write ``alter table`` and the compiled pattern matches
    ``ALTER\\n\\tTABLE`` as well. Patterns must therefore never rely on a
    literal space inside a character class.
    """
    return pattern.replace(" ", WHITESPACE_RUN)


@dataclass(frozen=True)
class Rule:
    """A compiled match pattern paired with its replacement template."""

    pattern: re.Pattern[str]
    replacement: str

    def process(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def rule(pattern: str, replacement: str) -> Rule:
    return Rule(
        pattern=re.compile(expand_spaces(pattern), re.IGNORECASE),
        replacement=replacement,
    )


def prefix_matcher(pattern: str) -> re.Pattern[str]:
    """Compile an anchored statement prefix that tolerates leading whitespace."""
    return re.compile(r"^[\s]*" + expand_spaces(pattern), re.IGNORECASE)


def apply_rules(statement: str, rules: Iterable[Rule]) -> str:
    for item in rules:
        statement = item.process(statement)
    return statement
