"""
Literal-aware line splitting.

A plain `str.splitlines()` would cut strings and comments that legitimately
span several lines (a multi-line `{* ... *}` comment, a quoted attribute
value, an embedded `text/template` script). Here every literal span is
consumed as a unit, so a logical line may contain embedded newlines but a
line boundary never falls inside a literal.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from ..defaults import DEFAULT_LITERALS
from ..types import LiteralPattern

logger = logging.getLogger(__name__)

LINEBREAK_GROUP = "linebreak"
END_GROUP = "end"


@lru_cache(maxsize=16)
def build_line_pattern(literals: tuple[LiteralPattern, ...]) -> re.Pattern[str]:
    """
    Compile the literal alternation plus the line-break and end anchors.

    Literals get positional group names (`literal_0`, ...) so any
    `LiteralPattern.name` is accepted; only the anchors are told apart by
    `match.lastgroup`.
    """
    parts = [f"(?P<literal_{i}>{lit.pattern})" for i, lit in enumerate(literals)]
    parts.append(rf"(?P<{LINEBREAK_GROUP}>\r?\n)")
    parts.append(rf"(?P<{END_GROUP}>\Z)")
    return re.compile("|".join(parts))


def split_lines(
    text: str,
    literals: tuple[LiteralPattern, ...] = DEFAULT_LITERALS,
) -> list[str]:
    """
    Split formatted text into logical lines, never inside a literal span.

    Line terminators are dropped. The final line is left-trimmed.
    """
    pattern = build_line_pattern(literals)
    lines: list[str] = []
    start = 0

    for match in pattern.finditer(text):
        group = match.lastgroup
        if group == LINEBREAK_GROUP:
            lines.append(text[start : match.start()])
            start = match.end()
        elif group == END_GROUP:
            lines.append(text[start:].lstrip())
            break

    logger.debug("split %d chars into %d lines", len(text), len(lines))
    return lines
