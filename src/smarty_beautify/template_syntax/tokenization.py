"""
Per-line Smarty tokenization.

Produces the event stream consumed by the indenter: tag-opening tokens
(`{if`, `{/foreach`, `{{else`, ...) and closing brackets (`}`), in line order.
Opaque literal spans (comments, embedded client-side templates) produce no
events, so `{* {if} *}` neither opens a block nor closes a bracket.
"""

from __future__ import annotations

import re
from functools import lru_cache

from ..defaults import DEFAULT_LITERALS
from ..defaults import DEFAULT_TAGS
from ..types import CloseBracket
from ..types import LineEvent
from ..types import LiteralPattern
from ..types import TagClassification
from ..types import TagToken

TAG_RE = r"(?P<delimiter>\{\{?)(?P<closing>/?)(?P<name>\w+)"


@lru_cache(maxsize=16)
def build_event_pattern(literals: tuple[LiteralPattern, ...]) -> re.Pattern[str]:
    opaque = [lit.pattern for lit in literals if lit.opaque]
    parts = []
    if opaque:
        parts.append("(?P<opaque>" + "|".join(f"(?:{p})" for p in opaque) + ")")
    parts.append(f"(?P<tag>{TAG_RE})")
    parts.append(r"(?P<bracket>\})")
    return re.compile("|".join(parts))


def tokenize_line(
    line: str,
    tags: TagClassification = DEFAULT_TAGS,
    literals: tuple[LiteralPattern, ...] = DEFAULT_LITERALS,
) -> list[LineEvent]:
    """
    Tokenize one logical line into tag and bracket events.
    """
    events: list[LineEvent] = []
    for match in build_event_pattern(literals).finditer(line):
        if match.group("tag") is not None:
            closing = bool(match.group("closing"))
            name = match.group("name")
            events.append(
                TagToken(
                    offset=match.start(),
                    delimiter=match.group("delimiter"),
                    closing=closing,
                    name=name,
                    kind=tags.classify(name, closing=closing),
                )
            )
        elif match.group("bracket") is not None:
            events.append(CloseBracket(offset=match.start()))
    return events


def tag_tokens(events: list[LineEvent]) -> list[TagToken]:
    return [event for event in events if isinstance(event, TagToken)]
