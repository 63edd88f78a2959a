"""
Block-aware re-indentation.

Walks logical lines with two stacks:

- `started_regions`: Smarty blocks opened on earlier lines and not yet closed.
  Its depth is the base indent of a line.
- `open_tags`: tag tokens whose closing `}` has not been seen yet. Carried
  across lines so a tag whose attributes wrap onto continuation lines keeps
  them indented under it.

Lines that pack several block tags together are split into one segment per
tag and pushed back onto the work queue, so each segment is indented on its
own. Malformed input never raises: unbalanced tags only skew indentation until
the stacks re-balance.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field

from ..defaults import DEFAULT_LITERALS
from ..defaults import DEFAULT_TAGS
from ..template_syntax.tokenization import tag_tokens
from ..template_syntax.tokenization import tokenize_line
from ..types import CloseBracket
from ..types import LineEvent
from ..types import LiteralPattern
from ..types import TagClassification
from ..types import TagKind
from ..types import TagToken

logger = logging.getLogger(__name__)

BLANK_LINE_RE = re.compile(r"^[ \t]+$", re.MULTILINE)


@dataclass
class IndentState:
    """Cross-line state of one indentation pass."""

    tags: TagClassification = DEFAULT_TAGS
    started_regions: list[str] = field(default_factory=list)
    open_tags: list[TagToken] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.started_regions)

    def open_tags_indent(self) -> int:
        # Unclosed block tags are already counted by `started_regions`.
        return sum(1 for tag in self.open_tags if tag.name not in self.tags.start)

    def close_tag(self) -> None:
        if self.open_tags:
            self.open_tags.pop()

    def end_region(self) -> None:
        if self.started_regions:
            self.started_regions.pop()


def _leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" \t"))]


def _is_self_closing(classified: list[TagToken]) -> bool:
    if len(classified) != 2:
        return False
    first, second = classified
    return (
        first.kind is TagKind.START
        and second.kind is TagKind.END
        and first.name == second.name
    )


def split_compound_line(line: str, events: list[LineEvent]) -> list[str] | None:
    """
    Split a line carrying more than one block tag into one segment per tag.

    Every tag token after the first starts a new segment prefixed with the
    original line's leading whitespace. A line holding a single
    `{name ...}...{/name}` pair is kept whole. Returns None when the line does
    not need splitting.
    """
    tokens = tag_tokens(events)
    classified = [tok for tok in tokens if tok.kind is not TagKind.PLAIN]
    if len(classified) < 2 or _is_self_closing(classified):
        return None

    prefix = _leading_whitespace(line)
    cuts = [tok.offset for tok in tokens[1:]]
    segments = [line[: cuts[0]].rstrip()]
    for start, end in zip(cuts, cuts[1:] + [len(line)]):
        segment = line[start:end]
        if end != len(line):
            segment = segment.rstrip()
        segments.append(prefix + segment)
    return segments


def indent_line(
    state: IndentState,
    line: str,
    events: list[LineEvent],
    indent_unit: str,
) -> str:
    """
    Indent one line and advance `state` past it.
    """
    repeat = state.depth
    open_tags_indent = state.open_tags_indent()

    brackets = [e.offset for e in events if isinstance(e, CloseBracket)]
    first: dict[TagKind, TagToken] = {}
    last_offset = 0

    for token in tag_tokens(events):
        # At most one earlier tag is closed between two tag tokens.
        if any(last_offset <= offset < token.offset for offset in brackets):
            state.close_tag()
        last_offset = token.offset
        if token.kind is not TagKind.PLAIN:
            first.setdefault(token.kind, token)
        state.open_tags.append(token)

    stripped = line.lstrip(" \t")
    begins_with_close_bracket = bool(state.open_tags) and (
        len(line) - len(stripped) in brackets
    )
    for offset in brackets:
        if offset >= last_offset and state.open_tags:
            state.open_tags.pop()

    start = first.get(TagKind.START)
    middle = first.get(TagKind.MIDDLE)
    end = first.get(TagKind.END)
    if start is not None:
        state.started_regions.append(start.name)
    elif middle is not None:
        repeat -= 1
    elif end is not None:
        state.end_region()
        repeat -= 1

    if start is not None and end is not None and start.name == end.name:
        state.end_region()

    if state.open_tags:
        return indent_unit * max(0, repeat + open_tags_indent) + stripped
    if begins_with_close_bracket:
        return indent_unit * max(0, repeat - 1 + open_tags_indent) + stripped
    return indent_unit * max(0, repeat) + line


def indent_lines(
    lines: Iterable[str],
    indent_unit: str,
    tags: TagClassification = DEFAULT_TAGS,
    literals: tuple[LiteralPattern, ...] = DEFAULT_LITERALS,
) -> list[str]:
    """
    Re-indent logical lines according to Smarty block nesting.
    """
    state = IndentState(tags=tags)
    queue = deque(lines)
    out: list[str] = []

    while queue:
        line = queue.popleft()
        events = tokenize_line(line, tags, literals)

        segments = split_compound_line(line, events)
        if segments is not None:
            logger.debug(
                "split compound line into %d segments: %s",
                len(segments),
                " ".join(tok.text for tok in tag_tokens(events)),
            )
            queue.extendleft(reversed(segments))
            continue

        out.append(indent_line(state, line, events, indent_unit))

    if state.started_regions:
        logger.debug("unclosed smarty blocks at end of input: %s", state.started_regions)
    return out


def join_lines(lines: list[str]) -> str:
    """Join lines and blank out lines holding only spaces or tabs."""
    return BLANK_LINE_RE.sub("", "\n".join(lines))
