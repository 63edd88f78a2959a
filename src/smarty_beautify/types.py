"""
Shared types for region protection, line splitting and indentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from enum import auto


class TagKind(Enum):
    """Indentation role of a Smarty tag token."""

    START = auto()  # {if ...}
    MIDDLE = auto()  # {else}
    END = auto()  # {/if}
    PLAIN = auto()  # {include ...}, {$var|modifier}, unknown names


@dataclass(frozen=True)
class LiteralPattern:
    """
    A named regex source for a span that never carries real tags.

    `opaque` spans (comments, embedded client-side templates) are also hidden
    from the tag tokenizer. Quoted strings are not opaque: in markup they are
    attribute values, where Smarty tags stay live.
    """

    name: str
    pattern: str
    opaque: bool = False


@dataclass(frozen=True)
class TagClassification:
    """Tag names that open, continue and close an indenting block."""

    start: frozenset[str]
    middle: frozenset[str]
    end: frozenset[str]

    def classify(self, name: str, *, closing: bool) -> TagKind:
        if closing:
            return TagKind.END if name in self.end else TagKind.PLAIN
        if name in self.start:
            return TagKind.START
        if name in self.middle:
            return TagKind.MIDDLE
        return TagKind.PLAIN


@dataclass(frozen=True, slots=True)
class TagToken:
    """
    A tag-opening token found on one line: `{` or `{{`, an optional `/`, a name.

    `offset` is the index of the opening delimiter within the line.
    """

    offset: int
    delimiter: str
    closing: bool
    name: str
    kind: TagKind = TagKind.PLAIN

    @property
    def text(self) -> str:
        return f"{self.delimiter}{'/' if self.closing else ''}{self.name}"


@dataclass(frozen=True, slots=True)
class CloseBracket:
    """A `}` outside of any opaque literal."""

    offset: int


LineEvent = TagToken | CloseBracket


@dataclass
class ProtectedText:
    """
    Text whose script/style Smarty tokens were swapped for placeholders.

    `placeholders` maps each placeholder id to the substring it replaced, in
    the order the substitutions were made.
    """

    text: str
    placeholders: dict[str, str] = field(default_factory=dict)

    @property
    def was_protected(self) -> bool:
        return bool(self.placeholders)
