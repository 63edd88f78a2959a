"""
Built-in tables for the Smarty tag language.

Keep hard-coded tag and literal knowledge here, out of the line splitter and
the indenter. Callers that need more block tags (plugins registering their own
block functions) pass a different `TagClassification` to `SmartyBeautifier`.
"""

from __future__ import annotations

from .types import LiteralPattern
from .types import TagClassification

BLOCK_TAGS = frozenset(
    {
        "block",
        "capture",
        "for",
        "foreach",
        "function",
        "if",
        "literal",
        "section",
        "setfilter",
        "strip",
        "while",
    }
)

DEFAULT_TAGS = TagClassification(
    start=BLOCK_TAGS,
    middle=frozenset({"else", "elseif", "foreachelse"}),
    end=BLOCK_TAGS,
)

# Order matters: at equal offsets the first alternative wins.
DEFAULT_LITERALS: tuple[LiteralPattern, ...] = (
    LiteralPattern("double_quoted", r'"(?:\\.|[^"\\])*"'),
    LiteralPattern("single_quoted", r"'(?:\\.|[^'\\])*'"),
    LiteralPattern("back_quoted", r"`(?:\\.|[^`\\])*`"),
    LiteralPattern("smarty_comment", r"\{\*[\s\S]*?\*\}", opaque=True),
    LiteralPattern("html_comment", r"<!--[\s\S]*?-->", opaque=True),
    LiteralPattern("css_comment", r"/\*[\s\S]*?\*/", opaque=True),
    LiteralPattern(
        "script_template",
        r"<script .*?type=['\"]text/template['\"].*?>[\s\S]*?</script>",
        opaque=True,
    ),
)
