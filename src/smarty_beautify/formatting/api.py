"""Beautification entry points.

Runs the full pipeline: protect script/style Smarty tokens, hand the document
to the generic formatter, restore the tokens, split into logical lines and
re-indent by Smarty block nesting.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Protocol

from ..config import FormatterSettings
from ..config import FormattingOptions
from ..config import beautifier_config
from ..defaults import DEFAULT_LITERALS
from ..defaults import DEFAULT_TAGS
from ..template_syntax.lines import split_lines
from ..types import LiteralPattern
from ..types import TagClassification
from .indentation import indent_lines
from .indentation import join_lines
from .protection import protect
from .protection import restore

logger = logging.getLogger(__name__)


class Formatter(Protocol):
    """A generic markup beautifier: `format(text, config) -> text`."""

    def __call__(self, text: str, config: dict[str, Any]) -> str: ...


def passthrough_formatter(text: str, config: dict[str, Any]) -> str:
    """
    Leave the markup as it is.

    Existing leading whitespace is kept and block indentation is added on top
    of it, so repeated runs keep indenting block bodies. Use it only on markup
    a real beautifier has just normalized.
    """
    return text


def dedent_formatter(text: str, config: dict[str, Any]) -> str:
    """
    Drop the leading whitespace of every line.

    The default formatter: without HTML knowledge, the only indentation left
    afterwards is Smarty block depth, so running it again is a no-op.
    Whitespace-sensitive content (`<pre>`, multi-line JS template strings) is
    dedented too.
    """
    return "\n".join(line.lstrip(" \t") for line in text.split("\n"))


class SmartyBeautifier:
    """
    Smarty-aware beautifier around a generic markup formatter.

    The tag classification and literal table default to the built-in Smarty
    tables and can be swapped for template dialects with extra block tags.
    """

    def __init__(
        self,
        formatter: Formatter = dedent_formatter,
        *,
        tags: TagClassification = DEFAULT_TAGS,
        literals: tuple[LiteralPattern, ...] = DEFAULT_LITERALS,
    ):
        self.formatter = formatter
        self.tags = tags
        self.literals = literals

    def beautify(
        self,
        text: str,
        options: FormattingOptions | None = None,
        settings: FormatterSettings | None = None,
    ) -> str:
        if options is None:
            options = FormattingOptions()

        protected = protect(text)
        config = beautifier_config(options, settings)
        # Formatter errors propagate unchanged.
        formatted = self.formatter(protected.text, config)
        if protected.was_protected:
            formatted = restore(formatted, protected)

        lines = split_lines(formatted, self.literals)
        indented = indent_lines(
            lines, options.indent_unit, tags=self.tags, literals=self.literals
        )
        logger.debug("beautified %d lines into %d lines", len(lines), len(indented))
        return join_lines(indented)


def beautify(
    text: str,
    options: FormattingOptions | None = None,
    *,
    settings: FormatterSettings | None = None,
    formatter: Formatter = dedent_formatter,
) -> str:
    """Beautify a Smarty template with the given formatter."""
    return SmartyBeautifier(formatter).beautify(text, options, settings)
