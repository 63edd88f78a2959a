"""
Script/style region protection.

A generic beautifier formats `<script>` and `<style>` contents as pure JS/CSS
and mangles any Smarty syntax it finds there. Before formatting, every Smarty
token inside those regions is swapped for a placeholder that is valid JS (a
bare identifier) or valid CSS (a comment); after formatting the placeholders
are resolved back through the table recorded in `ProtectedText`.
"""

from __future__ import annotations

import logging
import re
import uuid

from ..types import ProtectedText

logger = logging.getLogger(__name__)

EMBEDDED_RE = re.compile(
    r"(<(?:script|style)[\s\S]*?>)([\s\S]*?)(</(?:script|style)>)"
)
SMARTY_TOKEN_RE = re.compile(r"\{\{?[^}\s][^}]*\}?")

PLACEHOLDER_PREFIX = "SMARTY_CODE_"
PLACEHOLDER_SUFFIX = "_SMARTY_CODE"
PLACEHOLDER_RE = re.compile(
    r"(/\*)?(" + PLACEHOLDER_PREFIX + r"[0-9a-f]+_\d+" + PLACEHOLDER_SUFFIX + r")(\*/)?"
)


def _is_style(opening_tag: str) -> bool:
    return opening_tag.startswith("<style")


def protect(text: str) -> ProtectedText:
    """
    Replace Smarty tokens inside script/style regions with placeholders.

    Regions whose content is blank are left untouched.
    """
    nonce = uuid.uuid4().hex[:8]
    placeholders: dict[str, str] = {}

    def make_placeholder(token: str) -> str:
        key = f"{PLACEHOLDER_PREFIX}{nonce}_{len(placeholders)}{PLACEHOLDER_SUFFIX}"
        placeholders[key] = token
        return key

    def replace_region(match: re.Match[str]) -> str:
        start, content, end = match.groups()
        if not content.strip():
            return match.group(0)

        if _is_style(start):
            content = SMARTY_TOKEN_RE.sub(
                lambda m: f"/*{make_placeholder(m.group(0))}*/", content
            )
        else:
            content = SMARTY_TOKEN_RE.sub(
                lambda m: make_placeholder(m.group(0)), content
            )
        return start + content + end

    protected = EMBEDDED_RE.sub(replace_region, text)
    if placeholders:
        logger.debug("protected %d smarty tokens in script/style", len(placeholders))
    return ProtectedText(text=protected, placeholders=placeholders)


def restore(text: str, protected: ProtectedText) -> str:
    """
    Resolve placeholders inside script/style regions of formatted text.

    Style placeholders carry their comment wrapper, which is removed along with
    the id. Ids missing from the table are left as they are.
    """
    table = protected.placeholders

    def replace_placeholder(match: re.Match[str], style: bool) -> str:
        open_comment, key, close_comment = match.groups()
        original = table.get(key)
        if original is None:
            return match.group(0)
        if style and open_comment and close_comment:
            return original
        return (open_comment or "") + original + (close_comment or "")

    def replace_region(match: re.Match[str]) -> str:
        style = _is_style(match.group(1))
        return PLACEHOLDER_RE.sub(
            lambda m: replace_placeholder(m, style), match.group(0)
        )

    return EMBEDDED_RE.sub(replace_region, text)
