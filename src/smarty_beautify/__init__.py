"""
Smarty Beautify - block-aware formatting for Smarty templates.

A generic markup beautifier formats the HTML/CSS/JS of a template; this
library protects Smarty syntax inside script/style regions from it and then
re-indents the result so Smarty blocks (`{if}`, `{foreach}`, ...) nest like
HTML elements.
"""

from __future__ import annotations

from .config import FormatterSettings
from .config import FormattingOptions
from .config import load_settings
from .formatting.api import Formatter
from .formatting.api import SmartyBeautifier
from .formatting.api import beautify
from .formatting.api import dedent_formatter
from .formatting.api import passthrough_formatter
from .logging import LogConfig
from .logging import configure_logging

__all__ = [
    "Formatter",
    "FormatterSettings",
    "FormattingOptions",
    "LogConfig",
    "SmartyBeautifier",
    "beautify",
    "configure_logging",
    "dedent_formatter",
    "load_settings",
    "passthrough_formatter",
]
