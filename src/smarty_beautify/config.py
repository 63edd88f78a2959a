"""
Formatting options and the configuration relayed to the generic beautifier.

`FormattingOptions` mirrors an editor's per-request options (tab size, tabs vs
spaces). `FormatterSettings` holds the beautifier tunables the core passes
through without interpreting them. Both are pydantic models so values coming
from editor payloads or TOML files are validated at the boundary.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import NonNegativeInt
from pydantic import PositiveInt

SETTINGS_TABLE = "smarty-beautify"

WrapAttributes = Literal[
    "auto",
    "force",
    "force-aligned",
    "force-expand-multiline",
    "aligned-multiple",
    "preserve",
    "preserve-aligned",
]


class FormattingOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    tab_size: PositiveInt = 4
    insert_spaces: bool = True

    @property
    def indent_unit(self) -> str:
        return " " * self.tab_size if self.insert_spaces else "\t"


class FormatterSettings(BaseModel):
    """Beautifier tunables, relayed verbatim."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent_inner_html: bool = False
    max_preserve_newlines: NonNegativeInt = 10
    preserve_newlines: bool = True
    wrap_line_length: NonNegativeInt = 0
    wrap_attributes: WrapAttributes = "auto"
    end_with_newline: bool = False


def load_settings(path: Path) -> FormatterSettings:
    """
    Load settings from a TOML file.

    A `pyproject.toml` is read from its `[tool.smarty-beautify]` table; any
    other file is read from the top level. A missing file yields defaults.
    """
    if not path.exists():
        return FormatterSettings()

    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get(SETTINGS_TABLE, {})
    return FormatterSettings.model_validate(data)


def beautifier_config(
    options: FormattingOptions,
    settings: FormatterSettings | None = None,
) -> dict[str, Any]:
    """
    Build the js-beautify style configuration handed to the generic formatter.

    Smarty is declared as foreign templating syntax so the formatter keeps
    `{...}` constructs verbatim; block indentation is left to this package.
    """
    if settings is None:
        settings = FormatterSettings()

    return {
        "indent_size": options.tab_size,
        "indent_with_tabs": not options.insert_spaces,
        "indent_handlebars": False,
        "indent_inner_html": settings.indent_inner_html,
        "max_preserve_newlines": settings.max_preserve_newlines,
        "preserve_newlines": settings.preserve_newlines,
        "wrap_line_length": settings.wrap_line_length,
        "wrap_attributes": settings.wrap_attributes,
        "brace_style": "collapse,preserve-inline",
        "jslint_happy": False,
        "indent_empty_lines": True,
        "html": {
            "end_with_newline": settings.end_with_newline,
            "js": {"end_with_newline": False},
            "css": {"end_with_newline": False},
        },
        "templating": ["smarty"],
    }
