from __future__ import annotations

import logging

import pytest

from smarty_beautify import FormatterSettings
from smarty_beautify import FormattingOptions
from smarty_beautify import SmartyBeautifier
from smarty_beautify import beautify
from smarty_beautify import passthrough_formatter
from smarty_beautify.types import TagClassification

from ._formatters import flatten_formatter
from ._formatters import strict_embedded_formatter


def test_defaults_indent_with_four_spaces():
    assert beautify("{if $x}\nA\n{/if}") == "{if $x}\n    A\n{/if}"


def test_tabs():
    tabs = FormattingOptions(insert_spaces=False)
    assert beautify("{if $x}\nA\n{/if}", tabs) == "{if $x}\n\tA\n{/if}"


def test_trailing_newline_is_kept(options):
    assert beautify("{if $x}\nA\n{/if}\n", options) == "{if $x}\n  A\n{/if}\n"


def test_blank_lines_inside_blocks_stay_blank(options):
    assert beautify("{if $x}\n\nA\n{/if}", options) == "{if $x}\n\n  A\n{/if}"


@pytest.mark.parametrize(
    "text",
    [
        "{if $x}\n<p>A</p>\n{/if}",
        "<ul>\n{foreach $a as $b}\n<li>{$b}</li>\n{foreachelse}\n<li>-</li>\n{/foreach}\n</ul>",
        "{if $a}{if $b}X{/if}{/if}\n<p>done</p>",
    ],
)
def test_idempotent_with_normalizing_formatter(text, options):
    once = beautify(text, options, formatter=flatten_formatter)
    twice = beautify(once, options, formatter=flatten_formatter)
    assert twice == once


@pytest.mark.parametrize(
    "text",
    [
        "<script>\nvar foo = {{$foo}};\n</script>",
        "<style>\n.a { color: red; }\n{{$bar}}\n</style>",
        '<script>\nvar s = "{$ünï} — 日本";\n</script>\n<style>\n.b { content: "{$ß}"; }\n</style>',
    ],
)
def test_embedded_smarty_survives_formatter(text, options):
    assert beautify(text, options, formatter=strict_embedded_formatter) == text


def test_formatter_receives_protected_text_and_config(options, recording_formatter):
    settings = FormatterSettings(wrap_line_length=80)
    beautify(
        "<script>{$a}</script>",
        options,
        settings=settings,
        formatter=recording_formatter,
    )

    [(text, config)] = recording_formatter.calls
    assert "{$a}" not in text
    assert config["indent_size"] == 2
    assert config["wrap_line_length"] == 80
    assert config["templating"] == ["smarty"]


def test_blank_script_is_not_protected(options, recording_formatter):
    text = '<script src="app.js"></script>'
    assert beautify(text, options, formatter=recording_formatter) == text
    assert recording_formatter.calls[0][0] == text


def test_formatter_errors_propagate(options):
    def broken(text, config):
        raise ValueError("invalid markup")

    with pytest.raises(ValueError, match="invalid markup"):
        beautify("<p>", options, formatter=broken)


def test_multiline_comment_is_left_alone(options):
    text = "{* multi\nline {if $x} *}\nA"
    assert beautify(text, options) == text


def test_text_template_script_is_not_indented(options):
    text = '<script type="text/template">\n{if x}\n</script>\n<p>A</p>'
    assert beautify(text, options) == text


def test_custom_tags(options):
    tags = TagClassification(
        start=frozenset({"macro"}),
        middle=frozenset(),
        end=frozenset({"macro"}),
    )
    beautifier = SmartyBeautifier(tags=tags)
    assert beautifier.beautify("{macro x}\nA\n{/macro}", options) == "{macro x}\n  A\n{/macro}"
    assert beautifier.beautify("{if $x}\nA\n{/if}", options) == "{if $x}\nA\n{/if}"


def test_compound_lines_are_logged(options, caplog):
    caplog.set_level(logging.DEBUG, logger="smarty_beautify")
    beautify("{if $a}x{else}y{/if}", options)
    assert "split compound line into 3 segments: {if {else {/if" in caplog.text


@pytest.mark.parametrize(
    "text",
    [
        "{if $user}\n<p>{$user.name}</p>\n{else}\n<p>Guest</p>\n{/if}",
        "{if $user}\n  <p>{$user.name}</p>\n{else}\n  <p>Guest</p>\n{/if}",
        "<div>\n  {if $a}{if $b}X{/if}{/if}\n  {include\n  file='a.tpl'\n  }\n</div>",
    ],
)
def test_default_formatter_is_idempotent(text, options):
    once = beautify(text, options)
    assert beautify(once, options) == once


def test_default_formatter_normalizes_indentation(options):
    text = "{if $user}\n      <p>{$user.name}</p>\n{/if}"
    assert beautify(text, options) == "{if $user}\n  <p>{$user.name}</p>\n{/if}"


def test_passthrough_formatter_keeps_existing_indentation(options):
    text = "{if $x}\n  <p>A</p>\n{/if}"
    assert beautify(text, options, formatter=passthrough_formatter) == (
        "{if $x}\n    <p>A</p>\n{/if}"
    )


def test_apostrophe_hides_following_lines_from_indentation(options):
    # `'t</p> ... <p>it'` is read as one quoted string, so the block body
    # shares a logical line with the opening tag and is not indented.
    text = "<p>don't</p>\n{if $x}\n<p>it's</p>\n{/if}"
    assert beautify(text, options) == text
