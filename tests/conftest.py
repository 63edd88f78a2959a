from __future__ import annotations

import pytest

from smarty_beautify.config import FormattingOptions

from ._formatters import RecordingFormatter


@pytest.fixture
def options() -> FormattingOptions:
    return FormattingOptions(tab_size=2)


@pytest.fixture
def recording_formatter() -> RecordingFormatter:
    return RecordingFormatter()
