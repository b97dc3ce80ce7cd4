"""Shared test fixtures for tracetool tests."""

import os

import pytest

SAMPLE_EVENTS = """\
# Example trace events
my_event(int a, const char *b) "a=%d b=%s"

disable off_event(void) "nothing"
no_args(void) ""
"""


@pytest.fixture
def sample_text():
    """Trace events file with a comment, a blank line and a disabled event."""
    return SAMPLE_EVENTS


@pytest.fixture
def sample_lines():
    """Sample trace events as a list of lines."""
    return SAMPLE_EVENTS.splitlines(keepends=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep TRACETOOL_* variables and a stray tracetool.toml out of tests."""
    for key in list(os.environ):
        if key.startswith("TRACETOOL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
