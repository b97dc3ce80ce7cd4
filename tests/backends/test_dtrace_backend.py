"""Tests for backends/dtrace.py."""

import pytest

from tracetool.backends import DTraceBackend, OutputKind, RenderContext
from tracetool.convert import convert
from tracetool.events import Event
from tracetool.exceptions import MissingOptionError

MY_EVENT = Event.parse('my_event(int a, const char *b) "a=%d b=%s"')


@pytest.fixture
def tapset_ctx():
    return RenderContext(binary="/usr/bin/qemu", probe_prefix="qemu.system.x86_64")


class TestDTraceHeader:
    """Test dtrace header output."""

    def test_guarded_probe(self):
        """Probe macro runs only when enabled."""
        lines = DTraceBackend().header_line(MY_EVENT, RenderContext())
        assert lines == [
            "static inline void trace_my_event(int a, const char *b) {",
            "    if (QEMU_MY_EVENT_ENABLED()) {",
            "        QEMU_MY_EVENT(a, b);",
            "    }",
            "}",
        ]

    def test_provider_sets_macro_prefix(self):
        """Macro prefix is the upper-cased provider."""
        lines = DTraceBackend().header_line(MY_EVENT, RenderContext(provider="vm"))
        assert "    if (VM_MY_EVENT_ENABLED()) {" in lines

    def test_source_is_empty(self, sample_lines):
        """DTrace emits no source body."""
        out = convert(sample_lines, DTraceBackend(), OutputKind.SOURCE)
        assert out == ["", "", "", ""]


class TestDTraceDescriptor:
    """Test the provider description output."""

    def test_full_pass(self, sample_lines):
        """void becomes an empty parameter list."""
        out = convert(sample_lines, DTraceBackend(), OutputKind.DESCRIPTOR)
        assert out == [
            "provider qemu {",
            "",
            "        probe my_event(int a, const char *b);",
            "",
            "",
            "        probe no_args();",
            "",
            "};",
        ]


class TestDTraceTapset:
    """Test the SystemTAP tapset output."""

    def test_probe_rule(self, tapset_ctx):
        """Each argument binds to its positional $argN."""
        lines = DTraceBackend().tapset_line(MY_EVENT, tapset_ctx)
        assert lines == [
            'probe qemu.system.x86_64.my_event = process("/usr/bin/qemu").mark("my_event")',
            "{",
            "  a = $arg1;",
            "  b = $arg2;",
            "}",
        ]

    def test_limit_is_renamed(self, tapset_ctx):
        """limit is a SystemTAP keyword."""
        event = Event.parse('set_limit(int limit, int x) "limit=%d x=%d"')
        lines = DTraceBackend().tapset_line(event, tapset_ctx)
        assert "  _limit = $arg1;" in lines
        assert "  x = $arg2;" in lines

    def test_begin_requires_binary(self):
        """Tapset begin refuses a missing binary."""
        with pytest.raises(MissingOptionError):
            DTraceBackend().tapset_begin(RenderContext(probe_prefix="qemu.system.arm"))

    def test_begin_requires_prefix(self):
        """Tapset begin refuses a missing prefix."""
        with pytest.raises(MissingOptionError):
            DTraceBackend().tapset_begin(RenderContext(binary="/usr/bin/qemu"))
