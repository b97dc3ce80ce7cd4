"""Tests for the nop, simple and stderr backends."""

from tracetool.backends import (
    NopBackend,
    OutputKind,
    RenderContext,
    SimpleBackend,
    StderrBackend,
)
from tracetool.convert import convert
from tracetool.events import Event

MY_EVENT = Event.parse('my_event(int a, const char *b) "a=%d b=%s"')
NO_ARGS = Event.parse('no_args(void) ""')


class TestNopBackend:
    """Test NopBackend rendering."""

    def test_header_is_empty_function(self):
        """Header is the signature with an empty body."""
        lines = NopBackend().header_line(MY_EVENT, RenderContext())
        assert lines == [
            "static inline void trace_my_event(int a, const char *b)",
            "{",
            "}",
        ]

    def test_source_is_empty(self):
        """Nop emits no source."""
        assert NopBackend().source_line(MY_EVENT, RenderContext()) == []

    def test_supports_every_output(self):
        """Nop renders for every output kind."""
        backend = NopBackend()
        assert all(backend.supports(kind) for kind in OutputKind)


class TestSimpleBackend:
    """Test SimpleBackend rendering."""

    def test_header_casts_arguments(self):
        """Arguments are cast and the index advances."""
        ctx = RenderContext()
        lines = SimpleBackend().header_line(MY_EVENT, ctx)
        assert lines == [
            "static inline void trace_my_event(int a, const char *b)",
            "{",
            "    trace2(0, (uint64_t)(uintptr_t)a, (uint64_t)(uintptr_t)b);",
            "}",
        ]
        assert ctx.index == 1

    def test_header_without_arguments(self):
        """No arguments means trace0 with just the index."""
        ctx = RenderContext(index=4)
        lines = SimpleBackend().header_line(NO_ARGS, ctx)
        assert lines[2] == "    trace0(4);"

    def test_header_full_pass(self, sample_lines):
        """Disabled events are empty and take no index."""
        out = convert(sample_lines, SimpleBackend(), OutputKind.HEADER)
        assert out == [
            '#include "simpletrace.h"',
            "",
            "static inline void trace_my_event(int a, const char *b)",
            "{",
            "    trace2(0, (uint64_t)(uintptr_t)a, (uint64_t)(uintptr_t)b);",
            "}",
            "",
            "static inline void trace_off_event(void)",
            "{",
            "}",
            "",
            "static inline void trace_no_args(void)",
            "{",
            "    trace0(1);",
            "}",
            "",
            "#define NR_TRACE_EVENTS 2",
            "extern TraceEvent trace_list[NR_TRACE_EVENTS];",
        ]

    def test_source_full_pass(self, sample_lines):
        """One table entry per enabled event."""
        out = convert(sample_lines, SimpleBackend(), OutputKind.SOURCE)
        assert out == [
            '#include "trace.h"',
            "",
            "TraceEvent trace_list[] = {",
            "",
            '{.tp_name = "my_event", .state=0},',
            "",
            "",
            '{.tp_name = "no_args", .state=0},',
            "",
            "};",
        ]

    def test_begin_resets_index(self):
        """Begin starts the index at 0."""
        ctx = RenderContext(index=7)
        SimpleBackend().header_begin(ctx)
        assert ctx.index == 0


class TestStderrBackend:
    """Test StderrBackend rendering."""

    def test_header_prints_when_enabled(self):
        """fprintf is guarded by the event's state."""
        lines = StderrBackend().header_line(MY_EVENT, RenderContext())
        assert lines == [
            "static inline void trace_my_event(int a, const char *b)",
            "{",
            "    if (trace_list[0].state != 0) {",
            '        fprintf(stderr, "my_event a=%d b=%s\\n", a, b);',
            "    }",
            "}",
        ]

    def test_header_without_arguments(self):
        """No arguments means no trailing argument list."""
        lines = StderrBackend().header_line(NO_ARGS, RenderContext())
        assert lines[3] == '        fprintf(stderr, "no_args \\n");'

    def test_header_begin_declares_table(self):
        """The state table is declared extern."""
        lines = StderrBackend().header_begin(RenderContext())
        assert "extern TraceEvent trace_list[];" in lines
        assert "#include <stdio.h>" in lines

    def test_header_end_counts_events(self, sample_lines):
        """NR_TRACE_EVENTS counts enabled events."""
        out = convert(sample_lines, StderrBackend(), OutputKind.HEADER)
        assert out[-1] == "#define NR_TRACE_EVENTS 2"

    def test_source_matches_simple(self, sample_lines):
        """Stderr uses the simple backend's table."""
        assert convert(sample_lines, StderrBackend(), OutputKind.SOURCE) == convert(
            sample_lines, SimpleBackend(), OutputKind.SOURCE
        )
