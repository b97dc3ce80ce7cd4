"""Stderr built-in backend.

Enabled events are printed with ``fprintf``. The enable state lives in the
``trace_list`` table, declared extern in the header and defined by the
generated source in the same order.
"""

from ..events import Event
from .base import BaseBackend, Lines, RenderContext, joined_argnames
from .simple import trace_list_begin, trace_list_entry


class StderrBackend(BaseBackend):
    name = "stderr"
    description = "Stderr built-in backend."

    def header_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return [
            "#include <stdio.h>",
            '#include "trace/stderr.h"',
            "",
            "extern TraceEvent trace_list[];",
        ]

    def header_line(self, event: Event, ctx: RenderContext) -> Lines:
        index = ctx.next_index()
        return [
            f"static inline void trace_{event.name}({event.args})",
            "{",
            f"    if (trace_list[{index}].state != 0) {{",
            '        fprintf(stderr, "%s %s\\n"%s);'
            % (event.name, event.fmt, joined_argnames(event, leading=True)),
            "    }",
            "}",
        ]

    def header_end(self, ctx: RenderContext) -> Lines:
        return [f"#define NR_TRACE_EVENTS {ctx.index}"]

    def source_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return trace_list_begin()

    def source_line(self, event: Event, ctx: RenderContext) -> Lines:
        ctx.next_index()
        return trace_list_entry(event)

    def source_end(self, ctx: RenderContext) -> Lines:
        return ["};"]
