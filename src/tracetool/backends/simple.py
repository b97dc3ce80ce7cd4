"""Simple built-in backend.

Arguments are cast to 64-bit integers and recorded through the
``trace0`` .. ``traceN`` entry points of ``simpletrace.h``, keyed by the
event's sequential index into ``trace_list``.
"""

from ..events import Event
from .base import BaseBackend, Lines, RenderContext


def cast_args_to_uint64(event: Event) -> str:
    return ", ".join(f"(uint64_t)(uintptr_t){name}" for name in event.argnames)


def trace_list_entry(event: Event) -> Lines:
    return ['{.tp_name = "%s", .state=0},' % event.name]


def trace_list_begin() -> Lines:
    return [
        '#include "trace.h"',
        "",
        "TraceEvent trace_list[] = {",
    ]


class SimpleBackend(BaseBackend):
    name = "simple"
    description = "Simple built-in backend."

    def header_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return ['#include "simpletrace.h"']

    def header_line(self, event: Event, ctx: RenderContext) -> Lines:
        trace_args = str(ctx.next_index())
        if event.argc > 0:
            trace_args += ", " + cast_args_to_uint64(event)
        return [
            f"static inline void trace_{event.name}({event.args})",
            "{",
            f"    trace{event.argc}({trace_args});",
            "}",
        ]

    def header_end(self, ctx: RenderContext) -> Lines:
        return [
            f"#define NR_TRACE_EVENTS {ctx.index}",
            "extern TraceEvent trace_list[NR_TRACE_EVENTS];",
        ]

    def source_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return trace_list_begin()

    def source_line(self, event: Event, ctx: RenderContext) -> Lines:
        ctx.next_index()
        return trace_list_entry(event)

    def source_end(self, ctx: RenderContext) -> Lines:
        return ["};"]
