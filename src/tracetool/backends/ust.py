"""LTTng User Space Tracing backend."""

from ..events import Event
from .base import BaseBackend, Lines, RenderContext, joined_argnames

# Macros defined by the UST headers that clash with the including project.
POLLUTING_MACROS = ("mutex_lock", "mutex_unlock", "inline", "wmb")


def clean_namespace() -> Lines:
    return [f"#undef {macro}" for macro in POLLUTING_MACROS]


class UstBackend(BaseBackend):
    name = "ust"
    description = "LTTng User Space Tracing backend."

    def header_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return ["#include <ust/tracepoint.h>"] + clean_namespace()

    def header_line(self, event: Event, ctx: RenderContext) -> Lines:
        return [
            "DECLARE_TRACE(ust_%s, TP_PROTO(%s), TP_ARGS(%s));"
            % (event.name, event.args, joined_argnames(event)),
            f"#define trace_{event.name} trace_ust_{event.name}",
        ]

    def source_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return ["#include <ust/marker.h>"] + clean_namespace() + ['#include "trace.h"']

    def source_line(self, event: Event, ctx: RenderContext) -> Lines:
        ctx.names.append(event.name)
        return [
            f"DEFINE_TRACE(ust_{event.name});",
            "",
            f"static void ust_{event.name}_probe({event.args})",
            "{",
            '    trace_mark(ust, %s, "%s"%s);'
            % (event.name, event.fmt, joined_argnames(event, leading=True)),
            "}",
        ]

    def source_end(self, ctx: RenderContext) -> Lines:
        lines = [
            "static void __attribute__((constructor)) trace_init(void)",
            "{",
        ]
        lines.extend(f"    register_trace_ust_{name}(ust_{name}_probe);" for name in ctx.names)
        lines.append("}")
        return lines
