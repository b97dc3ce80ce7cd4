"""Trace event declarations.

One declaration per line::

    [prop ...] name(type name, ...) "format string"

Parsing is permissive. A malformed line yields empty or partial fields
instead of raising, and every backend still renders something for it.
Nested parentheses inside the argument list are not supported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


def is_declaration(line: str) -> bool:
    """Return False for blank lines and ``#`` comments."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


def _split_head(line: str) -> list[str]:
    """Tokens before the first ``(``: properties followed by the name."""
    return line.split("(", 1)[0].split()


def _extract_args(line: str) -> str:
    if "(" not in line:
        return ""
    rest = line.split("(", 1)[1]
    return rest.split(")", 1)[0].strip()


def _extract_fmt(line: str) -> str:
    first = line.find('"')
    last = line.rfind('"')
    if first == -1 or first == last:
        return ""
    return line[first + 1:last]


def extract_argnames(args: str) -> list[str]:
    """Argument names of a raw argument list.

    Only fields ending in a comma carry a name, except the last field, which
    counts as a name when the list has more than one field. ``void`` gives
    no names, ``int a`` gives ``["a"]``.
    """
    names: list[str] = []
    fields = args.split()
    name = ""
    for raw in fields:
        # one pointer star only
        if raw.startswith("*"):
            raw = raw[1:]
        name = raw[:-1] if raw.endswith(",") else raw
        if name != raw:
            names.append(name)

    if len(fields) > 1:
        names.append(name)
    return names


def extract_arguments(args: str) -> list[tuple[str, str]]:
    """Split a raw argument list into ``(type, name)`` pairs."""
    pairs: list[tuple[str, str]] = []
    for part in args.split(","):
        tokens = part.split()
        if len(tokens) < 2:
            continue
        name = tokens[-1]
        ctype = " ".join(tokens[:-1])
        stars = len(name) - len(name.lstrip("*"))
        if stars:
            name = name[stars:]
            ctype = ctype + " " + "*" * stars
        pairs.append((ctype, name))
    return pairs


@dataclass(frozen=True)
class Event:
    """A single parsed trace event declaration."""

    name: str
    properties: frozenset = field(default_factory=frozenset)
    args: str = ""
    fmt: str = ""
    argnames: tuple = ()

    @classmethod
    def parse(cls, line: str) -> "Event":
        """Build an Event from one declaration line."""
        line = line.strip()
        head = _split_head(line)
        name = head[-1] if head else ""
        args = _extract_args(line)
        return cls(
            name=name,
            properties=frozenset(head[:-1]),
            args=args,
            fmt=_extract_fmt(line),
            argnames=tuple(extract_argnames(args)),
        )

    @property
    def argc(self) -> int:
        return len(self.argnames)

    @property
    def arguments(self) -> list[tuple[str, str]]:
        return extract_arguments(self.args)

    def has_property(self, prop: str) -> bool:
        return prop in self.properties

    @property
    def disabled(self) -> bool:
        return self.has_property("disable")


def read_events(lines: Iterable[str]) -> Iterator[Event]:
    """Yield an Event for every declaration line, skipping the rest."""
    for line in lines:
        if is_declaration(line):
            yield Event.parse(line)
