"""Template compiler — turns ``"/forum/{id}{*:rest}"`` into tokens.

Grammar::

    {name}      capture one non-empty path segment
    {*:name}    capture the rest of the path (final token only)
    anything    literal text, matched exactly, "/" included

Compilation is pure, so compiled templates are memoised per source string.
"""

import functools
from dataclasses import dataclass
from typing import TypeAlias

from pathswitch.errors import (
    DuplicateCaptureName,
    EmptyCaptureName,
    InvalidCatchAllPosition,
    MalformedTemplate,
)

CATCH_ALL_PREFIX = "*:"


@dataclass(frozen=True, slots=True)
class Literal:
    """Text the input must contain verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class Capture:
    """A single non-empty segment bound to ``name``."""

    name: str


@dataclass(frozen=True, slots=True)
class CatchAll:
    """The whole remainder of the path bound to ``name``. Always last."""

    name: str


Token: TypeAlias = Literal | Capture | CatchAll


@dataclass(frozen=True, slots=True)
class Template:
    """A compiled template. Reusable across any number of match/build calls."""

    source: str
    tokens: tuple[Token, ...]

    @property
    def capture_names(self) -> tuple[str, ...]:
        """Capture names (both kinds) in template order."""
        return tuple(t.name for t in self.tokens if not isinstance(t, Literal))

    @property
    def catch_all(self) -> CatchAll | None:
        if self.tokens and isinstance(self.tokens[-1], CatchAll):
            return self.tokens[-1]
        return None

    def __str__(self) -> str:
        return self.source


@functools.cache
def parse_template(source: str) -> Template:
    """Compile a template string into a ``Template``.

    Examples::

        "/"                -> [Literal("/")]
        "/profile/{id}"    -> [Literal("/profile/"), Capture("id")]
        "/forum{*:rest}"   -> [Literal("/forum"), CatchAll("rest")]
        "/v{major}.{minor}" -> [Literal("/v"), Capture("major"),
                               Literal("."), Capture("minor")]

    Raises:
        InvalidCatchAllPosition: ``{*:name}`` is not the last thing in the template.
        DuplicateCaptureName: a capture name is used twice.
        EmptyCaptureName: ``{}`` or ``{*:}``.
        MalformedTemplate: unbalanced braces, or a name that is not an identifier.
    """
    tokens: list[Token] = []
    seen: set[str] = set()
    pos = 0

    while pos < len(source):
        if tokens and isinstance(tokens[-1], CatchAll):
            raise InvalidCatchAllPosition(source, f"Text follows {{*:{tokens[-1].name}}}")

        open_at = source.find("{", pos)
        close_at = source.find("}", pos)

        if open_at == -1:
            if close_at != -1:
                raise MalformedTemplate(source, f"Unmatched '}}' at index {close_at}")
            tokens.append(Literal(source[pos:]))
            break

        if -1 < close_at < open_at:
            raise MalformedTemplate(source, f"Unmatched '}}' at index {close_at}")
        if open_at > pos:
            tokens.append(Literal(source[pos:open_at]))

        close_at = source.find("}", open_at)
        if close_at == -1:
            raise MalformedTemplate(source, f"Unclosed '{{' at index {open_at}")

        inner = source[open_at + 1 : close_at]
        if "{" in inner:
            raise MalformedTemplate(source, f"Nested '{{' at index {open_at}")

        if inner.startswith(CATCH_ALL_PREFIX):
            name = inner[len(CATCH_ALL_PREFIX) :]
            token: Token = CatchAll(name)
        else:
            name = inner
            token = Capture(name)

        if not name:
            raise EmptyCaptureName(source, f"Empty capture name at index {open_at}")
        if not name.isidentifier():
            raise MalformedTemplate(source, f"Capture name {name!r} is not an identifier")
        if name in seen:
            raise DuplicateCaptureName(source, f"Capture name {name!r} is used twice")

        seen.add(name)
        tokens.append(token)
        pos = close_at + 1

    return Template(source=source, tokens=tuple(tokens))
