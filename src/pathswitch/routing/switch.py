"""Switch — ordered dispatch of paths to alternatives, and back.

A Switch owns an ordered list of routes. ``from_path`` tries them in
registration order and returns the first alternative whose template
matches and whose captures all decode. ``to_path`` finds the route that
produced an alternative and rebuilds its path.

A Switch is also a codec, so one Switch can be the codec of another's
catch-all field. That is how multi-level paths are handled::

    forum = Switch("ForumRoute")
    forum.add("/{subforum}/{thread_slug}", Thread)

    pages = Switch("Page")
    pages.add("/forum{*:rest}", Forum, codecs={"rest": forum})

    pages.from_path("/forum/test/12")
    # Forum(rest=Thread(subforum="test", thread_slug="12"))
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import fields as dc_fields
from dataclasses import is_dataclass
from typing import Any, TypeVar, get_type_hints

from pathswitch.config import SwitchConfig
from pathswitch.errors import (
    CaptureFieldMismatch,
    ConfigurationError,
    DecodeError,
    NoMatch,
    UnknownAlternative,
)
from pathswitch.routing.codecs import EMPTY_ON_NONE, Codec, StrCodec, codec_for
from pathswitch.routing.matcher import match_template
from pathswitch.routing.route import Route
from pathswitch.routing.template import Capture, Literal, Template, parse_template

logger = logging.getLogger("pathswitch.switch")

T = TypeVar("T")

_STR = StrCodec()
_UNSET: Any = object()


class Switch:
    """An ordered set of routes for one choice type.

    Usage::

        pages = Switch("Page")

        @pages.route("/profile/{id}")
        @dataclass(frozen=True)
        class Profile:
            id: int

        pages.unit("/", Page.HOME)

        pages.from_path("/profile/42")   # Profile(id=42)
        pages.to_path(Profile(id=7))     # "/profile/7"

    Routes are registered during setup. The first ``from_path`` or
    ``to_path`` call freezes the Switch; no routes can be added after that.
    """

    __slots__ = ("_frozen", "_routes", "config", "name")

    def __init__(self, name: str, *, config: SwitchConfig | None = None) -> None:
        self.name = name
        self.config = config or SwitchConfig()
        self._routes: list[Route] = []
        self._frozen = False

    def __repr__(self) -> str:
        return f"Switch({self.name!r}, routes={len(self._routes)})"

    # -- Registration ------------------------------------------------------

    def add(
        self,
        template: str,
        constructor: Callable[..., Any],
        *,
        fields: Iterable[str] | None = None,
        codecs: Mapping[str, Any] | None = None,
        variant: Any = _UNSET,
    ) -> Route:
        """Register a template for one alternative. Must be called before freezing.

        Args:
            template: Template string, e.g. ``"/profile/{id}"``.
            constructor: Called with the decoded captures to build the
                alternative. Usually the alternative's class.
            fields: Field names in declaration order. Defaults to the
                dataclass or NamedTuple fields of ``constructor``, else
                the capture names.
                Captures bind to fields by name when the names agree,
                otherwise by position.
            codecs: Per-field codec (or annotation) overrides. Fields not
                listed are resolved from ``constructor``'s type hints and
                fall back to plain strings.
            variant: What ``to_path`` recognises as built by this route.
                Defaults to ``constructor`` when it is a class.

        Returns:
            The registered ``Route``.

        Raises:
            ConfigurationError: If the Switch is frozen, a codec cannot be
                resolved, or no ``variant`` can be inferred.
            TemplateError: If the template is invalid or its captures do
                not fit the fields.
        """
        if self._frozen:
            msg = f"Cannot add routes to {self.name} after it has been used."
            raise ConfigurationError(msg)

        compiled = parse_template(template)

        if variant is _UNSET:
            if not isinstance(constructor, type):
                msg = f"variant= is required for {template!r}: {constructor!r} is not a class."
                raise ConfigurationError(msg)
            variant = constructor

        if fields is None:
            if isinstance(constructor, type) and is_dataclass(constructor):
                fields = tuple(f.name for f in dc_fields(constructor) if f.init)
            elif isinstance(constructor, type) and issubclass(constructor, tuple):
                # NamedTuple
                fields = getattr(constructor, "_fields", compiled.capture_names)
            else:
                fields = compiled.capture_names
        fields = tuple(fields)

        by_name = _bind_fields(compiled, fields, variant)
        route = Route(
            template=compiled,
            constructor=constructor,
            variant=variant,
            fields=fields,
            codecs=_resolve_codecs(compiled, fields, by_name, constructor, codecs or {}),
            by_name=by_name,
        )
        self._routes.append(route)
        logger.debug("%s: registered %s -> %s", self.name, compiled.source, route.name)
        return route

    def route(self, template: str, **kwargs: Any) -> Callable[[type[T]], type[T]]:
        """Class decorator form of ``add()``. Stack it for several templates."""

        def decorator(cls: type[T]) -> type[T]:
            self.add(template, cls, **kwargs)
            return cls

        return decorator

    def unit(self, template: str, value: Any) -> Route:
        """Register a field-less alternative, such as an enum member."""
        return self.add(template, lambda: value, fields=(), variant=value)

    def freeze(self) -> None:
        """Freeze the Switch. No more routes can be added."""
        self._frozen = True

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes in registration (priority) order."""
        return tuple(self._routes)

    def capture_names(self) -> frozenset[str]:
        """Every capture name used by any route."""
        return frozenset(name for r in self._routes for name in r.template.capture_names)

    # -- Matching ----------------------------------------------------------

    def match(self, path: str) -> tuple[Route, Any] | None:
        """Return ``(route, alternative)`` for the first route that accepts ``path``.

        A route accepts a path when its template matches structurally and
        every capture decodes. A decode failure (including a nested Switch
        finding nothing) moves on to the next route.
        """
        self._frozen = True
        for route in self._routes:
            result = match_template(route.template, path, self.config)
            if result is None:
                continue
            decoded = self._decode(route, result.captures)
            if decoded is None:
                continue
            return route, route.construct(decoded)

        logger.debug("%s: no route matches %r", self.name, path)
        return None

    def from_path(self, path: str) -> Any | None:
        """The alternative for ``path``, or ``None`` if nothing matches."""
        matched = self.match(path)
        if matched is None:
            return None
        return matched[1]

    def require(self, path: str) -> Any:
        """Like ``from_path()`` but raises ``NoMatch`` instead of returning ``None``."""
        matched = self.match(path)
        if matched is None:
            raise NoMatch(self.name, path)
        return matched[1]

    def _decode(self, route: Route, captures: dict[str, str]) -> dict[str, Any] | None:
        decoded: dict[str, Any] = {}
        for (name, raw), codec in zip(captures.items(), route.codecs, strict=True):
            try:
                decoded[name] = codec.decode(raw)
            except DecodeError as exc:
                logger.debug(
                    "%s: %s matched but {%s} rejected %r: %s",
                    self.name,
                    route.template.source,
                    name,
                    raw,
                    exc,
                )
                return None
        return decoded

    # -- Building ----------------------------------------------------------

    def to_path(self, alternative: Any) -> str:
        """Rebuild the path for an alternative.

        Raises:
            UnknownAlternative: If no route in this Switch produces ``alternative``.
        """
        self._frozen = True
        for route in self._routes:
            if route.produces(alternative):
                break
        else:
            msg = f"{self.name} has no route for {alternative!r}"
            raise UnknownAlternative(msg)

        values = route.field_values(alternative)
        codecs = dict(zip(route.template.capture_names, route.codecs, strict=True))
        parts: list[str] = []
        for token in route.template.tokens:
            if isinstance(token, Literal):
                parts.append(token.text)
            else:
                parts.append(codecs[token.name].encode(values[token.name]))
        return "".join(parts)

    # -- Codec protocol ----------------------------------------------------

    def decode(self, raw: str) -> Any:
        matched = self.match(raw)
        if matched is None:
            msg = f"No route in {self.name} matches {raw!r}"
            raise DecodeError(msg)
        return matched[1]

    def encode(self, value: Any) -> str:
        return self.to_path(value)


def _bind_fields(template: Template, fields: tuple[str, ...], variant: Any) -> bool:
    """True to bind captures to fields by name, False for by position."""
    names = template.capture_names
    if len(names) != len(fields):
        msg = f"Captures {list(names)} do not fit the fields {list(fields)} of {variant!r}"
        raise CaptureFieldMismatch(template.source, msg)
    return set(names) == set(fields)


def _resolve_codecs(
    template: Template,
    fields: tuple[str, ...],
    by_name: bool,
    constructor: Callable[..., Any],
    overrides: Mapping[str, Any],
) -> tuple[Codec, ...]:
    """One codec per capture, in template order."""
    names = template.capture_names
    field_names = names if by_name else fields

    unknown = set(overrides) - set(field_names)
    if unknown:
        msg = f"codecs= names unknown fields {sorted(unknown)} for {template.source!r}"
        raise ConfigurationError(msg)

    hints: dict[str, Any] = {}
    if any(f not in overrides for f in field_names):
        try:
            hints = get_type_hints(constructor)
        except NameError as exc:
            msg = f"Cannot resolve type hints of {constructor!r}: {exc}. Pass codecs={{...}}."
            raise ConfigurationError(msg) from exc
        except TypeError:
            # Not introspectable (functools.partial, builtins): strings only
            hints = {}

    codecs: list[Codec] = []
    for field in field_names:
        if field in overrides:
            codecs.append(codec_for(overrides[field]))
        elif field in hints:
            codecs.append(codec_for(hints[field]))
        else:
            codecs.append(_STR)

    slots = [t for t in template.tokens if not isinstance(t, Literal)]
    for token, field, codec in zip(slots, field_names, codecs, strict=True):
        if isinstance(token, Capture) and isinstance(codec, EMPTY_ON_NONE):
            msg = (
                f"Field {field!r} can be None, which would rebuild {{{token.name}}} "
                "as an empty segment; make it the trailing {*:...} catch-all"
            )
            raise CaptureFieldMismatch(template.source, msg)
    return tuple(codecs)
