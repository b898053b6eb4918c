"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pathswitch.routing.codecs import Codec
from pathswitch.routing.template import Template


@dataclass(frozen=True, slots=True)
class Route:
    """A template bound to one alternative of a Switch.

    ``variant`` identifies the alternative when building a path: a class
    (matched by exact type) or a singleton value such as an enum member
    (matched by equality). ``fields`` pairs up with the template's
    captures by name when ``by_name`` is true, otherwise by position.
    ``codecs`` is in template capture order.
    """

    template: Template
    constructor: Callable[..., Any]
    variant: Any
    fields: tuple[str, ...]
    codecs: tuple[Codec, ...]
    by_name: bool = True

    @property
    def name(self) -> str:
        if isinstance(self.variant, type):
            return self.variant.__qualname__
        return repr(self.variant)

    def produces(self, value: Any) -> bool:
        """Whether ``value`` is an alternative this route builds."""
        if isinstance(self.variant, type):
            return type(value) is self.variant
        return value == self.variant

    def construct(self, decoded: Mapping[str, Any]) -> Any:
        """Call the constructor with decoded capture values.

        ``decoded`` is keyed by capture name, in template order.
        """
        if self.by_name:
            return self.constructor(**{f: decoded[f] for f in self.fields})
        return self.constructor(*decoded.values())

    def field_values(self, value: Any) -> dict[str, Any]:
        """Read field values off an alternative, keyed by capture name."""
        names = self.template.capture_names
        return {
            capture: getattr(value, field)
            for capture, field in zip(names, self._ordered_fields(names), strict=True)
        }

    def _ordered_fields(self, names: tuple[str, ...]) -> tuple[str, ...]:
        return names if self.by_name else self.fields


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Structural match of one template against a path.

    ``captures`` maps capture name to raw text in template order.
    ``consumed + remainder`` is always the input path.
    """

    captures: dict[str, str]
    consumed: str
    remainder: str
