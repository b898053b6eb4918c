"""Tests for pathswitch.routing.route — Route and RouteMatch."""

import enum
from dataclasses import dataclass

import pytest

from pathswitch.routing.codecs import IntCodec, StrCodec
from pathswitch.routing.route import Route, RouteMatch
from pathswitch.routing.template import parse_template


@dataclass(frozen=True, slots=True)
class Thread:
    subforum: str
    number: int


class Color(enum.Enum):
    RED = "red"


def _thread_route(source: str = "/{subforum}/{number}", *, by_name: bool = True) -> Route:
    fields = ("subforum", "number")
    return Route(
        template=parse_template(source),
        constructor=Thread,
        variant=Thread,
        fields=fields,
        codecs=(StrCodec(), IntCodec()),
        by_name=by_name,
    )


class TestRoute:
    def test_frozen(self) -> None:
        route = _thread_route()
        with pytest.raises(AttributeError):
            route.variant = object  # type: ignore[misc]

    def test_name_of_class_variant(self) -> None:
        assert _thread_route().name == "Thread"

    def test_name_of_value_variant(self) -> None:
        route = Route(
            template=parse_template("/red"),
            constructor=lambda: Color.RED,
            variant=Color.RED,
            fields=(),
            codecs=(),
        )
        assert route.name == "<Color.RED: 'red'>"
        assert route.produces(Color.RED)

    def test_produces_exact_type(self) -> None:
        route = _thread_route()
        assert route.produces(Thread("a", 1))
        assert not route.produces(("a", 1))

    def test_construct_by_name(self) -> None:
        route = _thread_route()
        assert route.construct({"subforum": "a", "number": 1}) == Thread("a", 1)

    def test_construct_by_position(self) -> None:
        route = _thread_route("/{x}/{y}", by_name=False)
        assert route.construct({"x": "a", "y": 1}) == Thread("a", 1)

    def test_field_values_by_name(self) -> None:
        route = _thread_route("/{number}/{subforum}")
        assert route.field_values(Thread("a", 1)) == {"number": 1, "subforum": "a"}

    def test_field_values_by_position(self) -> None:
        route = _thread_route("/{x}/{y}", by_name=False)
        assert route.field_values(Thread("a", 1)) == {"x": "a", "y": 1}


class TestRouteMatch:
    def test_parts_recompose_input(self) -> None:
        match = RouteMatch(captures={"id": "1"}, consumed="/p/1", remainder="/")
        assert match.consumed + match.remainder == "/p/1/"
