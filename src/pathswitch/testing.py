"""Assertion helpers for testing route tables."""

from typing import Any

from pathswitch.routing.switch import Switch


def assert_round_trip(switch: Switch, path: str, expected: Any = None) -> Any:
    """Assert ``path`` matches, and that its rebuilt path matches to an equal value.

    Returns the matched alternative. When ``expected`` is given, the match
    must also equal it.
    """
    value = switch.from_path(path)
    assert value is not None, f"{switch.name} has no route for {path!r}"
    if expected is not None:
        assert value == expected, f"{path!r} matched {value!r}, expected {expected!r}"

    rebuilt = switch.to_path(value)
    again = switch.from_path(rebuilt)
    assert again == value, (
        f"{path!r} -> {value!r} rebuilt as {rebuilt!r}, which matched {again!r}"
    )
    return value


def assert_no_match(switch: Switch, path: str) -> None:
    """Assert no route in ``switch`` accepts ``path``."""
    value = switch.from_path(path)
    assert value is None, f"{path!r} unexpectedly matched {value!r}"
