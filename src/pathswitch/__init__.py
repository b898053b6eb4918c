"""pathswitch — match paths to typed alternatives, and build paths back.

Basic usage::

    from dataclasses import dataclass

    from pathswitch import Switch

    pages = Switch("Page")

    @pages.route("/profile/{id}")
    @dataclass(frozen=True, slots=True)
    class Profile:
        id: int

    pages.from_path("/profile/42")   # Profile(id=42)
    pages.to_path(Profile(id=42))    # "/profile/42"
"""

__version__ = "0.1.0"
__all__ = [
    "AllowMissing",
    "Codec",
    "ConfigurationError",
    "DecodeError",
    "LeadingSlash",
    "NoMatch",
    "OptionalCodec",
    "PathSwitchError",
    "Route",
    "Switch",
    "SwitchConfig",
    "Template",
    "TemplateError",
    "UIntCodec",
    "UnknownAlternative",
    "parse_template",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathswitch`` cheap for CLI start-up.
    """
    if name == "Switch":
        from pathswitch.routing.switch import Switch

        return Switch

    if name == "SwitchConfig":
        from pathswitch.config import SwitchConfig

        return SwitchConfig

    if name == "Route":
        from pathswitch.routing.route import Route

        return Route

    if name in ("Template", "parse_template"):
        from pathswitch.routing import template as _template

        return getattr(_template, name)

    if name in ("AllowMissing", "Codec", "LeadingSlash", "OptionalCodec", "UIntCodec"):
        from pathswitch.routing import codecs as _codecs

        return getattr(_codecs, name)

    if name in (
        "ConfigurationError",
        "DecodeError",
        "NoMatch",
        "PathSwitchError",
        "TemplateError",
        "UnknownAlternative",
    ):
        from pathswitch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
