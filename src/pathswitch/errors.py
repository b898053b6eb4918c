"""pathswitch exception hierarchy.

Shared across the template compiler, codecs, and Switch so every module
raises and catches the same types.
"""


class PathSwitchError(Exception):
    """Base for all pathswitch-specific errors."""


class ConfigurationError(PathSwitchError):
    """Raised when a route registration is invalid.

    Registration happens once, before any matching, so these surface at
    import time of the module that declares the routes.
    """


class TemplateError(ConfigurationError):
    """A template string could not be compiled or bound to its variant."""

    def __init__(self, template: str, detail: str) -> None:
        self.template = template
        self.detail = detail
        super().__init__(f"{detail} in template {template!r}")


class InvalidCatchAllPosition(TemplateError):  # noqa: N818
    """``{*:name}`` is followed by more template text."""


class DuplicateCaptureName(TemplateError):  # noqa: N818
    """Two captures in one template share a name."""


class EmptyCaptureName(TemplateError):  # noqa: N818
    """``{}`` or ``{*:}``."""


class MalformedTemplate(TemplateError):  # noqa: N818
    """Unbalanced braces or a capture name that is not an identifier."""


class CaptureFieldMismatch(TemplateError):  # noqa: N818
    """The template's captures cannot be bound to the variant's fields."""


class DecodeError(PathSwitchError):
    """A captured string is not a valid value for its field.

    Never fatal during matching: the Switch moves on to the next route.
    """


class NoMatch(PathSwitchError):  # noqa: N818
    """No route matched a path. Only raised by ``Switch.require()``."""

    def __init__(self, switch_name: str, path: str) -> None:
        self.switch_name = switch_name
        self.path = path
        super().__init__(f"No route in {switch_name} matches {path!r}")


class UnknownAlternative(PathSwitchError):  # noqa: N818
    """``to_path()`` was given a value no route in the Switch produces."""
