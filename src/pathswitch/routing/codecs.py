"""Field codecs — typed decoding of captured text, and encoding back.

A codec is any object with ``decode(raw) -> value`` (raising ``DecodeError``)
and ``encode(value) -> str``. Built-ins cover ``str``, ``int``, ``float``
and ``bool``; ``codec_for()`` picks one from a field annotation.
"""

import re
import types
from dataclasses import dataclass
from typing import Any, Protocol, Union, get_args, get_origin, runtime_checkable

from pathswitch.errors import ConfigurationError, DecodeError

_INT_RE = re.compile(r"[+-]?\d+")
_UINT_RE = re.compile(r"\+?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|nan)")


@runtime_checkable
class Codec(Protocol):
    """Bidirectional conversion between a path fragment and a field value."""

    def decode(self, raw: str) -> Any: ...

    def encode(self, value: Any) -> str: ...


@dataclass(frozen=True, slots=True)
class StrCodec:
    def decode(self, raw: str) -> str:
        return raw

    def encode(self, value: str) -> str:
        return str(value)


@dataclass(frozen=True, slots=True)
class IntCodec:
    """Signed decimal integers. ``"007"`` decodes to 7 and encodes as ``"7"``."""

    def decode(self, raw: str) -> int:
        if not _INT_RE.fullmatch(raw):
            raise DecodeError(f"{raw!r} is not an integer")
        return int(raw)

    def encode(self, value: int) -> str:
        return str(int(value))


@dataclass(frozen=True, slots=True)
class UIntCodec:
    """Non-negative decimal integers."""

    def decode(self, raw: str) -> int:
        if not _UINT_RE.fullmatch(raw):
            raise DecodeError(f"{raw!r} is not a non-negative integer")
        return int(raw)

    def encode(self, value: int) -> str:
        return str(int(value))


@dataclass(frozen=True, slots=True)
class FloatCodec:
    def decode(self, raw: str) -> float:
        if not _FLOAT_RE.fullmatch(raw):
            raise DecodeError(f"{raw!r} is not a number")
        return float(raw)

    def encode(self, value: float) -> str:
        return repr(float(value))


@dataclass(frozen=True, slots=True)
class BoolCodec:
    """Exactly ``"true"`` or ``"false"``."""

    def decode(self, raw: str) -> bool:
        if raw == "true":
            return True
        if raw == "false":
            return False
        raise DecodeError(f"{raw!r} is not 'true' or 'false'")

    def encode(self, value: bool) -> str:
        return "true" if value else "false"


@dataclass(frozen=True, slots=True)
class OptionalCodec:
    """Wraps a codec so that empty or undecodable text becomes ``None``.

    Permissive on purpose: an optional field never rejects a match. Only
    valid on a catch-all, since ``None`` rebuilds as an empty slot.
    """

    inner: Codec

    def decode(self, raw: str) -> Any:
        if not raw:
            return None
        try:
            return self.inner.decode(raw)
        except DecodeError:
            return None

    def encode(self, value: Any) -> str:
        if value is None:
            return ""
        return self.inner.encode(value)


@dataclass(frozen=True, slots=True)
class AllowMissing:
    """Catch-all wrapper: a missing section decodes to ``None``.

    The section counts as missing when the remainder is empty or starts a
    new segment (``/``) that ``inner`` does not accept. Any other text
    ``inner`` rejects is still a decode failure.
    """

    inner: Codec

    def decode(self, raw: str) -> Any:
        try:
            return self.inner.decode(raw)
        except DecodeError:
            if not raw or raw.startswith("/"):
                return None
            raise

    def encode(self, value: Any) -> str:
        if value is None:
            return ""
        return self.inner.encode(value)


# Wrappers that encode None as "", which only a catch-all can match again
EMPTY_ON_NONE: tuple[type, ...] = (OptionalCodec, AllowMissing)


@dataclass(frozen=True, slots=True)
class LeadingSlash:
    """Requires a leading ``/`` and hands the rest to ``inner``.

    Lets a catch-all such as ``/files{*:name}`` carry a plain ``str`` or
    ``int`` without the separator ending up in the value.
    """

    inner: Codec

    def decode(self, raw: str) -> Any:
        if not raw.startswith("/"):
            raise DecodeError(f"{raw!r} does not start with '/'")
        return self.inner.decode(raw[1:])

    def encode(self, value: Any) -> str:
        return "/" + self.inner.encode(value)


# python_type -> codec, for annotation lookup
CODECS: dict[type, Codec] = {
    str: StrCodec(),
    int: IntCodec(),
    float: FloatCodec(),
    bool: BoolCodec(),
}


def codec_for(annotation: Any) -> Codec:
    """Pick a codec for a field annotation.

    Accepts a codec instance (a ``Switch`` included), one of the types in
    ``CODECS``, or ``X | None`` / ``Optional[X]`` of those.

    Raises ``ConfigurationError`` for anything else.
    """
    if isinstance(annotation, Codec) and not isinstance(annotation, type):
        return annotation

    if annotation in CODECS:
        return CODECS[annotation]

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1 and len(args) < len(get_args(annotation)):
            return OptionalCodec(codec_for(args[0]))

    msg = f"No codec for field type {annotation!r}. Pass one explicitly with codecs={{...}}."
    raise ConfigurationError(msg)
