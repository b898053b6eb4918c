"""Path matcher — a single left-to-right walk of tokens over a path.

No alternation inside a template means no backtracking: each token either
consumes a prefix of what is left or the whole match fails.
"""

from pathswitch.config import SwitchConfig
from pathswitch.routing.route import RouteMatch
from pathswitch.routing.template import Capture, CatchAll, Literal, Template

_DEFAULT_CONFIG = SwitchConfig()


def match_template(
    template: Template,
    path: str,
    config: SwitchConfig = _DEFAULT_CONFIG,
) -> RouteMatch | None:
    """Match ``path`` against a compiled template.

    Returns a ``RouteMatch`` on success, ``None`` otherwise. Templates
    without a trailing catch-all must consume the entire path.
    """
    tokens = template.tokens
    captures: dict[str, str] = {}
    pos = 0

    for i, token in enumerate(tokens):
        if isinstance(token, Literal):
            end = pos + len(token.text)
            if not _literal_eq(path[pos:end], token.text, config):
                return None
            pos = end

        elif isinstance(token, Capture):
            end = _segment_end(path, pos, tokens[i + 1] if i + 1 < len(tokens) else None, config)
            if end == pos:
                return None
            captures[token.name] = path[pos:end]
            pos = end

        elif isinstance(token, CatchAll):
            captures[token.name] = path[pos:]
            pos = len(path)

    remainder = path[pos:]
    if remainder and (config.strict or remainder != "/"):
        return None
    return RouteMatch(captures=captures, consumed=path[:pos], remainder=remainder)


def _segment_end(path: str, pos: int, following: object, config: SwitchConfig) -> int:
    """End index of the capture that starts at ``pos``.

    A capture stops at the next ``/``. When it is directly followed by
    literal text that is not a separator (``{name}.json``), it also stops
    at the first occurrence of that text within the segment.
    """
    end = path.find("/", pos)
    if end == -1:
        end = len(path)
    if isinstance(following, Literal) and not following.text.startswith("/"):
        stop = following.text.split("/", 1)[0]
        if config.case_insensitive:
            # Slices of the original text keep indices valid when case
            # mapping changes length ("İ".lower() is two characters)
            found = next(
                (
                    i
                    for i in range(pos, end - len(stop) + 1)
                    if _literal_eq(path[i : i + len(stop)], stop, config)
                ),
                -1,
            )
        else:
            found = path.find(stop, pos, end)
        if found != -1:
            end = found
    return end


def _literal_eq(candidate: str, text: str, config: SwitchConfig) -> bool:
    if config.case_insensitive:
        return candidate.casefold() == text.casefold()
    return candidate == text
