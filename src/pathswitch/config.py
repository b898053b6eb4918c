"""Matcher configuration.

SwitchConfig is a frozen dataclass, shared read-only by every match call.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SwitchConfig:
    """Matching options for a Switch. Immutable after creation.

    The defaults give exact, case-sensitive matching that must consume the
    whole path::

        config = SwitchConfig(case_insensitive=True)
        pages = Switch("Page", config=config)
    """

    # Compare literal template text with str.casefold()
    case_insensitive: bool = False

    # When False, a single unconsumed trailing "/" does not fail the match
    strict: bool = True
