"""Exception types.

Unknown or malformed identifiers are not errors (lookups return None);
these are raised only for broken static data or misuse of a surface.
"""

from __future__ import annotations


class FlagmojiError(Exception):
    """Base class for flagmoji errors."""


class RegistryError(FlagmojiError):
    """A closed set and its scalar table disagree."""


class UnknownKindError(FlagmojiError, ValueError):
    """A kind name that is not one of country/subdivision/international/cultural."""

    def __init__(self, name: str):
        super().__init__(f"Unknown flag kind: {name!r}")
        self.name = name
