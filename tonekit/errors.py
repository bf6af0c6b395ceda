"""
Errors raised by tone lookups, palette lookups and theme construction.
"""
from typing import Iterable


class UnknownTone(LookupError):
    """Tone name is not part of the tone scale."""

    def __init__(self, tone: str, known: Iterable[str] = ()):
        self.tone = tone
        self.known = tuple(known)
        msg = f"Unknown tone {tone!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)


class UnknownPaletteKey(LookupError):
    """Palette key is not defined by the theme."""

    def __init__(self, key: str, known: Iterable[str] = ()):
        self.key = key
        self.known = tuple(known)
        msg = f"Unknown palette key {key!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)


class ThemeConfigError(ValueError):
    """Theme, tone scale or config values are malformed."""
