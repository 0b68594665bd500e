"""
Censor Error Types — Structured exception hierarchy.

All errors are precondition violations raised synchronously to the caller.
"No match" is never an error.
"""


class CensorError(Exception):
    """Base class for all CensorSensor errors."""
    pass


class UnknownLocale(CensorError, KeyError):
    """The requested locale id is not present in the registry."""

    def __init__(self, locale_id):
        self.locale_id = locale_id
        super().__init__(locale_id)

    def __str__(self):
        return f"Unknown locale: {self.locale_id!r}"


class InvalidTier(CensorError, ValueError):
    """A tier identifier outside the five defined tiers."""

    def __init__(self, tier):
        self.tier = tier
        super().__init__(tier)

    def __str__(self):
        return f"Invalid tier: {self.tier!r} (expected 1-5 or a tier name)"


class LocaleLoadError(CensorError):
    """A locale file could not be read or failed validation."""
    pass
