"""
Severity tiers — the closed set of buckets a lexicon entry can belong to.

The numeric value is only a stable key (YAML files and env vars use it);
tiers are never compared by order.
"""

from enum import IntEnum

from tools.censor_errors import InvalidTier


class Tier(IntEnum):
    """Severity classification for a lexicon entry."""
    SLURS = 1
    COMMON_PROFANITY = 2
    SEXUAL_TERMS = 3
    POSSIBLY_OFFENSIVE = 4
    USER_ADDED = 5

    @classmethod
    def coerce(cls, value) -> "Tier":
        """Turn a Tier, int, digit string or member name into a Tier.

        Raises:
            InvalidTier: if the value doesn't name one of the five tiers.
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True would silently become SLURS
        if isinstance(value, bool):
            raise InvalidTier(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidTier(value) from None
        if isinstance(value, str):
            key = value.strip()
            if key.isdigit():
                return cls.coerce(int(key))
            key = key.upper().replace("-", "_").replace(" ", "_")
            if key in cls.__members__:
                return cls[key]
        raise InvalidTier(value)


ALL_TIERS = tuple(Tier)
