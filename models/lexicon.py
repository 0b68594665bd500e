"""
Locale dictionary schema — validates word → tier data before it is registered.

Every locale, whether loaded from YAML or handed over in memory, passes
through this model first. If validation fails, nothing is registered.
"""

from typing import Dict, Mapping
from pydantic import BaseModel, field_validator

from models.tiers import Tier


class LocaleDictionaryModel(BaseModel):
    """Schema for a locale dictionary file."""

    locale: str
    description: str = ""
    words: Dict[str, Tier] = {}

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("locale id must not be empty")
        return v

    @field_validator("words", mode="before")
    @classmethod
    def coerce_words(cls, v):
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            raise ValueError("words must be a mapping of word -> tier")
        words = {}
        for word, tier in v.items():
            if not isinstance(word, str):
                raise ValueError(
                    f"dictionary words must be strings, got {word!r} ({type(word).__name__}); "
                    "quote YAML keys like no, on or off"
                )
            key = word.strip().lower()
            if not key:
                raise ValueError("dictionary words must not be empty")
            words[key] = Tier.coerce(tier)
        return words

    model_config = {"extra": "allow"}


def validate_dictionary(locale_id: str, words: Mapping) -> Dict[str, Tier]:
    """Validate an in-memory word → tier mapping and return a clean copy."""
    return LocaleDictionaryModel(locale=locale_id, words=words).words
