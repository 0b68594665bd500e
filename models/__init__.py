"""
Pydantic v2 data models — the contract for lexicon data.

Every locale registered with the engine passes through these models first.
"""

from models.tiers import Tier, ALL_TIERS
from models.lexicon import LocaleDictionaryModel, validate_dictionary

__all__ = [
    "Tier",
    "ALL_TIERS",
    "LocaleDictionaryModel",
    "validate_dictionary",
]
