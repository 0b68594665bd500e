"""
Lexicon Resolver — Builds the word → tier mapping a match runs against.

The effective lexicon is the active locale overlaid with the engine's
custom words, minus removed words. It is rebuilt on every call so locale
switches and word edits are seen immediately.
"""

from typing import Dict, Iterable, Mapping

from models.tiers import Tier
from tools.locale_registry import LocaleRegistry


def effective_lexicon(
    locale_id: str,
    custom: Mapping[str, Tier],
    registry: LocaleRegistry,
    removed: Iterable[str] = (),
) -> Dict[str, Tier]:
    """Merge a locale's base dictionary with custom entries.

    Custom entries win on collision. Removed words are dropped even when
    the locale still lists them. Neither input is modified.

    Raises:
        UnknownLocale: if the locale isn't registered.
    """
    lexicon = dict(registry.get(locale_id))
    lexicon.update(custom)
    for word in removed:
        lexicon.pop(word, None)
    return lexicon
