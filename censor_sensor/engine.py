"""
CensorSensor — Lexicon-driven profanity detection and redaction.

Owns the per-instance state (active locale, custom words, removed words,
tier gate, clean function) and composes the normalizer, resolver, matcher
and redactor into the public API. Locale dictionaries live in a
LocaleRegistry that can be shared between engines.
"""

import logging
from typing import Callable, Dict, List, Optional, Set

from models.tiers import Tier
from tools.lexicon_resolver import effective_lexicon
from tools.locale_registry import LocaleRegistry, get_default_registry
from tools.masking import CallableMask, CleanFunction, FixedMask
from tools import matcher, redactor
from tools.tier_gate import TierGate

logger = logging.getLogger("CensorSensor")


class CensorSensor:
    """Profanity filter bound to one locale and one set of user edits.

    Args:
        locale: Locale id to match against (must be registered).
        registry: Where locale dictionaries are looked up. Defaults to the
            process-wide registry, so `add_locale` on one engine is visible
            to every other engine using the default.
        clean_function: Optional custom mask, same as `set_clean_function`.

    Raises:
        UnknownLocale: if `locale` isn't in the registry.
    """

    def __init__(
        self,
        locale: str = "en",
        registry: Optional[LocaleRegistry] = None,
        clean_function: Optional[Callable[[str], str]] = None,
    ):
        self.registry = registry if registry is not None else get_default_registry()
        self._locale = "en"
        self._custom_dictionary: Dict[str, Tier] = {}
        self._removed_words: Set[str] = set()
        self._tier_gate = TierGate()
        self._default_clean: CleanFunction = FixedMask()
        self._custom_clean: Optional[CleanFunction] = None

        self.set_locale(locale)
        if clean_function is not None:
            self.set_clean_function(clean_function)

    @classmethod
    def from_settings(cls, settings, registry: Optional[LocaleRegistry] = None) -> "CensorSensor":
        """Build an engine from a CensorSettings instance.

        Extra locale files in `settings.locale_dir` are loaded into the
        registry before the locale is selected.
        """
        registry = registry if registry is not None else get_default_registry()
        if settings.locale_dir:
            registry.load_directory(settings.locale_dir)

        engine = cls(locale=settings.locale, registry=registry)
        engine._default_clean = FixedMask(settings.mask)
        for tier in settings.disabled_tiers:
            engine.disable_tier(tier)
        return engine

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def current_dictionary(self) -> Dict[str, Tier]:
        """The effective lexicon, rebuilt on every access."""
        return effective_lexicon(
            self._locale, self._custom_dictionary, self.registry, self._removed_words
        )

    @property
    def custom_dictionary(self) -> Dict[str, Tier]:
        return dict(self._custom_dictionary)

    @property
    def removed_words(self) -> Set[str]:
        return set(self._removed_words)

    @property
    def enabled_tiers(self) -> List[Tier]:
        return self._tier_gate.enabled_tiers()

    @property
    def clean_function(self) -> CleanFunction:
        """The custom clean function if one is set, else the default mask."""
        if self._custom_clean is not None:
            return self._custom_clean
        return self._default_clean

    # ------------------------------------------------------------------
    # Locales
    # ------------------------------------------------------------------

    def add_locale(self, locale_id: str, dictionary: Dict[str, Tier]) -> None:
        """Register (or replace) a locale in this engine's registry."""
        self.registry.register(locale_id, dictionary)

    def set_locale(self, locale_id: str) -> None:
        """Switch the active locale.

        Raises:
            UnknownLocale: if the locale isn't registered. The active
                locale is left unchanged.
        """
        self.registry.get(locale_id)
        self._locale = locale_id
        logger.info(f"Active locale set to '{locale_id}'")

    # ------------------------------------------------------------------
    # Tiers
    # ------------------------------------------------------------------

    def enable_tier(self, tier) -> None:
        self._tier_gate.enable(tier)

    def disable_tier(self, tier) -> None:
        self._tier_gate.disable(tier)

    def is_tier_enabled(self, tier) -> bool:
        return self._tier_gate.is_enabled(tier)

    # ------------------------------------------------------------------
    # Custom words
    # ------------------------------------------------------------------

    def add_word(self, word: str, tier=Tier.USER_ADDED) -> None:
        """Add a word to this engine's custom dictionary.

        Overrides the locale's tier for that word and undoes an earlier
        `remove_word`.
        """
        key = word.strip().lower()
        if not key:
            raise ValueError("Cannot add an empty word")
        self._custom_dictionary[key] = Tier.coerce(tier)
        self._removed_words.discard(key)
        logger.debug(f"Added custom word '{key}' ({self._custom_dictionary[key].name})")

    def remove_word(self, word: str) -> None:
        """Stop matching a word, even if the locale dictionary lists it."""
        key = word.strip().lower()
        self._custom_dictionary.pop(key, None)
        self._removed_words.add(key)
        logger.debug(f"Removed word '{key}'")

    # ------------------------------------------------------------------
    # Detection
    # ------------------------------------------------------------------

    def is_profane(self, phrase: str) -> bool:
        return matcher.is_profane(phrase, self.current_dictionary, self._tier_gate)

    def profane_words(self, phrase: str) -> List[str]:
        return matcher.profane_words(phrase, self.current_dictionary, self._tier_gate)

    def is_profane_ish(self, phrase: str) -> bool:
        return matcher.is_profane_ish(phrase, self.current_dictionary, self._tier_gate)

    def profane_ish_words(self, phrase: str, original_fragment: str) -> List[str]:
        return matcher.profane_ish_words(
            phrase, original_fragment, self.current_dictionary, self._tier_gate
        )

    # ------------------------------------------------------------------
    # Masking
    # ------------------------------------------------------------------

    def set_clean_function(self, func: Optional[Callable[[str], str]]) -> None:
        """Install a custom mask used by both clean methods.

        Passing None is the same as `reset_clean_function`.
        """
        if func is None:
            self.reset_clean_function()
            return
        self._custom_clean = CallableMask(func)

    def reset_clean_function(self) -> None:
        """Go back to the default mask."""
        self._custom_clean = None

    # ------------------------------------------------------------------
    # Redaction
    # ------------------------------------------------------------------

    def clean_profanity(self, phrase: str) -> str:
        return redactor.clean_profanity(
            phrase, self.current_dictionary, self._tier_gate, self.clean_function
        )

    def clean_profanity_ish(self, phrase: str) -> str:
        return redactor.clean_profanity_ish(
            phrase, self.current_dictionary, self._tier_gate, self.clean_function
        )

    def __repr__(self):
        return (
            f"CensorSensor(locale={self._locale!r}, custom={len(self._custom_dictionary)}, "
            f"removed={len(self._removed_words)}, gate={self._tier_gate!r})"
        )
