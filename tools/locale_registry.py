"""
LocaleRegistry — Named store of locale dictionaries shared by engines.

Each locale is a read-only word → tier mapping. Engines look locales up by
name at match time, so a locale registered here is visible to every engine
holding the same registry.

Locale files are YAML:

    locale: en
    description: Built-in English lexicon
    words:
      darn: 4
      shit: common_profanity
"""

import os
import yaml
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from models.lexicon import LocaleDictionaryModel, validate_dictionary
from models.tiers import Tier
from tools.censor_errors import LocaleLoadError, UnknownLocale

logger = logging.getLogger("LocaleRegistry")

BUILTIN_LOCALE_DIR = Path(__file__).resolve().parent.parent / "censor_sensor" / "locales"


class LocaleRegistry:
    """Thread-safe registry of locale id → immutable dictionary.

    Stored dictionaries are snapshots; callers can't mutate them and
    re-registering a name swaps the snapshot atomically.
    """

    def __init__(self, locales: Optional[Mapping[str, Mapping]] = None):
        self._locales: Dict[str, Mapping[str, Tier]] = {}
        self._lock = threading.RLock()
        for locale_id, words in (locales or {}).items():
            self.register(locale_id, words)

    @classmethod
    def with_builtin_locales(cls) -> "LocaleRegistry":
        """Build a registry preloaded with every packaged locale (at least 'en')."""
        registry = cls()
        registry.load_directory(BUILTIN_LOCALE_DIR)
        return registry

    # ------------------------------------------------------------------
    # Registration / lookup
    # ------------------------------------------------------------------

    def register(self, locale_id: str, dictionary: Mapping) -> None:
        """Store a dictionary under a name, replacing any existing one."""
        words = validate_dictionary(locale_id, dictionary)
        snapshot = MappingProxyType(words)
        with self._lock:
            if locale_id in self._locales:
                logger.warning(f"Locale '{locale_id}' already registered; replacing it")
            self._locales[locale_id] = snapshot
        logger.info(f"Registered locale '{locale_id}' with {len(words)} words")

    def lookup(self, locale_id: str) -> Optional[Mapping[str, Tier]]:
        """Return the dictionary for a locale, or None if absent."""
        with self._lock:
            return self._locales.get(locale_id)

    def get(self, locale_id: str) -> Mapping[str, Tier]:
        """Return the dictionary for a locale.

        Raises:
            UnknownLocale: if nothing is registered under that name.
        """
        dictionary = self.lookup(locale_id)
        if dictionary is None:
            raise UnknownLocale(locale_id)
        return dictionary

    def locales(self) -> List[str]:
        """Registered locale ids, in registration order."""
        with self._lock:
            return list(self._locales)

    def __contains__(self, locale_id) -> bool:
        with self._lock:
            return locale_id in self._locales

    def __len__(self) -> int:
        with self._lock:
            return len(self._locales)

    # ------------------------------------------------------------------
    # YAML loading
    # ------------------------------------------------------------------

    def load_yaml(self, path: Union[str, Path], locale_id: Optional[str] = None) -> str:
        """Load and register one YAML locale file.

        The locale id comes from the file's `locale` key, then the
        `locale_id` argument, then the file stem.

        Returns:
            The locale id the dictionary was registered under.

        Raises:
            LocaleLoadError: unreadable file, bad YAML, or failed validation.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise LocaleLoadError(f"Cannot read locale file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise LocaleLoadError(f"YAML parse error in {path}: {e}") from e

        if not isinstance(data, dict):
            raise LocaleLoadError(f"Locale file {path} must contain a mapping")

        data.setdefault("locale", locale_id or path.stem)
        try:
            model = LocaleDictionaryModel(**data)
        except ValidationError as e:
            raise LocaleLoadError(f"Invalid locale file {path}: {e}") from e

        self.register(model.locale, model.words)
        return model.locale

    def load_directory(self, directory: Union[str, Path]) -> List[str]:
        """Load every *.yaml / *.yml file in a directory, sorted by name."""
        directory = Path(directory)
        if not directory.is_dir():
            raise LocaleLoadError(f"Locale directory not found: {directory}")

        loaded = []
        for name in sorted(os.listdir(directory)):
            if name.endswith((".yaml", ".yml")):
                loaded.append(self.load_yaml(directory / name))
        logger.debug(f"Loaded {len(loaded)} locale(s) from {directory}: {loaded}")
        return loaded


_default_registry: Optional[LocaleRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> LocaleRegistry:
    """Process-wide registry used by engines built without one.

    Built on first use with the packaged locales.
    """
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = LocaleRegistry.with_builtin_locales()
        return _default_registry
