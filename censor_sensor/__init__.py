"""
CensorSensor — tiered, locale-aware profanity detection and redaction.
"""

from censor_sensor.engine import CensorSensor
from censor_sensor.config import CensorSettings, load_settings
from models.tiers import Tier
from tools.censor_errors import CensorError, InvalidTier, LocaleLoadError, UnknownLocale
from tools.locale_registry import LocaleRegistry, get_default_registry
from tools.masking import CallableMask, FixedMask, RepeatMask
from tools.normalizer import normalize

__all__ = [
    "CensorSensor",
    "CensorSettings",
    "load_settings",
    "Tier",
    "CensorError",
    "InvalidTier",
    "LocaleLoadError",
    "UnknownLocale",
    "LocaleRegistry",
    "get_default_registry",
    "CallableMask",
    "FixedMask",
    "RepeatMask",
    "normalize",
]
