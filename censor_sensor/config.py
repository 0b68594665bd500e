"""
Configuration — Environment-driven engine settings.

Values come from the process environment, with a .env file in the working
directory loaded first (existing environment variables win):

    CENSOR_LOCALE=en
    CENSOR_DISABLED_TIERS=4,user_added
    CENSOR_MASK=****
    CENSOR_LOCALE_DIR=./locales
    CENSOR_LOG_LEVEL=INFO
"""

import os
import logging
from typing import List, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

from models.tiers import Tier
from tools.masking import DEFAULT_MASK

logger = logging.getLogger("CensorConfig")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class CensorSettings(BaseModel):
    """Validated engine settings."""

    locale: str = "en"
    disabled_tiers: List[Tier] = []
    mask: str = DEFAULT_MASK
    locale_dir: Optional[str] = None
    log_level: str = "INFO"

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v):
        v = v.strip()
        return v or "en"

    @field_validator("disabled_tiers", mode="before")
    @classmethod
    def parse_tiers(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [part for part in (p.strip() for p in v.split(",")) if part]
        return [Tier.coerce(tier) for tier in v]

    @field_validator("locale_dir")
    @classmethod
    def blank_dir_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        if v.upper() not in _LOG_LEVELS:
            return "INFO"
        return v.upper()


def load_settings(env: Optional[Mapping[str, str]] = None) -> CensorSettings:
    """Read CensorSettings from `env`, or from .env + os.environ if omitted."""
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    raw = {
        "locale": env.get("CENSOR_LOCALE"),
        "disabled_tiers": env.get("CENSOR_DISABLED_TIERS"),
        "mask": env.get("CENSOR_MASK"),
        "locale_dir": env.get("CENSOR_LOCALE_DIR"),
        "log_level": env.get("CENSOR_LOG_LEVEL"),
    }
    settings = CensorSettings(**{k: v for k, v in raw.items() if v is not None})
    logger.debug(f"Loaded settings: {settings.model_dump()}")
    return settings
