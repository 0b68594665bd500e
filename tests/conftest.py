"""
Shared pytest fixtures for the CensorSensor test suite.

Engines get their own registry so tests never leak locales into the
process-wide default registry.
"""

import pytest

from censor_sensor.engine import CensorSensor
from models.tiers import Tier
from tools.locale_registry import LocaleRegistry
from tools.tier_gate import TierGate


# ---------------------------------------------------------------------------
# Small lexicons
# ---------------------------------------------------------------------------

SAMPLE_EN = {
    "slurword": Tier.SLURS,
    "shit": Tier.COMMON_PROFANITY,
    "fuck": Tier.COMMON_PROFANITY,
    "boobs": Tier.SEXUAL_TERMS,
    "darn": Tier.POSSIBLY_OFFENSIVE,
    "ass": Tier.POSSIBLY_OFFENSIVE,
}


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_lexicon():
    """A fresh copy of the sample English lexicon."""
    return dict(SAMPLE_EN)


@pytest.fixture
def gate():
    """TierGate with every tier enabled."""
    return TierGate()


@pytest.fixture
def registry():
    """Isolated registry holding only the sample 'en' locale."""
    return LocaleRegistry({"en": SAMPLE_EN})


@pytest.fixture
def engine(registry):
    """CensorSensor bound to the isolated sample registry."""
    return CensorSensor(registry=registry)


@pytest.fixture
def locale_dir(tmp_path):
    """Directory with two valid YAML locale files."""
    (tmp_path / "fr.yaml").write_text(
        "locale: fr\n"
        "description: French sample\n"
        "words:\n"
        "  zut: 2\n"
        "  merde: common_profanity\n",
        encoding="utf-8",
    )
    (tmp_path / "de.yml").write_text(
        "words:\n"
        "  Mist: possibly_offensive\n",
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path
