"""
Matcher — Exact-token and substring ("ish") profanity matching.

All functions take the effective lexicon and the tier gate explicitly, so
they hold no state of their own. A lexicon hit only counts when its tier
is enabled.

Exact mode splits the normalized phrase on single spaces and looks each
token up verbatim. Substring mode scans every lexicon key against the whole
normalized phrase, so "shitty" and "bullshit" both hit on "shit".
"""

import logging
from typing import List, Mapping, Tuple

from models.tiers import Tier
from tools.normalizer import normalize
from tools.tier_gate import TierGate

logger = logging.getLogger("Matcher")


def is_profane_token(token: str, lexicon: Mapping[str, Tier], gate: TierGate) -> bool:
    """True if `token` is a lexicon word whose tier is enabled."""
    tier = lexicon.get(token)
    if tier is None:
        return False
    return gate.is_enabled(tier)


# ---------------------------------------------------------------------------
# Exact mode
# ---------------------------------------------------------------------------

def is_profane(phrase: str, lexicon: Mapping[str, Tier], gate: TierGate) -> bool:
    """True if any space-separated token of the normalized phrase matches."""
    return any(is_profane_token(token, lexicon, gate) for token in normalize(phrase).split(" "))


def profane_words(phrase: str, lexicon: Mapping[str, Tier], gate: TierGate) -> List[str]:
    """Normalized tokens of `phrase` that match, in order (repeats kept)."""
    return [token for token in normalize(phrase).split(" ") if is_profane_token(token, lexicon, gate)]


# ---------------------------------------------------------------------------
# Substring ("ish") mode
# ---------------------------------------------------------------------------

def profane_ish_matches(
    phrase: str,
    lexicon: Mapping[str, Tier],
    gate: TierGate,
) -> List[Tuple[str, Tier]]:
    """Every enabled lexicon key found inside the normalized phrase.

    Returns (key, tier) pairs in lexicon order.
    """
    text = normalize(phrase)
    return [
        (word, tier)
        for word, tier in lexicon.items()
        if word in text and gate.is_enabled(tier)
    ]


def is_profane_ish(phrase: str, lexicon: Mapping[str, Tier], gate: TierGate) -> bool:
    """True on the first enabled lexicon key found inside the phrase."""
    text = normalize(phrase)
    for word, tier in lexicon.items():
        if word in text and gate.is_enabled(tier):
            logger.debug(f"Substring hit '{word}' ({tier.name})")
            return True
    return False


def profane_ish_words(
    phrase: str,
    original_fragment: str,
    lexicon: Mapping[str, Tier],
    gate: TierGate,
) -> List[str]:
    """One copy of `original_fragment` per enabled lexicon key in `phrase`.

    Callers pass a single whitespace-split fragment as `original_fragment`
    and its normalized form as `phrase`. The fragment is repeated once for
    every key that hits, e.g. "Sh1tfuck" against {"shit", "fuck"} yields
    ["Sh1tfuck", "Sh1tfuck"].
    """
    return [original_fragment for _word, _tier in profane_ish_matches(phrase, lexicon, gate)]
