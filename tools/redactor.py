"""
Redactor — Rewrites matched spans in the caller's original text.

Matching runs on normalized text, but replacements are applied to the
original so everything that didn't match comes back unchanged. Both modes
split and rejoin on single spaces, so tabs and runs of spaces are kept as
empty tokens rather than collapsed.
"""

import re
import logging
from typing import Mapping

from models.tiers import Tier
from tools.masking import CleanFunction
from tools.matcher import is_profane_token, profane_ish_words
from tools.normalizer import normalize
from tools.tier_gate import TierGate

logger = logging.getLogger("Redactor")


def replace_literal(phrase: str, fragment: str, replacement: str) -> str:
    """Replace every case-insensitive occurrence of `fragment` in `phrase`.

    `fragment` is matched literally and `replacement` is inserted verbatim
    (no backreference expansion).
    """
    if not fragment:
        return phrase
    pattern = re.compile(re.escape(fragment), re.IGNORECASE)
    return pattern.sub(lambda _match: replacement, phrase)


def clean_profanity(
    phrase: str,
    lexicon: Mapping[str, Tier],
    gate: TierGate,
    clean: CleanFunction,
) -> str:
    """Exact mode: mask whole tokens that are enabled lexicon words.

    Tokens are only lowercased for the lookup (no leetspeak folding); the
    clean function receives the token in its original case. The number of
    space-separated fields never changes.
    """
    tokens = phrase.split(" ")
    cleaned = [
        clean(token) if is_profane_token(token.lower(), lexicon, gate) else token
        for token in tokens
    ]
    return " ".join(cleaned)


def clean_profanity_ish(
    phrase: str,
    lexicon: Mapping[str, Tier],
    gate: TierGate,
    clean: CleanFunction,
) -> str:
    """Substring mode: mask every fragment that contains an enabled word.

    Each matching fragment is replaced everywhere it occurs in the running
    phrase, once per lexicon key it contains. Later fragments are replaced
    in the text produced by earlier replacements.
    """
    result = phrase
    for fragment in phrase.split(" "):
        for hit in profane_ish_words(normalize(fragment), fragment, lexicon, gate):
            result = replace_literal(result, hit, clean(hit))
    if result != phrase:
        logger.debug(f"Substring redaction changed {phrase[:100]!r}")
    return result
