"""
Normalizer — Collapses common leetspeak obfuscations to plain words.

Pure text → text. Substitutions apply anywhere in the string, including
inside words that were never obfuscated ("h3llo" and "l33t" alike).
"""

# Applied in this exact order; multi-char sequences must run before the
# single-digit replacements that would otherwise consume them.
_SUBSTITUTIONS = (
    ("0rz", "ers"),
    ("0t", "er"),
    # Never matches once the text is lowercased.
    ("xX", "ck"),
    ("0", "o"),
    ("!", "i"),
    ("1", "i"),
    ("3", "e"),
    ("4", "a"),
    ("5", "s"),
)


def normalize(text: str) -> str:
    """Lowercase text and undo leetspeak substitutions.

    Deterministic and idempotent: normalize(normalize(x)) == normalize(x).
    """
    result = text.lower()
    for old, new in _SUBSTITUTIONS:
        result = result.replace(old, new)
    return result
