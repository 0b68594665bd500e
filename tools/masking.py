"""
Masking strategies — Render a matched word into its redacted replacement.

Anything callable as `mask(word) -> str` works as a clean function; these
classes cover the common cases.
"""

from typing import Callable, Protocol

DEFAULT_MASK = "****"


class CleanFunction(Protocol):
    def __call__(self, word: str) -> str: ...


class FixedMask:
    """Constant replacement, regardless of the word's length or content."""

    def __init__(self, mask: str = DEFAULT_MASK):
        self.mask = mask

    def __call__(self, word: str) -> str:
        return self.mask

    def __repr__(self):
        return f"FixedMask({self.mask!r})"


class RepeatMask:
    """One mask character per character of the matched word."""

    def __init__(self, char: str = "*"):
        if len(char) != 1:
            raise ValueError("RepeatMask needs exactly one character")
        self.char = char

    def __call__(self, word: str) -> str:
        return self.char * len(word)

    def __repr__(self):
        return f"RepeatMask({self.char!r})"


class CallableMask:
    """Wraps a user-supplied function and coerces its result to str."""

    def __init__(self, func: Callable[[str], str]):
        if not callable(func):
            raise TypeError(f"Clean function must be callable, got {type(func).__name__}")
        self.func = func

    def __call__(self, word: str) -> str:
        return str(self.func(word))

    def __repr__(self):
        return f"CallableMask({getattr(self.func, '__name__', self.func)!r})"
