"""POSIX quoting for command line reconstruction."""

from __future__ import annotations

from collections.abc import Iterable

from shquote.core.chars import ESCAPE, SINGLE_QUOTE

# Close the single-quoted run, emit an escaped quote, reopen
_EMBEDDED_QUOTE = SINGLE_QUOTE + ESCAPE + SINGLE_QUOTE + SINGLE_QUOTE


def quote(s: str) -> str:
    """Quote a string so a POSIX shell reads it back as exactly one word.

    Always wraps the whole input in single quotes, even when it holds
    nothing special. Embedded single quotes become '\\''. Returns '' for
    the empty string.

    There are infinitely many valid quotings of a string; callers must not
    depend on this particular one beyond the round trip through unquote().
    """
    return SINGLE_QUOTE + s.replace(SINGLE_QUOTE, _EMBEDDED_QUOTE) + SINGLE_QUOTE


def join(words: Iterable[str]) -> str:
    """Join words into a command line with proper quoting."""
    return " ".join(quote(w) for w in words)
