"""
Character classes shared by the quoter and the unquoter.
"""

from __future__ import annotations

# === Word structure ===

# Default IFS: the only characters that separate words
SEPARATORS = frozenset(" \t\n")

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
ESCAPE = "\\"
NEWLINE = "\n"

# Inside double quotes a backslash only escapes these.
# Newline is handled separately as a line continuation.
DOUBLE_QUOTE_ESCAPABLE = frozenset('$`"\\')


# === Special characters ===
# Anything a shell would treat as more than a literal character somewhere
# in a word. A word free of these is already a valid shell literal.

METACHARACTERS = frozenset("|&;<>()")

SPECIAL = (
    SEPARATORS
    | METACHARACTERS
    | {SINGLE_QUOTE, DOUBLE_QUOTE, ESCAPE}
    | frozenset("$`*?[#~=%{}!")
)


def is_separator(c: str) -> bool:
    return c in SEPARATORS


def is_double_quote_escapable(c: str) -> bool:
    return c in DOUBLE_QUOTE_ESCAPABLE


def needs_quoting(s: str) -> bool:
    """Check if a word must be quoted to survive a trip through the shell.

    The empty string always needs quoting, since it would otherwise vanish.
    """
    if not s:
        return True
    return any(c in SPECIAL for c in s)
