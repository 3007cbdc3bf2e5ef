"""
shquote - POSIX shell quoting and unquoting.

Quotes strings so a shell reads them back as single words, and turns quoted
command lines back into the words they denote.
"""

from __future__ import annotations

__version__ = "0.1.0"

from shquote.core.chars import needs_quoting
from shquote.core.config import Config, configure_logging, load_config
from shquote.core.continuation import LineAccumulator, needs_continuation
from shquote.core.quote import join, quote
from shquote.core.unquote import (
    TRAILING_ESCAPE,
    UNTERMINATED_DOUBLE_QUOTE,
    UNTERMINATED_SINGLE_QUOTE,
    ParseError,
    ParseState,
    UnquoteError,
    UnquoteResult,
    split,
    unquote,
    unquote_literal,
)

__all__ = [
    "Config",
    "LineAccumulator",
    "ParseError",
    "ParseState",
    "TRAILING_ESCAPE",
    "UNTERMINATED_DOUBLE_QUOTE",
    "UNTERMINATED_SINGLE_QUOTE",
    "UnquoteError",
    "UnquoteResult",
    "__version__",
    "configure_logging",
    "join",
    "load_config",
    "needs_continuation",
    "needs_quoting",
    "quote",
    "split",
    "unquote",
    "unquote_literal",
]
