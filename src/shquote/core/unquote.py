"""
POSIX quote removal and word splitting.

A single left-to-right pass over the input drives a five-state machine:

    UNQUOTED                separators end words, quotes and backslash open
    IN_SINGLE_QUOTE         everything literal up to the next '
    IN_DOUBLE_QUOTE         literal except " (close) and \\ (escape)
    ESCAPE_UNQUOTED         next character is literal, <NL> is dropped
    ESCAPE_IN_DOUBLE_QUOTE  only $ ` " \\ and <NL> are escapable

Nothing beyond quote removal happens: $VAR, `cmd`, globs and operators all
come out as literal text.

Errors are only detectable at end of input, when the machine is left in any
state other than UNQUOTED. The result then carries the words completed before
the failure, so an interactive caller can decide to ask for another line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from shquote.core.chars import (
    DOUBLE_QUOTE,
    ESCAPE,
    NEWLINE,
    SINGLE_QUOTE,
    is_double_quote_escapable,
    is_separator,
)
from shquote.core.config import log_event

UNTERMINATED_SINGLE_QUOTE = "unterminated-single-quote"
UNTERMINATED_DOUBLE_QUOTE = "unterminated-double-quote"
TRAILING_ESCAPE = "trailing-escape"

ErrorKind = Literal[
    "unterminated-single-quote", "unterminated-double-quote", "trailing-escape"
]


class ParseState(Enum):
    """Quoting mode of the unquoter at one input position."""

    UNQUOTED = "unquoted"
    IN_SINGLE_QUOTE = "in-single-quote"
    IN_DOUBLE_QUOTE = "in-double-quote"
    ESCAPE_UNQUOTED = "escape-unquoted"
    ESCAPE_IN_DOUBLE_QUOTE = "escape-in-double-quote"


# How input ending in each non-final state fails
_EOF_ERRORS: dict[ParseState, ErrorKind] = {
    ParseState.IN_SINGLE_QUOTE: UNTERMINATED_SINGLE_QUOTE,
    ParseState.IN_DOUBLE_QUOTE: UNTERMINATED_DOUBLE_QUOTE,
    ParseState.ESCAPE_UNQUOTED: TRAILING_ESCAPE,
    ParseState.ESCAPE_IN_DOUBLE_QUOTE: TRAILING_ESCAPE,
}


@dataclass(frozen=True)
class ParseError:
    """Where and why unquoting failed.

    offset is a character index into the input, byte_offset the same
    position in its UTF-8 encoding. For unterminated quotes both point at
    the opening quote; for a trailing escape, at the backslash.
    """

    kind: ErrorKind
    offset: int
    byte_offset: int

    def __str__(self) -> str:
        return f"{self.kind} at offset {self.offset}"


class UnquoteError(ValueError):
    """Raised by the exception-style API when input cannot be unquoted."""

    def __init__(self, error: ParseError, words: list[str] | None = None):
        super().__init__(str(error))
        self.error = error
        self.words = list(words) if words else []  # completed before the error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def offset(self) -> int:
        return self.error.offset


@dataclass(frozen=True)
class UnquoteResult:
    """Outcome of an unquote operation.

    On failure, words holds only the words that were complete before the
    construct that failed; the word in progress is dropped.

    The result is frozen but words is a plain list shared with the caller.
    Mutating it changes the result; unwrap() returns a copy.
    """

    words: list[str] = field(default_factory=list)
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[str]:
        """Return the words, or raise UnquoteError if parsing failed."""
        if self.error is not None:
            raise UnquoteError(self.error, self.words)
        return list(self.words)


class _WordBuffer:
    """Characters of the word being built.

    started is tracked apart from the contents so that '' and "" produce an
    empty word instead of no word at all.
    """

    __slots__ = ("chars", "started")

    def __init__(self) -> None:
        self.chars: list[str] = []
        self.started = False

    def start(self) -> None:
        self.started = True

    def append(self, c: str) -> None:
        self.chars.append(c)
        self.started = True

    def take(self) -> str:
        word = "".join(self.chars)
        self.chars = []
        self.started = False
        return word


def _byte_offset(source: str, offset: int) -> int:
    # surrogatepass: lone surrogates still get a position
    return len(source[:offset].encode("utf-8", "surrogatepass"))


def _scan(source: str, split_words: bool) -> UnquoteResult:
    """Run the state machine over source."""
    words: list[str] = []
    buf = _WordBuffer()
    state = ParseState.UNQUOTED
    quote_start = 0  # offset of the innermost open quote
    escape_start = 0  # offset of the pending backslash

    for i, c in enumerate(source):
        if state is ParseState.UNQUOTED:
            if split_words and is_separator(c):
                if buf.started:
                    words.append(buf.take())
            elif c == SINGLE_QUOTE:
                buf.start()
                quote_start = i
                state = ParseState.IN_SINGLE_QUOTE
            elif c == DOUBLE_QUOTE:
                buf.start()
                quote_start = i
                state = ParseState.IN_DOUBLE_QUOTE
            elif c == ESCAPE:
                escape_start = i
                state = ParseState.ESCAPE_UNQUOTED
            else:
                buf.append(c)

        elif state is ParseState.IN_SINGLE_QUOTE:
            # No escapes at all, not even for '
            if c == SINGLE_QUOTE:
                state = ParseState.UNQUOTED
            else:
                buf.append(c)

        elif state is ParseState.IN_DOUBLE_QUOTE:
            if c == DOUBLE_QUOTE:
                state = ParseState.UNQUOTED
            elif c == ESCAPE:
                escape_start = i
                state = ParseState.ESCAPE_IN_DOUBLE_QUOTE
            else:
                buf.append(c)

        elif state is ParseState.ESCAPE_UNQUOTED:
            # Line continuation: drop both, and do not start a word
            if c != NEWLINE:
                buf.append(c)
            state = ParseState.UNQUOTED

        elif state is ParseState.ESCAPE_IN_DOUBLE_QUOTE:
            if is_double_quote_escapable(c):
                buf.append(c)
            elif c != NEWLINE:
                # Backslash is not special here, keep it
                buf.append(ESCAPE)
                buf.append(c)
            state = ParseState.IN_DOUBLE_QUOTE

        else:
            raise AssertionError(f"unhandled state {state!r}")

    if state is ParseState.UNQUOTED:
        # Without splitting the whole input is one word, even when empty
        if buf.started or not split_words:
            words.append(buf.take())
        log_event("unquote_ok", level="debug", source=source, words=len(words))
        return UnquoteResult(words)

    kind = _EOF_ERRORS[state]
    offset = escape_start if kind == TRAILING_ESCAPE else quote_start
    error = ParseError(kind, offset, _byte_offset(source, offset))
    log_event(
        "unquote_failed",
        source=source,
        kind=kind,
        offset=offset,
        length=len(source),
    )
    return UnquoteResult(words, error)


def unquote(source: str) -> UnquoteResult:
    """Unquote and split a string into words according to POSIX shell rules.

    Whitespace (space, tab, newline) outside quotes separates words; runs of
    it collapse. Adjacent quoted and unquoted segments join into one word.

    Never raises. Check result.ok, or use split() to get an exception.

    Examples:
        unquote("a 'b c'").words        -> ["a", "b c"]
        unquote("a'b'c").words          -> ["abc"]
        unquote("a'").error.offset      -> 1
    """
    return _scan(source, split_words=True)


def unquote_literal(source: str) -> UnquoteResult:
    """Remove quoting from a string without splitting it into words.

    Whitespace is kept as-is, so a successful result always holds exactly
    one word. On failure words is empty.
    """
    return _scan(source, split_words=False)


def split(source: str) -> list[str]:
    """Split a string into words. Raises UnquoteError if quoting is broken."""
    return unquote(source).unwrap()
