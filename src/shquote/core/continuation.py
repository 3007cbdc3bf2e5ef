"""
Multi-line input assembly for interactive prompts.

Any of the three parse errors means the input stops in the middle of a quote
or escape, so a prompt should ask for another line rather than fail.
"""

from __future__ import annotations

from shquote.core.chars import ESCAPE, NEWLINE
from shquote.core.config import log_event
from shquote.core.unquote import split, unquote


def _ends_with_line_continuation(source: str) -> bool:
    """Check if source ends in an unquoted backslash-newline.

    Only meaningful for input that unquotes cleanly: then no quote is open
    at the end, and the trailing backslashes pair up as escapes of each
    other. An odd count leaves one escaping the final newline.
    """
    if not source.endswith(NEWLINE):
        return False
    body = source[:-1]
    count = len(body) - len(body.rstrip(ESCAPE))
    return count % 2 == 1


def needs_continuation(source: str) -> bool:
    """Check if source is an incomplete command line awaiting more input."""
    if not unquote(source).ok:
        return True
    return _ends_with_line_continuation(source)


class LineAccumulator:
    """Collect prompt lines until they form a complete command line.

    Lines are joined with newlines, so a quote left open on one line
    carries the newline into the word, and a trailing backslash joins the
    next line onto the current word.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    @property
    def pending(self) -> str:
        """Text buffered so far."""
        return NEWLINE.join(self._lines)

    def reset(self) -> None:
        self._lines = []

    def feed(self, line: str) -> list[str] | None:
        """Add a line. Returns the words once input is complete, else None."""
        self._lines.append(line.removesuffix(NEWLINE))
        text = self.pending
        result = unquote(text)
        if not result.ok:
            log_event("continuation_pending", level="debug", lines=len(self._lines))
            return None
        self.reset()
        return result.words

    def finish(self) -> list[str]:
        """Parse whatever is buffered now that no more input will come.

        Raises UnquoteError if the buffered text is still incomplete.
        """
        text = self.pending
        self.reset()
        return split(text)
