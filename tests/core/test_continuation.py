"""Tests for multi-line input assembly."""

import pytest

from shquote.core.continuation import LineAccumulator, needs_continuation
from shquote.core.unquote import (
    TRAILING_ESCAPE,
    UNTERMINATED_DOUBLE_QUOTE,
    UNTERMINATED_SINGLE_QUOTE,
    UnquoteError,
)


class TestNeedsContinuation:
    @pytest.mark.parametrize("s", ["", "ls -la", "echo 'done'", 'a "b"', "a\\\\\n"])
    def test_complete(self, s):
        assert not needs_continuation(s)

    @pytest.mark.parametrize(
        "s",
        [
            "echo 'open",
            'echo "open',
            "echo trailing\\",
            'echo "escape\\',
            "echo next\\\n",
            "'x'\\\n",
        ],
    )
    def test_incomplete(self, s):
        assert needs_continuation(s)


class TestLineAccumulator:
    def test_complete_line(self):
        acc = LineAccumulator()
        assert acc.feed("ls -la") == ["ls", "-la"]
        assert acc.pending == ""

    def test_empty_line(self):
        assert LineAccumulator().feed("") == []

    def test_trailing_newline_ignored(self):
        assert LineAccumulator().feed("ls -la\n") == ["ls", "-la"]

    def test_open_single_quote_spans_lines(self):
        acc = LineAccumulator()
        assert acc.feed("echo 'first") is None
        assert acc.pending == "echo 'first"
        assert acc.feed("second'") == ["echo", "first\nsecond"]
        assert acc.pending == ""

    def test_open_double_quote_spans_lines(self):
        acc = LineAccumulator()
        assert acc.feed('say "a') is None
        assert acc.feed("b") is None
        assert acc.feed('c"') == ["say", "a\nb\nc"]

    def test_backslash_joins_lines(self):
        acc = LineAccumulator()
        assert acc.feed("git commit \\") is None
        assert acc.feed("  -m msg") == ["git", "commit", "-m", "msg"]

    def test_backslash_continues_word(self):
        acc = LineAccumulator()
        assert acc.feed("foo\\") is None
        assert acc.feed("bar") == ["foobar"]

    def test_empty_line_after_backslash_completes(self):
        """Enter on an empty line ends a backslash-continued command."""
        acc = LineAccumulator()
        assert acc.feed("echo a\\") is None
        assert acc.feed("") == ["echo", "a"]
        assert acc.pending == ""

    def test_fed_line_with_backslash_newline_awaits_more(self):
        acc = LineAccumulator()
        assert acc.feed("echo a\\\n") is None
        assert acc.feed("b") == ["echo", "ab"]

    def test_reset(self):
        acc = LineAccumulator()
        acc.feed("echo 'oops")
        acc.reset()
        assert acc.pending == ""
        assert acc.feed("ok") == ["ok"]

    def test_finish_complete(self):
        acc = LineAccumulator()
        assert acc.finish() == []

    @pytest.mark.parametrize(
        "line, kind",
        [
            ("echo 'open", UNTERMINATED_SINGLE_QUOTE),
            ('echo "open', UNTERMINATED_DOUBLE_QUOTE),
            ("echo \\", TRAILING_ESCAPE),
        ],
    )
    def test_finish_incomplete_raises(self, line, kind):
        acc = LineAccumulator()
        assert acc.feed(line) is None
        with pytest.raises(UnquoteError) as exc_info:
            acc.finish()
        assert exc_info.value.kind == kind
        assert exc_info.value.offset == 5
        assert exc_info.value.words == ["echo"]
        assert acc.pending == ""
