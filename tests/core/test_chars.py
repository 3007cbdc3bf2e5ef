"""Tests for character classification."""

import pytest

from shquote.core.chars import (
    is_double_quote_escapable,
    is_separator,
    needs_quoting,
)


class TestIsSeparator:
    @pytest.mark.parametrize("c", [" ", "\t", "\n"])
    def test_separators(self, c):
        assert is_separator(c)

    @pytest.mark.parametrize("c", ["\r", "\v", "\f", "\u00a0", "a", "'"])
    def test_not_separators(self, c):
        assert not is_separator(c)


class TestDoubleQuoteEscapable:
    @pytest.mark.parametrize("c", ["$", "`", '"', "\\"])
    def test_escapable(self, c):
        assert is_double_quote_escapable(c)

    @pytest.mark.parametrize("c", ["'", "n", "\n", " "])
    def test_not_escapable(self, c):
        assert not is_double_quote_escapable(c)


class TestNeedsQuoting:
    def test_empty_string(self):
        assert needs_quoting("")

    @pytest.mark.parametrize(
        "s", ["hello", "foo-bar_baz.txt", "/path/to/file", "user@host:22", "+x,y"]
    )
    def test_plain_words(self, s):
        assert not needs_quoting(s)

    @pytest.mark.parametrize(
        "s",
        [
            "hello world",
            "it's",
            'say "hi"',
            "a\\b",
            "$HOME",
            "a*b",
            "a;b",
            "a|b",
            "a&b",
            "<in",
            "out>",
            "(sub)",
            "~user",
            "key=value",
            "#comment",
            "{a,b}",
            "!!",
            "tab\there",
        ],
    )
    def test_special_words(self, s):
        assert needs_quoting(s)
