"""Tests for character classification and word/line boundary scanning."""

import pytest

from readline_edit.boundaries import (
    backward_word_cursor,
    forward_word_cursor,
    leading_whitespace_end,
    scan,
    trailing_whitespace_start,
)
from readline_edit.chars import is_whitespace, is_word_char
from readline_edit.constants import ALPHANUM, NON_WHITESPACE_CHARS


class TestClassifier:
    def test_space_and_tab_are_whitespace(self):
        assert is_whitespace(" ")
        assert is_whitespace("\t")

    def test_other_whitespace_is_not(self):
        assert not is_whitespace("\n")
        assert not is_whitespace("\u00a0")
        assert not is_whitespace("x")

    def test_word_char_membership(self):
        assert is_word_char("a", ALPHANUM)
        assert is_word_char("Z", ALPHANUM)
        assert is_word_char("7", ALPHANUM)
        assert not is_word_char("_", ALPHANUM)
        assert not is_word_char(" ", ALPHANUM)

    def test_word_char_is_case_sensitive(self):
        assert is_word_char("a", "abc")
        assert not is_word_char("A", "abc")

    def test_non_whitespace_sentinel(self):
        assert is_word_char("+", NON_WHITESPACE_CHARS)
        assert is_word_char("a", NON_WHITESPACE_CHARS)
        assert not is_word_char(" ", NON_WHITESPACE_CHARS)
        assert not is_word_char("\t", NON_WHITESPACE_CHARS)


class TestLineEdges:
    def test_leading_whitespace(self):
        assert leading_whitespace_end("  foo") == 2
        assert leading_whitespace_end("\t foo") == 2
        assert leading_whitespace_end("foo") == 0

    def test_leading_whitespace_all_blank(self):
        assert leading_whitespace_end("   ") == 3
        assert leading_whitespace_end("") == 0

    def test_trailing_whitespace(self):
        assert trailing_whitespace_start("foo  ") == 3
        assert trailing_whitespace_start("foo\t") == 3
        assert trailing_whitespace_start("foo") == 3

    def test_trailing_whitespace_all_blank(self):
        assert trailing_whitespace_start("   ") == 0
        assert trailing_whitespace_start("") == 0


class TestForwardWordCursor:
    def test_single_word(self):
        assert forward_word_cursor("hello", 0) == 5

    def test_single_letters(self):
        assert forward_word_cursor("a b c", 0) == 1
        assert forward_word_cursor("a b c", 1) == 3
        assert forward_word_cursor("a b c", 2) == 3
        assert forward_word_cursor("a b c", 3) == 5
        assert forward_word_cursor("a b c", 4) == 5
        assert forward_word_cursor("a b c", 5) == 5

    def test_blank_line(self):
        assert forward_word_cursor("  ", 0) == 2
        assert forward_word_cursor("  ", 1) == 2
        assert forward_word_cursor("  ", 2) == 2

    def test_surrounded_word(self):
        assert forward_word_cursor(" x ", 0) == 2
        assert forward_word_cursor(" x ", 1) == 2
        assert forward_word_cursor(" x ", 2) == 3
        assert forward_word_cursor(" x ", 3) == 3

    def test_trailing_space(self):
        assert forward_word_cursor("xx ", 0) == 2
        assert forward_word_cursor("xx ", 1) == 2
        assert forward_word_cursor("xx ", 2) == 3
        assert forward_word_cursor("xx ", 3) == 3

    def test_leading_space(self):
        assert forward_word_cursor(" xx", 0) == 3
        assert forward_word_cursor(" xx", 1) == 3
        assert forward_word_cursor(" xx", 2) == 3
        assert forward_word_cursor(" xx", 3) == 3

    def test_symbol_run_is_a_word(self):
        assert forward_word_cursor("+ foo", 0) == 1
        assert forward_word_cursor("x += 1", 1) == 4

    def test_word_stops_at_symbol(self):
        assert forward_word_cursor("foo.bar", 0) == 3
        assert forward_word_cursor("foo.bar", 3) == 7

    def test_symbols_then_word(self):
        # A symbol run does not stop at the word that follows it
        assert forward_word_cursor("(foo)", 0) == 4


class TestBackwardWordCursor:
    def test_single_word(self):
        assert backward_word_cursor("hello", 5) == 0

    def test_single_letters(self):
        assert backward_word_cursor("a b c", 0) == 0
        assert backward_word_cursor("a b c", 1) == 0
        assert backward_word_cursor("a b c", 2) == 0
        assert backward_word_cursor("a b c", 3) == 2
        assert backward_word_cursor("a b c", 4) == 2
        assert backward_word_cursor("a b c", 5) == 4

    def test_blank_line(self):
        assert backward_word_cursor("  ", 0) == 0
        assert backward_word_cursor("  ", 1) == 0
        assert backward_word_cursor("  ", 2) == 0

    def test_surrounded_word(self):
        assert backward_word_cursor(" x ", 0) == 0
        assert backward_word_cursor(" x ", 1) == 0
        assert backward_word_cursor(" x ", 2) == 1
        assert backward_word_cursor(" x ", 3) == 1

    def test_trailing_space(self):
        assert backward_word_cursor("xx ", 0) == 0
        assert backward_word_cursor("xx ", 1) == 0
        assert backward_word_cursor("xx ", 2) == 0
        assert backward_word_cursor("xx ", 3) == 0

    def test_leading_space(self):
        assert backward_word_cursor(" xx", 0) == 0
        assert backward_word_cursor(" xx", 1) == 0
        assert backward_word_cursor(" xx", 2) == 1
        assert backward_word_cursor(" xx", 3) == 1

    def test_word_stops_at_symbol(self):
        assert backward_word_cursor("foo.bar", 7) == 4
        assert backward_word_cursor("foo.bar", 4) == 0


class TestScan:
    LINES = ["", "hello", "  indented  ", "a+b c", "\tfoo(bar, baz)", "héllo wörld"]

    def test_forward_at_end_stays(self):
        for line in self.LINES:
            for word_chars in (ALPHANUM, NON_WHITESPACE_CHARS, "+"):
                assert scan(line, len(line), 1, word_chars) == len(line)

    def test_backward_at_start_stays(self):
        for line in self.LINES:
            for word_chars in (ALPHANUM, NON_WHITESPACE_CHARS, "+"):
                assert scan(line, 0, -1, word_chars) == 0

    def test_results_are_valid_columns(self):
        for line in self.LINES:
            for i in range(len(line) + 1):
                assert 0 <= scan(line, i, 1, ALPHANUM) <= len(line)
                assert 0 <= scan(line, i, -1, ALPHANUM) <= len(line)

    def test_forward_moves_or_is_at_end(self):
        for line in self.LINES:
            for i in range(len(line)):
                assert scan(line, i, 1, ALPHANUM) > i

    def test_non_whitespace_word_chars(self):
        assert scan("foo.bar baz", 0, 1, NON_WHITESPACE_CHARS) == 7
        assert scan("foo.bar baz", 11, -1, NON_WHITESPACE_CHARS) == 8
        assert scan("foo.bar baz", 8, -1, NON_WHITESPACE_CHARS) == 0

    def test_custom_word_chars(self):
        assert scan("foo_bar baz", 0, 1, ALPHANUM + "_") == 7
        assert scan("foo_bar baz", 0, 1, ALPHANUM) == 3

    def test_counts_characters_not_bytes(self):
        assert scan("héllo wörld", 0, 1, NON_WHITESPACE_CHARS) == 5
        assert scan("héllo wörld", 11, -1, NON_WHITESPACE_CHARS) == 6

    def test_bad_direction(self):
        with pytest.raises(ValueError):
            scan("hello", 0, 2, ALPHANUM)

    def test_column_out_of_range(self):
        with pytest.raises(ValueError):
            scan("hello", 6, 1, ALPHANUM)
        with pytest.raises(ValueError):
            scan("hello", -1, -1, ALPHANUM)
