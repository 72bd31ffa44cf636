"""Tests for word-safe truncation."""

import pytest

from ghactivity_core.utils.text import ELLIPSIS, TRUNCATE_LENGTH, truncate


class TestTruncate:
    def test_short_text_returned_verbatim(self):
        assert truncate("Fix login bug") == "Fix login bug"

    def test_text_exactly_at_limit_returned_verbatim(self):
        text = "a" * TRUNCATE_LENGTH
        assert truncate(text) == text

    def test_empty_text(self):
        assert truncate("") == ""

    def test_cuts_at_last_whitespace(self):
        assert truncate("Refactor the session cache layer", 20) == "Refactor the session..."

    def test_whitespace_at_limit_is_used_as_cut(self):
        # The 11th character is a space, so the cut lands right before it.
        assert truncate("0123456789 abc", 10) == "0123456789..."

    def test_single_long_word_cut_at_limit(self):
        assert truncate("x" * 50, 8) == "xxxxxxxx..."

    def test_line_break_takes_priority(self):
        assert truncate("Short subject\n\nLong body that follows", 100) == "Short subject..."

    def test_line_break_before_limit_wins_over_length(self):
        assert truncate("ab\ncdefghijklmnop", 5) == "ab..."

    def test_line_break_after_limit_does_not_apply(self):
        assert truncate("abcdef ghijkl\nmore", 8) == "abcdef..."

    def test_carriage_return_is_a_line_break(self):
        assert truncate("subject\r\nbody", 32) == "subject..."

    def test_counts_characters_not_bytes(self):
        text = "日本語のテキスト"
        assert truncate(text, 8) == text
        assert truncate(text, 4) == "日本語の..."

    def test_emoji_are_single_characters(self):
        assert truncate("🎉🎉🎉 party", 9) == "🎉🎉🎉 party"

    def test_idempotent(self):
        once = truncate("Add support for custom key bindings in the editor", 20)
        assert truncate(once, 20) == once

    def test_idempotent_after_line_break_cut(self):
        once = truncate("subject\nbody")
        assert truncate(once) == once

    def test_text_ending_in_ellipsis_longer_than_limit_is_cut(self):
        assert truncate("abcdefghij...", 5) == "abcde..."

    @pytest.mark.parametrize(
        "text",
        [
            "one two three four five six seven eight nine",
            "nospacesatallinthisverylongstringofcharacters",
            " leading space and then a lot more words here",
            "tabs\tare\twhitespace\ttoo\tso\tthey\tcount\tas\tcuts",
        ],
    )
    def test_output_never_exceeds_limit_plus_ellipsis(self, text):
        for limit in (1, 5, 12, 32):
            assert len(truncate(text, limit)) <= limit + len(ELLIPSIS)

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ValueError):
            truncate("text", 0)
