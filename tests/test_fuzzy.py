"""Tests for fuzzy subsequence matching and highlighting."""

import pytest

from cmdpal.commands import Command, CommandGroup
from cmdpal.fuzzy import Segment, command_haystack, command_matches, highlight, matches


def _joined(segments):
    return "".join(s.text for s in segments)


class TestMatches:
    """Tests for matches()."""

    @pytest.mark.parametrize("text", ["", "Dashboard", "New Blog Post", "  "])
    def test_empty_query_matches_everything(self, text):
        assert matches(text, "") is True

    def test_whitespace_query_matches_everything(self):
        assert matches("Users", "   ") is True

    def test_non_contiguous_subsequence(self):
        assert matches("Dashboard", "db") is True

    def test_missing_character(self):
        assert matches("Users", "db") is False

    def test_order_matters(self):
        assert matches("Dashboard", "bd") is True  # b at 4, d at 8
        assert matches("Users", "su") is False

    def test_case_insensitive(self):
        assert matches("Dashboard", "DASH") is True
        assert matches("dashboard", "DaSh") is True

    def test_query_longer_than_text(self):
        assert matches("ab", "abc") is False

    def test_repeated_characters_need_repeats_in_text(self):
        assert matches("New Newsletter", "nn") is True
        assert matches("Newsletter", "nn") is False

    def test_surrounding_whitespace_in_query_is_ignored(self):
        assert matches("Orders", "  ord ") is True

    def test_inner_space_must_match(self):
        assert matches("New Blog Post", "w b") is True
        assert matches("Newsletter", "w b") is False

    @pytest.mark.parametrize(
        "text,query,expected",
        [
            ("dashboard", "ord", True),
            ("orders", "ord", True),
            ("users", "ord", False),
            ("template categories", "tc", True),
            ("logout", "lgt", True),
            ("logout", "tl", False),
        ],
    )
    def test_examples(self, text, query, expected):
        assert matches(text, query) is expected


class TestHighlight:
    """Tests for highlight()."""

    def test_empty_text(self):
        assert highlight("", "abc") == []

    def test_empty_query_is_single_unmatched_run(self):
        assert highlight("Users", "") == [Segment("Users", False)]

    def test_runs_alternate(self):
        assert highlight("Dashboard", "db") == [
            Segment("D", True),
            Segment("ash", False),
            Segment("b", True),
            Segment("oard", False),
        ]

    def test_adjacent_matches_merge_into_one_run(self):
        assert highlight("Orders", "ord") == [Segment("Ord", True), Segment("ers", False)]

    def test_whole_text_matched(self):
        assert highlight("Blog", "blog") == [Segment("Blog", True)]

    def test_greedy_earliest_alignment(self):
        # "a" aligns with the first a, not the later one
        assert highlight("banana", "a") == [
            Segment("b", False),
            Segment("a", True),
            Segment("nana", False),
        ]

    def test_partial_alignment_still_marked(self):
        segments = highlight("Users", "uz")
        assert segments == [Segment("U", True), Segment("sers", False)]

    def test_original_case_preserved(self):
        segments = highlight("New Blog Post", "NBP")
        assert [s.text for s in segments if s.matched] == ["N", "B", "P"]

    @pytest.mark.parametrize(
        "text,query",
        [
            ("Dashboard", "db"),
            ("Template Categories", "tmpcat"),
            ("Keyboard Shortcuts", "zzz"),
            ("İstanbul", "i"),
            ("aaa", "aaaa"),
            ("x", ""),
        ],
    )
    def test_concatenation_reproduces_text(self, text, query):
        assert _joined(highlight(text, query)) == text


class TestCommandMatching:
    """Tests for matching against a command's searchable text."""

    def _command(self, **kwargs):
        return Command(id="nav-orders", label="Orders", action=lambda: None, group=CommandGroup.NAVIGATE, **kwargs)

    def test_haystack_joins_fields(self):
        command = self._command(description="View & approve orders", keywords="purchases payments")
        assert command_haystack(command) == "Orders View & approve orders purchases payments"

    def test_haystack_with_missing_fields(self):
        assert command_haystack(self._command()) == "Orders  "

    def test_keywords_are_searched(self):
        command = self._command(keywords="purchases payments")
        assert command_matches(command, "paym") is True

    def test_description_is_searched(self):
        command = self._command(description="View & approve orders")
        assert command_matches(command, "approve") is True

    def test_match_may_span_fields(self):
        command = self._command(description="View")
        assert command_matches(command, "sv") is True  # s in Orders, v in View
