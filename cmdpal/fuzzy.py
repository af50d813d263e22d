"""Fuzzy subsequence matching for the command palette.

A query matches a text when every query character appears in the text in
the same order, not necessarily adjacent. Matching is case-insensitive and
ignores whitespace around the query. The greedy earliest-match alignment is
always sufficient for subsequence membership, so a single left-to-right scan
decides a match and the same scan drives highlighting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .commands import Command

__all__ = ["Segment", "command_haystack", "command_matches", "highlight", "matches"]


@dataclass(frozen=True)
class Segment:
    """A run of characters from the original text."""

    text: str
    matched: bool


def _fold(query: str) -> list[str]:
    # Folded per character so text positions stay aligned with the original
    return [ch.lower() for ch in query.strip()]


def matches(text: str, query: str) -> bool:
    """Return True if ``query`` is a case-insensitive subsequence of ``text``.

    An empty (or all-whitespace) query matches everything.
    """
    needle = _fold(query)
    if not needle:
        return True

    cursor = 0
    for ch in text:
        if ch.lower() == needle[cursor]:
            cursor += 1
            if cursor == len(needle):
                return True
    return False


def highlight(text: str, query: str) -> list[Segment]:
    """Split ``text`` into alternating unmatched/matched runs.

    Uses the same greedy alignment as :func:`matches`. Joining the run texts
    always reproduces ``text`` exactly. When the query is only partially
    found, the characters that did align are still marked.
    """
    if not text:
        return []

    needle = _fold(query)
    if not needle:
        return [Segment(text, False)]

    segments: list[Segment] = []
    run_start = 0
    run_matched = False
    cursor = 0

    for i, ch in enumerate(text):
        hit = cursor < len(needle) and ch.lower() == needle[cursor]
        if hit:
            cursor += 1
        if hit != run_matched:
            if i > run_start:
                segments.append(Segment(text[run_start:i], run_matched))
            run_start = i
            run_matched = hit

    segments.append(Segment(text[run_start:], run_matched))
    return segments


def command_haystack(command: Command) -> str:
    """Text a command is searched by: label, description and keywords."""
    return f"{command.label} {command.description or ''} {command.keywords or ''}"


def command_matches(command: Command, query: str) -> bool:
    """Return True if the command's searchable text matches ``query``."""
    return matches(command_haystack(command), query)
