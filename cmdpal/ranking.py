"""
Candidate ranking and grouping for the palette list.

With a query, the candidates are the matching commands in registration
order. Without one, the list is grouped into Recent, Navigate and Create
sections and capped.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from .commands import Command, CommandGroup, CommandRegistry
from .config.constants import (
    MAX_EMPTY_QUERY_RESULTS,
    SECTION_CREATE,
    SECTION_NAVIGATE,
    SECTION_RECENT,
)
from .fuzzy import command_matches

__all__ = ["RankedCommands", "Section", "rank"]

# Empty-query sections, in display order
_GROUP_SECTIONS = (
    (CommandGroup.NAVIGATE, SECTION_NAVIGATE),
    (CommandGroup.CREATE, SECTION_CREATE),
)


@dataclass(frozen=True)
class Section:
    """A header shown above the candidate at index ``start``."""

    label: str
    start: int


@dataclass(frozen=True)
class RankedCommands:
    """Candidates to display, plus section headers for the grouped view."""

    candidates: tuple[Command, ...] = ()
    sections: tuple[Section, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.candidates)

    @property
    def is_grouped(self) -> bool:
        return bool(self.sections)

    def section_at(self, index: int) -> Optional[str]:
        """Label of the section starting at ``index``, if any."""
        for section in self.sections:
            if section.start == index:
                return section.label
        return None


def rank(
    registry: CommandRegistry,
    query: str,
    recent_ids: Sequence[str] = (),
    limit: int = MAX_EMPTY_QUERY_RESULTS,
) -> RankedCommands:
    """Compute the candidate list for ``query``.

    Args:
        registry: Commands supplied by the host
        query: Current input text
        recent_ids: Recently executed ids, most recent first
        limit: Cap applied to the grouped (empty query) list

    Returns:
        RankedCommands with sections only when the query is empty
    """
    if query.strip():
        return RankedCommands(tuple(c for c in registry if command_matches(c, query)))

    sublists: list[tuple[str, list[Command]]] = [
        (SECTION_RECENT, [c for c in (registry.get(i) for i in recent_ids) if c is not None]),
    ]
    for group, label in _GROUP_SECTIONS:
        sublists.append((label, registry.in_group(group)))

    candidates: list[Command] = []
    sections: list[Section] = []
    for label, commands in sublists:
        if commands:
            sections.append(Section(label, len(candidates)))
            candidates.extend(commands)

    candidates = candidates[:limit]
    sections = [s for s in sections if s.start < len(candidates)]
    return RankedCommands(tuple(candidates), tuple(sections))
