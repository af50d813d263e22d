"""
Command descriptors and the command registry.

The host application supplies the commands; the registry only fixes their
order and guarantees ids are unique.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import CommandNotFoundError, DuplicateCommandError

logger = logging.getLogger(__name__)


class CommandGroup(Enum):
    """Groups a command can belong to."""

    NAVIGATE = "navigate"
    CREATE = "create"
    ACTION = "action"


@dataclass(frozen=True)
class Command:
    """A command that can be executed from the palette."""

    id: str  # Stable identifier, also the recency key: "nav-dashboard"
    label: str  # Display name and primary match target: "Dashboard"
    action: Callable[[], object] = field(compare=False, repr=False)
    group: CommandGroup = CommandGroup.ACTION
    description: str = ""  # Shown under the label, also searched
    keywords: str = ""  # Synonyms, searched but never displayed
    shortcut: tuple[str, ...] = ()  # Key labels for display: ("G", "D")

    def __post_init__(self) -> None:
        if not isinstance(self.group, CommandGroup):
            # Accept the plain tag ("navigate") but store the enum member
            object.__setattr__(self, "group", CommandGroup(self.group))
        if not isinstance(self.shortcut, tuple):
            object.__setattr__(self, "shortcut", tuple(self.shortcut))


class CommandRegistry:
    """Immutable, ordered collection of palette commands.

    Registration order is preserved and is the only ordering the ranker
    applies to matches.
    """

    def __init__(self, commands: Iterable[Command] = ()):
        self._commands: tuple[Command, ...] = tuple(commands)
        self._by_id: dict[str, Command] = {}
        for command in self._commands:
            if command.id in self._by_id:
                raise DuplicateCommandError(command_id=command.id)
            self._by_id[command.id] = command
        logger.debug("Built command registry with %d commands", len(self._commands))

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._by_id

    def get(self, command_id: str) -> Optional[Command]:
        """Get a command by id, or None."""
        return self._by_id.get(command_id)

    def require(self, command_id: str) -> Command:
        """Get a command by id, raising CommandNotFoundError if missing."""
        command = self._by_id.get(command_id)
        if command is None:
            raise CommandNotFoundError(command_id=command_id)
        return command

    def in_group(self, group: CommandGroup) -> list[Command]:
        """All commands of one group, in registration order."""
        return [c for c in self._commands if c.group is group]

    def all(self) -> list[Command]:
        return list(self._commands)
