"""
Command execution for the palette.

Runs a command's action, records it as recently used, then signals the host
to close the palette. The action is never awaited: if it returns an
awaitable, the awaitable is handed to the host's scheduler.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Optional

from .commands import Command
from .recency import RecencyStore

logger = logging.getLogger(__name__)


class Dispatcher:
    """Executes commands chosen in the palette."""

    def __init__(
        self,
        recency: RecencyStore,
        on_close: Optional[Callable[[], None]] = None,
        schedule: Optional[Callable[[Awaitable[Any]], object]] = None,
    ):
        self.recency = recency
        self.on_close = on_close
        self.schedule = schedule

    def execute(self, command: Command) -> None:
        """Run ``command``, record it, and close the palette.

        Exceptions raised by the action propagate to the caller; in that case
        nothing is recorded and the close signal is not sent.
        """
        logger.info("Executing palette command %s", command.id)
        result = command.action()
        if inspect.isawaitable(result):
            self._hand_off(command, result)

        self.recency.record(command.id)

        if self.on_close:
            self.on_close()

    def _hand_off(self, command: Command, pending: Awaitable[Any]) -> None:
        if self.schedule is not None:
            self.schedule(pending)
            return
        logger.warning("Command %s returned an awaitable but no scheduler is set", command.id)
        if inspect.iscoroutine(pending):
            pending.close()
