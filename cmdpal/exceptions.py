"""Custom exception hierarchy for cmdpal.

Exception Hierarchy:
    CmdpalError (base)
    ├── RegistryError - building or querying the command registry
    │   ├── DuplicateCommandError
    │   └── CommandNotFoundError
    └── StorageError - persistence backend failures

Failures the palette is expected to absorb (malformed recency data, no
matches) never raise. Exceptions from host command actions are not wrapped;
they propagate unchanged.

Usage:
    from cmdpal.exceptions import CommandNotFoundError

    raise CommandNotFoundError(command_id="nav-orders")
"""

from typing import Any, Optional


class CmdpalError(Exception):
    """Base exception for all cmdpal errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., ids, paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Registry Errors
# =============================================================================


class RegistryError(CmdpalError):
    """Base exception for command registry problems."""

    pass


class DuplicateCommandError(RegistryError):
    """Two commands were registered under the same id."""

    def __init__(
        self,
        message: str = "Duplicate command id",
        *,
        command_id: Optional[str] = None,
        **context: Any,
    ) -> None:
        if command_id is not None:
            context["command_id"] = command_id
        super().__init__(message, **context)


class CommandNotFoundError(RegistryError):
    """No command is registered under the requested id."""

    def __init__(
        self,
        message: str = "Command not found",
        *,
        command_id: Optional[str] = None,
        **context: Any,
    ) -> None:
        if command_id is not None:
            context["command_id"] = command_id
        super().__init__(message, **context)


# =============================================================================
# Storage Errors
# =============================================================================


class StorageError(CmdpalError):
    """The key-value persistence backend failed."""

    def __init__(
        self,
        message: str = "Storage operation failed",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)
