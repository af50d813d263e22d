"""
Keyboard plumbing: the shared key stream and host-level shortcuts.

``KeyboardHub`` stands in for the application's global key stream. Listeners
are offered each key, most recently attached first, and return True when
they consumed it. The palette attaches one listener while open and must
detach it on close.

``ShortcutMap`` resolves host bindings such as ``ctrl+k`` or two-key
sequences like ``g d`` (press G, then D within a short window).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Optional

from .config.constants import SEQUENCE_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

KeyListener = Callable[[str], bool]

# Browser-style and Textual-style names mapped onto one vocabulary
_KEY_ALIASES = {
    "arrowup": "up",
    "arrowdown": "down",
    "return": "enter",
    "esc": "escape",
    "slash": "/",
    "question_mark": "?",
}

_MODIFIER_ALIASES = {"cmd": "ctrl", "meta": "ctrl", "control": "ctrl"}


def normalize_key(key: str) -> str:
    """Normalize a key or combo: lower case, ``cmd``/``meta`` read as ``ctrl``."""
    parts = key.strip().lower().split("+")
    if len(parts) > 1 and parts[-1] == "":
        # The "+" key itself, e.g. "ctrl++"
        parts = parts[:-2] + ["+"]
    *mods, base = parts
    mods = [_MODIFIER_ALIASES.get(m, m) for m in mods]
    base = _KEY_ALIASES.get(base, base)
    return "+".join([*mods, base])


class KeyboardHub:
    """Shared key stream that listeners attach to and detach from."""

    def __init__(self) -> None:
        self._listeners: list[KeyListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def is_attached(self, listener: KeyListener) -> bool:
        return listener in self._listeners

    def attach(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            return
        self._listeners.append(listener)

    def detach(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, key: str) -> bool:
        """Offer ``key`` to listeners. Returns True if one consumed it."""
        combo = normalize_key(key)
        for listener in reversed(list(self._listeners)):
            if listener(combo):
                return True
        return False


class ShortcutMap:
    """
    Host-owned keyboard shortcuts.

    Bindings are either single keys/combos (``"ctrl+k"``, ``"/"``) or
    two-key sequences separated by a space (``"g d"``).
    """

    def __init__(
        self,
        bindings: Mapping[str, Callable[[], object]],
        timeout: float = SEQUENCE_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.timeout = timeout
        self._clock = clock
        self._direct: dict[str, Callable[[], object]] = {}
        self._sequences: dict[str, Callable[[], object]] = {}
        for combo, handler in bindings.items():
            keys = combo.split()
            if len(keys) == 2:
                self._sequences[" ".join(normalize_key(k) for k in keys)] = handler
            elif len(keys) == 1:
                self._direct[normalize_key(keys[0])] = handler
            else:
                raise ValueError(f"Unsupported shortcut: {combo!r}")
        self._starters = {seq.split()[0] for seq in self._sequences}
        self._pending: Optional[str] = None
        self._pending_until = 0.0

    @property
    def pending(self) -> Optional[str]:
        """First key of a sequence in progress, if still inside the window."""
        if self._pending is not None and self._clock() > self._pending_until:
            self._pending = None
        return self._pending

    def handle(self, key: str, editable: bool = False) -> bool:
        """Process one key press. Returns True if a shortcut fired.

        Keys typed into an editable field (``editable=True``) are ignored.
        """
        if editable:
            return False

        combo = normalize_key(key)

        handler = self._direct.get(combo)
        if handler is not None:
            self._pending = None
            logger.debug("Shortcut %s", combo)
            handler()
            return True

        pending = self.pending
        if pending is not None:
            self._pending = None
            sequence = f"{pending} {combo}"
            handler = self._sequences.get(sequence)
            if handler is not None:
                logger.debug("Shortcut sequence %s", sequence)
                handler()
                return True

        if "+" not in combo[:-1] and combo in self._starters:
            self._pending = combo
            self._pending_until = self._clock() + self.timeout

        return False

    def __call__(self, key: str) -> bool:
        """Listener form for attaching to a KeyboardHub."""
        return self.handle(key)
