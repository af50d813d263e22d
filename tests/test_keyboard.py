"""Tests for the shared key stream and host shortcuts."""

import pytest

from cmdpal.keyboard import KeyboardHub, ShortcutMap, normalize_key


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("K", "k"),
        ("cmd+k", "ctrl+k"),
        ("Meta+K", "ctrl+k"),
        ("ctrl+shift+N", "ctrl+shift+n"),
        ("ArrowUp", "up"),
        ("ArrowDown", "down"),
        ("Escape", "escape"),
        ("slash", "/"),
        ("question_mark", "?"),
        ("ctrl++", "ctrl++"),
        ("+", "+"),
    ],
)
def test_normalize_key(raw, expected):
    assert normalize_key(raw) == expected


class TestKeyboardHub:
    def test_attach_detach(self):
        hub = KeyboardHub()
        listener = lambda key: True  # noqa: E731
        hub.attach(listener)
        assert hub.listener_count == 1
        assert hub.is_attached(listener)
        hub.detach(listener)
        assert hub.listener_count == 0

    def test_attach_twice_keeps_one(self):
        hub = KeyboardHub()
        listener = lambda key: False  # noqa: E731
        hub.attach(listener)
        hub.attach(listener)
        assert hub.listener_count == 1

    def test_detach_unknown_is_noop(self):
        KeyboardHub().detach(lambda key: False)

    def test_latest_listener_first_and_consumption_stops(self):
        hub = KeyboardHub()
        seen = []
        hub.attach(lambda key: seen.append(("first", key)) or False)
        hub.attach(lambda key: seen.append(("second", key)) or key == "up")

        assert hub.dispatch("ArrowUp") is True
        assert seen == [("second", "up")]

        assert hub.dispatch("x") is False
        assert seen[1:] == [("second", "x"), ("first", "x")]

    def test_no_listeners(self):
        assert KeyboardHub().dispatch("enter") is False


class TestShortcutMap:
    def _map(self, fired, clock=None):
        return ShortcutMap(
            {
                "cmd+k": lambda: fired.append("palette"),
                "/": lambda: fired.append("palette"),
                "g d": lambda: fired.append("/dashboard"),
                "g u": lambda: fired.append("/users"),
                "n b": lambda: fired.append("/blog?new=1"),
            },
            clock=clock or FakeClock(),
        )

    def test_direct_combo(self):
        fired = []
        shortcuts = self._map(fired)
        assert shortcuts.handle("ctrl+k") is True
        assert shortcuts.handle("Meta+K") is True
        assert shortcuts.handle("slash") is True
        assert fired == ["palette", "palette", "palette"]

    def test_sequence(self):
        fired = []
        shortcuts = self._map(fired)
        assert shortcuts.handle("g") is False
        assert shortcuts.pending == "g"
        assert shortcuts.handle("d") is True
        assert fired == ["/dashboard"]
        assert shortcuts.pending is None

    def test_sequence_times_out(self):
        fired = []
        clock = FakeClock()
        shortcuts = self._map(fired, clock)
        shortcuts.handle("g")
        clock.now += 0.9
        assert shortcuts.handle("d") is False
        assert fired == []

    def test_sequence_within_window(self):
        fired = []
        clock = FakeClock()
        shortcuts = self._map(fired, clock)
        shortcuts.handle("g")
        clock.now += 0.5
        assert shortcuts.handle("u") is True
        assert fired == ["/users"]

    def test_mismatch_restarts_with_current_key(self):
        fired = []
        shortcuts = self._map(fired)
        shortcuts.handle("g")
        assert shortcuts.handle("n") is False
        assert shortcuts.pending == "n"
        assert shortcuts.handle("b") is True
        assert fired == ["/blog?new=1"]

    def test_unbound_key(self):
        fired = []
        shortcuts = self._map(fired)
        assert shortcuts.handle("x") is False
        assert shortcuts.pending is None
        assert fired == []

    def test_modified_key_never_starts_sequence(self):
        shortcuts = self._map([])
        shortcuts.handle("ctrl+g")
        assert shortcuts.pending is None

    def test_editable_target_ignored(self):
        fired = []
        shortcuts = self._map(fired)
        assert shortcuts.handle("ctrl+k", editable=True) is False
        assert shortcuts.handle("g", editable=True) is False
        assert shortcuts.pending is None
        assert fired == []

    def test_direct_combo_clears_pending(self):
        fired = []
        shortcuts = self._map(fired)
        shortcuts.handle("g")
        shortcuts.handle("ctrl+k")
        assert shortcuts.pending is None

    def test_invalid_binding(self):
        with pytest.raises(ValueError):
            ShortcutMap({"g d x": lambda: None})

    def test_attaches_to_hub(self):
        fired = []
        hub = KeyboardHub()
        hub.attach(self._map(fired))
        assert hub.dispatch("cmd+k") is True
        assert fired == ["palette"]
