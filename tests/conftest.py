"""Shared pytest fixtures for cmdpal tests."""

import pytest

from cmdpal.commands import Command, CommandGroup, CommandRegistry
from cmdpal.recency import RecencyStore
from cmdpal.storage import MemoryStorage


def make_command(cid, label, group=CommandGroup.NAVIGATE, calls=None, **kwargs):
    """Build a command whose action appends its id to ``calls``."""
    sink = calls if calls is not None else []
    return Command(id=cid, label=label, group=group, action=lambda: sink.append(cid), **kwargs)


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.config/cmdpal."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("CMDPAL_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def calls():
    """Ids of commands executed during a test, in order."""
    return []


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def recency(storage):
    return RecencyStore(storage)


@pytest.fixture
def small_registry(calls):
    """Dashboard, Users (navigate) and New Post (create)."""
    return CommandRegistry(
        [
            make_command("nav-dashboard", "Dashboard", calls=calls),
            make_command("nav-users", "Users", calls=calls),
            make_command("create-post", "New Post", group=CommandGroup.CREATE, calls=calls),
        ]
    )
