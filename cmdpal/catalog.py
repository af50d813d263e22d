"""
Sample admin catalog used by the demo host and the CLI.

The palette engine does not own any commands; a host builds them with its
own side effects. This catalog mirrors an admin back office: pages to
navigate to, records to create, and a few account actions. Its actions only
call the ``navigate`` and ``close`` callbacks they are given.
"""

from collections.abc import Callable
from typing import Optional

from .commands import Command, CommandGroup, CommandRegistry

Navigate = Callable[[str], None]

# id, label, description, route, shortcut, keywords
_PAGES = [
    ("nav-dashboard", "Dashboard", "Overview & analytics", "/dashboard", ("G", "D"), "home stats"),
    ("nav-users", "Users", "Manage user accounts", "/users", ("G", "U"), "people accounts"),
    ("nav-orders", "Orders", "View & approve orders", "/orders", ("G", "O"), "purchases payments"),
    ("nav-blog", "Blog", "Manage blog posts", "/blog", ("G", "B"), "posts articles"),
    ("nav-tests", "Tests", "Assessments & questions", "/tests", (), "quiz assessment"),
    ("nav-contacts", "Contacts", "Support submissions", "/contacts", ("G", "C"), "support messages"),
    ("nav-newsletter", "Newsletter", "Campaigns & subscribers", "/newsletter", ("G", "N"), "email campaigns"),
    ("nav-templates", "Templates", "Digital product templates", "/templates", (), "files downloads"),
    (
        "nav-template-categories",
        "Template Categories",
        "Manage template categories",
        "/template-categories",
        (),
        "categories templates",
    ),
    ("nav-calculators", "Calculators", "Usage analytics", "/calculators", (), "tools usage"),
]

_CREATE = [
    ("create-blog", "New Blog Post", "Open blog editor", "/blog?new=1", ("N", "B"), "write article"),
    ("create-nl", "New Newsletter", "Create campaign", "/newsletter?new=1", ("N", "N"), "email send"),
    ("create-template", "New Template", "Upload template", "/templates?new=1", (), "upload file"),
]


def _go(navigate: Navigate, route: str) -> Callable[[], None]:
    return lambda: navigate(route)


def build_admin_commands(
    navigate: Navigate,
    close: Optional[Callable[[], None]] = None,
    logout: Optional[Callable[[], None]] = None,
) -> CommandRegistry:
    """Build the admin catalog in display order.

    Args:
        navigate: Called with a route such as "/orders"
        close: Called by actions that only dismiss the palette
        logout: Called by the Logout action; defaults to ``close``
    """
    dismiss = close or (lambda: None)
    commands = [
        Command(
            id=cid,
            label=label,
            description=description,
            keywords=keywords,
            group=CommandGroup.NAVIGATE,
            shortcut=shortcut,
            action=_go(navigate, route),
        )
        for cid, label, description, route, shortcut, keywords in _PAGES
    ]
    commands += [
        Command(
            id=cid,
            label=label,
            description=description,
            keywords=keywords,
            group=CommandGroup.CREATE,
            shortcut=shortcut,
            action=_go(navigate, route),
        )
        for cid, label, description, route, shortcut, keywords in _CREATE
    ]
    commands += [
        Command(
            id="action-analytics",
            label="View Analytics",
            description="Revenue & growth",
            keywords="charts graphs",
            group=CommandGroup.ACTION,
            action=_go(navigate, "/dashboard"),
        ),
        Command(
            id="action-shortcuts",
            label="Keyboard Shortcuts",
            description="View all shortcuts",
            group=CommandGroup.ACTION,
            shortcut=("?",),
            action=dismiss,
        ),
        Command(
            id="action-logout",
            label="Logout",
            description="Sign out of admin",
            keywords="sign out",
            group=CommandGroup.ACTION,
            action=logout or dismiss,
        ),
    ]
    return CommandRegistry(commands)


def admin_shortcuts(
    navigate: Navigate,
    open_palette: Callable[[], None],
) -> dict[str, Callable[[], None]]:
    """Host-level bindings: palette openers plus the G/N page sequences."""
    bindings: dict[str, Callable[[], None]] = {
        "cmd+k": open_palette,
        "/": open_palette,
    }
    for _cid, _label, _desc, route, shortcut, _kw in _PAGES + _CREATE:
        if shortcut:
            bindings[" ".join(shortcut).lower()] = _go(navigate, route)
    bindings["g t"] = _go(navigate, "/templates")
    return bindings
