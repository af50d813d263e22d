"""
Textual host for the command palette.

Provides:
- CommandPaletteScreen: Modal overlay driven by PalettePresenter
- PaletteApp: Demo admin shell that opens the palette with Ctrl+K or /
"""

from .app import PaletteApp
from .palette_screen import CommandPaletteScreen

__all__ = [
    "CommandPaletteScreen",
    "PaletteApp",
]
