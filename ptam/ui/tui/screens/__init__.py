"""
TUI screen modules.

Contains:
- AdminSettingsScreen: Tabbed admin settings page
"""

from __future__ import annotations

__all__ = ["AdminSettingsScreen"]


def __getattr__(name: str):
    if name == "AdminSettingsScreen":
        from ptam.ui.tui.screens.settings import AdminSettingsScreen
        return AdminSettingsScreen
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
