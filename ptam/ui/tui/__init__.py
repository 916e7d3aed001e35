"""
TUI (Text User Interface) module for the admin settings page.

Provides a terminal interface built with Textual.
"""

from __future__ import annotations

__all__ = [
    "AdminSettingsApp",
    "run_tui",
]


def __getattr__(name: str):
    if name in __all__:
        from ptam.ui.tui.app import AdminSettingsApp, run_tui
        return {"AdminSettingsApp": AdminSettingsApp, "run_tui": run_tui}[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
