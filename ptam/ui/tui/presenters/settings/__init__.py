"""Settings screen presenters for navigation formatting."""

from __future__ import annotations

from ptam.ui.tui.presenters.settings.nav_formatting import (
    SUB_TAB_SEPARATOR,
    format_nav_plain,
    format_page_text,
    format_sub_tab_nav,
    format_tab_nav,
    select_sub_tab_action,
    select_tab_action,
)

__all__ = [
    "SUB_TAB_SEPARATOR",
    "format_nav_plain",
    "format_page_text",
    "format_sub_tab_nav",
    "format_tab_nav",
    "select_sub_tab_action",
    "select_tab_action",
]
