"""Pure formatting helpers for the settings page navigation.

These functions turn a ``SettingsPageView`` into Rich markup or plain text so
rendering can be tested independently of the TUI widget tree.
"""

from __future__ import annotations

from typing import Sequence

from rich.markup import escape

from ptam.admin.models import NavItem, SettingsPageView

SUB_TAB_SEPARATOR = " | "


def select_tab_action(index: int) -> str:
    """Return the Textual click action that opens the tab at ``index``.

    Tabs are addressed by their position in the rendered view.
    """
    return f"app.select_tab({int(index)})"


def select_sub_tab_action(index: int) -> str:
    """Return the Textual click action that opens the sub-tab at ``index``."""
    return f"app.select_sub_tab({int(index)})"


def format_tab_nav(items: Sequence[NavItem]) -> str:
    """Format top-level tabs as clickable markup; the active tab is highlighted."""
    parts: list[str] = []
    for index, item in enumerate(items):
        label = escape(item.label)
        link = f"[@click={select_tab_action(index)}]{label}[/]"
        if item.active:
            parts.append(f"[reverse bold] {link} [/]")
        else:
            parts.append(f" {link} ")
    return " ".join(parts)


def format_sub_tab_nav(items: Sequence[NavItem]) -> str:
    """Format sub-tabs; the active one is a plain label, the rest are links."""
    parts: list[str] = []
    for index, item in enumerate(items):
        label = escape(item.label)
        if item.clickable:
            parts.append(f"[@click={select_sub_tab_action(index)}]{label}[/]")
        else:
            parts.append(f"[b]{label}[/b]")
    return SUB_TAB_SEPARATOR.join(parts)


def format_nav_plain(items: Sequence[NavItem], *, sub_tabs: bool = False) -> str:
    """Format navigation as plain text, marking active entries.

    Active top-level tabs are wrapped in brackets, the active sub-tab in
    asterisks.
    """
    if sub_tabs:
        return SUB_TAB_SEPARATOR.join(f"*{item.label}*" if item.active else item.label for item in items)
    return " ".join(f"[{item.label}]" if item.active else item.label for item in items)


def format_page_text(view: SettingsPageView, body: str = "") -> str:
    """Render a full settings page view as plain text for the CLI.

    Args:
        view: Rendered page view.
        body: Body text for the active tab.

    Returns:
        Multi-line string.
    """
    lines = [view.title, view.info_text, ""]
    if not view.has_nav:
        lines.append("No tabs available.")
        return "\n".join(lines)

    lines.append(f"Tabs: {format_nav_plain(view.tabs)}")
    if view.sub_tabs:
        lines.append(f"Sub-tabs: {format_nav_plain(view.sub_tabs, sub_tabs=True)}")
    lines.append(f"Active: {view.tab.active_id}" + (f" / {view.sub_tab.active_id}" if view.sub_tab.active_id else ""))
    if view.dispatched:
        lines.append(f"Actions: {', '.join(view.dispatched)}")
    if body:
        lines.extend(["", body])
    return "\n".join(lines)
