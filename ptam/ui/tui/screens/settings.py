"""Tabbed admin settings screen for the TUI."""

from __future__ import annotations

from typing import Any, Optional

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widget import Widget
from textual.widgets import Static

from ptam.admin.models import SettingsPageView
from ptam.admin.request import AdminRequest
from ptam.admin.settings_page import AdminSettings
from ptam.logging import get_logger
from ptam.ui.tui.presenters.settings import format_sub_tab_nav, format_tab_nav

logger = get_logger(__name__)


class AdminSettingsScreen(Widget):
    """Renders one settings page view and re-renders on navigation."""

    def __init__(self, settings: AdminSettings, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.settings = settings
        self.request = AdminRequest()
        self.view: Optional[SettingsPageView] = None

    def compose(self) -> ComposeResult:
        with Vertical(id="settings-layout"):
            yield Static("", id="settings-header")
            yield Static("", id="settings-tabs")
            yield Static("", id="settings-sub-tabs")
            yield Static("", id="settings-body")

    def on_mount(self) -> None:
        self.show(self.request)

    def show(self, request: AdminRequest) -> SettingsPageView:
        """Render the page for a request and refresh every section."""
        view = self.settings.render(request)
        self.request = request
        self.view = view

        self._update("#settings-header", f"[b]{escape(view.title)}[/b]\n{escape(view.info_text)}")
        self._update("#settings-tabs", format_tab_nav(view.tabs))
        self._update("#settings-sub-tabs", format_sub_tab_nav(view.sub_tabs))
        self._update("#settings-body", escape(view.body))
        return view

    def next_tab_id(self, step: int = 1) -> Optional[str]:
        """Id of the tab ``step`` positions after the active one, wrapping around."""
        if self.view is None or not self.view.tabs:
            return None
        ids = [item.id for item in self.view.tabs]
        try:
            index = ids.index(self.view.tab.active_id)
        except ValueError:
            index = -1 if step > 0 else 0
        return ids[(index + step) % len(ids)]

    def request_for_tab(self, index: int) -> Optional[AdminRequest]:
        """Request that opens the rendered tab at ``index``; None when out of range."""
        if self.view is None or not 0 <= index < len(self.view.tabs):
            return None
        return AdminRequest(tab=self.view.tabs[index].id)

    def request_for_sub_tab(self, index: int) -> Optional[AdminRequest]:
        """Request that opens the rendered sub-tab at ``index`` within the active tab."""
        if self.view is None or not 0 <= index < len(self.view.sub_tabs):
            return None
        return AdminRequest(tab=self.view.tab.active_id, sub_tab=self.view.sub_tabs[index].id)

    def _update(self, selector: str, markup: str) -> None:
        try:
            self.query_one(selector, Static).update(markup)
        except Exception:
            logger.debug("Settings section %s not mounted yet.", selector)
