"""
Main TUI application for the admin settings page.

Provides a terminal rendering of the tabbed settings screen using Textual:
- Clickable tab and sub-tab navigation
- Keyboard shortcuts to cycle tabs
"""

from __future__ import annotations

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ptam.admin.request import AdminRequest
from ptam.admin.settings_page import AdminSettings
from ptam.logging import get_logger
from ptam.ui.tui.screens.settings import AdminSettingsScreen

logger = get_logger(__name__)


class AdminSettingsApp(App):
    """Textual host for ``AdminSettingsScreen``."""

    CSS = """
    #settings-layout { padding: 1 2; }
    #settings-header { margin-bottom: 1; }
    #settings-tabs { margin-bottom: 1; }
    #settings-sub-tabs { margin-bottom: 1; color: $text-muted; }
    #settings-body { border: round $primary; padding: 1 2; }
    """

    BINDINGS = [
        Binding("right,right_square_bracket", "next_tab", "Next tab", show=True),
        Binding("left,left_square_bracket", "previous_tab", "Previous tab", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, settings: AdminSettings, request: Optional[AdminRequest] = None) -> None:
        super().__init__()
        self.settings = settings
        self.initial_request = request or AdminRequest()
        self.title = settings.config.page_title

    def compose(self) -> ComposeResult:
        yield Header()
        page = AdminSettingsScreen(self.settings, id="admin-settings")
        page.request = self.initial_request
        yield page
        yield Footer()

    @property
    def settings_screen(self) -> AdminSettingsScreen:
        return self.query_one("#admin-settings", AdminSettingsScreen)

    def action_navigate(self, tab_id: str, sub_tab_id: str = "") -> None:
        """Open a tab (and optionally a sub-tab) by id, matched exactly."""
        self._show(AdminRequest(tab=tab_id or None, sub_tab=sub_tab_id or None))

    def action_select_tab(self, index: int) -> None:
        """Open the tab at ``index`` in the current navigation."""
        request = self.settings_screen.request_for_tab(int(index))
        if request is not None:
            self._show(request)

    def action_select_sub_tab(self, index: int) -> None:
        """Open the sub-tab at ``index`` in the current navigation."""
        request = self.settings_screen.request_for_sub_tab(int(index))
        if request is not None:
            self._show(request)

    def action_next_tab(self) -> None:
        self._step_tab(1)

    def action_previous_tab(self) -> None:
        self._step_tab(-1)

    def _step_tab(self, step: int) -> None:
        tab_id = self.settings_screen.next_tab_id(step)
        if tab_id is not None:
            self._show(AdminRequest(tab=tab_id))

    def _show(self, request: AdminRequest) -> None:
        logger.debug("Navigating to %s", request)
        self.settings_screen.show(request)


def run_tui(settings: AdminSettings, request: Optional[AdminRequest] = None) -> int:
    """
    Run the TUI application.

    Args:
        settings: Bootstrapped admin settings
        request: Initial tab state

    Returns:
        Exit code (0 for success)
    """
    app = AdminSettingsApp(settings, request)
    app.run()
    return 0
