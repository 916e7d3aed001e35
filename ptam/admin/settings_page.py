"""
Settings page pipeline: menu entry, plugin-list links and the tabbed render.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ptam.admin.dispatch import ActionDispatcher
from ptam.admin.models import (
    ActionLink,
    MenuPage,
    NavItem,
    SettingsPageView,
    SubTabSelection,
    TabDescriptor,
    TabSelection,
)
from ptam.admin.registry import TabProviderRegistry
from ptam.admin.request import AdminRequest
from ptam.admin.resolver import resolve_subtab, resolve_tab
from ptam.admin.urls import settings_url
from ptam.config.constants import DEFAULT_TAB
from ptam.config.models import AdminConfig
from ptam.logging import get_logger

logger = get_logger(__name__)


class AdminSettings:
    """Controller for the plugin's admin settings page."""

    def __init__(
        self,
        config: AdminConfig,
        registry: Optional[TabProviderRegistry] = None,
        dispatcher: Optional[ActionDispatcher] = None,
    ) -> None:
        self.config = config
        self.registry = registry if registry is not None else TabProviderRegistry()
        self.dispatcher = dispatcher if dispatcher is not None else ActionDispatcher(config.namespace)

    def settings_url(self, tab: Optional[str] = None, sub_tab: Optional[str] = None) -> str:
        return settings_url(self.config, tab, sub_tab)

    def menu_page(self) -> MenuPage:
        """Describe the options-page menu entry."""
        return MenuPage(
            parent=self.config.parent_page,
            page_title=self.config.page_title,
            menu_title=self.config.menu_title,
            capability=self.config.capability,
            menu_slug=self.config.page_slug,
        )

    def plugin_action_links(self, existing: Any = None) -> list[Any]:
        """
        Append the Settings and Support links to a plugin's action links.

        Args:
            existing: Links already present; anything but a list is discarded.
        """
        links = [
            ActionLink(label="Settings", url=self.settings_url(self.config.default_tab)),
            ActionLink(label="Support", url=self.settings_url("support")),
        ]
        if not isinstance(existing, list):
            return list(links)
        return [*existing, *links]

    def plugin_row_meta(self, plugin_meta: list[Any], plugin_file: str) -> list[Any]:
        """Add the upgrade link to this plugin's row on the plugin list."""
        if plugin_file != self.config.plugin_file:
            return plugin_meta
        return [*plugin_meta, ActionLink(label="Get Archive Pages Pro", url=self.config.pro_url, highlight=True)]

    def render(self, request: Optional[AdminRequest] = None) -> SettingsPageView:
        """
        Resolve and render the tab navigation for one request.

        Collects tabs, resolves the active tab, collects that tab's sub-tabs,
        resolves the active sub-tab and fires the matching actions, whose
        written output becomes the page body. With no tabs offered nothing
        is resolved or dispatched.

        Args:
            request: Requested tab state; defaults to an empty request.

        Returns:
            SettingsPageView describing the rendered navigation.
        """
        request = request or AdminRequest()
        tabs = self.registry.collect_tabs()
        if not tabs:
            logger.debug("No tabs offered; skipping navigation.")
            return SettingsPageView(
                title=self.config.page_title,
                info_text=self.config.info_text,
                tab=TabSelection(active_id=DEFAULT_TAB),
            )

        tab = resolve_tab(request.tab, tabs)
        subtabs = self.registry.collect_subtabs(tab.active_id, request.sub_tab)
        sub_tab = resolve_subtab(request.sub_tab, subtabs)

        logger.debug(
            "Resolved tab=%r sub_tab=%r (requested tab=%r sub_tab=%r)",
            tab.active_id,
            sub_tab.active_id,
            request.tab,
            request.sub_tab,
        )

        fired = self.dispatcher.dispatch(tab, sub_tab)
        return SettingsPageView(
            title=self.config.page_title,
            info_text=self.config.info_text,
            tab=tab,
            sub_tab=sub_tab,
            tabs=_tab_nav(tabs, tab),
            sub_tabs=_sub_tab_nav(subtabs, sub_tab),
            dispatched=tuple(fired),
            body=self.dispatcher.output.getvalue(),
        )


def _tab_nav(tabs: Sequence[TabDescriptor], selection: TabSelection) -> tuple[NavItem, ...]:
    return tuple(
        NavItem(id=tab.id, label=tab.label, url=tab.url, active=tab.id == selection.active_id)
        for tab in tabs
    )


def _sub_tab_nav(subtabs: Sequence[TabDescriptor], selection: SubTabSelection) -> tuple[NavItem, ...]:
    items = []
    for subtab in subtabs:
        active = subtab.id == selection.active_id
        items.append(NavItem(id=subtab.id, label=subtab.label, url=subtab.url, active=active, clickable=not active))
    return tuple(items)
