"""
Base abstraction for built-in admin tabs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial
from typing import Optional

from ptam.admin.dispatch import ActionDispatcher
from ptam.admin.models import TabDescriptor
from ptam.admin.registry import TabProviderRegistry
from ptam.admin.urls import settings_url
from ptam.config.models import AdminConfig


class BaseTab(ABC):
    """
    A tab that contributes itself (and optionally sub-tabs) to the page.

    Body content is rendered through the dispatcher: the tab's action handler
    and its ``(tab, sub_tab)`` handlers write ``body()`` to the dispatch
    output.
    """

    tab_id: str = "base"
    label: str = "Base"

    SUB_TABS: tuple[tuple[str, str], ...] = ()
    """``(id, label)`` pairs offered while this tab is active."""

    def __init__(self, config: AdminConfig) -> None:
        self.config = config

    def register(self, registry: TabProviderRegistry, dispatcher: ActionDispatcher) -> None:
        """Hook this tab's providers and body handlers into the page."""
        registry.add_tab_provider(self.add_tab)
        registry.add_sub_tab_provider(self.add_sub_tabs)

        action = self.action_name()
        if action:
            dispatcher.add_action(action, partial(self._write_body, dispatcher))
        for sub_id, _label in self.SUB_TABS:
            dispatcher.add_sub_tab_handler(
                self.tab_id,
                sub_id,
                partial(self._write_body, dispatcher, self.tab_id, sub_id),
            )

    def action_name(self) -> str:
        """Top-level action fired while this tab is active; empty for none."""
        return ""

    def descriptor(self) -> TabDescriptor:
        return TabDescriptor(
            id=self.tab_id,
            label=self.label,
            url=settings_url(self.config, self.tab_id),
            action=self.action_name(),
        )

    def add_tab(self, tabs: list[TabDescriptor]) -> list[TabDescriptor]:
        return [*tabs, self.descriptor()]

    def add_sub_tabs(
        self,
        sub_tabs: list[TabDescriptor],
        tab_id: str,
        sub_tab_id: Optional[str],
    ) -> list[TabDescriptor]:
        if tab_id != self.tab_id or not self.SUB_TABS:
            return sub_tabs
        return [
            *sub_tabs,
            *(
                TabDescriptor(id=sub_id, label=label, url=settings_url(self.config, self.tab_id, sub_id))
                for sub_id, label in self.SUB_TABS
            ),
        ]

    def _write_body(self, dispatcher: ActionDispatcher, tab_id: str, sub_tab_id: Optional[str]) -> None:
        dispatcher.output.write(self.body(tab_id, sub_tab_id))

    @abstractmethod
    def body(self, tab_id: str, sub_tab_id: Optional[str]) -> str:
        """
        Text shown in the page body while this tab is active.

        Args:
            tab_id: Active tab id.
            sub_tab_id: Active sub-tab id, or None.
        """
