"""
Application bootstrap for the admin settings page.

Builds the provider registry and action dispatcher, registers the built-in
tabs and hands back a ready ``AdminSettings``.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ptam.admin.dispatch import ActionDispatcher
from ptam.admin.registry import TabProviderRegistry
from ptam.admin.settings_page import AdminSettings
from ptam.admin.tabs import BUILTIN_TABS, BaseTab
from ptam.config.models import AdminConfig
from ptam.logging import get_logger

logger = get_logger(__name__)


def create_admin_settings(
    config: Optional[AdminConfig] = None,
    *,
    tab_classes: Iterable[type[BaseTab]] = BUILTIN_TABS,
) -> AdminSettings:
    """
    Wire a settings page with its built-in tabs.

    Args:
        config: Admin configuration; defaults to ``AdminConfig()``.
        tab_classes: Built-in tab classes, registered in order.

    Returns:
        AdminSettings whose registry and dispatcher accept further
        providers and handlers before the first render.
    """
    config = config or AdminConfig()
    registry = TabProviderRegistry()
    dispatcher = ActionDispatcher(config.namespace)

    tab_ids: list[str] = []
    for tab_class in tab_classes:
        tab = tab_class(config)
        tab.register(registry, dispatcher)
        tab_ids.append(tab.tab_id)

    logger.info("Admin settings ready with tabs: %s", ", ".join(tab_ids) or "(none)")
    return AdminSettings(config, registry=registry, dispatcher=dispatcher)
