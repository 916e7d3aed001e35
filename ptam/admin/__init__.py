"""
Admin settings page: tab providers, resolution and action dispatch.
"""

from __future__ import annotations

from .dispatch import ActionDispatcher, ActionOutput, slugify, sub_tab_action_name
from .models import (
    ActionLink,
    MenuPage,
    NavItem,
    SettingsPageView,
    SubTabSelection,
    TabDescriptor,
    TabSelection,
)
from .registry import TabProviderRegistry
from .request import AdminRequest
from .resolver import resolve_subtab, resolve_tab
from .settings_page import AdminSettings
from .bootstrap import create_admin_settings

__all__ = [
    "ActionDispatcher",
    "ActionLink",
    "ActionOutput",
    "AdminRequest",
    "AdminSettings",
    "MenuPage",
    "NavItem",
    "SettingsPageView",
    "SubTabSelection",
    "TabDescriptor",
    "TabProviderRegistry",
    "TabSelection",
    "create_admin_settings",
    "resolve_subtab",
    "resolve_tab",
    "slugify",
    "sub_tab_action_name",
]
