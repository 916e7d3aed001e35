"""Built-in tabs shipped with the settings page."""

from __future__ import annotations

from .base import BaseTab
from .settings import SettingsTab
from .support import SupportTab

BUILTIN_TABS: tuple[type[BaseTab], ...] = (SettingsTab, SupportTab)

__all__ = ["BUILTIN_TABS", "BaseTab", "SettingsTab", "SupportTab"]
