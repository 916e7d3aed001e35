"""The default "Settings" tab and its sub-tabs."""

from __future__ import annotations

from typing import Optional

from ptam.admin.tabs.base import BaseTab
from ptam.config.constants import DEFAULT_TAB


class SettingsTab(BaseTab):
    tab_id = DEFAULT_TAB
    label = "Settings"

    SUB_TABS = (
        ("general", "General"),
        ("license", "License"),
    )

    _BODIES = {
        "general": "Archive mapping and query block options.",
        "license": "Custom Query Blocks is free software. Upgrade to Archive Pages Pro for more layouts.",
    }

    def body(self, tab_id: str, sub_tab_id: Optional[str]) -> str:
        return self._BODIES.get(sub_tab_id or "", "")
