"""The "Support" tab."""

from __future__ import annotations

from typing import Optional

from ptam.admin.tabs.base import BaseTab


class SupportTab(BaseTab):
    tab_id = "support"
    label = "Support"

    def action_name(self) -> str:
        return f"{self.config.namespace}_admin_tab_support"

    def body(self, tab_id: str, sub_tab_id: Optional[str]) -> str:
        return (
            f"Need help? Visit the support forums: {self.config.support_url}\n"
            f"Want more? Archive Pages Pro: {self.config.pro_url}"
        )
