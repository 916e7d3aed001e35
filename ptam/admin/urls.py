"""URL helpers for the settings page."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlencode

from ptam.admin.request import SUB_TAB_PARAM, TAB_PARAM
from ptam.config.models import AdminConfig


def settings_url(config: AdminConfig, tab: Optional[str] = None, sub_tab: Optional[str] = None) -> str:
    """
    Build the admin URL of the settings page.

    Example:
        >>> settings_url(AdminConfig(), "settings", "general")
        '/wp-admin/options-general.php?page=custom-query-blocks&tab=settings&subtab=general'
    """
    params = [("page", config.page_slug)]
    if tab:
        params.append((TAB_PARAM, tab))
    if sub_tab:
        params.append((SUB_TAB_PARAM, sub_tab))
    return f"{config.admin_url}/{config.parent_page}?{urlencode(params)}"
