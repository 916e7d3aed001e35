"""
Configuration data model for the admin settings screen.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .constants import (
    DEFAULT_ADMIN_URL,
    DEFAULT_CAPABILITY,
    DEFAULT_INFO_TEXT,
    DEFAULT_NAMESPACE,
    DEFAULT_PAGE_SLUG,
    DEFAULT_PAGE_TITLE,
    DEFAULT_PARENT_PAGE,
    DEFAULT_PLUGIN_FILE,
    DEFAULT_PRO_URL,
    DEFAULT_SUPPORT_URL,
    DEFAULT_TAB,
)

_NAMESPACE_RE = re.compile(r"^[a-z][a-z0-9_]*$")


@dataclass
class AdminConfig:
    """
    Settings that shape the admin page: identifiers, titles and link targets.
    """

    namespace: str = DEFAULT_NAMESPACE
    """Prefix for extension-point and action names (``<namespace>_admin_sub_tab_...``)."""

    page_slug: str = DEFAULT_PAGE_SLUG
    """Menu slug used as the ``page`` query parameter."""

    page_title: str = DEFAULT_PAGE_TITLE
    """Title shown in the page header and menu."""

    menu_title: str = ""
    """Menu label; follows ``page_title`` when empty."""

    parent_page: str = DEFAULT_PARENT_PAGE
    """Admin screen the settings page is nested under."""

    capability: str = DEFAULT_CAPABILITY

    admin_url: str = DEFAULT_ADMIN_URL
    """Base URL of the admin area, without trailing slash."""

    plugin_file: str = DEFAULT_PLUGIN_FILE
    """Plugin basename used to match plugin-list rows."""

    pro_url: str = DEFAULT_PRO_URL
    support_url: str = DEFAULT_SUPPORT_URL
    info_text: str = DEFAULT_INFO_TEXT

    default_tab: str = DEFAULT_TAB
    """Tab linked from the plugin list's "Settings" action."""

    config_path: Optional[Path] = field(default=None, compare=False)
    """File the configuration was loaded from, if any."""

    def __post_init__(self) -> None:
        self.namespace = str(self.namespace or "").strip()
        self.page_slug = str(self.page_slug or "").strip()
        self.page_title = str(self.page_title or "").strip()
        self.menu_title = str(self.menu_title or "").strip() or self.page_title
        self.admin_url = str(self.admin_url or "").strip().rstrip("/")
        self.default_tab = str(self.default_tab or "").strip() or DEFAULT_TAB

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If a required field is empty or malformed.
        """
        if not _NAMESPACE_RE.match(self.namespace):
            raise ValueError(
                f"namespace must start with a letter and contain only lowercase "
                f"letters, digits or underscores, got {self.namespace!r}"
            )
        if not self.page_slug:
            raise ValueError("page_slug is required")
        if not self.page_title:
            raise ValueError("page_title is required")
        if not self.plugin_file:
            raise ValueError("plugin_file is required")
