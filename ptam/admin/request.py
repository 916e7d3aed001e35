"""Requested tab state read from the page's query parameters."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import parse_qs

_KEY_STRIP_RE = re.compile(r"[^a-z0-9_\-]")

TAB_PARAM = "tab"
SUB_TAB_PARAM = "subtab"


def sanitize_key(value: Any) -> str:
    """Lowercase a query value and drop everything but ``[a-z0-9_-]``."""
    return _KEY_STRIP_RE.sub("", str(value).lower())


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _clean(value: Any) -> Optional[str]:
    value = _first(value)
    if value is None:
        return None
    return sanitize_key(value) or None


@dataclass(frozen=True)
class AdminRequest:
    """Requested tab and sub-tab; ``None`` means the parameter was absent."""

    tab: Optional[str] = None
    sub_tab: Optional[str] = None

    @classmethod
    def from_query(cls, query: str | Mapping[str, Any] | None) -> "AdminRequest":
        """
        Read ``tab`` and ``subtab`` from a query string or parsed mapping.

        Example:
            >>> AdminRequest.from_query("page=custom-query-blocks&tab=Support")
            AdminRequest(tab='support', sub_tab=None)
        """
        if not query:
            return cls()
        if isinstance(query, str):
            params: Mapping[str, Any] = parse_qs(query.lstrip("?"), keep_blank_values=True)
        else:
            params = query

        return cls(
            tab=_clean(params.get(TAB_PARAM)),
            sub_tab=_clean(params.get(SUB_TAB_PARAM)),
        )
