"""
Registry of tab and sub-tab providers for the settings page.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Generic, Optional, TypeVar

from ptam.admin.models import TabDescriptor, normalize_tabs
from ptam.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PRIORITY = 10

TabProvider = Callable[[list[TabDescriptor]], Any]
"""Receives the tabs collected so far and returns the new list."""

SubTabProvider = Callable[[list[TabDescriptor], str, Optional[str]], Any]
"""Receives the sub-tabs collected so far, the active tab id and the requested sub-tab id."""

P = TypeVar("P")


@dataclass(frozen=True)
class _Registration(Generic[P]):
    priority: int
    sequence: int
    provider: P


class TabProviderRegistry:
    """
    Ordered chain of providers that build the tab and sub-tab lists.

    Providers run in ``(priority, registration order)`` order. Each one gets
    the list accumulated so far and returns the list to pass on, so it can
    append, reorder or remove entries. A ``None`` return empties the list; a
    mapping of descriptors is read in value order. A provider that raises, or
    returns something that is not a tab collection, is logged and skipped.
    """

    def __init__(self) -> None:
        self._sequence = count()
        self._tab_providers: list[_Registration[TabProvider]] = []
        self._sub_tab_providers: list[_Registration[SubTabProvider]] = []

    def add_tab_provider(self, provider: TabProvider, *, priority: int = DEFAULT_PRIORITY) -> None:
        """Register a top-level tab provider."""
        self._tab_providers.append(_Registration(priority, next(self._sequence), provider))
        self._tab_providers.sort(key=lambda reg: (reg.priority, reg.sequence))

    def add_sub_tab_provider(self, provider: SubTabProvider, *, priority: int = DEFAULT_PRIORITY) -> None:
        """Register a sub-tab provider."""
        self._sub_tab_providers.append(_Registration(priority, next(self._sequence), provider))
        self._sub_tab_providers.sort(key=lambda reg: (reg.priority, reg.sequence))

    def collect_tabs(self) -> list[TabDescriptor]:
        """
        Build the top-level tab list for one render.

        Returns:
            Fresh list of descriptors in render order.
        """
        tabs: list[TabDescriptor] = []
        for registration in self._tab_providers:
            try:
                result = registration.provider(list(tabs))
            except Exception:
                logger.exception("Tab provider %r failed; keeping previous tabs.", registration.provider)
                continue
            normalized = normalize_tabs(result)
            if normalized is None:
                logger.warning(
                    "Tab provider %r returned %s, not a tab list; keeping previous tabs.",
                    registration.provider,
                    type(result).__name__,
                )
                continue
            tabs = normalized
        return tabs

    def collect_subtabs(self, tab_id: str, subtab_id: Optional[str]) -> list[TabDescriptor]:
        """
        Build the sub-tab list for the active tab.

        Args:
            tab_id: Active top-level tab id.
            subtab_id: Requested sub-tab id, or None.

        Returns:
            Fresh list of descriptors in render order.
        """
        subtabs: list[TabDescriptor] = []
        for registration in self._sub_tab_providers:
            try:
                result = registration.provider(list(subtabs), tab_id, subtab_id)
            except Exception:
                logger.exception("Sub-tab provider %r failed; keeping previous sub-tabs.", registration.provider)
                continue
            normalized = normalize_tabs(result)
            if normalized is None:
                logger.warning(
                    "Sub-tab provider %r returned %s, not a tab list; keeping previous sub-tabs.",
                    registration.provider,
                    type(result).__name__,
                )
                continue
            subtabs = normalized
        return subtabs

    def __len__(self) -> int:
        return len(self._tab_providers) + len(self._sub_tab_providers)
