"""
Active tab and sub-tab resolution for the settings page.

Both resolvers are pure: they take the requested identifier and the ordered
descriptors offered for this render and never raise.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ptam.admin.models import SubTabSelection, TabDescriptor, TabSelection
from ptam.config.constants import DEFAULT_TAB
from ptam.logging import get_logger

logger = get_logger(__name__)


def resolve_tab(requested_id: Optional[str], tabs: Sequence[TabDescriptor]) -> TabSelection:
    """
    Resolve the active top-level tab.

    A missing request means ``"settings"``. A request for any other id is
    honoured only when some tab carries that id; otherwise the page falls back
    to ``"settings"``. Every tab whose id equals the resolved id overwrites the
    pending dispatch action, so with duplicate ids the last one wins.

    Args:
        requested_id: Tab id from the request, or None.
        tabs: Tabs in render order.

    Returns:
        TabSelection; ``active_id`` is never None.
    """
    requested = DEFAULT_TAB if requested_id is None else requested_id

    matched = False
    if requested == DEFAULT_TAB:
        active_id = DEFAULT_TAB
    else:
        matched = any(tab.id == requested for tab in tabs)
        active_id = requested if matched else DEFAULT_TAB
        if not matched:
            logger.debug("Requested tab %r not offered; falling back to %r", requested, DEFAULT_TAB)

    dispatch_action: Optional[str] = None
    for tab in tabs:
        if tab.id == active_id:
            dispatch_action = tab.action or None

    return TabSelection(active_id=active_id, dispatch_action=dispatch_action, matched=matched)


def resolve_subtab(requested_id: Optional[str], subtabs: Sequence[TabDescriptor]) -> SubTabSelection:
    """
    Resolve the active sub-tab within the active tab.

    Matching is exact and case-sensitive. Unknown or missing requests fall
    back to the first-listed sub-tab.

    Args:
        requested_id: Sub-tab id from the request, or None.
        subtabs: Sub-tabs offered for the active tab, in render order.

    Returns:
        ``SubTabSelection(None, False)`` when there are no sub-tabs, otherwise
        the active id with ``should_dispatch`` set.
    """
    if not subtabs:
        return SubTabSelection()

    requested = "" if requested_id is None else requested_id
    first_id = subtabs[0].id

    if requested == first_id:
        return SubTabSelection(active_id=requested, should_dispatch=True)

    if any(subtab.id == requested for subtab in subtabs):
        return SubTabSelection(active_id=requested, should_dispatch=True)

    logger.debug("Requested sub-tab %r not offered; falling back to %r", requested, first_id)
    return SubTabSelection(active_id=first_id, should_dispatch=True)
