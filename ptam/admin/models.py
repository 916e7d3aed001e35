"""Data models for admin tab navigation and the rendered settings page."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

_DESCRIPTOR_FIELDS = ("id", "label", "url", "action")


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if not value:
        return ""
    return str(value)


@dataclass(frozen=True)
class TabDescriptor:
    """One navigation entry contributed by a tab provider."""

    id: str = ""
    """Identifier matched against the request and used in URLs. Not unique."""

    label: str = ""
    url: str = ""

    action: str = ""
    """Action fired when this top-level entry is active; empty for none."""

    @classmethod
    def from_raw(cls, raw: Any) -> "TabDescriptor":
        """
        Normalize a provider entry into a descriptor.

        Accepts descriptors, mappings (``id`` or legacy ``get`` key) and
        attribute-style objects. Missing fields and falsy non-string values
        such as ``None`` or ``False`` become ``""``;
        entries of any other shape become an all-empty descriptor.
        """
        if isinstance(raw, TabDescriptor):
            return raw
        if isinstance(raw, Mapping):
            tab_id = raw.get("id")
            if tab_id is None:
                tab_id = raw.get("get")
            return cls(
                id=_text(tab_id),
                label=_text(raw.get("label")),
                url=_text(raw.get("url")),
                action=_text(raw.get("action")),
            )
        if any(hasattr(raw, name) for name in _DESCRIPTOR_FIELDS):
            return cls(**{name: _text(getattr(raw, name, None)) for name in _DESCRIPTOR_FIELDS})
        return cls()


def _is_descriptor_like(value: Any) -> bool:
    if isinstance(value, (TabDescriptor, Mapping)):
        return True
    return any(hasattr(value, name) for name in _DESCRIPTOR_FIELDS)


def normalize_tabs(raw: Any) -> Optional[list[TabDescriptor]]:
    """
    Convert a provider return value into an ordered descriptor list.

    ``None`` means "no tabs". A mapping whose values are descriptors (keyed by
    tab id) is read in value order.

    Returns:
        The descriptor list, or None when ``raw`` is not a tab collection at
        all (a string, a number, a single descriptor mapping).
    """
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        values = list(raw.values())
        if not all(_is_descriptor_like(value) for value in values):
            return None
        return [TabDescriptor.from_raw(value) for value in values]
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        return None
    return [TabDescriptor.from_raw(entry) for entry in raw]


@dataclass(frozen=True)
class TabSelection:
    """Outcome of top-level tab resolution."""

    active_id: str
    dispatch_action: Optional[str] = None
    matched: bool = False
    """True when a non-default requested id was found among the tabs."""


@dataclass(frozen=True)
class SubTabSelection:
    """Outcome of sub-tab resolution."""

    active_id: Optional[str] = None
    should_dispatch: bool = False


@dataclass(frozen=True)
class NavItem:
    """Single rendered navigation entry."""

    id: str
    label: str
    url: str
    active: bool = False
    clickable: bool = True


@dataclass(frozen=True)
class SettingsPageView:
    """Everything one render of the settings page produced."""

    title: str
    info_text: str
    tab: TabSelection
    sub_tab: SubTabSelection = field(default_factory=SubTabSelection)
    tabs: tuple[NavItem, ...] = ()
    sub_tabs: tuple[NavItem, ...] = ()
    dispatched: tuple[str, ...] = ()
    """Names of actions fired during the render, in firing order."""

    body: str = ""
    """Text written by the dispatched handlers."""

    @property
    def has_nav(self) -> bool:
        return bool(self.tabs)


@dataclass(frozen=True)
class ActionLink:
    """Link shown on the plugin list screen."""

    label: str
    url: str
    highlight: bool = False


@dataclass(frozen=True)
class MenuPage:
    """Admin menu registration for the settings page."""

    parent: str
    page_title: str
    menu_title: str
    capability: str
    menu_slug: str
