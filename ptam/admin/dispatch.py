"""
Action dispatch for the resolved tab selection.

Top-level tabs name an action explicitly; sub-tabs are looked up in a handler
table keyed by the slugified ``(tab_id, subtab_id)`` pair. Unknown names and
unregistered pairs are silent no-ops.
"""

from __future__ import annotations

import re
import unicodedata
from collections import defaultdict
from typing import Callable, Optional

from ptam.admin.models import SubTabSelection, TabSelection
from ptam.logging import get_logger

logger = get_logger(__name__)

TabActionHandler = Callable[[str, Optional[str]], object]
SubTabHandler = Callable[[], object]

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(value: Optional[str]) -> str:
    """
    Reduce a tab identifier to a slug usable in action names.

    Accents are stripped, text is lowercased and every run of characters
    outside ``[a-z0-9]`` becomes a single ``-``.

    Example:
        >>> slugify("Post Types / Archives")
        'post-types-archives'
    """
    text = unicodedata.normalize("NFKD", str(value or ""))
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_ALNUM_RE.sub("-", text).strip("-")


def sub_tab_action_name(namespace: str, tab_id: str, subtab_id: Optional[str]) -> str:
    """Return the action name fired for an active sub-tab."""
    return f"{namespace}_admin_sub_tab_{slugify(tab_id)}_{slugify(subtab_id)}"


class ActionOutput:
    """
    Text written by handlers during one dispatch.

    Handlers have no return channel, so tabs that render body content write
    it here. The buffer is cleared at the start of every dispatch.
    """

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        if text:
            self._chunks.append(text)

    def getvalue(self) -> str:
        return "\n\n".join(self._chunks)

    def clear(self) -> None:
        self._chunks.clear()


class ActionDispatcher:
    """
    Registry of tab action handlers, populated at bootstrap.

    Handlers that render body content write it to ``output``; it holds the
    text of the most recent dispatch only.
    """

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        self._actions: dict[str, list[TabActionHandler]] = defaultdict(list)
        self._sub_tab_handlers: dict[tuple[str, str], list[SubTabHandler]] = defaultdict(list)
        self.output = ActionOutput()

    def add_action(self, name: str, handler: TabActionHandler) -> None:
        """
        Register a handler for a top-level tab action.

        Args:
            name: Action name as declared by a tab descriptor.
            handler: Called with ``(tab_id, subtab_id)``.

        Raises:
            ValueError: If the action name is empty.
        """
        name = str(name or "").strip()
        if not name:
            raise ValueError("Action name cannot be empty")
        self._actions[name].append(handler)

    def add_sub_tab_handler(self, tab_id: str, subtab_id: str, handler: SubTabHandler) -> None:
        """
        Register a handler for a ``(tab_id, subtab_id)`` pair.

        Keys are stored slugified, so ``("Settings", "General")`` and
        ``("settings", "general")`` share a slot.
        """
        self._sub_tab_handlers[(slugify(tab_id), slugify(subtab_id))].append(handler)

    def has_action(self, name: str) -> bool:
        return bool(self._actions.get(name))

    def has_sub_tab_handler(self, tab_id: str, subtab_id: Optional[str]) -> bool:
        return bool(self._sub_tab_handlers.get((slugify(tab_id), slugify(subtab_id))))

    def dispatch(self, tab: TabSelection, sub_tab: SubTabSelection) -> list[str]:
        """
        Fire the actions for a resolved selection.

        The sub-tab action fires first, then the top-level tab action.

        Returns:
            Names of the actions fired, whether or not any handler was registered.
        """
        self.output.clear()
        fired: list[str] = []

        if sub_tab.should_dispatch:
            name = sub_tab_action_name(self.namespace, tab.active_id, sub_tab.active_id)
            key = (slugify(tab.active_id), slugify(sub_tab.active_id))
            for handler in list(self._sub_tab_handlers.get(key, ())):
                self._invoke(name, handler)
            fired.append(name)

        if tab.dispatch_action:
            name = tab.dispatch_action
            for handler in list(self._actions.get(name, ())):
                self._invoke(name, handler, tab.active_id, sub_tab.active_id)
            fired.append(name)

        if fired:
            logger.debug("Dispatched actions: %s", ", ".join(fired))
        return fired

    def _invoke(self, name: str, handler: Callable[..., object], *args: object) -> None:
        try:
            handler(*args)
        except Exception:
            logger.exception("Handler for action '%s' failed.", name)
