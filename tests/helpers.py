"""Small builders shared by the admin tests."""

from __future__ import annotations

from typing import Dict, Optional

from ptam.admin import TabDescriptor


def make_tabs(*ids: str, actions: Optional[Dict[str, str]] = None) -> list[TabDescriptor]:
    """Build descriptors for the given ids; labels are title-cased ids."""
    actions = actions or {}
    return [
        TabDescriptor(id=tab_id, label=tab_id.title(), url=f"?tab={tab_id}", action=actions.get(tab_id, ""))
        for tab_id in ids
    ]
