"""User interfaces for the admin settings page.

- tui: Textual-based terminal UI
"""

from __future__ import annotations

__all__ = ["tui"]
