"""TUI-specific pytest configuration.

Registers test speed markers:
- tui_fast: unit tests with fakes, no app lifecycle
- tui_slow: tests that run a real Textual app headlessly
"""

from __future__ import annotations


def pytest_configure(config):
    """Register TUI test markers."""
    config.addinivalue_line(
        "markers",
        "tui_fast: Fast unit tests with mocks/fakes, no app lifecycle (<100ms)",
    )
    config.addinivalue_line(
        "markers",
        "tui_slow: Slower tests with real app lifecycle (startup, mount, timers)",
    )
