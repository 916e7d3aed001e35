"""Pure presenters for TUI screens."""
