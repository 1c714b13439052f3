"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings that
work from any screen. Everything else goes through the dispatcher.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "quit", "Quit", priority=True),
    Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
