"""Keyboard bindings module.

This module provides all keyboard bindings for the kafkaview TUI.
Bindings are organized into three parts:

- app: App-level Textual bindings (APP_BINDINGS)
- navigation: Global, overlay and panel binding tables
- dispatcher: Key event -> Command resolution
"""

from kafkaview.keyboard.app import APP_BINDINGS
from kafkaview.keyboard.dispatcher import (
    Command,
    KeyPress,
    dispatch,
)
from kafkaview.keyboard.navigation import (
    GLOBAL_BINDINGS,
    HELP_BINDINGS,
    OVERLAY_BINDINGS,
    PANEL_BINDINGS,
    RECORD_DETAIL_BINDINGS,
    RECORDS_BINDINGS,
    SCHEMAS_BINDINGS,
    SEARCH_BINDINGS,
    TOPICS_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    "GLOBAL_BINDINGS",
    "HELP_BINDINGS",
    "OVERLAY_BINDINGS",
    "PANEL_BINDINGS",
    "RECORDS_BINDINGS",
    "RECORD_DETAIL_BINDINGS",
    "SCHEMAS_BINDINGS",
    "SEARCH_BINDINGS",
    "TOPICS_BINDINGS",
    "Command",
    "KeyPress",
    "dispatch",
]
