"""Panel-specific keyboard bindings.

Every table maps a Textual key name to a command name (the value of a
:class:`~kafkaview.constants.enums.CommandName`) and a help description.
The dispatcher consults them in this order:

1. With an overlay open: that overlay's table, then OVERLAY_BINDINGS.
2. Otherwise: the focused panel's table, then (Search only) printable
   characters, then GLOBAL_BINDINGS.
"""

from typing import Annotated

from kafkaview.constants.enums import Panel

BindingTable = list[Annotated[tuple[str, str, str], "key, action, description"]]

# ============================================================================
# Global Bindings
# ============================================================================

GLOBAL_BINDINGS: BindingTable = [
    ("tab", "focus_next", "Focus next window"),
    ("shift+tab", "focus_previous", "Focus previous window"),
    ("slash", "focus_search", "Focus search input"),
    ("ctrl+h", "toggle_help", "Show/hide help"),
    # Terminals deliver Ctrl+H as the backspace byte
    ("backspace", "toggle_help", "Show/hide help"),
    ("ctrl+o", "toggle_topics", "Show/hide topics"),
    ("left_square_bracket", "scroll_to_top", "Go to top"),
    ("right_square_bracket", "scroll_to_bottom", "Go to bottom"),
    ("j", "move_down", "Scroll down"),
    ("k", "move_up", "Scroll up"),
    ("down", "move_down", "Scroll down"),
    ("up", "move_up", "Scroll up"),
    ("escape", "dismiss", "Close the window"),
]

# ============================================================================
# Overlay Bindings (apply to whichever overlay is on top)
# ============================================================================

OVERLAY_BINDINGS: BindingTable = [
    ("escape", "dismiss", "Close the window"),
    ("ctrl+h", "toggle_help", "Show/hide help"),
    ("backspace", "toggle_help", "Show/hide help"),
    ("ctrl+o", "toggle_topics", "Show/hide topics"),
]

# ============================================================================
# Topics Bindings
# ============================================================================

TOPICS_BINDINGS: BindingTable = [
    ("j", "move_down", "Next topic"),
    ("k", "move_up", "Previous topic"),
    ("down", "move_down", "Next topic"),
    ("up", "move_up", "Previous topic"),
    ("left_square_bracket", "scroll_to_top", "First topic"),
    ("right_square_bracket", "scroll_to_bottom", "Last topic"),
    ("space", "toggle_select", "Select/unselect topic"),
    ("ctrl+u", "clear_selection", "Unselect all topics"),
    ("ctrl+p", "refresh_topics", "Refresh topics"),
    ("enter", "confirm_topics", "Search selected topics"),
]

# ============================================================================
# Help Bindings
# ============================================================================

HELP_BINDINGS: BindingTable = [
    ("j", "move_down", "Scroll down"),
    ("k", "move_up", "Scroll up"),
    ("down", "move_down", "Scroll down"),
    ("up", "move_up", "Scroll up"),
    ("left_square_bracket", "scroll_to_top", "Go to top"),
    ("right_square_bracket", "scroll_to_bottom", "Go to bottom"),
]

# ============================================================================
# Records Bindings
# ============================================================================

RECORDS_BINDINGS: BindingTable = [
    ("enter", "show_record", "Show record"),
    ("c", "copy_record", "Copy"),
    ("e", "export_record", "Export"),
    ("E", "export_records", "Export all"),
    ("o", "open_record", "Open"),
]

# ============================================================================
# Record Detail Bindings
# ============================================================================

RECORD_DETAIL_BINDINGS: BindingTable = [
    ("up", "previous_record", "Previous record"),
    ("down", "next_record", "Next record"),
    ("o", "open_record", "Open"),
    ("s", "show_schemas", "Schemas"),
    ("c", "copy_record", "Copy"),
    ("e", "export_record", "Export"),
]

# ============================================================================
# Schemas Bindings
# ============================================================================

SCHEMAS_BINDINGS: BindingTable = [
    ("c", "copy_schemas", "Copy"),
]

# ============================================================================
# Search Bindings
# ============================================================================

SEARCH_BINDINGS: BindingTable = [
    ("enter", "submit", "Search"),
    ("backspace", "backspace", "Delete character"),
    ("up", "history_previous", "Previous query"),
    ("down", "history_next", "Next query"),
    ("right", "accept_autocomplete", "Accept suggestion"),
    ("escape", "cancel_search", "Cancel"),
]

PANEL_BINDINGS: dict[Panel, BindingTable] = {
    Panel.TOPICS: TOPICS_BINDINGS,
    Panel.RECORDS: RECORDS_BINDINGS,
    Panel.RECORD_DETAIL: RECORD_DETAIL_BINDINGS,
    Panel.SCHEMAS: SCHEMAS_BINDINGS,
    Panel.SEARCH: SEARCH_BINDINGS,
    Panel.HELP: HELP_BINDINGS,
}

# Display names used when rendering the tables in the help overlay.
KEY_DISPLAY: dict[str, str] = {
    "tab": "TAB",
    "shift+tab": "SHIFT + TAB",
    "slash": "/",
    "ctrl+h": "CTRL + H",
    "ctrl+o": "CTRL + O",
    "ctrl+u": "CTRL + U",
    "ctrl+p": "CTRL + P",
    "left_square_bracket": "[",
    "right_square_bracket": "]",
    "escape": "ESC",
    "enter": "ENTER",
    "space": "SPACE",
    "backspace": "BACKSPACE",
    "up": "↑",
    "down": "↓",
    "right": "→",
    "j": "J",
    "k": "K",
    "E": "SHIFT + E",
}


def display_key(key: str) -> str:
    """Human-readable form of a Textual key name."""
    return KEY_DISPLAY.get(key, key.upper())


__all__ = [
    "GLOBAL_BINDINGS",
    "HELP_BINDINGS",
    "KEY_DISPLAY",
    "OVERLAY_BINDINGS",
    "PANEL_BINDINGS",
    "RECORDS_BINDINGS",
    "RECORD_DETAIL_BINDINGS",
    "SCHEMAS_BINDINGS",
    "SEARCH_BINDINGS",
    "TOPICS_BINDINGS",
    "BindingTable",
    "display_key",
]
