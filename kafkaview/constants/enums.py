"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Panel Enums
# =============================================================================


class Panel(Enum):
    """Navigable view areas of the browser."""

    TOPICS = "topics"
    RECORDS = "records"
    RECORD_DETAIL = "record_detail"
    SCHEMAS = "schemas"
    SEARCH = "search"
    HELP = "help"


# Panels that can only be shown stacked above the layout.
OVERLAY_PANELS: frozenset[Panel] = frozenset({Panel.TOPICS, Panel.HELP})

# Panels that keep a cursor over a list of items.
LIST_PANELS: frozenset[Panel] = frozenset({Panel.TOPICS, Panel.RECORDS})

# Panels that scroll over lines of text.
TEXT_PANELS: frozenset[Panel] = frozenset(
    {Panel.RECORD_DETAIL, Panel.SCHEMAS, Panel.HELP}
)


# =============================================================================
# Search Enums
# =============================================================================


class SearchPhase(Enum):
    """Lifecycle of the search bar."""

    IDLE = "idle"
    EDITING = "editing"
    SUBMITTED = "submitted"


# =============================================================================
# Command Enums
# =============================================================================


class CommandName(Enum):
    """Commands produced by the input dispatcher.

    Values are the action names used in the keybinding tables.
    """

    # Global
    FOCUS_NEXT = "focus_next"
    FOCUS_PREVIOUS = "focus_previous"
    FOCUS_SEARCH = "focus_search"
    TOGGLE_HELP = "toggle_help"
    TOGGLE_TOPICS = "toggle_topics"
    DISMISS = "dismiss"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SCROLL_TO_TOP = "scroll_to_top"
    SCROLL_TO_BOTTOM = "scroll_to_bottom"

    # Topics
    TOGGLE_SELECT = "toggle_select"
    CLEAR_SELECTION = "clear_selection"
    REFRESH_TOPICS = "refresh_topics"
    CONFIRM_TOPICS = "confirm_topics"

    # Records / record detail
    SHOW_RECORD = "show_record"
    PREVIOUS_RECORD = "previous_record"
    NEXT_RECORD = "next_record"
    OPEN_RECORD = "open_record"
    SHOW_SCHEMAS = "show_schemas"
    COPY_RECORD = "copy_record"
    EXPORT_RECORD = "export_record"
    EXPORT_RECORDS = "export_records"

    # Schemas
    COPY_SCHEMAS = "copy_schemas"

    # Search
    APPEND = "append"
    BACKSPACE = "backspace"
    HISTORY_PREVIOUS = "history_previous"
    HISTORY_NEXT = "history_next"
    ACCEPT_AUTOCOMPLETE = "accept_autocomplete"
    SUBMIT = "submit"
    CANCEL_SEARCH = "cancel_search"


# =============================================================================
# Status Enums
# =============================================================================


class Severity(Enum):
    """Severity levels for status messages."""

    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


class FetchState(Enum):
    """Data fetch state values."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "LIST_PANELS",
    "OVERLAY_PANELS",
    "TEXT_PANELS",
    "CommandName",
    "FetchState",
    "Panel",
    "SearchPhase",
    "Severity",
]
