"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

from kafkaview.constants.enums import Panel

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "kafkaview"
CONFIG_DIR_ENV: Final = "KAFKAVIEW_CONFIG_DIR"

# ============================================================================
# Panel titles
# ============================================================================

PANEL_TITLES: Final[dict[Panel, str]] = {
    Panel.TOPICS: "Topics",
    Panel.RECORDS: "Records",
    Panel.RECORD_DETAIL: "Record details",
    Panel.SCHEMAS: "Schemas",
    Panel.SEARCH: "Search",
    Panel.HELP: "Help",
}

# ============================================================================
# Status messages
# ============================================================================

STATUS_FETCHING_RECORDS: Final = "Fetching records..."
STATUS_EXPORTING: Final = "Exporting..."
STATUS_FETCHING_TOPICS: Final = "Refreshing topics..."
STATUS_NO_RECORD: Final = "No record selected"
STATUS_NO_SCHEMAS: Final = "This record has no schema"
STATUS_NO_URL_TEMPLATE: Final = "No record URL template configured"
STATUS_NO_TOPICS: Final = "No topics available"

# ============================================================================
# Search vocabulary (autocomplete)
# ============================================================================

SEARCH_VOCABULARY: Final[tuple[str, ...]] = (
    "topic",
    "offset",
    "key",
    "value",
    "partition",
    "timestamp",
    "size",
    "headers",
    "contains",
    "starts with",
    "limit",
    "from",
    "begin",
    "end",
    "order by",
    "asc",
    "desc",
)

__all__ = [
    "APP_TITLE",
    "CONFIG_DIR_ENV",
    "PANEL_TITLES",
    "SEARCH_VOCABULARY",
    "STATUS_EXPORTING",
    "STATUS_FETCHING_RECORDS",
    "STATUS_FETCHING_TOPICS",
    "STATUS_NO_RECORD",
    "STATUS_NO_SCHEMAS",
    "STATUS_NO_TOPICS",
    "STATUS_NO_URL_TEMPLATE",
]
