"""Limit and threshold constants for the TUI.

All limit values and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

SEARCH_HISTORY_SIZE_MIN: Final = 1
SEARCH_HISTORY_SIZE_MAX: Final = 10_000
MAX_RECORDS_MIN: Final = 1
MAX_RECORDS_MAX: Final = 100_000
PAGE_SIZE_MIN: Final = 1
PAGE_SIZE_MAX: Final = 10_000
VIEWPORT_HEIGHT_MIN: Final = 1

# ============================================================================
# Display limits
# ============================================================================

RECORD_PREVIEW_WIDTH: Final = 120

__all__ = [
    "MAX_RECORDS_MAX",
    "MAX_RECORDS_MIN",
    "PAGE_SIZE_MAX",
    "PAGE_SIZE_MIN",
    "RECORD_PREVIEW_WIDTH",
    "SEARCH_HISTORY_SIZE_MAX",
    "SEARCH_HISTORY_SIZE_MIN",
    "VIEWPORT_HEIGHT_MIN",
]
