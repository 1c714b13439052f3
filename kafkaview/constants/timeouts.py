"""Timeout constants for the TUI.

All timeout values for record source requests and notifications.
"""

from typing import Final

# ============================================================================
# Record source timeouts (float, in seconds)
# ============================================================================

LIST_TOPICS_TIMEOUT: Final = 15.0
FETCH_RECORDS_TIMEOUT: Final = 60.0
FETCH_SCHEMA_TIMEOUT: Final = 15.0

# ============================================================================
# Notification timeouts (float, in seconds)
# ============================================================================

STATUS_NOTIFY_TIMEOUT: Final = 4.0
ERROR_NOTIFY_TIMEOUT: Final = 8.0

__all__ = [
    "ERROR_NOTIFY_TIMEOUT",
    "FETCH_RECORDS_TIMEOUT",
    "FETCH_SCHEMA_TIMEOUT",
    "LIST_TOPICS_TIMEOUT",
    "STATUS_NOTIFY_TIMEOUT",
]
