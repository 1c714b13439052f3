"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
VIEWPORT_HEIGHT_DEFAULT: Final = 20

# ============================================================================
# Search defaults
# ============================================================================

SEARCH_HISTORY_SIZE_DEFAULT: Final = 100

# ============================================================================
# Fetch defaults
# ============================================================================

MAX_RECORDS_DEFAULT: Final = 1000
PAGE_SIZE_DEFAULT: Final = 100

# ============================================================================
# Collaborator defaults
# ============================================================================

EXPORT_PATH_DEFAULT: Final = "./exports"
RECORD_URL_TEMPLATE_DEFAULT: Final = ""
LOG_FILE_NAME: Final = "kafkaview.log"
SETTINGS_FILE_NAME: Final = "settings.yaml"

__all__ = [
    "EXPORT_PATH_DEFAULT",
    "LOG_FILE_NAME",
    "MAX_RECORDS_DEFAULT",
    "PAGE_SIZE_DEFAULT",
    "RECORD_URL_TEMPLATE_DEFAULT",
    "SEARCH_HISTORY_SIZE_DEFAULT",
    "SETTINGS_FILE_NAME",
    "THEME_DEFAULT",
    "VIEWPORT_HEIGHT_DEFAULT",
]
