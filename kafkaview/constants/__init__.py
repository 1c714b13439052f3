"""Constants module for the kafkaview TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, titles with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in kafkaview.keyboard module.
"""

from kafkaview.constants.defaults import (
    EXPORT_PATH_DEFAULT,
    MAX_RECORDS_DEFAULT,
    PAGE_SIZE_DEFAULT,
    SEARCH_HISTORY_SIZE_DEFAULT,
    THEME_DEFAULT,
    VIEWPORT_HEIGHT_DEFAULT,
)
from kafkaview.constants.enums import (
    LIST_PANELS,
    OVERLAY_PANELS,
    TEXT_PANELS,
    CommandName,
    FetchState,
    Panel,
    SearchPhase,
    Severity,
)
from kafkaview.constants.values import (
    APP_TITLE,
    PANEL_TITLES,
    SEARCH_VOCABULARY,
)

__all__ = [
    "APP_TITLE",
    "EXPORT_PATH_DEFAULT",
    "LIST_PANELS",
    "MAX_RECORDS_DEFAULT",
    "OVERLAY_PANELS",
    "PAGE_SIZE_DEFAULT",
    "PANEL_TITLES",
    "SEARCH_HISTORY_SIZE_DEFAULT",
    "SEARCH_VOCABULARY",
    "TEXT_PANELS",
    "THEME_DEFAULT",
    "VIEWPORT_HEIGHT_DEFAULT",
    "CommandName",
    "FetchState",
    "Panel",
    "SearchPhase",
    "Severity",
]
