"""Application state models."""

from kafkaview.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kafkaview.models.state.app_state import AppState, StatusMessage
from kafkaview.models.state.config_manager import ConfigManager
from kafkaview.models.state.overlay_stack import OverlayStack
from kafkaview.models.state.panel_stack import PanelStack
from kafkaview.models.state.search_state import SearchController, SearchState
from kafkaview.models.state.selection import ListSelection, ScrollState

__all__ = [
    "AppSettings",
    "AppState",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "ListSelection",
    "OverlayStack",
    "PanelStack",
    "ScrollState",
    "SearchController",
    "SearchState",
    "StatusMessage",
]
