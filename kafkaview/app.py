"""Main application class for the kafkaview TUI."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from kafkaview.constants import APP_TITLE, THEME_DEFAULT
from kafkaview.controllers.base.base_controller import RecordSource
from kafkaview.controllers.records.controller import RecordsController
from kafkaview.controllers.records.memory_source import InMemoryRecordSource
from kafkaview.keyboard.app import APP_BINDINGS
from kafkaview.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)
from kafkaview.models.state.app_state import AppState
from kafkaview.models.state.config_manager import ConfigManager
from kafkaview.screens.browser.browser_screen import BrowserScreen
from kafkaview.utils.browser import BrowserLauncher, WebBrowserLauncher
from kafkaview.utils.clipboard import ClipboardSink, TextualClipboard
from kafkaview.utils.exporter import FileExporter

logger = logging.getLogger(__name__)


class KafkaViewApp(App[None]):
    """Main TUI application for kafkaview."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS
    # ctrl+p refreshes topics
    ENABLE_COMMAND_PALETTE = False

    settings: AppSettings
    state: AppState

    def __init__(
        self,
        source: RecordSource | None = None,
        *,
        topics: Sequence[str] = (),
        query: str | None = None,
        config_path: Path | None = None,
        clipboard: ClipboardSink | None = None,
        browser: BrowserLauncher | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.config_path = config_path
        self._initial_query = query
        self._preselected_topics = list(topics)

        self._load_settings()
        self.state = AppState(self.settings, preselected_topics=self._preselected_topics)
        if query:
            self.state.search.set_query(query)

        self.controller = RecordsController(
            source or InMemoryRecordSource(page_size=self.settings.page_size),
            max_records=self.settings.max_records,
        )
        self.clipboard_sink = clipboard or TextualClipboard(self)
        self.browser = browser or WebBrowserLauncher()
        self.exporter = FileExporter(self.settings.export_path)

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings = AppSettings()

        theme_name = self.settings.theme.strip()
        if theme_name not in self.available_themes:
            logger.warning("Unknown theme %r, using %s", theme_name, THEME_DEFAULT)
            theme_name = THEME_DEFAULT
        self.theme = theme_name

    def on_mount(self) -> None:
        self.push_screen(
            BrowserScreen(
                self.state,
                self.controller,
                clipboard=self.clipboard_sink,
                browser=self.browser,
                exporter=self.exporter,
                search_on_start=bool(self._initial_query or self._preselected_topics),
            )
        )

    def on_unmount(self) -> None:
        self.save_settings()

    def save_settings(self) -> bool:
        """Persist settings (search history included); False on failure."""
        try:
            ConfigManager.save(self.settings, self.config_path)
        except ConfigSaveError as exc:
            logger.error("Cannot save settings: %s", exc)
            return False
        return True


__all__ = ["KafkaViewApp"]
