"""Browser screen - the single screen of kafkaview.

The screen owns no navigation state. Every key event is handed to
:class:`AppState`, the returned effects are executed, and the panels are
re-rendered from state.
"""

from __future__ import annotations

import asyncio
import logging
import time

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen

from kafkaview.constants.enums import LIST_PANELS, TEXT_PANELS, CommandName, Panel, Severity
from kafkaview.constants.timeouts import ERROR_NOTIFY_TIMEOUT, STATUS_NOTIFY_TIMEOUT
from kafkaview.constants.values import STATUS_EXPORTING
from kafkaview.controllers.records.controller import RecordsController
from kafkaview.exceptions import ExportError, KafkaViewError
from kafkaview.keyboard.dispatcher import Command, KeyPress
from kafkaview.models.state.app_state import AppState
from kafkaview.models.state.effects import (
    CopyToClipboard,
    Effect,
    ExportRecord,
    ExportRecords,
    FetchRecords,
    FetchSchemas,
    FetchTopics,
    OpenUrl,
)
from kafkaview.screens.browser.config import PANEL_IDS, STATUS_BAR_ID
from kafkaview.screens.browser.presenter import BrowserPresenter
from kafkaview.screens.mixins.worker_mixin import (
    ExportFailed,
    ExportFinished,
    RecordsFailed,
    RecordsLoaded,
    SchemasFailed,
    SchemasLoaded,
    TopicsFailed,
    TopicsLoaded,
    WorkerMixin,
)
from kafkaview.utils.browser import BrowserLauncher
from kafkaview.utils.clipboard import ClipboardSink
from kafkaview.utils.exporter import FileExporter
from kafkaview.widgets.panels import PANEL_WIDGETS, PanelWidget, StatusBar

logger = logging.getLogger(__name__)


class BrowserScreen(WorkerMixin, Screen[None]):
    """Search bar, records list, record details, schemas and overlays."""

    def __init__(
        self,
        state: AppState,
        controller: RecordsController,
        *,
        clipboard: ClipboardSink,
        browser: BrowserLauncher,
        exporter: FileExporter,
        search_on_start: bool = False,
    ) -> None:
        super().__init__()
        self.state = state
        self.controller = controller
        self.clipboard_sink = clipboard
        self.browser = browser
        self.exporter = exporter
        self.presenter = BrowserPresenter(state)
        self._search_on_start = search_on_start

    def compose(self) -> ComposeResult:
        yield PANEL_WIDGETS[Panel.SEARCH](id=PANEL_IDS[Panel.SEARCH])
        with Horizontal(id="body"):
            yield PANEL_WIDGETS[Panel.RECORDS](id=PANEL_IDS[Panel.RECORDS])
            with Vertical(id="detail-column"):
                yield PANEL_WIDGETS[Panel.RECORD_DETAIL](id=PANEL_IDS[Panel.RECORD_DETAIL])
                yield PANEL_WIDGETS[Panel.SCHEMAS](id=PANEL_IDS[Panel.SCHEMAS])
        for overlay in (Panel.TOPICS, Panel.HELP):
            yield PANEL_WIDGETS[overlay](id=PANEL_IDS[overlay])
        yield StatusBar(id=STATUS_BAR_ID)

    def on_mount(self) -> None:
        self.render_state()
        self.run_effects(self.state.apply(Command(CommandName.REFRESH_TOPICS)))

    def on_resize(self, _: events.Resize) -> None:
        self.call_after_refresh(self._sync_viewports)

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        """Route every key through the state; Textual's own focus keys are consumed."""
        effects = self.state.handle_key(KeyPress(event.key, event.character))
        self.run_effects(effects)
        self.render_state()
        event.stop()
        event.prevent_default()

    # =========================================================================
    # Effects
    # =========================================================================

    def run_effects(self, effects: list[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, FetchRecords):
                self._fetch_records(effect)
            elif isinstance(effect, FetchTopics):
                self._fetch_topics()
            elif isinstance(effect, FetchSchemas):
                self._fetch_schemas(effect)
            elif isinstance(effect, (ExportRecord, ExportRecords)):
                self._export(effect)
            else:
                self._run_inline(effect)

    def _run_inline(self, effect: Effect) -> None:
        try:
            if isinstance(effect, CopyToClipboard):
                self.clipboard_sink.copy(effect.text)
                message = f"Copied {effect.label} to clipboard"
            elif isinstance(effect, OpenUrl):
                self.browser.open(effect.url)
                message = f"Opened {effect.url}"
            else:
                raise TypeError(f"Unknown effect {effect!r}")
        except KafkaViewError as exc:
            self._report_failure(type(effect).__name__, str(exc))
            return
        self._report_success(message)

    def _report_success(self, message: str) -> None:
        self.state.set_status(message)
        self.notify(message, timeout=STATUS_NOTIFY_TIMEOUT)

    def _report_failure(self, operation: str, error: str) -> None:
        logger.warning("%s failed: %s", operation, error)
        self.state.set_status(error, Severity.ERROR)
        self.notify(error, severity="error", timeout=ERROR_NOTIFY_TIMEOUT)

    def _export(self, effect: ExportRecord | ExportRecords) -> None:
        async def export() -> None:
            started = time.monotonic()
            try:
                # File writes and fsync stay off the UI loop
                if isinstance(effect, ExportRecord):
                    path = await asyncio.to_thread(
                        self.exporter.write_record,
                        effect.record,
                        search_query=effect.search_query,
                    )
                    message = f"Exported record to {path}"
                else:
                    path = await asyncio.to_thread(
                        self.exporter.write_records,
                        list(effect.records),
                        search_query=effect.search_query,
                    )
                    message = f"Exported {len(effect.records)} record(s) to {path}"
            except ExportError as exc:
                self.post_message(ExportFailed(str(exc)))
                return
            self.post_message(ExportFinished(message, (time.monotonic() - started) * 1000))

        self.state.set_status(STATUS_EXPORTING)
        self.start_worker(export, name=f"export-{id(effect)}", group="export", exclusive=False)

    def _fetch_records(self, effect: FetchRecords) -> None:
        async def fetch() -> None:
            result = await self.controller.fetch_records(effect.topics, effect.query)
            if result.success:
                self.post_message(RecordsLoaded(effect.generation, result.data, result.duration_ms))
            else:
                self.post_message(RecordsFailed(effect.generation, result.error or "Fetch failed"))

        self.start_worker(fetch, name=f"fetch-records-{effect.generation}", group="records")

    def _fetch_topics(self) -> None:
        async def fetch() -> None:
            result = await self.controller.list_topics()
            if result.success:
                self.post_message(TopicsLoaded(result.data, result.duration_ms))
            else:
                self.post_message(TopicsFailed(result.error or "Listing topics failed"))

        self.start_worker(fetch, name="list-topics", group="topics")

    def _fetch_schemas(self, effect: FetchSchemas) -> None:
        async def fetch() -> None:
            result = await self.controller.fetch_schema(effect.topic)
            if result.success:
                self.post_message(SchemasLoaded(effect.request, result.data, result.duration_ms))
            else:
                self.post_message(
                    SchemasFailed(effect.request, result.error or "Fetching schemas failed")
                )

        self.start_worker(fetch, name=f"fetch-schema-{effect.topic}", group="schemas")

    # =========================================================================
    # Fetch completions
    # =========================================================================

    def on_records_loaded(self, message: RecordsLoaded) -> None:
        self.state.records_loaded(message.generation, message.records)
        self.render_state()

    def on_records_failed(self, message: RecordsFailed) -> None:
        if self.state.records_failed(message.generation, message.error):
            self.notify(message.error, severity="error", timeout=ERROR_NOTIFY_TIMEOUT)
        self.render_state()

    def on_topics_loaded(self, message: TopicsLoaded) -> None:
        self.state.topics_loaded(message.topics)
        if self._search_on_start:
            self._search_on_start = False
            self.run_effects(self.state.start_search())
        self.render_state()

    def on_topics_failed(self, message: TopicsFailed) -> None:
        self.state.topics_failed(message.error)
        self.notify(message.error, severity="error", timeout=ERROR_NOTIFY_TIMEOUT)
        self.render_state()

    def on_schemas_loaded(self, message: SchemasLoaded) -> None:
        self.state.schemas_loaded(message.request, message.schemas)
        self.render_state()

    def on_schemas_failed(self, message: SchemasFailed) -> None:
        if self.state.schemas_failed(message.request, message.error):
            self.notify(message.error, severity="error", timeout=ERROR_NOTIFY_TIMEOUT)
        self.render_state()

    def on_export_finished(self, message: ExportFinished) -> None:
        logger.info("%s (%.2fms)", message.message, message.duration_ms)
        self._report_success(message.message)
        self.render_state()

    def on_export_failed(self, message: ExportFailed) -> None:
        self._report_failure("Export", message.error)
        self.render_state()

    def watch_is_loading(self, _loading: bool) -> None:
        if self.is_mounted:
            self.query_one(f"#{STATUS_BAR_ID}", StatusBar).show(
                self.presenter.status_line(loading=self.is_loading)
            )

    # =========================================================================
    # Rendering
    # =========================================================================

    def panel(self, panel: Panel) -> PanelWidget:
        return self.query_one(f"#{PANEL_IDS[panel]}", PanelWidget)

    def _sync_viewports(self) -> None:
        """Match list and scroll viewports to the laid-out panel heights."""
        changed = False
        for panel in LIST_PANELS | TEXT_PANELS:
            widget = self.panel(panel)
            if not widget.display or widget.content_region.height <= 0:
                continue
            height = widget.viewport_height
            if panel in LIST_PANELS:
                current = self.state.selection(panel).viewport_height
            else:
                current = self.state.scroll_state(panel).viewport_height
            if height != current:
                self.state.set_viewport(panel, height)
                changed = True
        if changed:
            self.render_state()

    def render_state(self) -> None:
        """Redraw every panel from the current state."""
        state = self.state
        visible = set(state.panels.panels) | set(state.overlays.overlays)
        focus_target = state.focus_target
        for panel in Panel:
            widget = self.panel(panel)
            widget.display = panel in visible
            widget.set_focused(panel is focus_target)

        self.panel(Panel.SEARCH).update_lines([self.presenter.search_line()])
        self.panel(Panel.RECORDS).update_lines(self.presenter.record_lines())
        if Panel.TOPICS in visible:
            self.panel(Panel.TOPICS).update_lines(self.presenter.topic_lines())
        self._render_text(Panel.RECORD_DETAIL, self.presenter.record_detail_lines())
        if Panel.SCHEMAS in visible:
            self._render_text(Panel.SCHEMAS, self.presenter.schema_lines())
        if Panel.HELP in visible:
            self._render_text(Panel.HELP, self.presenter.help_lines())

        self.query_one(f"#{STATUS_BAR_ID}", StatusBar).show(
            self.presenter.status_line(loading=self.is_loading)
        )
        # Panels shown by this render get their real height after layout.
        self.call_after_refresh(self._sync_viewports)

    def _render_text(self, panel: Panel, lines: list[Text]) -> None:
        scroll = self.state.scroll_state(panel)
        scroll.set_content_length(len(lines))
        start = scroll.offset
        self.panel(panel).update_lines(lines[start : start + scroll.viewport_height])


__all__ = ["BrowserScreen"]
