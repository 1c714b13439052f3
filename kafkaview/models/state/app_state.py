"""Browser state - the single place where navigation state changes.

Key events are dispatched into commands, commands are applied here, and the
returned effects are executed by the screen. Fetch completions come back
through :meth:`AppState.records_loaded` and friends on the same event loop,
so state is only ever mutated by one consumer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kafkaview.constants.enums import (
    LIST_PANELS,
    TEXT_PANELS,
    CommandName,
    FetchState,
    Panel,
    SearchPhase,
    Severity,
)
from kafkaview.constants.values import (
    STATUS_FETCHING_RECORDS,
    STATUS_FETCHING_TOPICS,
    STATUS_NO_RECORD,
    STATUS_NO_SCHEMAS,
    STATUS_NO_TOPICS,
    STATUS_NO_URL_TEMPLATE,
)
from kafkaview.exceptions import BrowserError
from kafkaview.keyboard.dispatcher import Command, KeyPress, dispatch
from kafkaview.models.core.records import KafkaRecord, SchemaDetail, TopicInfo
from kafkaview.models.state.app_settings import AppSettings
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
from kafkaview.models.state.overlay_stack import OverlayStack
from kafkaview.models.state.panel_stack import PanelStack
from kafkaview.models.state.search_state import SearchController
from kafkaview.models.state.selection import ListSelection, ScrollState
from kafkaview.utils.browser import build_record_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusMessage:
    """Transient message shown in the status bar."""

    text: str
    severity: Severity = Severity.INFORMATION


def _record_id(record: KafkaRecord) -> tuple[str, int, int]:
    return (record.topic, record.partition, record.offset)

class AppState:
    """Panels, overlays, selections, search and loaded data."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        preselected_topics: Iterable[str] = (),
    ) -> None:
        self.settings = settings or AppSettings()
        self.panels = PanelStack()
        self.overlays = OverlayStack()
        self.search = SearchController(
            self.settings.search_history,
            max_history=self.settings.search_history_size,
        )
        self.topics: list[TopicInfo] = []
        self.records: list[KafkaRecord] = []
        self.schemas: SchemaDetail | None = None
        self.status: StatusMessage | None = None
        self.fetch_state = FetchState.IDLE
        self._generation = 0
        self._schema_request = 0
        self._schema_record: tuple[str, int, int] | None = None
        self._preselected_topics = list(preselected_topics)
        self._list_selections: dict[Panel, ListSelection] = {}
        self._scroll_states: dict[Panel, ScrollState] = {}
        self._handlers: dict[CommandName, Callable[[Command], list[Effect]]] = {
            CommandName.FOCUS_NEXT: self._focus_next,
            CommandName.FOCUS_PREVIOUS: self._focus_previous,
            CommandName.FOCUS_SEARCH: self._focus_search,
            CommandName.TOGGLE_HELP: self._toggle_help,
            CommandName.TOGGLE_TOPICS: self._toggle_topics,
            CommandName.DISMISS: self._dismiss,
            CommandName.MOVE_UP: self._move_up,
            CommandName.MOVE_DOWN: self._move_down,
            CommandName.SCROLL_TO_TOP: self._scroll_to_top,
            CommandName.SCROLL_TO_BOTTOM: self._scroll_to_bottom,
            CommandName.TOGGLE_SELECT: self._toggle_select,
            CommandName.CLEAR_SELECTION: self._clear_selection,
            CommandName.REFRESH_TOPICS: self._refresh_topics,
            CommandName.CONFIRM_TOPICS: self._confirm_topics,
            CommandName.SHOW_RECORD: self._show_record,
            CommandName.PREVIOUS_RECORD: self._previous_record,
            CommandName.NEXT_RECORD: self._next_record,
            CommandName.OPEN_RECORD: self._open_record,
            CommandName.SHOW_SCHEMAS: self._show_schemas,
            CommandName.COPY_RECORD: self._copy_record,
            CommandName.EXPORT_RECORD: self._export_record,
            CommandName.EXPORT_RECORDS: self._export_records,
            CommandName.COPY_SCHEMAS: self._copy_schemas,
            CommandName.APPEND: self._append,
            CommandName.BACKSPACE: self._backspace,
            CommandName.HISTORY_PREVIOUS: self._history_previous,
            CommandName.HISTORY_NEXT: self._history_next,
            CommandName.ACCEPT_AUTOCOMPLETE: self._accept_autocomplete,
            CommandName.SUBMIT: self._submit,
            CommandName.CANCEL_SEARCH: self._cancel_search,
        }

    # =========================================================================
    # Derived state
    # =========================================================================

    @property
    def focus_target(self) -> Panel:
        """Panel receiving non-global keys: top overlay, else focused panel."""
        return self.overlays.top or self.panels.focused

    @property
    def generation(self) -> int:
        """Number of the most recently submitted record fetch."""
        return self._generation

    @property
    def current_record(self) -> KafkaRecord | None:
        if not self.records:
            return None
        return self.records[self.selection(Panel.RECORDS).cursor]

    @property
    def selected_topics(self) -> list[str]:
        """Selected topic names in listing order."""
        selection = self.selection(Panel.TOPICS)
        return [topic.name for topic in self.topics if selection.is_selected(topic.name)]

    def selection(self, panel: Panel) -> ListSelection:
        """Cursor state for a list panel, created on first use."""
        if panel not in LIST_PANELS:
            raise ValueError(f"{panel} is not a list panel")
        selection = self._list_selections.get(panel)
        if selection is None:
            length = len(self.topics) if panel is Panel.TOPICS else len(self.records)
            selection = ListSelection(
                length,
                self.settings.viewport_height,
                multi_select=panel is Panel.TOPICS,
            )
            self._list_selections[panel] = selection
        return selection

    def scroll_state(self, panel: Panel) -> ScrollState:
        """Scroll state for a text panel, created on first use."""
        if panel not in TEXT_PANELS:
            raise ValueError(f"{panel} is not a text panel")
        state = self._scroll_states.get(panel)
        if state is None:
            state = ScrollState(viewport_height=self.settings.viewport_height)
            self._scroll_states[panel] = state
        return state

    def set_viewport(self, panel: Panel, height: int) -> None:
        if panel in LIST_PANELS:
            self.selection(panel).set_viewport(height)
        elif panel in TEXT_PANELS:
            self.scroll_state(panel).set_viewport(height)

    def set_status(self, text: str, severity: Severity = Severity.INFORMATION) -> None:
        self.status = StatusMessage(text, severity)

    # =========================================================================
    # Input
    # =========================================================================

    def handle_key(self, key_press: KeyPress) -> list[Effect]:
        """Dispatch a key event and apply the resulting command, if any."""
        command = dispatch(key_press, self.panels.focused, self.overlays.overlays)
        if command is None:
            return []
        return self.apply(command)

    def apply(self, command: Command) -> list[Effect]:
        """Apply ``command`` and return the effects the caller must run."""
        logger.debug("Applying %s to %s", command.name.value, self.focus_target.value)
        return self._handlers[command.name](command)

    # =========================================================================
    # Completions (delivered by workers through the UI loop)
    # =========================================================================

    def records_loaded(self, generation: int, records: list[KafkaRecord]) -> bool:
        """Install fetched records unless a newer fetch was submitted since.

        Returns:
            True when the records were applied, False when they were stale.
        """
        if generation != self._generation:
            logger.debug(
                "Discarding stale records (generation %d, current %d)",
                generation,
                self._generation,
            )
            return False
        self.records = list(records)
        selection = self.selection(Panel.RECORDS)
        selection.set_length(len(self.records))
        selection.scroll_to_top()
        self.scroll_state(Panel.RECORD_DETAIL).reset()
        self.fetch_state = FetchState.SUCCESS
        self.set_status(f"{len(self.records)} record(s)")
        return True

    def records_failed(self, generation: int, error: str) -> bool:
        """Report a fetch failure; existing records and selection are kept."""
        if generation != self._generation:
            logger.debug("Ignoring stale fetch failure (generation %d)", generation)
            return False
        self.fetch_state = FetchState.ERROR
        self.set_status(error, Severity.ERROR)
        return True

    def topics_loaded(self, topics: list[TopicInfo]) -> None:
        self.topics = sorted(topics, key=lambda topic: topic.name)
        selection = self.selection(Panel.TOPICS)
        selection.set_length(len(self.topics))
        names = [topic.name for topic in self.topics]
        selection.retain(names)
        if self._preselected_topics:
            selection.select(name for name in self._preselected_topics if name in names)
            self._preselected_topics = []
        self.set_status(f"{len(self.topics)} topic(s)")

    def topics_failed(self, error: str) -> None:
        self.set_status(error, Severity.ERROR)

    def schemas_loaded(self, request: int, schemas: SchemaDetail) -> bool:
        """Show fetched schemas unless the user moved on since the request.

        Returns:
            True when the result was applied, False when it was stale.
        """
        if not self._is_current_schema_request(request):
            logger.debug("Discarding stale schemas (request %d)", request)
            return False
        if schemas.is_empty:
            self.set_status(STATUS_NO_SCHEMAS, Severity.WARNING)
            return True
        self.schemas = schemas
        self.scroll_state(Panel.SCHEMAS).reset()
        self._set_focus(Panel.SCHEMAS)
        return True

    def schemas_failed(self, request: int, error: str) -> bool:
        if not self._is_current_schema_request(request):
            logger.debug("Ignoring stale schema failure (request %d)", request)
            return False
        self.set_status(error, Severity.ERROR)
        return True

    def _is_current_schema_request(self, request: int) -> bool:
        record = self.current_record
        return (
            request == self._schema_request
            and record is not None
            and _record_id(record) == self._schema_record
        )

    def start_search(self) -> list[Effect]:
        """Run the current query without touching focus or history (startup)."""
        return self._request_records(self.search.query)

    # =========================================================================
    # Focus and overlays
    # =========================================================================

    def _set_focus(self, panel: Panel) -> None:
        previous = self.panels.focused
        self.panels.show(panel)
        if previous is Panel.SEARCH and panel is not Panel.SEARCH:
            self.search.blur()
        elif previous is not Panel.SEARCH and self.search.phase is SearchPhase.SUBMITTED:
            self.search.blur()

    def _focus_next(self, _command: Command) -> list[Effect]:
        self._cycle(self.panels.focus_next)
        return []

    def _focus_previous(self, _command: Command) -> list[Effect]:
        self._cycle(self.panels.focus_previous)
        return []

    def _cycle(self, move: Callable[[], Panel]) -> None:
        previous = self.panels.focused
        current = move()
        if current is not previous and self.search.phase is not SearchPhase.IDLE:
            self.search.blur()

    def _focus_search(self, _command: Command) -> list[Effect]:
        self._set_focus(Panel.SEARCH)
        return []

    def _toggle_help(self, _command: Command) -> list[Effect]:
        self.overlays.toggle(Panel.HELP)
        return []

    def _toggle_topics(self, _command: Command) -> list[Effect]:
        if self.overlays.toggle(Panel.TOPICS) and not self.topics:
            return self._refresh_topics(_command)
        return []

    def _dismiss(self, _command: Command) -> list[Effect]:
        if self.overlays:
            self.overlays.dismiss()
            return []
        focused = self.panels.focused
        if focused is Panel.SCHEMAS:
            self.panels.hide(Panel.SCHEMAS, fallback=Panel.RECORD_DETAIL)
        elif focused is Panel.RECORD_DETAIL:
            self.panels.jump_to(Panel.RECORDS)
        return []

    # =========================================================================
    # Cursor and scrolling
    # =========================================================================

    def _move_up(self, _command: Command) -> list[Effect]:
        self._navigate(ListSelection.move_up, ScrollState.scroll_up)
        return []

    def _move_down(self, _command: Command) -> list[Effect]:
        self._navigate(ListSelection.move_down, ScrollState.scroll_down)
        return []

    def _scroll_to_top(self, _command: Command) -> list[Effect]:
        self._navigate(ListSelection.scroll_to_top, ScrollState.scroll_to_top)
        return []

    def _scroll_to_bottom(self, _command: Command) -> list[Effect]:
        self._navigate(ListSelection.scroll_to_bottom, ScrollState.scroll_to_bottom)
        return []

    def _navigate(
        self,
        on_list: Callable[[ListSelection], int],
        on_text: Callable[[ScrollState], int],
    ) -> None:
        target = self.focus_target
        if target in LIST_PANELS:
            selection = self.selection(target)
            before = selection.cursor
            on_list(selection)
            if target is Panel.RECORDS and selection.cursor != before:
                self.scroll_state(Panel.RECORD_DETAIL).reset()
        elif target in TEXT_PANELS:
            on_text(self.scroll_state(target))

    # =========================================================================
    # Topics
    # =========================================================================

    def _toggle_select(self, _command: Command) -> list[Effect]:
        if not self.topics:
            return []
        selection = self.selection(Panel.TOPICS)
        selection.toggle_select(self.topics[selection.cursor].name)
        return []

    def _clear_selection(self, _command: Command) -> list[Effect]:
        self.selection(Panel.TOPICS).clear_selection()
        return []

    def _refresh_topics(self, _command: Command) -> list[Effect]:
        self.set_status(STATUS_FETCHING_TOPICS)
        return [FetchTopics()]

    def _confirm_topics(self, _command: Command) -> list[Effect]:
        self.overlays.close(Panel.TOPICS)
        self._set_focus(Panel.RECORDS)
        return self._request_records(self.search.query)

    # =========================================================================
    # Records
    # =========================================================================

    def _show_record(self, _command: Command) -> list[Effect]:
        if self.current_record is None:
            self.set_status(STATUS_NO_RECORD, Severity.WARNING)
            return []
        self.scroll_state(Panel.RECORD_DETAIL).reset()
        self._set_focus(Panel.RECORD_DETAIL)
        return []

    def _previous_record(self, _command: Command) -> list[Effect]:
        self.selection(Panel.RECORDS).move_up()
        self.scroll_state(Panel.RECORD_DETAIL).reset()
        return []

    def _next_record(self, _command: Command) -> list[Effect]:
        self.selection(Panel.RECORDS).move_down()
        self.scroll_state(Panel.RECORD_DETAIL).reset()
        return []

    def _open_record(self, _command: Command) -> list[Effect]:
        record = self.current_record
        if record is None:
            self.set_status(STATUS_NO_RECORD, Severity.WARNING)
            return []
        template = self.settings.record_url_template
        if not template:
            self.set_status(STATUS_NO_URL_TEMPLATE, Severity.WARNING)
            return []
        try:
            url = build_record_url(template, record)
        except BrowserError as exc:
            self.set_status(str(exc), Severity.ERROR)
            return []
        return [OpenUrl(url)]

    def _show_schemas(self, _command: Command) -> list[Effect]:
        record = self.current_record
        if record is None:
            self.set_status(STATUS_NO_RECORD, Severity.WARNING)
            return []
        if not record.has_schemas:
            self.set_status(STATUS_NO_SCHEMAS, Severity.WARNING)
            return []
        self._schema_request += 1
        self._schema_record = _record_id(record)
        return [FetchSchemas(record.topic, self._schema_request)]

    def _copy_record(self, _command: Command) -> list[Effect]:
        record = self.current_record
        if record is None:
            self.set_status(STATUS_NO_RECORD, Severity.WARNING)
            return []
        text = record.export(self.search.query).model_dump_json(indent=2)
        return [CopyToClipboard(text, label="record")]

    def _export_record(self, _command: Command) -> list[Effect]:
        record = self.current_record
        if record is None:
            self.set_status(STATUS_NO_RECORD, Severity.WARNING)
            return []
        return [ExportRecord(record, self.search.query)]

    def _export_records(self, _command: Command) -> list[Effect]:
        if not self.records:
            self.set_status(STATUS_NO_RECORD, Severity.WARNING)
            return []
        return [ExportRecords(tuple(self.records), self.search.query)]

    def _copy_schemas(self, _command: Command) -> list[Effect]:
        if self.schemas is None:
            self.set_status(STATUS_NO_SCHEMAS, Severity.WARNING)
            return []
        return [CopyToClipboard(self.schemas.model_dump_json(indent=2), label="schemas")]

    # =========================================================================
    # Search
    # =========================================================================

    def _append(self, command: Command) -> list[Effect]:
        if command.argument:
            self.search.append(command.argument)
        return []

    def _backspace(self, _command: Command) -> list[Effect]:
        self.search.backspace()
        return []

    def _history_previous(self, _command: Command) -> list[Effect]:
        self.search.history_prev()
        return []

    def _history_next(self, _command: Command) -> list[Effect]:
        self.search.history_next()
        return []

    def _accept_autocomplete(self, _command: Command) -> list[Effect]:
        self.search.accept_autocomplete()
        return []

    def _cancel_search(self, _command: Command) -> list[Effect]:
        self.search.cancel()
        return []

    def _submit(self, _command: Command) -> list[Effect]:
        query = self.search.submit()
        self.settings.search_history = list(self.search.history)
        # Focus moves without blurring so the bar reads as Submitted.
        self.panels.jump_to(Panel.RECORDS)
        return self._request_records(query)

    def _request_records(self, query: str) -> list[Effect]:
        topics = self.selected_topics or [topic.name for topic in self.topics]
        if not topics:
            self.set_status(STATUS_NO_TOPICS, Severity.WARNING)
            return []
        self._generation += 1
        self.fetch_state = FetchState.LOADING
        self.set_status(STATUS_FETCHING_RECORDS)
        return [FetchRecords(self._generation, tuple(topics), query)]


__all__ = ["AppState", "StatusMessage"]
