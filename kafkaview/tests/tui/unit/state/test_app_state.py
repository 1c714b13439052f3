"""Unit tests for AppState: commands, effects and fetch completions."""

from __future__ import annotations

import json

import pytest

from kafkaview.constants.enums import CommandName, FetchState, Panel, SearchPhase, Severity
from kafkaview.keyboard.dispatcher import Command, KeyPress
from kafkaview.models.core.records import KafkaRecord, SchemaDetail, TopicInfo
from kafkaview.models.state.app_settings import AppSettings
from kafkaview.models.state.app_state import AppState
from kafkaview.models.state.effects import (
    CopyToClipboard,
    ExportRecord,
    ExportRecords,
    FetchRecords,
    FetchSchemas,
    FetchTopics,
    OpenUrl,
)

TOPICS = [TopicInfo(name="orders"), TopicInfo(name="payments"), TopicInfo(name="users")]


def _press(state: AppState, *keys: str) -> list:
    effects: list = []
    for key in keys:
        character = key if len(key) == 1 else None
        effects.extend(state.handle_key(KeyPress(key, character)))
    return effects


def _records(count: int) -> list[KafkaRecord]:
    return [KafkaRecord(topic="orders", offset=i, key=f"k{i}", value={"i": i}) for i in range(count)]


@pytest.fixture
def state() -> AppState:
    state = AppState()
    state.topics_loaded(list(TOPICS))
    return state


class TestFocus:
    """Test focus cycling and the search phase."""

    def test_tab_cycles_back_to_start(self, state: AppState) -> None:
        start = state.panels.focused
        _press(state, "tab", "tab", "tab")
        assert state.panels.focused is start

    def test_shift_tab_reverses(self, state: AppState) -> None:
        _press(state, "shift+tab")
        assert state.panels.focused is Panel.SEARCH

    def test_slash_focuses_search(self, state: AppState) -> None:
        _press(state, "slash")
        assert state.panels.focused is Panel.SEARCH

    def test_leaving_search_while_editing_goes_idle(self, state: AppState) -> None:
        _press(state, "slash", "a", "tab")
        assert state.search.phase is SearchPhase.IDLE
        assert state.search.query == "a"


class TestOverlays:
    """Test Help and Topics overlays."""

    def test_toggle_help(self, state: AppState) -> None:
        _press(state, "ctrl+h")
        assert state.focus_target is Panel.HELP
        _press(state, "ctrl+h")
        assert not state.overlays

    def test_escape_closes_in_lifo_order(self, state: AppState) -> None:
        _press(state, "ctrl+h", "ctrl+o")
        _press(state, "escape")
        assert state.overlays.overlays == (Panel.HELP,)
        _press(state, "escape")
        assert not state.overlays
        assert state.panels.focused is Panel.RECORDS

    def test_overlay_keeps_layout_focus(self, state: AppState) -> None:
        _press(state, "slash", "ctrl+h", "escape")
        assert state.panels.focused is Panel.SEARCH

    def test_topics_opened_empty_requests_listing(self) -> None:
        state = AppState()
        effects = _press(state, "ctrl+o")
        assert effects == [FetchTopics()]

    def test_topics_opened_with_listing_requests_nothing(self, state: AppState) -> None:
        assert _press(state, "ctrl+o") == []


class TestTopicsNavigation:
    """Test cursor and selection in the Topics overlay."""

    def test_j_j_bracket_lands_on_last_topic(self, state: AppState) -> None:
        _press(state, "ctrl+o", "j", "j", "right_square_bracket")
        assert state.selection(Panel.TOPICS).cursor == 2

    def test_move_down_clamps(self, state: AppState) -> None:
        _press(state, "ctrl+o", "j", "j", "j", "j")
        assert state.selection(Panel.TOPICS).cursor == 2

    def test_space_selects_topic(self, state: AppState) -> None:
        _press(state, "ctrl+o", "j", "space")
        assert state.selected_topics == ["payments"]

    def test_ctrl_u_clears_selection(self, state: AppState) -> None:
        _press(state, "ctrl+o", "space", "j", "space", "ctrl+u")
        assert state.selected_topics == []

    def test_ctrl_p_refreshes(self, state: AppState) -> None:
        assert _press(state, "ctrl+o", "ctrl+p") == [FetchTopics()]

    def test_enter_searches_selected_topics(self, state: AppState) -> None:
        effects = _press(state, "ctrl+o", "j", "space", "enter")
        assert effects == [FetchRecords(1, ("payments",), "")]
        assert not state.overlays
        assert state.panels.focused is Panel.RECORDS

    def test_preselected_topics_applied_on_load(self) -> None:
        state = AppState(preselected_topics=["users", "missing"])
        state.topics_loaded(list(TOPICS))
        assert state.selected_topics == ["users"]

    def test_reloading_drops_vanished_selection(self, state: AppState) -> None:
        _press(state, "ctrl+o", "space")
        state.topics_loaded([TopicInfo(name="payments")])
        assert state.selected_topics == []


class TestSearchSubmission:
    """Test search submission and fetch generations."""

    def test_submit_requests_all_topics_when_none_selected(self, state: AppState) -> None:
        effects = _press(state, "slash", "k", "e", "y", "enter")
        assert effects == [FetchRecords(1, ("orders", "payments", "users"), "key")]
        assert state.panels.focused is Panel.RECORDS
        assert state.search.phase is SearchPhase.SUBMITTED
        assert state.fetch_state is FetchState.LOADING

    def test_submit_records_history_in_settings(self, state: AppState) -> None:
        _press(state, "slash", "x", "enter")
        assert state.settings.search_history == ["x"]

    def test_submitted_goes_idle_on_next_focus_change(self, state: AppState) -> None:
        _press(state, "slash", "x", "enter", "tab")
        assert state.search.phase is SearchPhase.IDLE

    def test_submit_without_topics_warns(self) -> None:
        state = AppState()
        assert _press(state, "slash", "enter") == []
        assert state.status is not None
        assert state.status.severity is Severity.WARNING

    def test_generation_increments(self, state: AppState) -> None:
        _press(state, "slash", "enter")
        _press(state, "slash", "enter")
        assert state.generation == 2


class TestFetchCompletion:
    """Test last-submitted-wins record installation."""

    def test_records_loaded_installs_records(self, state: AppState) -> None:
        _press(state, "slash", "enter")
        assert state.records_loaded(1, _records(3)) is True
        assert len(state.records) == 3
        assert state.selection(Panel.RECORDS).cursor == 0
        assert state.fetch_state is FetchState.SUCCESS

    def test_stale_records_discarded(self, state: AppState) -> None:
        _press(state, "slash", "a", "enter")
        _press(state, "slash", "b", "enter")
        assert state.records_loaded(2, _records(2)) is True
        assert state.records_loaded(1, _records(5)) is False
        assert len(state.records) == 2

    def test_failure_keeps_records_and_cursor(self, state: AppState) -> None:
        _press(state, "slash", "enter")
        state.records_loaded(1, _records(5))
        _press(state, "j", "j")
        _press(state, "slash", "enter")
        assert state.records_failed(2, "boom") is True
        assert len(state.records) == 5
        assert state.selection(Panel.RECORDS).cursor == 2
        assert state.status is not None
        assert state.status.severity is Severity.ERROR

    def test_stale_failure_ignored(self, state: AppState) -> None:
        _press(state, "slash", "enter")
        _press(state, "slash", "enter")
        assert state.records_failed(1, "old") is False
        assert state.fetch_state is FetchState.LOADING

    def test_new_results_reset_cursor(self, state: AppState) -> None:
        _press(state, "slash", "enter")
        state.records_loaded(1, _records(5))
        _press(state, "right_square_bracket")
        _press(state, "slash", "enter")
        state.records_loaded(2, _records(5))
        assert state.selection(Panel.RECORDS).cursor == 0


@pytest.fixture
def loaded(state: AppState) -> AppState:
    _press(state, "slash", "enter")
    records = _records(3)
    records[1] = KafkaRecord(topic="orders", offset=1, key="k1", value="v", value_schema_id="3")
    state.records_loaded(1, records)
    return state


class TestRecordCommands:
    """Test record detail, copy, export and open."""

    def test_enter_shows_detail(self, loaded: AppState) -> None:
        _press(loaded, "enter")
        assert loaded.panels.focused is Panel.RECORD_DETAIL

    def test_detail_arrows_move_records_cursor(self, loaded: AppState) -> None:
        _press(loaded, "enter", "down", "down", "down", "up")
        assert loaded.selection(Panel.RECORDS).cursor == 1

    def test_copy_includes_search_query(self, loaded: AppState) -> None:
        loaded.search.set_query("k")
        (effect,) = _press(loaded, "c")
        assert isinstance(effect, CopyToClipboard)
        payload = json.loads(effect.text)
        assert payload["search_query"] == "k"
        assert payload["offset"] == 0

    def test_export_current_record(self, loaded: AppState) -> None:
        (effect,) = _press(loaded, "e")
        assert isinstance(effect, ExportRecord)
        assert effect.record.offset == 0

    def test_export_all(self, loaded: AppState) -> None:
        (effect,) = _press(loaded, "E")
        assert isinstance(effect, ExportRecords)
        assert len(effect.records) == 3

    def test_open_without_template_warns(self, loaded: AppState) -> None:
        assert _press(loaded, "o") == []
        assert loaded.status is not None
        assert loaded.status.severity is Severity.WARNING

    def test_open_with_template(self) -> None:
        state = AppState(AppSettings(record_url_template="http://ui/{topic}/{partition}/{offset}"))
        state.topics_loaded(list(TOPICS))
        _press(state, "slash", "enter")
        state.records_loaded(1, _records(1))
        assert _press(state, "o") == [OpenUrl("http://ui/orders/0/0")]

    def test_schemas_for_record_without_schema_warns(self, loaded: AppState) -> None:
        assert _press(loaded, "enter", "s") == []

    def test_schemas_requested_and_shown(self, loaded: AppState) -> None:
        effects = _press(loaded, "j", "enter", "s")
        assert effects == [FetchSchemas("orders", 1)]
        assert loaded.schemas_loaded(1, SchemaDetail(value='{"type": "string"}'))
        assert loaded.panels.focused is Panel.SCHEMAS

    def test_late_schemas_for_left_record_discarded(self, loaded: AppState) -> None:
        _press(loaded, "j", "enter", "s")
        _press(loaded, "escape", "k")
        assert loaded.schemas_loaded(1, SchemaDetail(key='"string"')) is False
        assert loaded.schemas is None
        assert Panel.SCHEMAS not in loaded.panels
        assert loaded.panels.focused is Panel.RECORDS

    def test_superseded_schema_request_discarded(self, loaded: AppState) -> None:
        _press(loaded, "j", "enter", "s")
        assert _press(loaded, "s") == [FetchSchemas("orders", 2)]
        assert loaded.schemas_loaded(1, SchemaDetail(key="old")) is False
        assert loaded.schemas_failed(1, "registry unreachable") is False
        assert loaded.schemas_loaded(2, SchemaDetail(key="new")) is True
        assert loaded.schemas == SchemaDetail(key="new")

    def test_empty_schemas_not_shown(self, loaded: AppState) -> None:
        _press(loaded, "j", "enter", "s")
        loaded.schemas_loaded(1, SchemaDetail())
        assert Panel.SCHEMAS not in loaded.panels

    def test_commands_without_records_warn(self, state: AppState) -> None:
        for key in ("enter", "c", "e", "E", "o"):
            assert _press(state, key) == []


class TestDismiss:
    """Test Escape with no overlay open."""

    def test_escape_from_schemas_focuses_detail(self, loaded: AppState) -> None:
        _press(loaded, "j", "enter", "s")
        loaded.schemas_loaded(1, SchemaDetail(key='"string"'))
        _press(loaded, "escape")
        assert Panel.SCHEMAS not in loaded.panels
        assert loaded.panels.focused is Panel.RECORD_DETAIL

    def test_escape_from_detail_focuses_records(self, loaded: AppState) -> None:
        _press(loaded, "enter", "escape")
        assert loaded.panels.focused is Panel.RECORDS

    def test_escape_while_editing_cancels(self, state: AppState) -> None:
        _press(state, "slash", "a", "escape")
        assert state.search.phase is SearchPhase.IDLE
        assert state.panels.focused is Panel.SEARCH

    def test_escape_in_records_is_noop(self, state: AppState) -> None:
        _press(state, "escape")
        assert state.panels.focused is Panel.RECORDS


class TestScrolling:
    """Test text panel scrolling targets."""

    def test_help_scrolls_independently(self, state: AppState) -> None:
        state.scroll_state(Panel.HELP).set_content_length(100)
        _press(state, "ctrl+h", "j", "j")
        assert state.scroll_state(Panel.HELP).offset == 2
        assert state.selection(Panel.RECORDS).cursor == 0

    def test_apply_unknown_panel_lookups_rejected(self, state: AppState) -> None:
        with pytest.raises(ValueError):
            state.selection(Panel.HELP)
        with pytest.raises(ValueError):
            state.scroll_state(Panel.RECORDS)

    def test_apply_command_directly(self, state: AppState) -> None:
        assert state.apply(Command(CommandName.REFRESH_TOPICS)) == [FetchTopics()]
