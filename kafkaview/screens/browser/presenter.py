"""Browser screen presenter - turns application state into renderable text."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from rich.text import Text

from kafkaview.constants.enums import Panel, SearchPhase
from kafkaview.constants.limits import RECORD_PREVIEW_WIDTH
from kafkaview.keyboard.navigation import (
    GLOBAL_BINDINGS,
    PANEL_BINDINGS,
    display_key,
)
from kafkaview.models.core.records import KafkaRecord, SchemaDetail, TopicInfo
from kafkaview.models.state.app_state import AppState
from kafkaview.screens.browser.config import (
    HELP_SECTIONS,
    RECORD_FIELDS,
    RECORD_LABEL_WIDTH,
    RECORDS_COLUMNS,
    SEARCH_CLAUSES,
    SEARCH_VARIABLES,
)

_HELP_KEY_WIDTH = 16

_AGE_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 365 * 86400),
    ("month", 30 * 86400),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


def format_value(value: Any) -> str:
    """Pretty-print a record value; JSON strings are re-indented."""
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return value
        if isinstance(value, str):
            return value
    return json.dumps(value, indent=2, default=str, ensure_ascii=False)


def format_size(size: int) -> str:
    """Format a byte count in IEC units."""
    if size <= 0:
        return "0 B"
    if size >= 1024 * 1024 * 1024:
        return f"{size / (1024 * 1024 * 1024):.1f} GiB"
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):.1f} MiB"
    if size >= 1024:
        return f"{size / 1024:.1f} KiB"
    return f"{size} B"


def format_age(timestamp: datetime, now: datetime | None = None) -> str:
    """Describe how long ago ``timestamp`` was, e.g. ``3 hours ago``."""
    if now is None:
        now = datetime.now(timezone.utc) if timestamp.tzinfo else datetime.now()
    seconds = int((now - timestamp).total_seconds())
    if seconds < 0:
        return "in the future"
    if seconds < 10:
        return "just now"
    for unit, length in _AGE_UNITS:
        if seconds >= length:
            count = seconds // length
            return f"{count} {unit}{'' if count == 1 else 's'} ago"
    return f"{seconds} seconds ago"


def _fit(text: str, width: int) -> str:
    text = text.replace("\n", " ")
    if len(text) > width:
        return text[: max(0, width - 1)] + "…"
    return text.ljust(width)


class BrowserPresenter:
    """Presenter for BrowserScreen - formatting only, no state changes."""

    def __init__(self, state: AppState) -> None:
        self._state = state

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def topic_lines(self) -> list[Text]:
        state = self._state
        if not state.topics:
            return [Text("No topics", style="dim")]
        selection = state.selection(Panel.TOPICS)
        lines = []
        for index in selection.visible_range:
            topic: TopicInfo = state.topics[index]
            marker = "[x]" if selection.is_selected(topic.name) else "[ ]"
            line = Text(f"{marker} {topic.name}  ")
            line.append(self.topic_summary(topic), style="dim")
            if index == selection.cursor:
                line.stylize("reverse")
            lines.append(line)
        return lines

    @staticmethod
    def topic_summary(topic: TopicInfo) -> str:
        groups = len(topic.consumer_groups)
        return (
            f"{topic.partitions} partitions, {topic.replicas} replicas, "
            f"{topic.record_count:_} records, {groups} consumer groups"
        )

    def records_header(self) -> Text:
        header = "".join(_fit(title, width) + " " for title, width in RECORDS_COLUMNS)
        return Text(header + "Value", style="bold")

    def record_row(self, record: KafkaRecord) -> str:
        timestamp = record.timestamp.isoformat() if record.timestamp else ""
        cells = [record.topic, str(record.partition), str(record.offset), timestamp, record.key or ""]
        row = "".join(
            _fit(cell, width) + " " for cell, (_title, width) in zip(cells, RECORDS_COLUMNS, strict=True)
        )
        value = format_value(record.value).replace("\n", " ")
        return row + value[:RECORD_PREVIEW_WIDTH]

    def record_lines(self) -> list[Text]:
        state = self._state
        if not state.records:
            return [self.records_header(), Text("No records", style="dim")]
        selection = state.selection(Panel.RECORDS)
        lines = [self.records_header()]
        for index in selection.visible_range:
            line = Text(self.record_row(state.records[index]), no_wrap=True)
            if index == selection.cursor:
                line.stylize("reverse")
            lines.append(line)
        return lines

    # ------------------------------------------------------------------
    # Text panels
    # ------------------------------------------------------------------

    def record_detail_lines(self) -> list[Text]:
        record = self._state.current_record
        if record is None:
            return [Text("No record selected", style="dim")]
        lines = []
        for field, label in RECORD_FIELDS:
            if field == "size":
                value = format_size(record.size)
            elif field == "published":
                if record.timestamp is None:
                    continue
                value = format_age(record.timestamp)
            else:
                raw = getattr(record, field)
                if raw is None:
                    continue
                value = raw.isoformat() if isinstance(raw, datetime) else str(raw)
            lines.append(self._labelled(label, value))
        if record.headers:
            lines.append(self._labelled("Headers", ""))
            for name, value in sorted(record.headers.items()):
                lines.append(Text(f"{'':>{RECORD_LABEL_WIDTH + 2}}{name}: {value}"))
        lines.append(self._labelled("Value", ""))
        lines.extend(Text(line) for line in format_value(record.value).splitlines())
        if record.has_schemas:
            lines.append(Text(""))
            lines.append(Text("Press S to view schemas", style="dim"))
        return lines

    def schema_lines(self) -> list[Text]:
        schemas: SchemaDetail | None = self._state.schemas
        if schemas is None:
            return [Text("No schema loaded", style="dim")]
        lines = []
        for label, body in (("Key", schemas.key), ("Value", schemas.value)):
            lines.append(Text(f"{label} schema", style="bold"))
            if body is None:
                lines.append(Text("unavailable", style="dim"))
            else:
                lines.extend(Text(line) for line in format_value(body).splitlines())
            lines.append(Text(""))
        return lines

    def help_lines(self) -> list[Text]:
        lines = [Text("Key".rjust(_HELP_KEY_WIDTH) + "      Description", style="bold")]
        for title, panel in HELP_SECTIONS:
            table = GLOBAL_BINDINGS if panel is None else PANEL_BINDINGS[panel]
            lines.append(Text(""))
            lines.append(Text(title, style="bold underline"))
            seen: set[tuple[str, str]] = set()
            for key, _action, description in table:
                shown = display_key(key)
                if (shown, description) in seen:
                    continue
                seen.add((shown, description))
                lines.append(Text(f"{shown:>{_HELP_KEY_WIDTH}}      {description}"))

        lines.append(Text(""))
        lines.append(Text(f"{'Variable':>{_HELP_KEY_WIDTH}}      {'Type':<22}{'Alias':<8}Description", style="bold"))
        for name, kind, alias, description in SEARCH_VARIABLES:
            lines.append(Text(f"{name:>{_HELP_KEY_WIDTH}}      {kind:<22}{alias:<8}{description}"))

        lines.append(Text(""))
        lines.append(Text(f"{'Clause':>{_HELP_KEY_WIDTH}}      {'Syntax':<32}Description", style="bold"))
        for name, syntax, description in SEARCH_CLAUSES:
            lines.append(Text(f"{name:>{_HELP_KEY_WIDTH}}      {syntax:<32}{description}"))

        settings = self._state.settings
        lines.append(Text(""))
        lines.append(Text(f"{'Setting':>{_HELP_KEY_WIDTH}}      Value", style="bold"))
        for label, value in (
            ("Export path", settings.export_path),
            ("Max records", str(settings.max_records)),
            ("Page size", str(settings.page_size)),
            ("History size", str(settings.search_history_size)),
            ("Record URL", settings.record_url_template or "(not set)"),
            ("Log file", settings.log_file or "(not set)"),
        ):
            lines.append(Text(f"{label:>{_HELP_KEY_WIDTH}}      {value}"))
        return lines

    # ------------------------------------------------------------------
    # Search and status
    # ------------------------------------------------------------------

    def search_line(self) -> Text:
        search = self._state.search
        line = Text("> ", style="bold")
        shown = search.displayed_query
        if search.history_preview is not None:
            line.append(shown, style="italic")
        else:
            line.append(shown)
        suggestion = search.suggestion
        if (
            search.phase is SearchPhase.EDITING
            and suggestion is not None
            and suggestion.startswith(shown)
        ):
            line.append(suggestion[len(shown) :], style="dim")
        return line

    def status_line(self, *, loading: bool = False) -> Text:
        state = self._state
        parts = ["working..."] if loading else []
        parts.append(f"focus: {state.focus_target.value}")
        if state.selected_topics:
            parts.append(f"topics: {', '.join(state.selected_topics)}")
        parts.append(f"search: {state.search.phase.value}")
        line = Text(" | ".join(parts), style="dim")
        if state.status is not None:
            line.append("  ")
            style = {
                "error": "bold red",
                "warning": "yellow",
            }.get(state.status.severity.value, "")
            line.append(state.status.text, style=style)
        return line

    @staticmethod
    def _labelled(label: str, value: str) -> Text:
        line = Text(f"{label:>{RECORD_LABEL_WIDTH}}: ", style="bold")
        line.append(value)
        return line


__all__ = ["BrowserPresenter", "format_age", "format_size", "format_value"]
