"""Browser panels: one widget per :class:`~kafkaview.constants.enums.Panel`."""

from __future__ import annotations

from typing import ClassVar

from rich.text import Text

from kafkaview.constants.values import PANEL_TITLES
from kafkaview.constants.enums import Panel
from kafkaview.widgets._base import BaseWidget, LinesWidget


class PanelWidget(LinesWidget):
    """A bordered panel titled after the panel it shows."""

    PANEL: ClassVar[Panel]
    _default_classes = "panel"

    def on_mount(self) -> None:
        self.border_title = PANEL_TITLES[self.PANEL]


class SearchPanel(PanelWidget):
    PANEL = Panel.SEARCH
    _default_classes = "panel search-panel"


class RecordsPanel(PanelWidget):
    PANEL = Panel.RECORDS
    HEADER_ROWS = 1
    _default_classes = "panel records-panel"


class RecordDetailPanel(PanelWidget):
    PANEL = Panel.RECORD_DETAIL
    _default_classes = "panel record-detail-panel"


class SchemasPanel(PanelWidget):
    PANEL = Panel.SCHEMAS
    _default_classes = "panel schemas-panel"


class TopicsPanel(PanelWidget):
    PANEL = Panel.TOPICS
    _default_classes = "panel overlay topics-panel"


class HelpPanel(PanelWidget):
    PANEL = Panel.HELP
    _default_classes = "panel overlay help-panel"


class StatusBar(BaseWidget):
    """Single-line status bar at the bottom of the screen."""

    _default_classes = "status-bar"

    def show(self, line: Text) -> None:
        self.update(line)


PANEL_WIDGETS: dict[Panel, type[PanelWidget]] = {
    Panel.SEARCH: SearchPanel,
    Panel.RECORDS: RecordsPanel,
    Panel.RECORD_DETAIL: RecordDetailPanel,
    Panel.SCHEMAS: SchemasPanel,
    Panel.TOPICS: TopicsPanel,
    Panel.HELP: HelpPanel,
}

__all__ = [
    "PANEL_WIDGETS",
    "HelpPanel",
    "PanelWidget",
    "RecordDetailPanel",
    "RecordsPanel",
    "SchemasPanel",
    "SearchPanel",
    "StatusBar",
    "TopicsPanel",
]
