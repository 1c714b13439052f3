"""Widgets for the kafkaview TUI."""

from kafkaview.widgets._base import BaseWidget, LinesWidget
from kafkaview.widgets.panels import (
    PANEL_WIDGETS,
    HelpPanel,
    PanelWidget,
    RecordDetailPanel,
    RecordsPanel,
    SchemasPanel,
    SearchPanel,
    StatusBar,
    TopicsPanel,
)

__all__ = [
    "PANEL_WIDGETS",
    "BaseWidget",
    "HelpPanel",
    "LinesWidget",
    "PanelWidget",
    "RecordDetailPanel",
    "RecordsPanel",
    "SchemasPanel",
    "SearchPanel",
    "StatusBar",
    "TopicsPanel",
]
