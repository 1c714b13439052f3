"""Browser screen configuration - widget ids and display constants."""

from __future__ import annotations

from kafkaview.constants.enums import Panel

# Widget IDs
PANEL_IDS: dict[Panel, str] = {
    Panel.TOPICS: "topics-panel",
    Panel.RECORDS: "records-panel",
    Panel.RECORD_DETAIL: "record-detail-panel",
    Panel.SCHEMAS: "schemas-panel",
    Panel.SEARCH: "search-panel",
    Panel.HELP: "help-panel",
}
STATUS_BAR_ID: str = "status-bar"

# Record detail field labels, in display order
RECORD_FIELDS: list[tuple[str, str]] = [
    ("topic", "Topic"),
    ("partition", "Partition"),
    ("offset", "Offset"),
    ("timestamp", "DateTime"),
    # Derived from the timestamp
    ("published", "Published"),
    ("size", "Size"),
    ("key", "Key"),
    ("key_schema_id", "Key schema"),
    ("value_schema_id", "Value schema"),
]
RECORD_LABEL_WIDTH: int = 12

# Records list columns (title, width); the value column takes the rest
RECORDS_COLUMNS: list[tuple[str, int]] = [
    ("Topic", 20),
    ("P", 4),
    ("Offset", 10),
    ("Timestamp", 25),
    ("Key", 20),
]

# Help sections rendered from the binding tables
HELP_SECTIONS: list[tuple[str, Panel | None]] = [
    ("Global", None),
    ("Topics", Panel.TOPICS),
    ("Records", Panel.RECORDS),
    ("Record details", Panel.RECORD_DETAIL),
    ("Schemas", Panel.SCHEMAS),
    ("Search", Panel.SEARCH),
]

# Search language reference (variable, type, alias, description)
SEARCH_VARIABLES: list[tuple[str, str, str, str]] = [
    ("topic", "String", "t", "Kafka topic"),
    ("offset", "Number", "o", "Offset of the record"),
    ("key", "", "k", "Key of the record"),
    ("value", "", "v", "Value of the record"),
    ("partition", "Number", "p", "Partition of the record"),
    ("timestamp", "String", "ts", "Timestamp of the record (RFC 3339)"),
    ("size", "Number", "si", "Size of the record"),
    ("headers", "Map<String, String>", "h", "Headers of the record"),
]

SEARCH_CLAUSES: list[tuple[str, str, str]] = [
    ("limit", "limit <number>", "Limit the number of kafka records to receive"),
    ("from", "from <begin|end|date|offset>", "Start consuming from the beginning, the end or a date"),
    ("order by", "order by <var> <asc|desc>", "Sort kafka records"),
]
