"""Side effects requested by :class:`AppState` after applying a command.

The state never talks to collaborators itself. It returns these requests and
the screen executes them (fetches in workers, the rest inline).
"""

from __future__ import annotations

from dataclasses import dataclass

from kafkaview.models.core.records import KafkaRecord


@dataclass(frozen=True)
class FetchRecords:
    generation: int
    topics: tuple[str, ...]
    query: str


@dataclass(frozen=True)
class FetchTopics:
    pass


@dataclass(frozen=True)
class FetchSchemas:
    topic: str
    request: int = 0


@dataclass(frozen=True)
class CopyToClipboard:
    text: str
    label: str = "record"


@dataclass(frozen=True)
class OpenUrl:
    url: str


@dataclass(frozen=True)
class ExportRecord:
    record: KafkaRecord
    search_query: str = ""


@dataclass(frozen=True)
class ExportRecords:
    records: tuple[KafkaRecord, ...]
    search_query: str = ""


Effect = (
    FetchRecords
    | FetchTopics
    | FetchSchemas
    | CopyToClipboard
    | OpenUrl
    | ExportRecord
    | ExportRecords
)

__all__ = [
    "CopyToClipboard",
    "Effect",
    "ExportRecord",
    "ExportRecords",
    "FetchRecords",
    "FetchSchemas",
    "FetchTopics",
    "OpenUrl",
]
