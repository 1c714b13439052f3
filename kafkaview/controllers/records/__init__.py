"""Records controller module."""

from kafkaview.controllers.records.controller import RecordsController
from kafkaview.controllers.records.memory_source import (
    InMemoryRecordSource,
    record_matches,
)

__all__ = [
    "InMemoryRecordSource",
    "RecordsController",
    "record_matches",
]
