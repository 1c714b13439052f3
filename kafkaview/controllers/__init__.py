"""Controllers package - record source access for the TUI."""

from kafkaview.controllers.base import (
    BaseController,
    RecordSource,
    WorkerResult,
)
from kafkaview.controllers.records import (
    InMemoryRecordSource,
    RecordsController,
)

__all__ = [
    "BaseController",
    "InMemoryRecordSource",
    "RecordSource",
    "RecordsController",
    "WorkerResult",
]
