"""Base controller module."""

from kafkaview.controllers.base.base_controller import (
    BaseController,
    RecordSource,
    WorkerResult,
)

__all__ = [
    "BaseController",
    "RecordSource",
    "WorkerResult",
]
