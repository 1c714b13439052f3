"""WorkerMixin - Worker lifecycle management for background fetches.

Fetches run as Textual workers on the screen. Results never touch state from
inside the worker: each worker posts one of the messages below and the
screen applies it on the UI loop.

Each kind of fetch runs in its own worker group with ``exclusive=True``, so
submitting a new records fetch cancels the running one while a topics
listing is left alone. Exports are not exclusive: every requested export
runs to completion.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.message import Message
from textual.reactive import reactive
from textual.worker import Worker, WorkerState

from kafkaview.models.core.records import KafkaRecord, SchemaDetail, TopicInfo

logger = logging.getLogger(__name__)


# ============================================================================
# Messages for Worker Communication
# ============================================================================


class DataLoaded(Message):
    """Base message indicating a successful fetch.

    Attributes:
        data: The loaded payload
        duration_ms: Time taken to load data in milliseconds
    """

    def __init__(self, data: Any, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.data = data
        self.duration_ms = duration_ms


class DataLoadFailed(Message):
    """Base message indicating a failed fetch."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


class RecordsLoaded(DataLoaded):
    """Records for fetch number ``generation``."""

    def __init__(
        self, generation: int, records: list[KafkaRecord], duration_ms: float = 0.0
    ) -> None:
        super().__init__(records, duration_ms)
        self.generation = generation

    @property
    def records(self) -> list[KafkaRecord]:
        return self.data


class RecordsFailed(DataLoadFailed):
    def __init__(self, generation: int, error: str) -> None:
        super().__init__(error)
        self.generation = generation


class TopicsLoaded(DataLoaded):
    @property
    def topics(self) -> list[TopicInfo]:
        return self.data


class TopicsFailed(DataLoadFailed):
    pass


class SchemasLoaded(DataLoaded):
    """Schemas for schema request number ``request``."""

    def __init__(
        self, request: int, schemas: SchemaDetail, duration_ms: float = 0.0
    ) -> None:
        super().__init__(schemas, duration_ms)
        self.request = request

    @property
    def schemas(self) -> SchemaDetail:
        return self.data


class SchemasFailed(DataLoadFailed):
    def __init__(self, request: int, error: str) -> None:
        super().__init__(error)
        self.request = request


class ExportFinished(DataLoaded):
    """An export wrote ``data`` (the status text) to disk."""

    @property
    def message(self) -> str:
        return self.data


class ExportFailed(DataLoadFailed):
    pass


# ============================================================================
# WorkerMixin Base Class
# ============================================================================


class WorkerMixin:
    """Mixin providing worker start/cancel helpers for screens.

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def _fetch(self) -> None:
                self.start_worker(self._fetch_worker, name="records", group="records")
        ```
    """

    is_loading = reactive(False, init=False)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._load_start_times: dict[str, float] = {}

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        name: str,
        group: str = "default",
        exclusive: bool = True,
        exit_on_error: bool = False,
    ) -> Worker[Any]:
        """Start an async worker.

        Args:
            worker_func: Async function to run in the worker.
            name: Worker name, used in logs.
            group: Worker group; ``exclusive`` cancels only this group.
            exclusive: Cancel running workers of the same group first.
            exit_on_error: Crash the app when the worker raises.

        Returns:
            The Worker instance
        """
        self._load_start_times[name] = time.monotonic()
        self.is_loading = True
        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            name=name,
            group=group,
            exclusive=exclusive,
            exit_on_error=exit_on_error,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers of this screen."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker completion and keep ``is_loading`` current."""
        if event.state not in (
            WorkerState.SUCCESS,
            WorkerState.CANCELLED,
            WorkerState.ERROR,
        ):
            return

        name = event.worker.name
        started = self._load_start_times.pop(name, None)
        duration_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0

        if event.state == WorkerState.CANCELLED:
            logger.debug("Worker '%s' was cancelled (%.2fms)", name, duration_ms)
        elif event.state == WorkerState.ERROR:
            logger.error("Worker '%s' error: %s (%.2fms)", name, event.worker.error, duration_ms)
        else:
            logger.debug("Worker '%s' completed successfully (%.2fms)", name, duration_ms)

        with suppress(NoActiveAppError):
            self.is_loading = any(
                not worker.is_finished
                for worker in self.workers  # type: ignore[attr-defined]
                if worker is not event.worker
            )


__all__ = [
    "DataLoadFailed",
    "DataLoaded",
    "ExportFailed",
    "ExportFinished",
    "RecordsFailed",
    "RecordsLoaded",
    "SchemasFailed",
    "SchemasLoaded",
    "TopicsFailed",
    "TopicsLoaded",
    "WorkerMixin",
]
