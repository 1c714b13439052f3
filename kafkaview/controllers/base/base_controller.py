"""Base controller with async worker-friendly patterns for the kafkaview TUI.

This module provides the foundation for background data loading using Textual
Workers, ensuring the UI remains responsive while the record source is busy.
"""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from typing import Any

from kafkaview.exceptions import FetchError
from kafkaview.models.core.records import RecordPage, SchemaDetail, TopicInfo

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """Result wrapper for worker operations."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class RecordSource(ABC):
    """Boundary with the record-producing backend (a Kafka consumer, a file...).

    All methods are coroutines and may raise
    :class:`~kafkaview.exceptions.FetchError`.
    """

    @abstractmethod
    async def list_topics(self) -> list[TopicInfo]:
        """Return the topics available for browsing."""
        ...

    @abstractmethod
    async def fetch_records(
        self,
        topics: Sequence[str],
        query: str,
        cursor: int | None = None,
    ) -> RecordPage:
        """Return one page of records matching ``query`` on ``topics``.

        Args:
            topics: Topics to read from.
            query: Search query typed by the user.
            cursor: Opaque cursor from the previous page, None for the first.
        """
        ...

    @abstractmethod
    async def fetch_schema(self, topic: str) -> SchemaDetail:
        """Return the key and value schemas registered for ``topic``."""
        ...


class BaseController(ABC):
    """Base controller class with worker-friendly patterns.

    :meth:`_run` times a source call and turns every failure into an
    unsuccessful :class:`WorkerResult`, so workers always have a result to
    post back to the screen.
    """

    async def _run(
        self, operation: str, awaitable: Awaitable[Any], timeout: float
    ) -> WorkerResult:
        started = time.monotonic()
        try:
            data = await asyncio.wait_for(awaitable, timeout=timeout)
        except asyncio.TimeoutError:
            duration_ms = _elapsed_ms(started)
            logger.warning("%s timed out after %.0fms", operation, duration_ms)
            return WorkerResult(
                success=False,
                error=f"{operation} timed out",
                duration_ms=duration_ms,
            )
        except FetchError as exc:
            duration_ms = _elapsed_ms(started)
            logger.warning("%s failed: %s", operation, exc)
            return WorkerResult(success=False, error=str(exc), duration_ms=duration_ms)
        except Exception as exc:
            duration_ms = _elapsed_ms(started)
            logger.exception("%s failed unexpectedly", operation)
            return WorkerResult(
                success=False,
                error=f"{operation} failed: {type(exc).__name__}: {exc}",
                duration_ms=duration_ms,
            )
        duration_ms = _elapsed_ms(started)
        logger.debug("%s completed in %.2fms", operation, duration_ms)
        return WorkerResult(success=True, data=data, duration_ms=duration_ms)


def _elapsed_ms(started: float) -> float:
    return (time.monotonic() - started) * 1000



__all__ = [
    "BaseController",
    "RecordSource",
    "WorkerResult",
]
