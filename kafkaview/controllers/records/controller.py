"""Records controller - runs record source requests for the browser screen.

Requests are executed inside Textual workers. Every method returns a
:class:`WorkerResult` instead of raising, so a failing backend never takes
the UI loop down.
"""

from __future__ import annotations

from collections.abc import Sequence

from kafkaview.constants.defaults import MAX_RECORDS_DEFAULT
from kafkaview.constants.timeouts import (
    FETCH_RECORDS_TIMEOUT,
    FETCH_SCHEMA_TIMEOUT,
    LIST_TOPICS_TIMEOUT,
)
from kafkaview.controllers.base.base_controller import (
    BaseController,
    RecordSource,
    WorkerResult,
)
from kafkaview.models.core.records import KafkaRecord


class RecordsController(BaseController):
    """Fetches topics, records and schemas from a :class:`RecordSource`."""

    def __init__(
        self,
        source: RecordSource,
        *,
        max_records: int = MAX_RECORDS_DEFAULT,
        records_timeout: float = FETCH_RECORDS_TIMEOUT,
    ) -> None:
        self._source = source
        self._max_records = max_records
        self._records_timeout = records_timeout

    @property
    def source(self) -> RecordSource:
        return self._source

    async def list_topics(self) -> WorkerResult:
        """List topics from the source."""
        return await self._run(
            "list_topics",
            self._source.list_topics(),
            LIST_TOPICS_TIMEOUT,
        )

    async def fetch_schema(self, topic: str) -> WorkerResult:
        """Fetch key/value schemas for ``topic``."""
        return await self._run(
            f"fetch_schema({topic})",
            self._source.fetch_schema(topic),
            FETCH_SCHEMA_TIMEOUT,
        )

    async def fetch_records(self, topics: Sequence[str], query: str) -> WorkerResult:
        """Read pages until the source is exhausted or ``max_records`` is reached."""
        return await self._run(
            f"fetch_records({', '.join(topics)})",
            self._collect_records(topics, query),
            self._records_timeout,
        )

    async def _collect_records(
        self, topics: Sequence[str], query: str
    ) -> list[KafkaRecord]:
        records: list[KafkaRecord] = []
        cursor: int | None = None
        while len(records) < self._max_records:
            page = await self._source.fetch_records(topics, query, cursor)
            records.extend(page.records)
            if page.next_cursor is None:
                break
            cursor = page.next_cursor
        return records[: self._max_records]


__all__ = ["RecordsController"]
