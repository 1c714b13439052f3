"""Unit tests for RecordsController."""

from __future__ import annotations

import asyncio

import pytest

from kafkaview.controllers.base.base_controller import RecordSource, WorkerResult
from kafkaview.controllers.records.controller import RecordsController
from kafkaview.controllers.records.memory_source import InMemoryRecordSource
from kafkaview.exceptions import FetchError
from kafkaview.models.core.records import KafkaRecord, RecordPage, SchemaDetail, TopicInfo


def _source(count: int, page_size: int) -> InMemoryRecordSource:
    records = [KafkaRecord(topic="orders", offset=i) for i in range(count)]
    return InMemoryRecordSource(records, page_size=page_size)


class FailingSource(RecordSource):
    async def list_topics(self) -> list[TopicInfo]:
        raise FetchError("broker unreachable")

    async def fetch_records(self, topics, query, cursor=None) -> RecordPage:
        raise FetchError("broker unreachable")

    async def fetch_schema(self, topic: str) -> SchemaDetail:
        raise FetchError("registry unreachable")


class SlowSource(FailingSource):
    async def fetch_records(self, topics, query, cursor=None) -> RecordPage:
        await asyncio.sleep(10)
        return RecordPage()


class BrokenSource(FailingSource):
    async def fetch_records(self, topics, query, cursor=None) -> RecordPage:
        raise ConnectionError("connection reset by peer")


class DelayedSource(InMemoryRecordSource):
    async def list_topics(self) -> list[TopicInfo]:
        await asyncio.sleep(0.05)
        return await super().list_topics()


class TestFetchRecords:
    """Test pagination and limits."""

    @pytest.mark.asyncio
    async def test_collects_all_pages(self) -> None:
        controller = RecordsController(_source(7, 3))
        result = await controller.fetch_records(["orders"], "")
        assert isinstance(result, WorkerResult)
        assert result.success
        assert [record.offset for record in result.data] == list(range(7))

    @pytest.mark.asyncio
    async def test_stops_at_max_records(self) -> None:
        controller = RecordsController(_source(50, 4), max_records=10)
        result = await controller.fetch_records(["orders"], "")
        assert len(result.data) == 10

    @pytest.mark.asyncio
    async def test_empty_result(self) -> None:
        controller = RecordsController(_source(3, 2))
        result = await controller.fetch_records(["orders"], "nothing matches this")
        assert result.success
        assert result.data == []

    @pytest.mark.asyncio
    async def test_failure_becomes_result(self) -> None:
        result = await RecordsController(FailingSource()).fetch_records(["orders"], "")
        assert not result.success
        assert result.error == "broker unreachable"

    @pytest.mark.asyncio
    async def test_timeout_becomes_result(self) -> None:
        controller = RecordsController(SlowSource(), records_timeout=0.01)
        result = await controller.fetch_records(["orders"], "")
        assert not result.success
        assert "timed out" in (result.error or "")

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_result(self) -> None:
        result = await RecordsController(BrokenSource()).fetch_records(["orders"], "")
        assert not result.success
        assert "ConnectionError" in (result.error or "")
        assert "connection reset by peer" in (result.error or "")


class TestTopicsAndSchemas:
    """Test listing and schema lookups."""

    @pytest.mark.asyncio
    async def test_list_topics(self) -> None:
        result = await RecordsController(_source(1, 1)).list_topics()
        assert result.success
        assert [topic.name for topic in result.data] == ["orders"]

    @pytest.mark.asyncio
    async def test_schema_failure(self) -> None:
        result = await RecordsController(FailingSource()).fetch_schema("orders")
        assert not result.success
        assert result.error == "registry unreachable"


class TestDurations:
    """Test per-call timing."""

    @pytest.mark.asyncio
    async def test_concurrent_calls_time_independently(self) -> None:
        records = [KafkaRecord(topic="orders", offset=0)]
        controller = RecordsController(DelayedSource(records, page_size=1))
        topics, page = await asyncio.gather(
            controller.list_topics(),
            controller.fetch_records(["orders"], ""),
        )
        assert topics.success and page.success
        assert topics.duration_ms >= 40
        assert page.duration_ms < topics.duration_ms
