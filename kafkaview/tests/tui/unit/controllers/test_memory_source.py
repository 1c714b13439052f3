"""Unit tests for InMemoryRecordSource."""

from __future__ import annotations

import pytest

from kafkaview.controllers.records.memory_source import InMemoryRecordSource, record_matches
from kafkaview.exceptions import FetchError
from kafkaview.models.core.records import KafkaRecord

YAML_DOCUMENT = """
topics:
  orders:
    partitions: 3
    replicas: 2
    consumer_groups: [billing, audit]
    schemas:
      value: '{"type": "record", "name": "Order"}'
    records:
      - key: 1001
        value: {amount: 12}
        headers: {retries: 2}
      - key: order-2
        value: {amount: 40}
  empty: {}
"""


class TestRecordMatches:
    """Test the substring filter."""

    def test_empty_query_matches(self) -> None:
        assert record_matches(KafkaRecord(topic="t"), "  ")

    def test_matches_key_case_insensitive(self) -> None:
        assert record_matches(KafkaRecord(topic="t", key="Alice"), "alice")

    def test_matches_structured_value(self) -> None:
        assert record_matches(KafkaRecord(topic="t", value={"city": "Paris"}), "paris")

    def test_no_match(self) -> None:
        assert not record_matches(KafkaRecord(topic="t", key="a", value="b"), "zzz")


class TestInMemoryRecordSource:
    """Test listing, paging and schema lookups."""

    @pytest.mark.asyncio
    async def test_pages(self, source: InMemoryRecordSource) -> None:
        first = await source.fetch_records(["orders"], "")
        assert len(first.records) == 2
        assert first.next_cursor == 2
        second = await source.fetch_records(["orders"], "", first.next_cursor)
        assert [record.offset for record in second.records] == [2]
        assert second.next_cursor is None

    @pytest.mark.asyncio
    async def test_filters_by_topic_and_query(self, source: InMemoryRecordSource) -> None:
        page = await source.fetch_records(["orders", "users"], "alice")
        assert [record.key for record in page.records] == ["alice"]

    @pytest.mark.asyncio
    async def test_unknown_topic(self, source: InMemoryRecordSource) -> None:
        with pytest.raises(FetchError):
            await source.fetch_records(["nope"], "")

    @pytest.mark.asyncio
    async def test_topics_sorted(self, source: InMemoryRecordSource) -> None:
        topics = await source.list_topics()
        assert [topic.name for topic in topics] == ["orders", "payments", "users"]

    @pytest.mark.asyncio
    async def test_schema_lookup(self, source: InMemoryRecordSource) -> None:
        assert not (await source.fetch_schema("orders")).is_empty
        assert (await source.fetch_schema("users")).is_empty


class TestYamlLoading:
    """Test building a source from YAML."""

    @pytest.mark.asyncio
    async def test_from_yaml(self, tmp_path) -> None:
        path = tmp_path / "records.yaml"
        path.write_text(YAML_DOCUMENT, encoding="utf-8")
        source = InMemoryRecordSource.from_yaml(path)

        topics = {topic.name: topic for topic in await source.list_topics()}
        assert topics["orders"].partitions == 3
        assert topics["orders"].replicas == 2
        assert topics["orders"].record_count == 2
        assert topics["orders"].consumer_groups == ("billing", "audit")
        assert topics["empty"].record_count == 0
        assert topics["empty"].replicas == 1

        page = await source.fetch_records(["orders"], "")
        first, second = page.records
        assert first.key == "1001"
        assert first.offset == 0
        assert first.headers == {"retries": "2"}
        assert second.offset == 1

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FetchError):
            InMemoryRecordSource.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_layout(self) -> None:
        with pytest.raises(FetchError):
            InMemoryRecordSource.from_mapping({"topics": ["orders"]})

    def test_invalid_record(self) -> None:
        with pytest.raises(FetchError):
            InMemoryRecordSource.from_mapping(
                {"topics": {"orders": {"records": [{"offset": "not a number"}]}}}
            )
