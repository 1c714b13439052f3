"""Unit tests for record and topic models."""

from __future__ import annotations

from kafkaview.models.core.records import KafkaRecord, TopicInfo


class TestKafkaRecordSize:
    """Test payload size measurement."""

    def test_structured_value_measured_as_json(self) -> None:
        record = KafkaRecord(topic="orders", value={"ok": True, "name": "x"})
        assert record.size == len('{"ok": true, "name": "x"}')

    def test_string_value_measured_as_sent(self) -> None:
        record = KafkaRecord(topic="orders", key="k1", value="héllo")
        assert record.size == 2 + len("héllo".encode())

    def test_empty_record(self) -> None:
        assert KafkaRecord(topic="orders").size == 0

    def test_exported_size_matches(self) -> None:
        record = KafkaRecord(topic="orders", value=[1, 2])
        assert record.export().size == len("[1, 2]")


class TestTopicInfo:
    """Test topic defaults."""

    def test_defaults(self) -> None:
        topic = TopicInfo(name="orders")
        assert (topic.partitions, topic.replicas, topic.record_count) == (1, 1, 0)
        assert topic.consumer_groups == ()
