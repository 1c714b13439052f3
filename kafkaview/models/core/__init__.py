"""Core data models."""

from kafkaview.models.core.records import (
    ExportedRecord,
    KafkaRecord,
    RecordPage,
    SchemaDetail,
    TopicInfo,
)

__all__ = [
    "ExportedRecord",
    "KafkaRecord",
    "RecordPage",
    "SchemaDetail",
    "TopicInfo",
]
