"""Record, topic and schema models exchanged with the record source."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class KafkaRecord(BaseModel):
    """A single record read from a topic."""

    model_config = ConfigDict(frozen=True)

    topic: str
    partition: int = 0
    offset: int = 0
    timestamp: datetime | None = None
    key: str | None = None
    value: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    key_schema_id: str | None = None
    value_schema_id: str | None = None

    @property
    def has_schemas(self) -> bool:
        """Whether the key or the value was encoded with a registry schema."""
        return self.key_schema_id is not None or self.value_schema_id is not None

    @property
    def size(self) -> int:
        """Payload size in bytes (key + value).

        String values count as sent; structured values are measured as JSON.
        """
        key_size = len((self.key or "").encode())
        if self.value is None:
            value_size = 0
        elif isinstance(self.value, str):
            value_size = len(self.value.encode())
        else:
            payload = json.dumps(self.value, default=str, ensure_ascii=False)
            value_size = len(payload.encode())
        return key_size + value_size

    def export(self, search_query: str = "") -> ExportedRecord:
        """Build the serialisable form used by the clipboard and file exports."""
        return ExportedRecord(
            **self.model_dump(),
            size=self.size,
            search_query=search_query,
        )


class ExportedRecord(BaseModel):
    """Record enriched with its size and the search query that produced it."""

    topic: str
    partition: int
    offset: int
    timestamp: datetime | None = None
    key: str | None = None
    value: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    key_schema_id: str | None = None
    value_schema_id: str | None = None
    size: int = 0
    search_query: str = ""


class RecordPage(BaseModel):
    """One page of records plus the cursor for the next page, if any."""

    records: list[KafkaRecord] = Field(default_factory=list)
    next_cursor: int | None = None


class TopicInfo(BaseModel):
    """Topic listing entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    partitions: int = 1
    replicas: int = 1
    record_count: int = 0
    consumer_groups: tuple[str, ...] = ()


class SchemaDetail(BaseModel):
    """Key and value schemas registered for a topic."""

    key: str | None = None
    value: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.key is None and self.value is None


__all__ = [
    "ExportedRecord",
    "KafkaRecord",
    "RecordPage",
    "SchemaDetail",
    "TopicInfo",
]
