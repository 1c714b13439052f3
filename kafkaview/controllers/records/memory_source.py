"""In-memory record source, optionally loaded from a YAML file.

File layout::

    topics:
      orders:
        partitions: 3
        replicas: 2
        consumer_groups: [billing]
        schemas:
          key: '{"type": "string"}'
          value: '{"type": "record", ...}'
        records:
          - partition: 0
            offset: 42
            key: order-1
            value: {"amount": 12}
            headers: {source: web}
            timestamp: 2025-06-01T12:00:00+02:00
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kafkaview.constants.defaults import PAGE_SIZE_DEFAULT
from kafkaview.controllers.base.base_controller import RecordSource
from kafkaview.exceptions import FetchError
from kafkaview.models.core.records import (
    KafkaRecord,
    RecordPage,
    SchemaDetail,
    TopicInfo,
)

logger = logging.getLogger(__name__)


def record_matches(record: KafkaRecord, query: str) -> bool:
    """Case-insensitive substring match of ``query`` on topic, key and value."""
    needle = query.strip().lower()
    if not needle:
        return True
    value = record.value
    if not isinstance(value, str):
        value = json.dumps(value, default=str, sort_keys=True)
    haystacks = (record.topic, record.key or "", value)
    return any(needle in haystack.lower() for haystack in haystacks)


class InMemoryRecordSource(RecordSource):
    """Serves records held in memory, paginated by ``page_size``."""

    def __init__(
        self,
        records: Iterable[KafkaRecord] = (),
        *,
        topics: Iterable[TopicInfo] = (),
        schemas: Mapping[str, SchemaDetail] | None = None,
        page_size: int = PAGE_SIZE_DEFAULT,
    ) -> None:
        self._records = list(records)
        self._schemas = dict(schemas or {})
        self._page_size = max(1, page_size)
        counts = Counter(record.topic for record in self._records)
        listed = {topic.name: topic for topic in topics}
        for name in counts:
            listed.setdefault(name, TopicInfo(name=name))
        self._topics = sorted(
            (
                topic.model_copy(update={"record_count": counts[topic.name]})
                for topic in listed.values()
            ),
            key=lambda topic: topic.name,
        )

    async def list_topics(self) -> list[TopicInfo]:
        return list(self._topics)

    async def fetch_records(
        self,
        topics: Sequence[str],
        query: str,
        cursor: int | None = None,
    ) -> RecordPage:
        wanted = set(topics)
        unknown = wanted - {topic.name for topic in self._topics}
        if unknown:
            raise FetchError(f"Unknown topic(s): {', '.join(sorted(unknown))}")
        matching = [
            record
            for record in self._records
            if record.topic in wanted and record_matches(record, query)
        ]
        start = cursor or 0
        end = start + self._page_size
        next_cursor = end if end < len(matching) else None
        return RecordPage(records=matching[start:end], next_cursor=next_cursor)

    async def fetch_schema(self, topic: str) -> SchemaDetail:
        if topic not in {known.name for known in self._topics}:
            raise FetchError(f"Unknown topic: {topic}")
        return self._schemas.get(topic, SchemaDetail())

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, page_size: int = PAGE_SIZE_DEFAULT
    ) -> InMemoryRecordSource:
        """Build a source from the parsed YAML layout described above."""
        topics: list[TopicInfo] = []
        records: list[KafkaRecord] = []
        schemas: dict[str, SchemaDetail] = {}
        raw_topics = data.get("topics") or {}
        if not isinstance(raw_topics, Mapping):
            raise FetchError("'topics' must be a mapping of topic name to topic")
        try:
            for name, body in raw_topics.items():
                body = body or {}
                topics.append(
                    TopicInfo(
                        name=str(name),
                        partitions=int(body.get("partitions", 1)),
                        replicas=int(body.get("replicas", 1)),
                        consumer_groups=tuple(
                            str(group) for group in body.get("consumer_groups") or ()
                        ),
                    )
                )
                if body.get("schemas"):
                    schemas[str(name)] = SchemaDetail.model_validate(body["schemas"])
                for offset, raw_record in enumerate(body.get("records") or []):
                    raw_record = dict(raw_record)
                    raw_record.setdefault("offset", offset)
                    raw_record["topic"] = str(name)
                    if raw_record.get("key") is not None:
                        raw_record["key"] = str(raw_record["key"])
                    raw_record["headers"] = {
                        str(k): str(v) for k, v in (raw_record.get("headers") or {}).items()
                    }
                    records.append(KafkaRecord.model_validate(raw_record))
        except (ValidationError, TypeError, ValueError) as exc:
            raise FetchError(f"Invalid records data: {exc}") from exc
        return cls(records, topics=topics, schemas=schemas, page_size=page_size)

    @classmethod
    def from_yaml(
        cls, path: Path, *, page_size: int = PAGE_SIZE_DEFAULT
    ) -> InMemoryRecordSource:
        """Load a source from a YAML file."""
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise FetchError(f"Cannot read records file {path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise FetchError(f"{path} must contain a mapping")
        source = cls.from_mapping(data, page_size=page_size)
        logger.info("Loaded %d topic(s) from %s", len(source._topics), path)
        return source


__all__ = ["InMemoryRecordSource", "record_matches"]
