"""Shared fixtures for kafkaview tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from kafkaview.app import KafkaViewApp
from kafkaview.controllers.records.memory_source import InMemoryRecordSource
from kafkaview.models.core.records import KafkaRecord, SchemaDetail, TopicInfo


class FakeClipboard:
    """Clipboard sink recording copied text."""

    def __init__(self) -> None:
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        self.copied.append(text)


class FakeBrowser:
    """Browser launcher recording opened URLs."""

    def __init__(self) -> None:
        self.opened: list[str] = []

    def open(self, url: str) -> None:
        self.opened.append(url)


def make_record(topic: str = "orders", offset: int = 0, **kwargs) -> KafkaRecord:
    kwargs.setdefault("key", f"{topic}-{offset}")
    kwargs.setdefault("value", {"id": offset, "topic": topic})
    kwargs.setdefault("timestamp", datetime(2025, 6, 1, 12, 0, offset % 60, tzinfo=timezone.utc))
    return KafkaRecord(topic=topic, offset=offset, **kwargs)


@pytest.fixture
def records() -> list[KafkaRecord]:
    return [
        make_record("orders", 0),
        make_record("orders", 1),
        make_record("orders", 2, value_schema_id="7"),
        make_record("payments", 0, value="paid"),
        make_record("users", 0, key="alice"),
    ]


@pytest.fixture
def source(records: list[KafkaRecord]) -> InMemoryRecordSource:
    return InMemoryRecordSource(
        records,
        topics=[
            TopicInfo(name="orders", partitions=3),
            TopicInfo(name="payments"),
            TopicInfo(name="users"),
        ],
        schemas={"orders": SchemaDetail(value='{"type": "record", "name": "Order"}')},
        page_size=2,
    )


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Keep settings and logs out of the real home directory."""
    path = tmp_path / "config"
    monkeypatch.setenv("KAFKAVIEW_CONFIG_DIR", str(path))
    return path


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture
def app(source, clipboard, browser) -> KafkaViewApp:
    return KafkaViewApp(source, clipboard=clipboard, browser=browser)
