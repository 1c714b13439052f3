"""Open records in a web UI through the system browser."""

from __future__ import annotations

import logging
import webbrowser
from typing import Protocol

from kafkaview.exceptions import BrowserError
from kafkaview.models.core.records import KafkaRecord

logger = logging.getLogger(__name__)


class BrowserLauncher(Protocol):
    def open(self, url: str) -> None: ...


def build_record_url(template: str, record: KafkaRecord) -> str:
    """Fill ``template`` placeholders ``{topic}``, ``{partition}``, ``{offset}``, ``{key}``.

    Raises:
        BrowserError: The template references an unknown placeholder.
    """
    try:
        return template.format(
            topic=record.topic,
            partition=record.partition,
            offset=record.offset,
            key=record.key or "",
        )
    except (KeyError, IndexError, ValueError) as exc:
        raise BrowserError(f"Invalid record URL template {template!r}: {exc}") from exc


class WebBrowserLauncher:
    """Launcher using the standard :mod:`webbrowser` controller."""

    def open(self, url: str) -> None:
        """Open ``url``.

        Raises:
            BrowserError: No browser could be launched.
        """
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as exc:
            raise BrowserError(f"Cannot open {url}: {exc}") from exc
        if not opened:
            raise BrowserError(f"No browser available to open {url}")
        logger.debug("Opened %s", url)


__all__ = ["BrowserLauncher", "WebBrowserLauncher", "build_record_url"]
