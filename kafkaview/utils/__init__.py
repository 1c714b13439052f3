"""Utility modules: collaborator adapters for clipboard, browser and export."""

from kafkaview.utils.browser import (
    BrowserLauncher,
    WebBrowserLauncher,
    build_record_url,
)
from kafkaview.utils.clipboard import ClipboardSink, TextualClipboard
from kafkaview.utils.exporter import FileExporter

__all__ = [
    "BrowserLauncher",
    "ClipboardSink",
    "FileExporter",
    "TextualClipboard",
    "WebBrowserLauncher",
    "build_record_url",
]
