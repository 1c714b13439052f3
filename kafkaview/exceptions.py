"""Exception hierarchy for kafkaview.

None of these are fatal: the UI loop reports them and keeps accepting input.
"""

from __future__ import annotations


class KafkaViewError(Exception):
    """Base exception for all kafkaview errors."""


class InputError(KafkaViewError):
    """A key event has no command in the current context.

    The dispatcher returns ``None`` for unmapped keys; this type exists for
    callers that prefer to raise, and is never shown to the user.
    """


class FetchError(KafkaViewError):
    """The record source failed to list topics, records or schemas."""


class ExportError(KafkaViewError):
    """Writing records to disk failed. No partial file is left behind."""


class ClipboardError(KafkaViewError):
    """Copying text to the clipboard failed."""


class BrowserError(KafkaViewError):
    """Opening a record URL in the browser failed."""


__all__ = [
    "BrowserError",
    "ClipboardError",
    "ExportError",
    "FetchError",
    "InputError",
    "KafkaViewError",
]
