"""Clipboard sink backed by the terminal (OSC 52) through Textual."""

from __future__ import annotations

import logging
from typing import Protocol

from textual.app import App

from kafkaview.exceptions import ClipboardError

logger = logging.getLogger(__name__)


class ClipboardSink(Protocol):
    def copy(self, text: str) -> None: ...


class TextualClipboard:
    """Copies text using :meth:`textual.app.App.copy_to_clipboard`."""

    def __init__(self, app: App) -> None:
        self._app = app

    def copy(self, text: str) -> None:
        """Copy ``text``.

        Raises:
            ClipboardError: The terminal driver rejected the request.
        """
        try:
            self._app.copy_to_clipboard(text)
        except (OSError, RuntimeError) as exc:
            logger.warning("Clipboard copy failed: %s", exc)
            raise ClipboardError(f"Cannot copy to clipboard: {exc}") from exc
        logger.debug("Copied %d characters to the clipboard", len(text))


__all__ = ["ClipboardSink", "TextualClipboard"]
