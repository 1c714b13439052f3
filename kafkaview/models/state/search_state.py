"""Search bar state: query buffer, history and autocomplete.

Phases follow ``Idle -> Editing -> Submitted -> Idle``:

- any character input moves to Editing,
- Enter submits (the fetch itself is requested by the caller),
- leaving the search bar, or Escape while editing, returns to Idle.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from kafkaview.constants.defaults import SEARCH_HISTORY_SIZE_DEFAULT
from kafkaview.constants.enums import SearchPhase
from kafkaview.constants.values import SEARCH_VOCABULARY

logger = logging.getLogger(__name__)


@dataclass
class SearchState:
    """Plain data held by the search bar."""

    query: str = ""
    history: list[str] = field(default_factory=list)
    suggestion: str | None = None
    history_index: int | None = None
    phase: SearchPhase = SearchPhase.IDLE


class SearchController:
    """Operations over :class:`SearchState`.

    While browsing history the buffer is left untouched: the entry under the
    pointer is only a preview (see :attr:`displayed_query`). Editing or
    submitting accepts the preview into the buffer.
    """

    def __init__(
        self,
        history: Iterable[str] = (),
        *,
        max_history: int = SEARCH_HISTORY_SIZE_DEFAULT,
        vocabulary: Iterable[str] = SEARCH_VOCABULARY,
    ) -> None:
        self._max_history = max(1, max_history)
        self.state = SearchState(history=list(history)[-self._max_history :])
        self._vocabulary = tuple(vocabulary)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self.state.history)

    @property
    def phase(self) -> SearchPhase:
        return self.state.phase

    @property
    def suggestion(self) -> str | None:
        return self.state.suggestion

    @property
    def history_preview(self) -> str | None:
        index = self.state.history_index
        if index is None:
            return None
        return self.state.history[index]

    @property
    def displayed_query(self) -> str:
        """What the search bar shows: the history preview, else the buffer."""
        preview = self.history_preview
        return preview if preview is not None else self.state.query

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def append(self, char: str) -> str:
        self._accept_history_preview()
        self.state.query += char
        self.state.phase = SearchPhase.EDITING
        self._refresh_suggestion()
        return self.state.query

    def backspace(self) -> str:
        self._accept_history_preview()
        self.state.query = self.state.query[:-1]
        self.state.phase = SearchPhase.EDITING
        self._refresh_suggestion()
        return self.state.query

    def set_query(self, query: str) -> None:
        """Replace the buffer without changing the phase (CLI preset)."""
        self.state.query = query
        self.state.history_index = None
        self._refresh_suggestion()

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def history_prev(self) -> str | None:
        """Step back to an older history entry and preview it."""
        history = self.state.history
        if not history:
            return None
        index = self.state.history_index
        if index is None:
            index = len(history) - 1
        else:
            index = max(0, index - 1)
        self.state.history_index = index
        return history[index]

    def history_next(self) -> str | None:
        """Step forward to a newer entry; past the newest returns to the buffer."""
        index = self.state.history_index
        if index is None:
            return None
        if index >= len(self.state.history) - 1:
            self.state.history_index = None
            return None
        self.state.history_index = index + 1
        return self.state.history[index + 1]

    # ------------------------------------------------------------------
    # Autocomplete
    # ------------------------------------------------------------------

    def accept_autocomplete(self) -> str:
        self._accept_history_preview()
        if self.state.suggestion is not None:
            self.state.query = self.state.suggestion
            self.state.phase = SearchPhase.EDITING
        self._refresh_suggestion()
        return self.state.query

    def compute_suggestion(self, query: str) -> str | None:
        """Completion for ``query``: newest history match, else a vocabulary word."""
        if not query:
            return None
        for entry in reversed(self.state.history):
            if entry.startswith(query) and entry != query:
                return entry
        head, _, last_word = query.rpartition(" ")
        if not last_word:
            return None
        for word in self._vocabulary:
            if word.startswith(last_word) and word != last_word:
                return f"{head} {word}" if head else word
        return None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def submit(self) -> str:
        """Commit the query and record it in history.

        Returns:
            The submitted query; the caller starts the fetch.
        """
        self._accept_history_preview()
        query = self.state.query
        history = self.state.history
        if query and (not history or history[-1] != query):
            history.append(query)
            del history[: max(0, len(history) - self._max_history)]
        self.state.suggestion = None
        self.state.phase = SearchPhase.SUBMITTED
        logger.debug("Search submitted: %r", query)
        return query

    def cancel(self) -> None:
        """Leave editing without submitting; drop uncommitted state."""
        self.state.suggestion = None
        self.state.history_index = None
        self.state.phase = SearchPhase.IDLE

    def blur(self) -> None:
        """Focus left the search bar."""
        self.state.history_index = None
        self.state.suggestion = None
        self.state.phase = SearchPhase.IDLE

    def _accept_history_preview(self) -> None:
        preview = self.history_preview
        if preview is not None:
            self.state.query = preview
            self.state.history_index = None

    def _refresh_suggestion(self) -> None:
        self.state.suggestion = self.compute_suggestion(self.state.query)


__all__ = ["SearchController", "SearchState"]
