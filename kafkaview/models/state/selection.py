"""Cursor and scroll state owned by individual panels.

Guarantees:
- ListSelection keeps ``offset <= cursor < offset + viewport_height`` for
  non-empty lists; moves clamp at both ends, never wrap.
- ScrollState keeps ``0 <= offset <= max(0, content_length - viewport_height)``.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from kafkaview.constants.defaults import VIEWPORT_HEIGHT_DEFAULT
from kafkaview.constants.limits import VIEWPORT_HEIGHT_MIN


class ListSelection:
    """Cursor, viewport and multi-select set over a list of items."""

    def __init__(
        self,
        length: int = 0,
        viewport_height: int = VIEWPORT_HEIGHT_DEFAULT,
        *,
        multi_select: bool = False,
    ) -> None:
        self._length = max(0, length)
        self._viewport_height = max(VIEWPORT_HEIGHT_MIN, viewport_height)
        self._cursor = 0
        self._offset = 0
        self._multi_select = multi_select
        self._selected: set[Hashable] = set()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def length(self) -> int:
        return self._length

    @property
    def viewport_height(self) -> int:
        return self._viewport_height

    @property
    def selected(self) -> frozenset[Hashable]:
        return frozenset(self._selected)

    @property
    def visible_range(self) -> range:
        """Indexes of the items currently inside the viewport."""
        end = min(self._length, self._offset + self._viewport_height)
        return range(self._offset, end)

    def is_selected(self, item: Hashable) -> bool:
        return item in self._selected

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------

    def move_up(self) -> int:
        if self._cursor > 0:
            self._cursor -= 1
            self._follow_cursor()
        return self._cursor

    def move_down(self) -> int:
        if self._cursor < self._length - 1:
            self._cursor += 1
            self._follow_cursor()
        return self._cursor

    def scroll_to_top(self) -> int:
        self._cursor = 0
        self._follow_cursor()
        return self._cursor

    def scroll_to_bottom(self) -> int:
        self._cursor = max(0, self._length - 1)
        self._follow_cursor()
        return self._cursor

    # ------------------------------------------------------------------
    # Multi-select (Topics)
    # ------------------------------------------------------------------

    def toggle_select(self, item: Hashable) -> bool:
        """Add ``item`` to the selection, or remove it when present.

        Returns:
            True when the item is selected afterwards.
        """
        if not self._multi_select:
            raise ValueError("this list does not support multi-selection")
        if item in self._selected:
            self._selected.discard(item)
            return False
        self._selected.add(item)
        return True

    def select(self, items: Iterable[Hashable]) -> None:
        if not self._multi_select:
            raise ValueError("this list does not support multi-selection")
        self._selected.update(items)

    def clear_selection(self) -> None:
        self._selected.clear()

    def retain(self, items: Iterable[Hashable]) -> None:
        """Drop selected entries that are no longer listed."""
        self._selected.intersection_update(set(items))

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def set_length(self, length: int) -> None:
        """Replace the item count, clamping the cursor into range."""
        self._length = max(0, length)
        self._cursor = min(self._cursor, max(0, self._length - 1))
        self._follow_cursor()

    def set_viewport(self, height: int) -> None:
        self._viewport_height = max(VIEWPORT_HEIGHT_MIN, height)
        self._follow_cursor()

    def _follow_cursor(self) -> None:
        if self._cursor < self._offset:
            self._offset = self._cursor
        elif self._cursor >= self._offset + self._viewport_height:
            self._offset = self._cursor - self._viewport_height + 1
        max_offset = max(0, self._length - self._viewport_height)
        self._offset = max(0, min(self._offset, max_offset, self._cursor))


class ScrollState:
    """Line offset over a block of text (help, record detail, schemas)."""

    def __init__(
        self,
        content_length: int = 0,
        viewport_height: int = VIEWPORT_HEIGHT_DEFAULT,
    ) -> None:
        self._content_length = max(0, content_length)
        self._viewport_height = max(VIEWPORT_HEIGHT_MIN, viewport_height)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def content_length(self) -> int:
        return self._content_length

    @property
    def viewport_height(self) -> int:
        return self._viewport_height

    @property
    def max_offset(self) -> int:
        return max(0, self._content_length - self._viewport_height)

    def scroll_down(self) -> int:
        self._offset = min(self._offset + 1, self.max_offset)
        return self._offset

    def scroll_up(self) -> int:
        self._offset = max(0, self._offset - 1)
        return self._offset

    def scroll_to_top(self) -> int:
        self._offset = 0
        return self._offset

    def scroll_to_bottom(self) -> int:
        self._offset = self.max_offset
        return self._offset

    def reset(self) -> None:
        self._offset = 0

    def set_content_length(self, length: int) -> None:
        self._content_length = max(0, length)
        self._offset = min(self._offset, self.max_offset)

    def set_viewport(self, height: int) -> None:
        self._viewport_height = max(VIEWPORT_HEIGHT_MIN, height)
        self._offset = min(self._offset, self.max_offset)


__all__ = ["ListSelection", "ScrollState"]
