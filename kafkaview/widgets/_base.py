"""Base widget classes for the browser panels.

Panels never own navigation state. They receive already-formatted lines from
the presenter and only know how tall their viewport is.
"""

from __future__ import annotations

from typing import ClassVar

from rich.console import Group
from rich.text import Text
from textual.widgets import Static


class BaseWidget(Static):
    """Static widget that applies ``_default_classes`` on creation.

    Attributes:
        _default_classes: Default CSS classes for the widget.
    """

    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        content: str = "",
        *,
        id: str | None = None,
        classes: str = "",
        **kwargs,
    ) -> None:
        super().__init__(content, id=id, classes=classes, **kwargs)
        if self._default_classes:
            self.add_class(*self._default_classes.split())


class LinesWidget(BaseWidget):
    """Widget rendering a list of rich ``Text`` lines."""

    # Rows used by chrome above the lines (list headers).
    HEADER_ROWS: ClassVar[int] = 0

    def update_lines(self, lines: list[Text]) -> None:
        self.update(Group(*lines))

    @property
    def viewport_height(self) -> int:
        """Rows available for content, at least one."""
        return max(1, self.content_region.height - self.HEADER_ROWS)

    def set_focused(self, focused: bool) -> None:
        self.set_class(focused, "focused")
