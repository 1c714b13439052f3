"""Ordered set of navigable panels with a single focused panel."""

from __future__ import annotations

from collections.abc import Iterable

from kafkaview.constants.enums import OVERLAY_PANELS, Panel

# Canonical order in which panels appear in the focus cycle.
PANEL_ORDER: tuple[Panel, ...] = (
    Panel.SEARCH,
    Panel.RECORDS,
    Panel.RECORD_DETAIL,
    Panel.SCHEMAS,
)

DEFAULT_PANELS: tuple[Panel, ...] = (
    Panel.SEARCH,
    Panel.RECORDS,
    Panel.RECORD_DETAIL,
)


class PanelStack:
    """Focus traversal over the panels currently laid out on screen.

    Overlay panels (Help, Topics) never take part in the cycle; they are
    tracked by :class:`~kafkaview.models.state.overlay_stack.OverlayStack`.
    """

    def __init__(
        self,
        panels: Iterable[Panel] = DEFAULT_PANELS,
        focused: Panel | None = None,
    ) -> None:
        self._panels: list[Panel] = []
        for panel in panels:
            self._insert(panel)
        if not self._panels:
            raise ValueError("PanelStack needs at least one panel")
        if focused is None:
            focused = Panel.RECORDS if Panel.RECORDS in self._panels else self._panels[0]
        if focused not in self._panels:
            raise ValueError(f"{focused} is not part of the panel stack")
        self._focused = focused

    @property
    def panels(self) -> tuple[Panel, ...]:
        return tuple(self._panels)

    @property
    def focused(self) -> Panel:
        return self._focused

    def __len__(self) -> int:
        return len(self._panels)

    def __contains__(self, panel: object) -> bool:
        return panel in self._panels

    def focus_next(self) -> Panel:
        """Move focus forward, wrapping after the last panel."""
        index = self._panels.index(self._focused)
        self._focused = self._panels[(index + 1) % len(self._panels)]
        return self._focused

    def focus_previous(self) -> Panel:
        """Move focus backward, wrapping before the first panel."""
        index = self._panels.index(self._focused)
        self._focused = self._panels[(index - 1) % len(self._panels)]
        return self._focused

    def jump_to(self, panel: Panel) -> Panel:
        """Focus ``panel``, which must already be laid out."""
        if panel not in self._panels:
            raise ValueError(f"{panel} is not shown")
        self._focused = panel
        return self._focused

    def show(self, panel: Panel, *, focus: bool = True) -> None:
        """Add an optional panel to the cycle, optionally focusing it."""
        if panel not in self._panels:
            self._insert(panel)
        if focus:
            self._focused = panel

    def hide(self, panel: Panel, *, fallback: Panel | None = None) -> None:
        """Remove ``panel`` from the cycle.

        When it held focus, focus moves to ``fallback`` or to the panel
        before it in the cycle.
        """
        if panel not in self._panels:
            return
        if len(self._panels) == 1:
            raise ValueError("cannot hide the last panel")
        index = self._panels.index(panel)
        self._panels.remove(panel)
        if self._focused is panel:
            if fallback is not None and fallback in self._panels:
                self._focused = fallback
            else:
                self._focused = self._panels[(index - 1) % len(self._panels)]

    def _insert(self, panel: Panel) -> None:
        if panel in OVERLAY_PANELS:
            raise ValueError(f"{panel} is an overlay, not a layout panel")
        if panel in self._panels:
            return
        self._panels.append(panel)
        self._panels.sort(key=PANEL_ORDER.index)


__all__ = ["DEFAULT_PANELS", "PANEL_ORDER", "PanelStack"]
