"""LIFO stack of transient dialogs (Help, Topics)."""

from __future__ import annotations

from kafkaview.constants.enums import OVERLAY_PANELS, Panel


class OverlayStack:
    """Dialogs currently shown above the layout, most recent last."""

    def __init__(self) -> None:
        self._overlays: list[Panel] = []

    @property
    def overlays(self) -> tuple[Panel, ...]:
        return tuple(self._overlays)

    @property
    def top(self) -> Panel | None:
        """The most recently opened dialog, which receives key input."""
        return self._overlays[-1] if self._overlays else None

    def __bool__(self) -> bool:
        return bool(self._overlays)

    def __len__(self) -> int:
        return len(self._overlays)

    def __contains__(self, panel: object) -> bool:
        return panel in self._overlays

    def open(self, overlay: Panel) -> None:
        """Show ``overlay`` on top. Re-opening moves it to the top."""
        if overlay not in OVERLAY_PANELS:
            raise ValueError(f"{overlay} cannot be shown as an overlay")
        if overlay in self._overlays:
            self._overlays.remove(overlay)
        self._overlays.append(overlay)

    def close(self, overlay: Panel) -> bool:
        """Hide ``overlay`` wherever it sits. Returns whether it was open."""
        if overlay not in self._overlays:
            return False
        self._overlays.remove(overlay)
        return True

    def toggle(self, overlay: Panel) -> bool:
        """Open ``overlay`` when hidden, close it when shown.

        Returns:
            True when the overlay is visible afterwards.
        """
        if overlay in self._overlays:
            self.close(overlay)
            return False
        self.open(overlay)
        return True

    def dismiss(self) -> Panel | None:
        """Close the most recently opened dialog, if any."""
        if not self._overlays:
            return None
        return self._overlays.pop()


__all__ = ["OverlayStack"]
