"""Unit tests for OverlayStack."""

from __future__ import annotations

import pytest

from kafkaview.constants.enums import Panel
from kafkaview.models.state.overlay_stack import OverlayStack


class TestOverlayStack:
    """Test LIFO dismissal and toggling."""

    def test_empty_stack(self) -> None:
        stack = OverlayStack()
        assert not stack
        assert stack.top is None
        assert stack.dismiss() is None

    def test_dismiss_is_lifo(self) -> None:
        stack = OverlayStack()
        stack.open(Panel.HELP)
        stack.open(Panel.TOPICS)
        assert stack.dismiss() is Panel.TOPICS
        assert stack.overlays == (Panel.HELP,)
        assert stack.dismiss() is Panel.HELP
        assert not stack

    def test_toggle_opens_then_closes(self) -> None:
        stack = OverlayStack()
        assert stack.toggle(Panel.HELP) is True
        assert stack.top is Panel.HELP
        assert stack.toggle(Panel.HELP) is False
        assert Panel.HELP not in stack

    def test_toggle_closes_buried_overlay(self) -> None:
        stack = OverlayStack()
        stack.open(Panel.HELP)
        stack.open(Panel.TOPICS)
        assert stack.toggle(Panel.HELP) is False
        assert stack.overlays == (Panel.TOPICS,)

    def test_reopen_moves_to_top(self) -> None:
        stack = OverlayStack()
        stack.open(Panel.HELP)
        stack.open(Panel.TOPICS)
        stack.open(Panel.HELP)
        assert stack.overlays == (Panel.TOPICS, Panel.HELP)

    def test_close_absent_returns_false(self) -> None:
        assert OverlayStack().close(Panel.TOPICS) is False

    def test_layout_panel_rejected(self) -> None:
        with pytest.raises(ValueError):
            OverlayStack().open(Panel.RECORDS)
