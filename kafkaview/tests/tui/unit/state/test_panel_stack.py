"""Unit tests for PanelStack focus traversal."""

from __future__ import annotations

import pytest

from kafkaview.constants.enums import Panel
from kafkaview.models.state.panel_stack import DEFAULT_PANELS, PanelStack


class TestPanelStackDefaults:
    """Test the initial layout."""

    def test_default_panels(self) -> None:
        stack = PanelStack()
        assert stack.panels == DEFAULT_PANELS

    def test_records_focused_by_default(self) -> None:
        assert PanelStack().focused is Panel.RECORDS

    def test_overlay_rejected(self) -> None:
        with pytest.raises(ValueError):
            PanelStack([Panel.RECORDS, Panel.HELP])

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            PanelStack([])


class TestPanelStackCycle:
    """Test focus_next / focus_previous."""

    @pytest.mark.parametrize("panels", [DEFAULT_PANELS, DEFAULT_PANELS + (Panel.SCHEMAS,)])
    def test_focus_next_returns_after_full_cycle(self, panels) -> None:
        stack = PanelStack(panels)
        start = stack.focused
        for _ in range(len(panels)):
            stack.focus_next()
        assert stack.focused is start

    @pytest.mark.parametrize("panels", [DEFAULT_PANELS, DEFAULT_PANELS + (Panel.SCHEMAS,)])
    def test_focus_previous_returns_after_full_cycle(self, panels) -> None:
        stack = PanelStack(panels)
        start = stack.focused
        for _ in range(len(panels)):
            stack.focus_previous()
        assert stack.focused is start

    def test_focus_next_wraps(self) -> None:
        stack = PanelStack(focused=Panel.RECORD_DETAIL)
        assert stack.focus_next() is Panel.SEARCH

    def test_focus_previous_wraps(self) -> None:
        stack = PanelStack(focused=Panel.SEARCH)
        assert stack.focus_previous() is Panel.RECORD_DETAIL

    def test_single_panel_cycle_is_stable(self) -> None:
        stack = PanelStack([Panel.RECORDS])
        assert stack.focus_next() is Panel.RECORDS
        assert stack.focus_previous() is Panel.RECORDS


class TestPanelStackShowHide:
    """Test optional panels entering and leaving the cycle."""

    def test_show_inserts_in_canonical_order(self) -> None:
        stack = PanelStack()
        stack.show(Panel.SCHEMAS)
        assert stack.panels[-1] is Panel.SCHEMAS
        assert stack.focused is Panel.SCHEMAS

    def test_show_without_focus(self) -> None:
        stack = PanelStack()
        stack.show(Panel.SCHEMAS, focus=False)
        assert stack.focused is Panel.RECORDS

    def test_hide_focused_uses_fallback(self) -> None:
        stack = PanelStack()
        stack.show(Panel.SCHEMAS)
        stack.hide(Panel.SCHEMAS, fallback=Panel.SEARCH)
        assert Panel.SCHEMAS not in stack
        assert stack.focused is Panel.SEARCH

    def test_hide_focused_moves_to_previous(self) -> None:
        stack = PanelStack()
        stack.show(Panel.SCHEMAS)
        stack.hide(Panel.SCHEMAS)
        assert stack.focused is Panel.RECORD_DETAIL

    def test_focus_hidden_panel_rejected(self) -> None:
        with pytest.raises(ValueError):
            PanelStack().jump_to(Panel.SCHEMAS)
