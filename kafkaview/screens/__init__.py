"""Screens for the kafkaview TUI."""

from kafkaview.screens.browser import BrowserScreen

__all__ = ["BrowserScreen"]
