"""Browser screen package."""

from kafkaview.screens.browser.browser_screen import BrowserScreen
from kafkaview.screens.browser.presenter import BrowserPresenter

__all__ = ["BrowserPresenter", "BrowserScreen"]
