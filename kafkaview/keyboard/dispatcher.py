"""Map raw key events to commands for the focused panel.

The dispatcher is a pure function of (key, focused panel, open overlays).
It never mutates state; applying the command is the job of
:class:`~kafkaview.models.state.app_state.AppState`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from kafkaview.constants.enums import CommandName, Panel
from kafkaview.keyboard.navigation import (
    GLOBAL_BINDINGS,
    OVERLAY_BINDINGS,
    PANEL_BINDINGS,
    BindingTable,
)

logger = logging.getLogger(__name__)

# Literal characters some terminals and test pilots report instead of key names.
KEY_ALIASES: dict[str, str] = {
    "[": "left_square_bracket",
    "]": "right_square_bracket",
    "/": "slash",
    " ": "space",
    "ctrl+i": "tab",
    "backtab": "shift+tab",
}

# Characters for key names whose ``character`` may be missing.
KEY_CHARACTERS: dict[str, str] = {
    "left_square_bracket": "[",
    "right_square_bracket": "]",
    "slash": "/",
    "space": " ",
}


@dataclass(frozen=True)
class KeyPress:
    """A key event reduced to what the dispatcher needs."""

    key: str
    character: str | None = None

    @property
    def normalized_key(self) -> str:
        return KEY_ALIASES.get(self.key, self.key)

    @property
    def printable(self) -> str | None:
        """The printable character carried by this key, if any."""
        char = self.character
        if char is None:
            char = KEY_CHARACTERS.get(self.normalized_key)
        if char is None and len(self.key) == 1:
            char = self.key
        if char is not None and len(char) == 1 and char.isprintable():
            return char
        return None


@dataclass(frozen=True)
class Command:
    """A dispatched command with an optional argument (typed character)."""

    name: CommandName
    argument: str | None = None


def _lookup(table: BindingTable, key: str) -> Command | None:
    for bound_key, action, _description in table:
        if bound_key == key:
            return Command(CommandName(action))
    return None


def dispatch(
    key_press: KeyPress,
    focused: Panel,
    overlays: Sequence[Panel] = (),
) -> Command | None:
    """Resolve ``key_press`` into at most one command.

    Args:
        key_press: The key event.
        focused: Panel holding focus in the layout.
        overlays: Open overlays, most recent last.

    Returns:
        The command, or None when the key is not bound in this context.
    """
    key = key_press.normalized_key

    if overlays:
        top = overlays[-1]
        command = _lookup(PANEL_BINDINGS[top], key) or _lookup(OVERLAY_BINDINGS, key)
        if command is None:
            logger.debug("Unmapped key %r in overlay %s", key, top.value)
        return command

    command = _lookup(PANEL_BINDINGS[focused], key)
    if command is not None:
        return command

    if focused is Panel.SEARCH:
        char = key_press.printable
        if char is not None:
            return Command(CommandName.APPEND, char)

    command = _lookup(GLOBAL_BINDINGS, key)
    if command is None:
        logger.debug("Unmapped key %r in panel %s", key, focused.value)
    return command


__all__ = [
    "KEY_ALIASES",
    "Command",
    "KeyPress",
    "dispatch",
]
