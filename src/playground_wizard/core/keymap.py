"""Logical wizard actions and their key bindings.

A :class:`KeyMap` is a plain configuration value handed to the
dispatcher at construction time; :data:`DEFAULT_KEYMAP` is only the
value used when the caller has no preference.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    """Key-independent actions the dispatcher understands."""

    QUIT = "quit"
    ADVANCE = "advance"
    RETREAT = "retreat"
    TOGGLE = "toggle"
    ACCEPT = "accept"
    SUBMIT = "submit"


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """One or more key names bound to an action, plus help text."""

    keys: tuple[str, ...]
    help_key: str
    help_text: str

    def matches(self, key: str) -> bool:
        return key in self.keys


@dataclass(frozen=True, slots=True)
class KeyMap:
    """Bindings for every :class:`Action`."""

    quit: KeyBinding
    advance: KeyBinding
    retreat: KeyBinding
    toggle: KeyBinding
    accept: KeyBinding
    submit: KeyBinding

    def _ordered(self) -> tuple[tuple[Action, KeyBinding], ...]:
        # Resolution precedence when two bindings share a key.
        return (
            (Action.QUIT, self.quit),
            (Action.ADVANCE, self.advance),
            (Action.RETREAT, self.retreat),
            (Action.TOGGLE, self.toggle),
            (Action.ACCEPT, self.accept),
            (Action.SUBMIT, self.submit),
        )

    def action_for(self, key: str) -> Action | None:
        """Return the action bound to *key*, or ``None`` if unbound."""
        for action, binding in self._ordered():
            if binding.matches(key):
                return action
        return None

    def help_entries(self) -> list[tuple[str, str]]:
        """``(key, description)`` pairs for the help line."""
        return [(b.help_key, b.help_text) for _, b in self._ordered()]


DEFAULT_KEYMAP = KeyMap(
    quit=KeyBinding(("ctrl+c",), "ctrl+c", "exit the program"),
    advance=KeyBinding(("tab",), "tab", "move to next input"),
    retreat=KeyBinding(("shift+tab",), "shift+tab", "move to previous input"),
    toggle=KeyBinding(("space",), "space", "toggle component"),
    accept=KeyBinding(("enter",), "enter", "accept input"),
    submit=KeyBinding(("ctrl+s",), "ctrl+s", "create project"),
)
